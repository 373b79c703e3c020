"""Profile repository: read-only lookups used to enrich task reads."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tasknest.application.dtos.profile import ProfileProjection
from tasknest.infrastructure.persistence.models.profile import Profile
from tasknest.infrastructure.persistence.repositories.base import BaseRepository


def _to_projection(p: Profile) -> ProfileProjection:
    """Only name and occupation leave the store; contact fields stay private."""
    return ProfileProjection(
        first_name=p.first_name,
        last_name=p.last_name,
        occupation=p.occupation,
    )


class ProfileRepository(BaseRepository[Profile]):
    """Profile repository. Implements IProfileRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Profile)

    async def find_by_owner(self, owner_id: str) -> ProfileProjection | None:
        async with self.store_errors("profile.find_by_owner"):
            result = await self.db.execute(
                select(Profile).where(Profile.owner_id == owner_id)
            )
            profile = result.scalar_one_or_none()
        return _to_projection(profile) if profile else None

    async def find_by_owners(
        self, owner_ids: set[str]
    ) -> dict[str, ProfileProjection]:
        if not owner_ids:
            return {}
        async with self.store_errors("profile.find_by_owners"):
            result = await self.db.execute(
                select(Profile).where(Profile.owner_id.in_(owner_ids))
            )
            profiles = result.scalars().all()
        return {p.owner_id: _to_projection(p) for p in profiles}
