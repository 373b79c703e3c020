"""Profile enrichment: attach the owner's profile projection to tasks.

One task maps to at most one profile. Owners without a profile yield
profile=None; that is never an error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tasknest.application.dtos.task import EnrichedTaskResult, TaskSearchResult

if TYPE_CHECKING:
    from tasknest.application.dtos.profile import ProfileProjection
    from tasknest.application.dtos.task import TaskResult
    from tasknest.application.interfaces.repositories import IProfileRepository


class ProfileEnrichmentService:
    """Resolve owner profiles for a page of tasks with one batched read."""

    def __init__(self, profile_repo: "IProfileRepository") -> None:
        self.profile_repo = profile_repo

    async def _profiles_for(
        self, tasks: list[TaskResult]
    ) -> dict[str, ProfileProjection]:
        owner_ids = {t.owner_id for t in tasks}
        if not owner_ids:
            return {}
        return await self.profile_repo.find_by_owners(owner_ids)

    async def enrich(self, tasks: list[TaskResult]) -> list[EnrichedTaskResult]:
        """Return tasks in the same order, each paired with its owner's profile."""
        profiles = await self._profiles_for(tasks)
        return [
            EnrichedTaskResult(task=t, profile=profiles.get(t.owner_id))
            for t in tasks
        ]

    async def enrich_for_search(
        self, tasks: list[TaskResult]
    ) -> list[TaskSearchResult]:
        """Return the restricted search projection, in the same order."""
        profiles = await self._profiles_for(tasks)
        return [
            TaskSearchResult(
                id=t.id,
                task_name=t.task_name,
                description=t.description,
                priority=t.priority,
                share_type=t.share_type,
                profile=profiles.get(t.owner_id),
            )
            for t in tasks
        ]
