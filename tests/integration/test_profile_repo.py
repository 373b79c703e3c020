"""ProfileRepository integration tests (sqlite+aiosqlite file per test)."""

import pytest

from tasknest.application.dtos.profile import ProfileProjection
from tasknest.domain.exceptions import ConflictException
from tasknest.infrastructure.persistence.models import Profile
from tasknest.infrastructure.persistence.repositories import ProfileRepository

pytestmark = pytest.mark.requires_db


async def test_find_by_owner(db_session, seed_profile) -> None:
    await seed_profile("alice", "Alice", "Smith", "Pilot")
    repo = ProfileRepository(db_session)
    assert await repo.find_by_owner("alice") == ProfileProjection("Alice", "Smith", "Pilot")
    assert await repo.find_by_owner("nobody") is None


async def test_find_by_owners_skips_missing(db_session, seed_profile) -> None:
    await seed_profile("alice", "Alice", "Smith", "Pilot")
    await seed_profile("bob", "Bob", "Jones", "Chef")
    repo = ProfileRepository(db_session)

    found = await repo.find_by_owners({"alice", "bob", "carol"})
    assert set(found) == {"alice", "bob"}
    assert found["bob"].occupation == "Chef"
    assert await repo.find_by_owners(set()) == {}


async def test_second_profile_for_owner_conflicts(db_session, seed_profile) -> None:
    await seed_profile("alice")
    repo = ProfileRepository(db_session)
    with pytest.raises(ConflictException):
        await repo.create(
            Profile(
                owner_id="alice",
                first_name="Dup",
                last_name="Licate",
                occupation="None",
                phone_number="+1",
            )
        )
