"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tasknest.application.dtos.profile import ProfileProjection
    from tasknest.application.dtos.task import TaskCreate, TaskResult, TaskUpdate


# Task repository interface
class ITaskRepository(Protocol):
    """Protocol for task repository.

    Every mutation is a single-document conditional update: the match
    predicate (ownership + expected state) is evaluated by the store at write
    time. None means no document matched.
    """

    async def create_task(self, owner_id: str, data: TaskCreate) -> TaskResult:
        """Insert one active task owned by owner_id."""

    async def get_active_by_id_and_owner(
        self, task_id: str, owner_id: str
    ) -> TaskResult | None:
        """Return task if it exists, is owned by owner_id and is active."""

    async def update_active(
        self, task_id: str, owner_id: str, data: TaskUpdate
    ) -> TaskResult | None:
        """Merge sent fields into an active task owned by owner_id."""

    async def bin_task(self, task_id: str, owner_id: str) -> TaskResult | None:
        """Set is_active=False where id, owner and is_active=True match."""

    async def restore_task(self, task_id: str, owner_id: str) -> TaskResult | None:
        """Set is_active=True where id, owner and is_active=False match."""

    async def list_visible(
        self, caller_id: str, skip: int = 0, limit: int = 100
    ) -> list[TaskResult]:
        """Return active tasks owned by caller_id or shared PUBLIC (newest first)."""

    async def list_binned(
        self, owner_id: str, skip: int = 0, limit: int = 100
    ) -> list[TaskResult]:
        """Return owner's binned tasks (newest first)."""

    async def search_visible(
        self, caller_id: str, text: str, limit: int = 50
    ) -> list[TaskResult]:
        """Case-insensitive substring match on task_name within the visible set."""


# Profile store interface (read-only collaborator)
class IProfileRepository(Protocol):
    """Protocol for the read-only profile store, keyed by owner id."""

    async def find_by_owner(self, owner_id: str) -> ProfileProjection | None:
        """Return the profile projection for owner_id, or None."""

    async def find_by_owners(
        self, owner_ids: set[str]
    ) -> dict[str, ProfileProjection]:
        """Return projections for the given owners (batch). Owners without a profile are absent."""
