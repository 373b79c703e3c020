"""Task lifecycle operations: create, get, list, update, bin, undo.

Two lifecycle states, Active and Binned (see TaskState). Every transition is
delegated to a single conditional update in ITaskRepository; a None result
means the guard (ownership + expected state) did not hold at write time and
is reported as ResourceNotFoundException, never as a permission error.

Transitions:
    create            -> Active
    Active  --update-> Active   (owner only; binned tasks cannot be updated)
    Active  --bin---> Binned    (owner only; at most once)
    Binned  --undo--> Active    (owner only; at most once)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from tasknest.application.services.task_field_validator import TaskFieldValidator
from tasknest.core.identifiers import require_identifiers
from tasknest.domain.exceptions import ResourceNotFoundException
from tasknest.shared.telemetry.tracing import add_span_attributes, traced

if TYPE_CHECKING:
    from tasknest.application.dtos.task import EnrichedTaskResult, TaskResult
    from tasknest.application.interfaces.repositories import ITaskRepository
    from tasknest.application.services.profile_enrichment import (
        ProfileEnrichmentService,
    )

logger = logging.getLogger(__name__)

DEFAULT_LIST_LIMIT = 100


class TaskService:
    """Create, read and transition tasks scoped to their owner."""

    def __init__(
        self,
        task_repo: "ITaskRepository",
        enrichment: "ProfileEnrichmentService",
        validator: TaskFieldValidator | None = None,
        max_list_limit: int = DEFAULT_LIST_LIMIT,
    ) -> None:
        self.task_repo = task_repo
        self.enrichment = enrichment
        self.validator = validator or TaskFieldValidator()
        self.max_list_limit = max_list_limit

    def _clamp(self, skip: int, limit: int) -> tuple[int, int]:
        return max(0, skip), min(max(1, limit), self.max_list_limit)

    @traced("task.create")
    async def create_task(
        self,
        owner_id: str,
        task_name: Any,
        description: Any,
        priority: Any,
        share_type: Any = None,
    ) -> TaskResult:
        """Create an active task owned by owner_id. share_type defaults to PRIVATE."""
        require_identifiers(owner_id=owner_id)
        data = self.validator.validate_create(
            task_name=task_name,
            description=description,
            priority=priority,
            share_type=share_type,
        )
        created = await self.task_repo.create_task(owner_id, data)
        add_span_attributes(task_state=created.state.value)
        logger.info(
            "Task created: id=%s owner_id=%s state=%s",
            created.id,
            owner_id,
            created.state.value,
        )
        return created

    @traced("task.get")
    async def get_task(self, owner_id: str, task_id: str) -> TaskResult:
        """Return the caller's own active task; binned or foreign tasks are not found."""
        require_identifiers(owner_id=owner_id, task_id=task_id)
        task = await self.task_repo.get_active_by_id_and_owner(task_id, owner_id)
        if task is None:
            raise ResourceNotFoundException("task", task_id)
        return task

    @traced("task.list")
    async def list_tasks(
        self, caller_id: str, skip: int = 0, limit: int = DEFAULT_LIST_LIMIT
    ) -> list[EnrichedTaskResult]:
        """Return active tasks the caller owns or that are PUBLIC, with owner profiles."""
        require_identifiers(caller_id=caller_id)
        skip, limit = self._clamp(skip, limit)
        tasks = await self.task_repo.list_visible(caller_id, skip=skip, limit=limit)
        add_span_attributes(result_count=len(tasks))
        return await self.enrichment.enrich(tasks)

    @traced("task.list_binned")
    async def list_binned_tasks(
        self, owner_id: str, skip: int = 0, limit: int = DEFAULT_LIST_LIMIT
    ) -> list[TaskResult]:
        """Return the owner's binned tasks (restorable with undo_task)."""
        require_identifiers(owner_id=owner_id)
        skip, limit = self._clamp(skip, limit)
        return await self.task_repo.list_binned(owner_id, skip=skip, limit=limit)

    @traced("task.update")
    async def update_task(
        self,
        owner_id: str,
        task_id: str,
        task_name: Any = None,
        description: Any = None,
        priority: Any = None,
        share_type: Any = None,
    ) -> TaskResult:
        """Merge the sent fields into the caller's active task. Owner and id never change."""
        require_identifiers(owner_id=owner_id, task_id=task_id)
        data = self.validator.validate_update(
            task_name=task_name,
            description=description,
            priority=priority,
            share_type=share_type,
        )
        updated = await self.task_repo.update_active(task_id, owner_id, data)
        if updated is None:
            raise ResourceNotFoundException("task", task_id)
        return updated

    @traced("task.bin")
    async def bin_task(self, owner_id: str, task_id: str) -> TaskResult:
        """Move an active task to the bin. A second call reports not found."""
        require_identifiers(owner_id=owner_id, task_id=task_id)
        binned = await self.task_repo.bin_task(task_id, owner_id)
        if binned is None:
            raise ResourceNotFoundException("task", task_id)
        add_span_attributes(task_state=binned.state.value)
        logger.info(
            "Task binned: id=%s owner_id=%s state=%s",
            task_id,
            owner_id,
            binned.state.value,
        )
        return binned

    @traced("task.undo")
    async def undo_task(self, owner_id: str, task_id: str) -> TaskResult:
        """Restore a binned task. Restoring an active task reports not found."""
        require_identifiers(owner_id=owner_id, task_id=task_id)
        restored = await self.task_repo.restore_task(task_id, owner_id)
        if restored is None:
            raise ResourceNotFoundException("task", task_id)
        add_span_attributes(task_state=restored.state.value)
        logger.info(
            "Task restored: id=%s owner_id=%s state=%s",
            task_id,
            owner_id,
            restored.state.value,
        )
        return restored
