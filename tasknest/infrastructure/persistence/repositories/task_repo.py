"""Task repository: owner-scoped lifecycle writes and visibility-gated reads."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Select, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tasknest.application.dtos.task import TaskCreate, TaskResult, TaskUpdate
from tasknest.domain.enums import Priority, ShareType
from tasknest.infrastructure.persistence.models.task import Task
from tasknest.infrastructure.persistence.repositories.base import BaseRepository
from tasknest.infrastructure.persistence.visibility import (
    owned_by,
    owned_task,
    visible_to,
)

_LIKE_ESCAPE = "\\"


def _to_result(t: Any) -> TaskResult:
    """Map a Task ORM object or a RETURNING row to TaskResult."""
    return TaskResult(
        id=t.id,
        owner_id=t.owner_id,
        task_name=t.task_name,
        description=t.description,
        share_type=ShareType.from_stored(t.share_type),
        priority=Priority.from_stored(t.priority),
        is_active=bool(t.is_active),
        created_at=t.created_at,
        updated_at=t.updated_at,
    )


def _escape_like(text: str) -> str:
    return (
        text.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )


class TaskRepository(BaseRepository[Task]):
    """Task repository. Implements ITaskRepository.

    State transitions are single UPDATE ... WHERE <guard> RETURNING statements,
    so the guard is checked by the database at write time and two concurrent
    callers can never both succeed.
    """

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Task)

    async def create_task(self, owner_id: str, data: TaskCreate) -> TaskResult:
        task = Task(
            owner_id=owner_id,
            task_name=data.task_name,
            description=data.description,
            share_type=data.share_type.value,
            priority=data.priority.value,
            is_active=True,
        )
        created = await self.create(task)
        return _to_result(created)

    async def get_active_by_id_and_owner(
        self, task_id: str, owner_id: str
    ) -> TaskResult | None:
        stmt = select(Task).where(owned_task(task_id, owner_id, active=True))
        async with self.store_errors("task.get"):
            result = await self.db.execute(
                stmt.execution_options(populate_existing=True)
            )
            task = result.scalar_one_or_none()
        return _to_result(task) if task else None

    async def _conditional_update(
        self, operation: str, guard: Any, values: dict[str, Any]
    ) -> TaskResult | None:
        """Apply values to the one row matching guard; None when nothing matched."""
        stmt = (
            update(Task)
            .where(guard)
            .values(**values)
            .returning(*Task.__table__.c)
            .execution_options(synchronize_session=False)
        )
        async with self.store_errors(operation):
            result = await self.db.execute(stmt)
            row = result.one_or_none()
        return _to_result(row) if row else None

    async def update_active(
        self, task_id: str, owner_id: str, data: TaskUpdate
    ) -> TaskResult | None:
        # owner_id, id and is_active are never part of the written fields
        return await self._conditional_update(
            "task.update",
            owned_task(task_id, owner_id, active=True),
            data.changed_fields(),
        )

    async def bin_task(self, task_id: str, owner_id: str) -> TaskResult | None:
        return await self._conditional_update(
            "task.bin",
            owned_task(task_id, owner_id, active=True),
            {"is_active": False},
        )

    async def restore_task(self, task_id: str, owner_id: str) -> TaskResult | None:
        return await self._conditional_update(
            "task.restore",
            owned_task(task_id, owner_id, active=False),
            {"is_active": True},
        )

    async def _fetch_all(self, operation: str, stmt: Select) -> list[TaskResult]:
        stmt = stmt.order_by(Task.created_at.desc(), Task.id.desc())
        async with self.store_errors(operation):
            result = await self.db.execute(
                stmt.execution_options(populate_existing=True)
            )
            tasks = result.scalars().all()
        return [_to_result(t) for t in tasks]

    async def list_visible(
        self, caller_id: str, skip: int = 0, limit: int = 100
    ) -> list[TaskResult]:
        stmt = select(Task).where(visible_to(caller_id)).offset(skip).limit(limit)
        return await self._fetch_all("task.list", stmt)

    async def list_binned(
        self, owner_id: str, skip: int = 0, limit: int = 100
    ) -> list[TaskResult]:
        stmt = (
            select(Task)
            .where(owned_by(owner_id, active=False))
            .offset(skip)
            .limit(limit)
        )
        return await self._fetch_all("task.list_binned", stmt)

    async def search_visible(
        self, caller_id: str, text: str, limit: int = 50
    ) -> list[TaskResult]:
        pattern = f"%{_escape_like(text)}%"
        stmt = (
            select(Task)
            .where(
                visible_to(caller_id),
                Task.task_name.ilike(pattern, escape=_LIKE_ESCAPE),
            )
            .limit(limit)
        )
        return await self._fetch_all("task.search", stmt)
