"""DTOs for task use cases (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from tasknest.application.dtos.profile import ProfileProjection
from tasknest.domain.enums import Priority, ShareType, TaskState


@dataclass(frozen=True)
class TaskResult:
    """Task read-model (result of create, get, update, bin, undo)."""

    id: str
    owner_id: str
    task_name: str
    description: str
    share_type: ShareType
    priority: Priority
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @property
    def state(self) -> TaskState:
        return TaskState.from_is_active(self.is_active)


@dataclass(frozen=True)
class TaskCreate:
    """Validated fields for a new task (owner comes from the caller)."""

    task_name: str
    description: str
    share_type: ShareType
    priority: Priority


@dataclass(frozen=True)
class TaskUpdate:
    """Validated partial update. None means "not sent"; unsent fields are never written."""

    task_name: str | None = None
    description: str | None = None
    share_type: ShareType | None = None
    priority: Priority | None = None

    def changed_fields(self) -> dict[str, object]:
        """Return only the fields that were sent, keyed by column name."""
        fields = {
            "task_name": self.task_name,
            "description": self.description,
            "share_type": self.share_type.value if self.share_type else None,
            "priority": self.priority.value if self.priority else None,
        }
        return {k: v for k, v in fields.items() if v is not None}


@dataclass(frozen=True)
class EnrichedTaskResult:
    """Task joined with its owner's profile projection (None when the owner has no profile)."""

    task: TaskResult
    profile: ProfileProjection | None


@dataclass(frozen=True)
class TaskSearchResult:
    """Restricted search projection: no owner id, lifecycle flag or timestamps."""

    id: str
    task_name: str
    description: str
    priority: Priority
    share_type: ShareType
    profile: ProfileProjection | None
