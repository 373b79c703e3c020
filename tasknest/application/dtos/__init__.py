"""Application DTOs (no ORM dependency)."""

from tasknest.application.dtos.profile import ProfileProjection
from tasknest.application.dtos.task import (
    EnrichedTaskResult,
    TaskCreate,
    TaskResult,
    TaskSearchResult,
    TaskUpdate,
)

__all__ = [
    "EnrichedTaskResult",
    "ProfileProjection",
    "TaskCreate",
    "TaskResult",
    "TaskSearchResult",
    "TaskUpdate",
]
