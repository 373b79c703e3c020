"""Repository implementations (SQLAlchemy)."""

from tasknest.infrastructure.persistence.repositories.profile_repo import (
    ProfileRepository,
)
from tasknest.infrastructure.persistence.repositories.task_repo import TaskRepository

__all__ = ["ProfileRepository", "TaskRepository"]
