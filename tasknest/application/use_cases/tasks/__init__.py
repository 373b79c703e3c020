"""Task use cases: lifecycle operations and search."""

from tasknest.application.use_cases.tasks.search import TaskSearchService
from tasknest.application.use_cases.tasks.task_operations import TaskService

__all__ = ["TaskSearchService", "TaskService"]
