"""Domain layer: enums, value objects, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from tasknest.domain.enums import Priority, ShareType, TaskState
from tasknest.domain.exceptions import (
    AuthenticationException,
    ConflictException,
    InvalidIdentifierException,
    ResourceNotFoundException,
    TaskNestException,
    ValidationException,
)
from tasknest.domain.value_objects import TaskDescription, TaskName

__all__ = [
    "AuthenticationException",
    "ConflictException",
    "InvalidIdentifierException",
    "Priority",
    "ResourceNotFoundException",
    "ShareType",
    "TaskDescription",
    "TaskName",
    "TaskNestException",
    "TaskState",
    "ValidationException",
]
