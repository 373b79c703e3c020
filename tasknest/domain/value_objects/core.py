"""Domain value objects for the TaskNest application.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value. Constructors raise
ValueError; the application layer turns that into ValidationException.
"""

from dataclasses import dataclass
from typing import ClassVar

from tasknest.domain.enums import Priority, ShareType


def _validate_text(
    value: object,
    min_len: int,
    max_len: int | None,
    field_name: str,
) -> str:
    """Return the trimmed string or raise ValueError (type, empty, length)."""
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string")
    trimmed = value.strip()
    if not trimmed:
        raise ValueError(f"{field_name} is required")
    if len(trimmed) < min_len:
        raise ValueError(f"{field_name} must be at least {min_len} characters")
    if max_len is not None and len(trimmed) > max_len:
        raise ValueError(f"{field_name} must not exceed {max_len} characters")
    return trimmed


@dataclass(frozen=True)
class TaskName:
    """Value object for a task name: trimmed, 5-255 characters."""

    MIN_LENGTH: ClassVar[int] = 5
    MAX_LENGTH: ClassVar[int] = 255

    value: str

    def __post_init__(self) -> None:
        trimmed = _validate_text(self.value, self.MIN_LENGTH, self.MAX_LENGTH, "Task name")
        object.__setattr__(self, "value", trimmed)


@dataclass(frozen=True)
class TaskDescription:
    """Value object for a task description: trimmed, at least 15 characters."""

    MIN_LENGTH: ClassVar[int] = 15

    value: str

    def __post_init__(self) -> None:
        trimmed = _validate_text(self.value, self.MIN_LENGTH, None, "Task description")
        object.__setattr__(self, "value", trimmed)


def parse_share_type(value: object) -> ShareType:
    """Parse a caller-supplied share type against the closed set.

    Falsy values (None, "") mean "not set" and resolve to PRIVATE.
    """
    if not value:
        return ShareType.PRIVATE
    if isinstance(value, ShareType):
        return value
    try:
        return ShareType(value)
    except ValueError as e:
        raise ValueError(
            f"Share type must be one of: {', '.join(ShareType.values())}"
        ) from e


def parse_priority(value: object) -> Priority:
    """Parse a caller-supplied priority against the closed set (required, no default)."""
    if isinstance(value, Priority):
        return value
    if not value:
        raise ValueError("Priority is required")
    try:
        return Priority(value)
    except ValueError as e:
        raise ValueError(
            f"Priority must be one of: {', '.join(Priority.values())}"
        ) from e
