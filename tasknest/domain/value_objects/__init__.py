"""Domain value objects (immutable, self-validating)."""

from tasknest.domain.value_objects.core import (
    TaskDescription,
    TaskName,
    parse_priority,
    parse_share_type,
)

__all__ = [
    "TaskDescription",
    "TaskName",
    "parse_priority",
    "parse_share_type",
]
