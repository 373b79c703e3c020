"""Task field contract validation (lengths, closed enum sets).

Collects every failing field into one ValidationException so callers get
per-field messages in a single response.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from tasknest.application.dtos.task import TaskCreate, TaskUpdate
from tasknest.domain.enums import ShareType
from tasknest.domain.exceptions import ValidationException
from tasknest.domain.value_objects import (
    TaskDescription,
    TaskName,
    parse_priority,
    parse_share_type,
)

T = TypeVar("T")


def _parse_sent_share_type(value: Any) -> ShareType:
    """On update an explicitly sent share type must be a member, never the PRIVATE fallback."""
    if not value:
        raise ValueError(f"Share type must be one of: {', '.join(ShareType.values())}")
    return parse_share_type(value)


class _ErrorCollector:
    """Run field parsers and accumulate {field, message} entries."""

    def __init__(self) -> None:
        self.errors: list[dict[str, str]] = []

    def check(self, field: str, parse: Callable[[Any], T], value: Any) -> T | None:
        try:
            return parse(value)
        except ValueError as e:
            self.errors.append({"field": field, "message": str(e)})
            return None

    def raise_if_errors(self) -> None:
        if self.errors:
            raise ValidationException(
                "Validation failed",
                field=self.errors[0]["field"] if len(self.errors) == 1 else None,
                errors=self.errors,
            )


class TaskFieldValidator:
    """Validate create and partial-update payloads for tasks."""

    def validate_create(
        self,
        task_name: Any,
        description: Any,
        priority: Any,
        share_type: Any = None,
    ) -> TaskCreate:
        """Return a TaskCreate or raise ValidationException listing every bad field."""
        collector = _ErrorCollector()
        name = collector.check("task_name", TaskName, task_name)
        desc = collector.check("description", TaskDescription, description)
        prio = collector.check("priority", parse_priority, priority)
        share = collector.check("share_type", parse_share_type, share_type)
        collector.raise_if_errors()
        return TaskCreate(
            task_name=name.value,
            description=desc.value,
            share_type=share,
            priority=prio,
        )

    def validate_update(
        self,
        task_name: Any = None,
        description: Any = None,
        priority: Any = None,
        share_type: Any = None,
    ) -> TaskUpdate:
        """Return a TaskUpdate holding only the sent fields.

        A field counts as sent when it is not None. At least one field is required.
        """
        if all(v is None for v in (task_name, description, priority, share_type)):
            raise ValidationException("At least one field must be provided for update")
        collector = _ErrorCollector()
        name = desc = prio = share = None
        if task_name is not None:
            name = collector.check("task_name", TaskName, task_name)
        if description is not None:
            desc = collector.check("description", TaskDescription, description)
        if priority is not None:
            prio = collector.check("priority", parse_priority, priority)
        if share_type is not None:
            share = collector.check("share_type", _parse_sent_share_type, share_type)
        collector.raise_if_errors()
        return TaskUpdate(
            task_name=name.value if name else None,
            description=desc.value if desc else None,
            priority=prio,
            share_type=share,
        )
