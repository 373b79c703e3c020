"""Visibility and ownership predicates for task reads.

Single place encoding who may see which task. A new visibility mode must
extend visible_to(); call sites never assemble their own conditions.

    visible_to(C)   = is_active AND (owner_id == C OR share_type == PUBLIC)
    owned_by(C, s)  = owner_id == C AND is_active == s

SHARE_VIA_LINK is gated like PRIVATE. Because share_type is compared with the
PUBLIC tag literally, unknown or legacy tags in storage are never public.
"""

from sqlalchemy import ColumnElement, and_, or_

from tasknest.domain.enums import ShareType
from tasknest.infrastructure.persistence.models.task import Task


def visible_to(caller_id: str) -> ColumnElement[bool]:
    """Return the read-eligibility predicate for list and search."""
    return and_(
        Task.is_active.is_(True),
        or_(
            Task.owner_id == caller_id,
            Task.share_type == ShareType.PUBLIC.value,
        ),
    )


def owned_by(owner_id: str, *, active: bool) -> ColumnElement[bool]:
    """Return the ownership + lifecycle-state guard for owner-only reads and mutations."""
    return and_(Task.owner_id == owner_id, Task.is_active.is_(active))


def owned_task(task_id: str, owner_id: str, *, active: bool) -> ColumnElement[bool]:
    """Return the single-task guard: id, owner and expected state must all match."""
    return and_(Task.id == task_id, owned_by(owner_id, active=active))
