"""Entity identifier format validation.

Shared by the task engine and the auth dependency so malformed owner or task
ids are rejected before any store access. Accepts CUID/UUID-style values.
"""

import logging
import re

from tasknest.domain.exceptions import InvalidIdentifierException

logger = logging.getLogger(__name__)

IDENTIFIER_MAX_LENGTH = 64
_IDENTIFIER_RE = re.compile(
    r"^[a-zA-Z0-9_-]{1," + str(IDENTIFIER_MAX_LENGTH) + r"}$"
)


def is_valid_identifier(value: str | None) -> bool:
    """Return True if value is a well-formed entity identifier."""
    if not value or not isinstance(value, str) or len(value) > IDENTIFIER_MAX_LENGTH:
        return False
    return bool(_IDENTIFIER_RE.fullmatch(value))


def require_identifiers(**identifiers: str | None) -> None:
    """Raise InvalidIdentifierException for the first malformed identifier.

    Every identifier passed is checked independently (all must be valid).
    Only the field name is logged; the rejected value may be hostile.

    Example:
        require_identifiers(owner_id=owner_id, task_id=task_id)
    """
    for field, value in identifiers.items():
        if not is_valid_identifier(value):
            logger.warning("Rejected malformed identifier: %s", field)
            raise InvalidIdentifierException(field)
