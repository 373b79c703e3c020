"""Domain enumerations for the TaskNest application.

Enums represent fixed sets of domain values (visibility mode, priority,
lifecycle state). Values are persisted as their string tags.
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)

# Tag written by earlier releases for SHARE_VIA_LINK.
_LEGACY_SHARE_TAGS = {"SHARE_VIE_LINK": "SHARE_VIA_LINK"}


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class ShareType(_ValuesMixin, str, Enum):
    """Task visibility mode.

    PRIVATE is owner-only, PUBLIC is readable by any caller. SHARE_VIA_LINK is
    reserved and gated exactly like PRIVATE by the read paths.
    """

    PRIVATE = "PRIVATE"
    PUBLIC = "PUBLIC"
    SHARE_VIA_LINK = "SHARE_VIA_LINK"

    @classmethod
    def from_stored(cls, tag: str | None) -> "ShareType":
        """Parse a tag read back from storage; unknown tags fall back to PRIVATE."""
        if tag is None:
            return cls.PRIVATE
        tag = _LEGACY_SHARE_TAGS.get(tag, tag)
        try:
            return cls(tag)
        except ValueError:
            logger.warning("Unknown share_type tag in storage: %r; reading as PRIVATE", tag)
            return cls.PRIVATE


class Priority(_ValuesMixin, str, Enum):
    """Task priority, highest first."""

    CRITICAL = "CRITICAL"
    VERY_HIGH = "VERY_HIGH"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    VERY_LOW = "VERY_LOW"
    NONE = "NONE"

    @classmethod
    def from_stored(cls, tag: str | None) -> "Priority":
        """Parse a tag read back from storage; unknown tags fall back to NONE."""
        try:
            return cls(tag)
        except ValueError:
            logger.warning("Unknown priority tag in storage: %r; reading as NONE", tag)
            return cls.NONE


class TaskState(_ValuesMixin, str, Enum):
    """Task lifecycle state derived from is_active."""

    ACTIVE = "active"
    BINNED = "binned"

    @classmethod
    def from_is_active(cls, is_active: bool) -> "TaskState":
        return cls.ACTIVE if is_active else cls.BINNED
