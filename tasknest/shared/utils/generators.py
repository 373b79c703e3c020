"""Primary key generation."""

from cuid2 import cuid_wrapper

_next_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new CUID2 string.

    CUID2 output is lowercase alphanumeric, 24 characters by default, so it
    always passes tasknest.core.identifiers.is_valid_identifier.
    """
    return _next_cuid()
