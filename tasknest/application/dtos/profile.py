"""DTOs for the owner profile projection used by task enrichment."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProfileProjection:
    """Public slice of an identity's profile. Internal ids are never part of it."""

    first_name: str
    last_name: str
    occupation: str
