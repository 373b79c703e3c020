"""Persistence models: ORM entities and mixins."""

from tasknest.infrastructure.persistence.models.mixins import (
    CuidMixin,
    OwnedModel,
    OwnerMixin,
    TimestampMixin,
)
from tasknest.infrastructure.persistence.models.profile import Profile
from tasknest.infrastructure.persistence.models.task import Task

__all__ = [
    "CuidMixin",
    "OwnedModel",
    "OwnerMixin",
    "Profile",
    "Task",
    "TimestampMixin",
]
