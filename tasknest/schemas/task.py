"""Task API schemas.

Request fields are typed strings carrying their documented lengths and enum
sets in the OpenAPI schema. Trimming, length and enum checks are enforced by
TaskFieldValidator so every failing field is reported in one 400 response.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from tasknest.domain.enums import Priority, ShareType

_TASK_NAME_SCHEMA = {"minLength": 5, "maxLength": 255}
_DESCRIPTION_SCHEMA = {"minLength": 15}


class TaskCreateRequest(BaseModel):
    """Request body for creating a task. share_type defaults to PRIVATE."""

    task_name: str | None = Field(
        default=None,
        description="5-255 characters after trimming",
        json_schema_extra=_TASK_NAME_SCHEMA,
    )
    description: str | None = Field(
        default=None,
        description="At least 15 characters after trimming",
        json_schema_extra=_DESCRIPTION_SCHEMA,
    )
    priority: str | None = Field(
        default=None,
        description="Required",
        json_schema_extra={"enum": Priority.values()},
    )
    share_type: str | None = Field(
        default=None,
        description="Defaults to PRIVATE",
        json_schema_extra={"enum": ShareType.values()},
    )


class TaskUpdateRequest(BaseModel):
    """Request body for updating a task (partial). Omitted fields are left unchanged."""

    task_name: str | None = Field(default=None, json_schema_extra=_TASK_NAME_SCHEMA)
    description: str | None = Field(
        default=None, json_schema_extra=_DESCRIPTION_SCHEMA
    )
    priority: str | None = Field(
        default=None, json_schema_extra={"enum": Priority.values()}
    )
    share_type: str | None = Field(
        default=None, json_schema_extra={"enum": ShareType.values()}
    )


class ProfileResponse(BaseModel):
    """Owner profile projection attached to listed and searched tasks."""

    model_config = ConfigDict(from_attributes=True)

    first_name: str
    last_name: str
    occupation: str


class TaskResponse(BaseModel):
    """Full task representation (owner-facing)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    owner_id: str
    task_name: str
    description: str
    share_type: ShareType
    priority: Priority
    is_active: bool
    created_at: datetime
    updated_at: datetime


class TaskWithProfileResponse(TaskResponse):
    """Task from the visible list, with its owner's profile (null when absent)."""

    profile: ProfileResponse | None = None

    @classmethod
    def from_enriched(cls, item: Any) -> "TaskWithProfileResponse":
        """Build from EnrichedTaskResult (task fields flattened, profile nested)."""
        base = TaskResponse.model_validate(item.task).model_dump()
        profile = (
            ProfileResponse.model_validate(item.profile) if item.profile else None
        )
        return cls(**base, profile=profile)


class TaskSearchItemResponse(BaseModel):
    """Search result: restricted projection without owner id or timestamps."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    task_name: str
    description: str
    priority: Priority
    share_type: ShareType
    profile: ProfileResponse | None = None
