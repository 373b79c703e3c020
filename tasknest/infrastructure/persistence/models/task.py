"""Task ORM model. Owned by one identity; soft-deleted via is_active."""

from sqlalchemy import Boolean, Index, String, Text, true
from sqlalchemy.orm import Mapped, mapped_column

from tasknest.domain.enums import ShareType
from tasknest.infrastructure.persistence.database import Base
from tasknest.infrastructure.persistence.models.mixins import OwnedModel


class Task(OwnedModel, Base):
    """Task record. Table: task.

    share_type and priority hold enum string tags (see tasknest.domain.enums).
    is_active False means the task is in the bin.
    """

    __tablename__ = "task"

    task_name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    share_type: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=ShareType.PRIVATE.value,
        server_default=ShareType.PRIVATE.value,
    )
    priority: Mapped[str] = mapped_column(String(32), nullable=False)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true()
    )

    __table_args__ = (
        Index("ix_task_owner_active", "owner_id", "is_active"),
        Index("ix_task_share_active", "share_type", "is_active"),
    )
