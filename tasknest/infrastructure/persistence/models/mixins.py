"""Column mixins shared by task and profile records."""

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from tasknest.core.identifiers import IDENTIFIER_MAX_LENGTH
from tasknest.shared.utils.generators import generate_cuid


class CuidMixin:
    """CUID2 primary key generated client-side on insert."""

    id: Mapped[str] = mapped_column(
        String(IDENTIFIER_MAX_LENGTH), primary_key=True, default=generate_cuid
    )


class OwnerMixin:
    """Owning identity, written once at insert and never updated.

    Identities live in an external auth store, so there is no foreign key.
    """

    owner_id: Mapped[str] = mapped_column(
        String(IDENTIFIER_MAX_LENGTH), nullable=False, index=True
    )


class TimestampMixin:
    """Server-maintained created_at / updated_at (timezone-aware)."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class OwnedModel(CuidMixin, OwnerMixin, TimestampMixin):
    """Combined mixin for owned records: id, owner_id and timestamps."""
