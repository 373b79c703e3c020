"""Profile ORM model. Owned by the profile service; read-only for task enrichment."""

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from tasknest.infrastructure.persistence.database import Base
from tasknest.infrastructure.persistence.models.mixins import OwnedModel


class Profile(OwnedModel, Base):
    """Profile of an identity (zero or one per owner). Table: profile."""

    __tablename__ = "profile"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    occupation: Mapped[str] = mapped_column(String(150), nullable=False)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    phone_number: Mapped[str] = mapped_column(String(32), nullable=False)

    __table_args__ = (UniqueConstraint("owner_id", name="uq_profile_owner_id"),)
