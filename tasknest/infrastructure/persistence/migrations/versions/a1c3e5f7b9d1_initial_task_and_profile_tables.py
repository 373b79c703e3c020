"""initial task and profile tables

Revision ID: a1c3e5f7b9d1
Revises:
Create Date: 2026-10-19

task: owner-scoped, soft-deleted via is_active. profile: one per owner,
read by the task engine for enrichment only.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "a1c3e5f7b9d1"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "task",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("owner_id", sa.String(length=64), nullable=False),
        sa.Column("task_name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column(
            "share_type",
            sa.String(length=32),
            nullable=False,
            server_default="PRIVATE",
        ),
        sa.Column("priority", sa.String(length=32), nullable=False),
        sa.Column(
            "is_active", sa.Boolean(), nullable=False, server_default=sa.true()
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_task_owner_id", "task", ["owner_id"], unique=False)
    op.create_index(
        "ix_task_owner_active", "task", ["owner_id", "is_active"], unique=False
    )
    op.create_index(
        "ix_task_share_active", "task", ["share_type", "is_active"], unique=False
    )

    op.create_table(
        "profile",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("owner_id", sa.String(length=64), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("occupation", sa.String(length=150), nullable=False),
        sa.Column("address", sa.String(length=500), nullable=True),
        sa.Column("phone_number", sa.String(length=32), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("owner_id", name="uq_profile_owner_id"),
    )
    op.create_index("ix_profile_owner_id", "profile", ["owner_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_profile_owner_id", table_name="profile")
    op.drop_table("profile")
    op.drop_index("ix_task_share_active", table_name="task")
    op.drop_index("ix_task_owner_active", table_name="task")
    op.drop_index("ix_task_owner_id", table_name="task")
    op.drop_table("task")
