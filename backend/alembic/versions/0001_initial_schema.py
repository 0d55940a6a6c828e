"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Creates the wait_time_submissions table with indexes on status and
hospital_name for the moderation queue and per-hospital views.
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


submission_status = sa.Enum("pending", "approved", "rejected", name="submissionstatus")


def upgrade() -> None:
    op.create_table(
        "wait_time_submissions",
        sa.Column("submission_id", sa.String(36), primary_key=True),
        sa.Column("hospital_name", sa.String(200), nullable=False),
        sa.Column("wait_time", sa.Integer, nullable=False),
        sa.Column("status", submission_status, nullable=False, server_default="pending"),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_wait_time_submissions_status", "wait_time_submissions", ["status"])
    op.create_index("ix_wait_time_submissions_hospital_name", "wait_time_submissions", ["hospital_name"])


def downgrade() -> None:
    op.drop_index("ix_wait_time_submissions_hospital_name", table_name="wait_time_submissions")
    op.drop_index("ix_wait_time_submissions_status", table_name="wait_time_submissions")
    op.drop_table("wait_time_submissions")
    submission_status.drop(op.get_bind(), checkfirst=True)
