"""create habit tables

Revision ID: 20261019_0001
Revises: 
Create Date: 2026-10-19
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "20261019_0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "habits",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("motivation", sa.Text(), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("is_archived", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_habits_id", "habits", ["id"], unique=False)
    op.create_index("ix_habits_created_at", "habits", ["created_at"], unique=False)
    op.create_index("ix_habits_is_archived", "habits", ["is_archived"], unique=False)

    op.create_table(
        "habit_logs",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("habit_id", sa.Integer(), sa.ForeignKey("habits.id", ondelete="CASCADE"), nullable=False),
        sa.Column("day", sa.Date(), nullable=False),
        sa.Column("status", sa.String(length=16), nullable=False),
        sa.Column("note", sa.Text(), nullable=True),
        sa.UniqueConstraint("habit_id", "day", name="uq_habit_log_per_day"),
    )
    op.create_index("ix_habit_logs_id", "habit_logs", ["id"], unique=False)
    op.create_index("ix_habit_logs_habit_id", "habit_logs", ["habit_id"], unique=False)
    op.create_index("ix_habit_logs_day", "habit_logs", ["day"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_habit_logs_day", table_name="habit_logs")
    op.drop_index("ix_habit_logs_habit_id", table_name="habit_logs")
    op.drop_index("ix_habit_logs_id", table_name="habit_logs")
    op.drop_table("habit_logs")

    op.drop_index("ix_habits_is_archived", table_name="habits")
    op.drop_index("ix_habits_created_at", table_name="habits")
    op.drop_index("ix_habits_id", table_name="habits")
    op.drop_table("habits")
