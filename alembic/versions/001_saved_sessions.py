"""Saved sessions — local analysis history.

Revision ID: 001_saved_sessions
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_saved_sessions"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "saved_sessions",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("problem_description", sa.Text, nullable=False),
        sa.Column("improving_param_id", sa.Integer, nullable=True),
        sa.Column("worsening_param_id", sa.Integer, nullable=True),
        sa.Column("ai_explanation", sa.Text, nullable=False, server_default=""),
        sa.Column("suggested_principles", sa.JSON, nullable=False),
        sa.Column("ai_draft", sa.JSON, nullable=True),
        sa.Column("locale", sa.String(10), nullable=False, server_default="ar"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index(
        "ix_saved_sessions_created_at", "saved_sessions", ["created_at"],
    )


def downgrade() -> None:
    op.drop_index("ix_saved_sessions_created_at", table_name="saved_sessions")
    op.drop_table("saved_sessions")
