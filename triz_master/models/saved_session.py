"""SavedSession ORM — one entry of the local analysis history.

Invariants:
    - id is UUID primary key
    - problem_description is non-nullable text (blank text never reaches the table)
    - suggested_principles keeps resolver order
    - ai_draft is a validated InnovationDraft dump, or NULL when no draft was made

Design Decisions:
    - JSON columns for principle ids and draft: stored as-is, read back whole (ADR: no joins needed)
    - Generic Uuid type: works on SQLite (default) and PostgreSQL alike
    - Indexed created_at: history is always listed newest first
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime, JSON, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from triz_master.db.base import Base


class SavedSession(Base):
    """A persisted analysis session (problem, contradiction, principles, draft)."""
    __tablename__ = "saved_sessions"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    problem_description: Mapped[str] = mapped_column(Text, nullable=False)
    improving_param_id: Mapped[int | None] = mapped_column(
        Integer, nullable=True,
    )
    worsening_param_id: Mapped[int | None] = mapped_column(
        Integer, nullable=True,
    )
    ai_explanation: Mapped[str] = mapped_column(
        Text, nullable=False, default="",
    )
    suggested_principles: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    ai_draft: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    locale: Mapped[str] = mapped_column(
        String(10), nullable=False, default="ar",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )
