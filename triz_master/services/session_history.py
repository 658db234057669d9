"""Session History Repository — persists the newest-first list of past analyses.

Invariants:
    - list() is ordered newest first
    - save() applies core/history_policy: same problem text replaced, oldest evicted beyond limit
    - Blank problem text raises EmptyProblemError before touching the DB
    - delete() of an unknown id raises ResourceNotFoundError

Design Decisions:
    - Pure plan (history_policy) + impure apply here (ADR: impureim sandwich)
    - Commit inside the repository: every public write is one transaction
"""

import logging
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from triz_master.core.errors import EmptyProblemError, ResourceNotFoundError
from triz_master.core.history_policy import (
    DEFAULT_HISTORY_LIMIT, is_saveable, plan_history_save,
)
from triz_master.models.saved_session import SavedSession
from triz_master.schemas.history import SavedSessionCreate

logger = logging.getLogger(__name__)


class SessionHistoryRepository:
    """History persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession, limit: int = DEFAULT_HISTORY_LIMIT):
        self.db = db
        self.limit = limit

    async def list(self) -> list[SavedSession]:
        result = await self.db.execute(
            select(SavedSession).order_by(SavedSession.created_at.desc()),
        )
        return list(result.scalars().all())

    async def save(self, entry: SavedSessionCreate) -> SavedSession:
        """Insert `entry` at the head of the history, applying replace/evict."""
        if not is_saveable(entry.problem_description):
            raise EmptyProblemError()

        existing = await self.list()
        plan = plan_history_save(existing, entry.problem_description, self.limit)
        if plan.removed_ids:
            await self.db.execute(
                delete(SavedSession).where(SavedSession.id.in_(plan.removed_ids)),
            )

        row = SavedSession(
            problem_description=entry.problem_description,
            improving_param_id=entry.improving_param_id,
            worsening_param_id=entry.worsening_param_id,
            ai_explanation=entry.ai_explanation,
            suggested_principles=list(entry.suggested_principles),
            ai_draft=entry.ai_draft.model_dump() if entry.ai_draft else None,
            locale=entry.locale.value,
        )
        self.db.add(row)
        await self.db.commit()
        await self.db.refresh(row)
        logger.info(
            f"History saved ({len(plan.replaced_ids)} replaced, "
            f"{len(plan.evicted_ids)} evicted)",
            extra={"session_id": str(row.id)},
        )
        return row

    async def delete(self, session_id: UUID) -> None:
        row = await self.db.get(SavedSession, session_id)
        if row is None:
            raise ResourceNotFoundError("SavedSession", str(session_id))
        await self.db.delete(row)
        await self.db.commit()

    async def clear(self) -> int:
        """Remove every entry; returns how many were removed."""
        result = await self.db.execute(delete(SavedSession))
        await self.db.commit()
        return result.rowcount or 0
