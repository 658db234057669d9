"""History Routes — list, save, delete and clear past analysis sessions.

Invariants:
    - GET returns newest first, at most `history_limit` entries
    - POST with a problem already in history replaces that entry
    - DELETE /{id} on an unknown id returns 404

Design Decisions:
    - Routes delegate to SessionHistoryRepository (no SQL here)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from triz_master.api.dependencies import get_history_repository
from triz_master.schemas.history import (
    HistoryListResponse, SavedSessionCreate, SavedSessionResponse,
)
from triz_master.services.session_history import SessionHistoryRepository

router = APIRouter(prefix="/api/v1/history", tags=["history"])


@router.get("", response_model=HistoryListResponse)
async def list_history(
    history: SessionHistoryRepository = Depends(get_history_repository),
):
    rows = await history.list()
    return HistoryListResponse(
        sessions=[SavedSessionResponse.model_validate(r) for r in rows],
        limit=history.limit,
    )


@router.post(
    "", response_model=SavedSessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def save_session(
    body: SavedSessionCreate,
    history: SessionHistoryRepository = Depends(get_history_repository),
):
    row = await history.save(body)
    return SavedSessionResponse.model_validate(row)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(
    session_id: UUID,
    history: SessionHistoryRepository = Depends(get_history_repository),
):
    await history.delete(session_id)


@router.delete("")
async def clear_history(
    history: SessionHistoryRepository = Depends(get_history_repository),
):
    removed = await history.clear()
    return {"removed": removed}
