"""Innovation Routes — AI contradiction analysis and innovation report drafting.

Invariants:
    - Both endpoints return 200 with a tagged body: status "ok" or status "error"
    - Locale: explicit request locale, else detected from the problem text
    - A successful draft is saved to history only when save_to_history is set

Design Decisions:
    - AI failure is a result, not an HTTP error: the UI shows the localized message
      and keeps the user's input (ADR: collaborator failures are expected)
"""

import logging

from fastapi import APIRouter, Depends

from triz_master.api.dependencies import (
    get_contradiction_analyst, get_draft_writer,
    get_history_repository, resolve_locale,
)
from triz_master.schemas.analysis import (
    AnalysisResult, AnalyzeRequest, DraftRequest, DraftResult, DraftSuccess,
)
from triz_master.schemas.history import SavedSessionCreate
from triz_master.services.contradiction_analyst import ContradictionAnalyst
from triz_master.services.draft_writer import InnovationDraftWriter
from triz_master.services.session_history import SessionHistoryRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["innovation"])


@router.post("/analysis", response_model=AnalysisResult)
async def analyze_problem(
    body: AnalyzeRequest,
    analyst: ContradictionAnalyst = Depends(get_contradiction_analyst),
):
    """Diagnose the contradiction in a free-text problem and resolve principles."""
    locale = resolve_locale(body.locale, body.problem)
    return await analyst.analyze(body.problem, locale)


@router.post("/drafts", response_model=DraftResult)
async def generate_draft(
    body: DraftRequest,
    writer: InnovationDraftWriter = Depends(get_draft_writer),
    history: SessionHistoryRepository = Depends(get_history_repository),
):
    """Draft an innovation report; optionally record the session in history."""
    locale = resolve_locale(body.locale, body.problem)
    result = await writer.draft(body.problem, body.principle_ids, locale)

    if isinstance(result, DraftSuccess) and body.save_to_history:
        saved = await history.save(SavedSessionCreate(
            problem_description=body.problem,
            improving_param_id=body.improving_param_id,
            worsening_param_id=body.worsening_param_id,
            ai_explanation=body.ai_explanation,
            suggested_principles=body.principle_ids,
            ai_draft=result.draft,
            locale=locale,
        ))
        result.saved_session_id = str(saved.id)
    return result
