"""Route Dependencies — shared providers for AI collaborators, history and locale.

Invariants:
    - One ResilientAnthropicClient per process (lazy, module-level)
    - Collaborators get model/token settings from get_settings(), never hardcoded
    - resolve_locale: explicit locale wins; otherwise detected from text; otherwise default

Design Decisions:
    - FastAPI Depends providers: tests swap them via app.dependency_overrides
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from triz_master.config import get_settings
from triz_master.core.detect_language import detect_locale
from triz_master.core.domain_types import Locale
from triz_master.infrastructure.anthropic_client import ResilientAnthropicClient
from triz_master.infrastructure.database import get_db
from triz_master.services.contradiction_analyst import ContradictionAnalyst
from triz_master.services.draft_writer import InnovationDraftWriter
from triz_master.services.session_history import SessionHistoryRepository

_anthropic_client: ResilientAnthropicClient | None = None


def get_anthropic_client() -> ResilientAnthropicClient:
    global _anthropic_client
    if _anthropic_client is None:
        settings = get_settings()
        _anthropic_client = ResilientAnthropicClient(
            api_key=settings.anthropic_api_key,
            max_retries=settings.anthropic_max_retries,
            base_delay_ms=settings.anthropic_base_delay_ms,
            max_delay_ms=settings.anthropic_max_delay_ms,
            timeout_seconds=settings.anthropic_timeout_seconds,
        )
    return _anthropic_client


def get_contradiction_analyst(
    client: ResilientAnthropicClient = Depends(get_anthropic_client),
) -> ContradictionAnalyst:
    settings = get_settings()
    return ContradictionAnalyst(
        client, model=settings.analysis_model,
        max_tokens=settings.analysis_max_tokens,
    )


def get_draft_writer(
    client: ResilientAnthropicClient = Depends(get_anthropic_client),
) -> InnovationDraftWriter:
    settings = get_settings()
    return InnovationDraftWriter(
        client, model=settings.draft_model,
        max_tokens=settings.draft_max_tokens,
    )


def get_history_repository(
    db: AsyncSession = Depends(get_db),
) -> SessionHistoryRepository:
    return SessionHistoryRepository(db, limit=get_settings().history_limit)


def resolve_locale(requested: Locale | None, text: str | None = None) -> Locale:
    """Pick the response locale for a request."""
    if requested is not None:
        return requested
    default = get_settings().default_locale
    if text:
        locale, _confidence = detect_locale(text, default=default)
        return locale
    return default
