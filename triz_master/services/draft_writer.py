"""Innovation Draft Writer — problem + principles → structured innovation report.

Invariants:
    - draft() never raises for API or payload failures: returns DraftFailure
    - Principle names rendered in the request locale; ids the catalog lacks are skipped
    - No API call when none of the requested principles is in the catalog

Design Decisions:
    - Full principle guide included as context: the model picks among known strategies
    - Persisting the draft is the caller's decision (route), not the writer's
"""

import logging

from triz_master.core.domain_types import Locale
from triz_master.core.errors import TrizError, ErrorContext
from triz_master.core.language_strings import get_draft_failed_message
from triz_master.core.principles import principle_names
from triz_master.infrastructure.anthropic_client import ResilientAnthropicClient
from triz_master.schemas.analysis import DraftFailure, DraftSuccess, InnovationDraft
from triz_master.services.define_report_tools import (
    TOOL_WRITE_INNOVATION_REPORT, WRITE_INNOVATION_REPORT, forced_tool_choice,
)
from triz_master.services.report_prompts import build_draft_prompt
from triz_master.services.tool_output import parse_tool_output

logger = logging.getLogger(__name__)


class InnovationDraftWriter:
    """Drafts an innovation report with the LLM."""

    def __init__(
        self,
        anthropic_client: ResilientAnthropicClient,
        model: str,
        max_tokens: int = 4000,
    ) -> None:
        self.client = anthropic_client
        self.model = model
        self.max_tokens = max_tokens

    async def draft(
        self, problem: str, principle_ids: list[int], locale: Locale,
    ) -> DraftSuccess | DraftFailure:
        names = principle_names(principle_ids, locale)
        if not names:
            return DraftFailure(
                error_code="NO_KNOWN_PRINCIPLES",
                message=get_draft_failed_message(locale),
            )

        system, user = build_draft_prompt(problem, names, locale)
        try:
            response = await self.client.create_message(
                model=self.model,
                max_tokens=self.max_tokens,
                system=system,
                messages=[{"role": "user", "content": user}],
                tools=[TOOL_WRITE_INNOVATION_REPORT],
                tool_choice=forced_tool_choice(WRITE_INNOVATION_REPORT),
                context=ErrorContext(operation="generate_draft"),
            )
            draft = parse_tool_output(
                response, WRITE_INNOVATION_REPORT, InnovationDraft,
            )
        except TrizError as e:
            logger.error(
                f"Draft generation failed: {e.message}",
                extra={"error_code": e.code, "tool_name": WRITE_INNOVATION_REPORT},
            )
            return DraftFailure(
                error_code=e.code,
                message=get_draft_failed_message(locale),
            )

        return DraftSuccess(draft=draft, principle_names=names, locale=locale)
