"""Contradiction Analyst — free-text problem → diagnosed contradiction → principle ids.

Invariants:
    - analyze() never raises for API or payload failures: returns AnalysisFailure
    - The diagnosed pair goes through the SAME resolver as a manual lookup
    - Diagnosis is validated (ids 1..39, non-empty explanation) before resolving

Design Decisions:
    - Forced report_contradiction tool: structured output without JSON recovery heuristics
    - Failure message is localized and generic; the error_code carries the cause
      (ADR: no provider details leaked to the user)
"""

import logging

from triz_master.core.domain_types import Locale
from triz_master.core.errors import TrizError, ErrorContext
from triz_master.core.language_strings import get_analysis_failed_message
from triz_master.core.resolve_contradiction import resolve_contradiction_detailed
from triz_master.infrastructure.anthropic_client import ResilientAnthropicClient
from triz_master.schemas.analysis import (
    AnalysisFailure, AnalysisSuccess, ContradictionDiagnosis,
)
from triz_master.services.define_report_tools import (
    REPORT_CONTRADICTION, TOOL_REPORT_CONTRADICTION, forced_tool_choice,
)
from triz_master.services.report_prompts import build_analysis_prompt
from triz_master.services.tool_output import parse_tool_output

logger = logging.getLogger(__name__)


class ContradictionAnalyst:
    """Asks the LLM to map a problem onto (improving, worsening) parameters."""

    def __init__(
        self,
        anthropic_client: ResilientAnthropicClient,
        model: str,
        max_tokens: int = 1500,
    ) -> None:
        self.client = anthropic_client
        self.model = model
        self.max_tokens = max_tokens

    async def analyze(
        self, problem: str, locale: Locale,
    ) -> AnalysisSuccess | AnalysisFailure:
        system, user = build_analysis_prompt(problem, locale)
        try:
            response = await self.client.create_message(
                model=self.model,
                max_tokens=self.max_tokens,
                system=system,
                messages=[{"role": "user", "content": user}],
                tools=[TOOL_REPORT_CONTRADICTION],
                tool_choice=forced_tool_choice(REPORT_CONTRADICTION),
                context=ErrorContext(operation="analyze_problem"),
            )
            diagnosis = parse_tool_output(
                response, REPORT_CONTRADICTION, ContradictionDiagnosis,
            )
        except TrizError as e:
            logger.error(
                f"AI analysis failed: {e.message}",
                extra={"error_code": e.code, "tool_name": REPORT_CONTRADICTION},
            )
            return AnalysisFailure(
                error_code=e.code,
                message=get_analysis_failed_message(locale),
            )

        resolution = resolve_contradiction_detailed(
            diagnosis.improving_param_id, diagnosis.worsening_param_id,
        )
        logger.info(
            "Contradiction diagnosed",
            extra={
                "improving": diagnosis.improving_param_id,
                "worsening": diagnosis.worsening_param_id,
                "source": resolution.source.value,
            },
        )
        return AnalysisSuccess(
            diagnosis=diagnosis,
            principle_ids=list(resolution.principle_ids),
            source=resolution.source,
            locale=locale,
        )
