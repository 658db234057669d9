"""AI Collaborator Schemas — validated payloads and tagged results for analysis and drafting.

Invariants:
    - ContradictionDiagnosis ids are parameter ids (1..39); explanation non-empty
    - InnovationDraft has an introduction, >= 1 solution, and an ordered next-steps list
    - Results are tagged by `status`: "ok" carries data, "error" carries error_code + message
    - AI payloads accept the camelCase keys used in the tool schemas; API output is snake_case

Design Decisions:
    - Pydantic validation at the AI boundary: untyped model output never reaches routes
      or the history table (ADR: explicit schema over trusting external input)
    - Discriminated unions over Optional fields: callers branch on `status`, not on None checks
"""

from typing import Annotated, Literal

from pydantic import AliasChoices, BaseModel, Field, field_validator

from triz_master.core.domain_types import Locale, PARAMETER_COUNT, ResolutionSource


def _strip_non_empty(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("cannot be empty or whitespace")
    return v


# --- AI payloads --------------------------------------------------------------


class ContradictionDiagnosis(BaseModel):
    """Technical contradiction diagnosed from free text."""
    improving_param_id: int = Field(
        ge=1, le=PARAMETER_COUNT,
        validation_alias=AliasChoices("improving_param_id", "improvingParamId"),
    )
    worsening_param_id: int = Field(
        ge=1, le=PARAMETER_COUNT,
        validation_alias=AliasChoices("worsening_param_id", "worseningParamId"),
    )
    explanation: str = Field(min_length=1)

    @field_validator("explanation")
    @classmethod
    def strip_explanation(cls, v: str) -> str:
        return _strip_non_empty(v)


class Solution(BaseModel):
    """One engineering solution in an innovation report."""
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    principle_applied: str = Field(
        min_length=1,
        validation_alias=AliasChoices("principle_applied", "principleApplied"),
    )
    feasibility: str = Field(min_length=1)


class InnovationDraft(BaseModel):
    """Structured innovation report drafted from problem + principles."""
    introduction: str = Field(min_length=1)
    solutions: list[Solution] = Field(min_length=1)
    next_steps: list[str] = Field(
        validation_alias=AliasChoices("next_steps", "nextSteps"),
    )


# --- Requests -----------------------------------------------------------------


class AnalyzeRequest(BaseModel):
    """Free-text problem to diagnose."""
    problem: str = Field(min_length=1, max_length=10_000)
    locale: Locale | None = None

    @field_validator("problem")
    @classmethod
    def strip_problem(cls, v: str) -> str:
        return _strip_non_empty(v)


class DraftRequest(BaseModel):
    """Problem + resolved principles to turn into an innovation report."""
    problem: str = Field(min_length=1, max_length=10_000)
    principle_ids: list[int] = Field(min_length=1, max_length=40)
    locale: Locale | None = None

    # Session context persisted alongside the draft when save_to_history is set
    save_to_history: bool = False
    improving_param_id: int | None = Field(None, ge=1, le=PARAMETER_COUNT)
    worsening_param_id: int | None = Field(None, ge=1, le=PARAMETER_COUNT)
    ai_explanation: str = Field("", max_length=10_000)

    @field_validator("problem")
    @classmethod
    def strip_problem(cls, v: str) -> str:
        return _strip_non_empty(v)


# --- Tagged results -----------------------------------------------------------


class AnalysisSuccess(BaseModel):
    status: Literal["ok"] = "ok"
    diagnosis: ContradictionDiagnosis
    principle_ids: list[int]
    source: ResolutionSource
    locale: Locale


class AnalysisFailure(BaseModel):
    status: Literal["error"] = "error"
    error_code: str
    message: str


AnalysisResult = Annotated[
    AnalysisSuccess | AnalysisFailure, Field(discriminator="status"),
]


class DraftSuccess(BaseModel):
    status: Literal["ok"] = "ok"
    draft: InnovationDraft
    principle_names: list[str]
    locale: Locale
    saved_session_id: str | None = None


class DraftFailure(BaseModel):
    status: Literal["error"] = "error"
    error_code: str
    message: str


DraftResult = Annotated[
    DraftSuccess | DraftFailure, Field(discriminator="status"),
]
