"""History Schemas — Pydantic models for saving and listing past sessions.

Invariants:
    - SavedSessionCreate.problem_description: stripped, non-empty, <= 10000 chars
    - Parameter ids, when present, are in 1..39
    - ai_draft, when present, is a validated InnovationDraft

Design Decisions:
    - from_attributes on the response: built straight from the ORM row
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from triz_master.core.domain_types import Locale, PARAMETER_COUNT
from triz_master.schemas.analysis import InnovationDraft


class SavedSessionCreate(BaseModel):
    """Session snapshot submitted for the history list."""
    problem_description: str = Field(min_length=1, max_length=10_000)
    improving_param_id: int | None = Field(None, ge=1, le=PARAMETER_COUNT)
    worsening_param_id: int | None = Field(None, ge=1, le=PARAMETER_COUNT)
    ai_explanation: str = Field("", max_length=10_000)
    suggested_principles: list[int] = Field(default_factory=list, max_length=40)
    ai_draft: InnovationDraft | None = None
    locale: Locale = Locale.AR

    @field_validator("problem_description")
    @classmethod
    def strip_problem(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("problem_description cannot be empty or whitespace")
        return v


class SavedSessionResponse(BaseModel):
    """History entry as returned to the client."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    problem_description: str
    improving_param_id: int | None
    worsening_param_id: int | None
    ai_explanation: str
    suggested_principles: list[int]
    ai_draft: InnovationDraft | None
    locale: Locale
    created_at: datetime


class HistoryListResponse(BaseModel):
    sessions: list[SavedSessionResponse]
    limit: int
