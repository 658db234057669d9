"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ParameterId is 1..39, PrincipleId is 1..40 (nominal catalog sizes)
    - Locale.AR is the primary locale; every LocalizedText carries it
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (ADR: FastAPI responses)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ParameterId = NewType("ParameterId", int)     # 1..39
PrincipleId = NewType("PrincipleId", int)     # 1..40


# ─── Catalog Bounds ──────────────────────────────────────────────

PARAMETER_COUNT = 39
NOMINAL_PRINCIPLE_COUNT = 40


# ─── Enums ───────────────────────────────────────────────────────

class Locale(str, Enum):
    """Supported display locales. AR is primary, EN is secondary."""
    AR = "ar"
    EN = "en"


PRIMARY_LOCALE = Locale.AR


class ResolutionSource(str, Enum):
    """Where a resolver answer came from."""
    CURATED = "curated"
    FALLBACK = "fallback"
