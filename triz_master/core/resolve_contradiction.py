"""Contradiction Resolver — (improving, worsening) → inventive principle ids.

Invariants:
    - Pure and deterministic: same inputs always produce the same ids
    - Directional: (a, b) never falls back to a curated (b, a) entry
    - Curated hit returns the curated ids verbatim (order kept, dedup only)
    - Fallback returns <= 4 distinct ids, each in 1..max_principle_id
    - Never raises; "nothing applicable" is an empty list
    - Inputs are NOT range-checked here (HTTP boundary validates 1..39)

Design Decisions:
    - Fallback ceiling is a parameter defaulting to MAX_POPULATED_PRINCIPLE_ID,
      not a literal 15: it tracks the catalog as more principles are populated
    - Resolution carries its source so callers can tell a fallback result from
      a curated one without comparing against the matrix themselves
"""

from dataclasses import dataclass

from triz_master.core.contradiction_matrix import curated_entry
from triz_master.core.domain_types import NOMINAL_PRINCIPLE_COUNT, ResolutionSource
from triz_master.core.principles import MAX_POPULATED_PRINCIPLE_ID

# (offset applied to seed, multiplier, substitute when the result is 0)
_FALLBACK_RULES: tuple[tuple[int, int, int], ...] = (
    (1, 1, 1),
    (0, 2, 13),
    (15, 1, 15),
    (25, 1, 2),
)


@dataclass(frozen=True)
class Resolution:
    """Resolver answer plus where it came from."""
    principle_ids: tuple[int, ...]
    source: ResolutionSource

    @property
    def is_empty(self) -> bool:
        return not self.principle_ids


def fallback_seed(improving: int, worsening: int) -> int:
    return (improving * worsening) % NOMINAL_PRINCIPLE_COUNT


def fallback_candidates(improving: int, worsening: int) -> tuple[int, ...]:
    """The four raw fallback candidates, before dedup and ceiling filter.

    A candidate that computes to 0 is replaced by its substitute id.
    """
    seed = fallback_seed(improving, worsening)
    return tuple(
        ((seed * multiplier + offset) % NOMINAL_PRINCIPLE_COUNT) or substitute
        for offset, multiplier, substitute in _FALLBACK_RULES
    )


def _dedupe(ids) -> tuple[int, ...]:
    return tuple(dict.fromkeys(ids))


def resolve_contradiction_detailed(
    improving: int,
    worsening: int,
    max_principle_id: int = MAX_POPULATED_PRINCIPLE_ID,
) -> Resolution:
    """Resolve a contradiction and report whether the answer was curated."""
    curated = curated_entry(improving, worsening)
    if curated is not None:
        return Resolution(_dedupe(curated), ResolutionSource.CURATED)

    candidates = _dedupe(fallback_candidates(improving, worsening))
    return Resolution(
        tuple(pid for pid in candidates if pid <= max_principle_id),
        ResolutionSource.FALLBACK,
    )


def resolve_contradiction(
    improving: int,
    worsening: int,
    max_principle_id: int = MAX_POPULATED_PRINCIPLE_ID,
) -> list[int]:
    """Return principle ids for the ordered (improving, worsening) pair."""
    return list(
        resolve_contradiction_detailed(
            improving, worsening, max_principle_id,
        ).principle_ids,
    )
