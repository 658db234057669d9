"""History Policy — pure decision of what a history save replaces and evicts.

Invariants:
    - At most `limit` entries survive a save (the new one included)
    - An entry with the same problem text as the new one is replaced, not kept
    - Eviction removes the oldest entries first
    - Blank problem text is never saved

Design Decisions:
    - Pure planner + impure repository: the repository applies the plan
      (ADR: impureim sandwich)
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

DEFAULT_HISTORY_LIMIT = 15


class HistoryEntryLike(Protocol):
    """Structural contract for stored history entries."""
    id: UUID
    problem_description: str


@dataclass
class HistorySavePlan:
    replaced_ids: list[UUID] = field(default_factory=list)
    evicted_ids: list[UUID] = field(default_factory=list)

    @property
    def removed_ids(self) -> list[UUID]:
        return self.replaced_ids + self.evicted_ids


def is_saveable(problem_description: str | None) -> bool:
    return bool(problem_description and problem_description.strip())


def plan_history_save(
    existing: Sequence[HistoryEntryLike],
    problem_description: str,
    limit: int = DEFAULT_HISTORY_LIMIT,
) -> HistorySavePlan:
    """Plan a save against `existing`, which must be ordered newest first."""
    plan = HistorySavePlan()
    survivors = []
    for entry in existing:
        if entry.problem_description == problem_description:
            plan.replaced_ids.append(entry.id)
        else:
            survivors.append(entry)

    # One slot is taken by the entry being saved
    keep = max(limit - 1, 0)
    plan.evicted_ids.extend(e.id for e in survivors[keep:])
    return plan
