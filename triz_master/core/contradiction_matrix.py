"""Contradiction Matrix — curated (improving, worsening) → principle ids.

Invariants:
    - Keys are ORDERED pairs: (a, b) and (b, a) are independent entries
    - Values are non-empty tuples, most-applicable principle first
    - Read-only after import (MappingProxyType)
    - Curated ids may exceed the populated principle catalog (e.g. 35, 36)

Design Decisions:
    - Sparse by design: 19 of 1521 possible pairs. Missing reverse entries are
      preserved as curated: no reverse entries are generated
    - Tuple keys over "a_b" strings: no parsing, no formatting ambiguity
"""

from types import MappingProxyType

CONTRADICTION_MATRIX = MappingProxyType({
    (1, 10): (1, 8, 15, 35),
    (1, 27): (2, 10, 28, 35),
    (1, 28): (1, 8, 15, 35),
    (1, 33): (1, 2, 28, 35),
    (9, 19): (13, 15, 19, 35),
    (9, 27): (11, 27, 28),
    (9, 39): (10, 19, 20, 38),
    (10, 1): (1, 8, 15, 35),
    (10, 36): (1, 2, 12),
    (39, 9): (10, 19, 20, 38),
    (39, 22): (10, 18, 23, 35),
    (39, 36): (1, 10, 20, 35),
    (13, 9): (1, 15, 18, 34),
    (13, 1): (1, 8, 15, 35),
    (14, 12): (1, 14, 15, 18),
    (35, 13): (1, 15, 18, 34),
    (35, 36): (2, 15, 28, 37),
    (12, 1): (1, 15, 18, 35),
    (21, 19): (1, 18, 19, 35),
})


def curated_entry(improving: int, worsening: int) -> tuple[int, ...] | None:
    """Return the curated principle ids for the ordered pair, or None."""
    return CONTRADICTION_MATRIX.get((improving, worsening))
