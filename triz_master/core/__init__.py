"""Core Layer — catalogs, contradiction matrix and resolver. No IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic
    - Catalog and matrix data is read-only after import

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
