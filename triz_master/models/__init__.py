"""ORM Models — SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Catalogs and the contradiction matrix are NOT persisted (static, in core/)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all / alembic
"""

from triz_master.models.saved_session import SavedSession  # noqa: F401
