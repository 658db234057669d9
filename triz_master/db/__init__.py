"""Database Declarations — SQLAlchemy Base shared by all ORM models.

Invariants:
    - Single async engine per process (initialized via infrastructure.database.init_db)

Design Decisions:
    - aiosqlite by default: history is local, single-user (ADR: no server-side persistence)
"""
