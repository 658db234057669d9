"""Pydantic Schemas — request/response validation for API endpoints and AI payloads.

Invariants:
    - Schemas validate at system boundary (user input, AI responses)
    - Domain types from core/ used for enum fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
