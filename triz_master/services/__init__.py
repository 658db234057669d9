"""Services Layer — AI collaborators and session history persistence.

Invariants:
    - AI collaborators return tagged results, never raise to the route
    - Prompt text and tool schemas live next to the collaborator that uses them

Design Decisions:
    - One file per collaborator for locality (ADR: no god objects)
"""
