"""Session History repository tests — persistence of the newest-first history.

Tests cover:
    - save() inserts and list() returns newest first
    - Same problem text replaces the earlier entry
    - Eviction keeps at most `limit` entries
    - Blank problem text rejected before touching the DB
    - delete() / clear()
"""

from uuid import uuid4

import pytest

from triz_master.core.domain_types import Locale
from triz_master.core.errors import EmptyProblemError, ResourceNotFoundError
from triz_master.schemas.analysis import InnovationDraft
from triz_master.schemas.history import SavedSessionCreate
from triz_master.services.session_history import SessionHistoryRepository


def _entry(problem, **kw):
    return SavedSessionCreate(problem_description=problem, **kw)


async def test_save_and_list(test_db):
    repo = SessionHistoryRepository(test_db)
    row = await repo.save(_entry(
        "Engine speed vs fuel",
        improving_param_id=9, worsening_param_id=19,
        ai_explanation="Speed costs energy",
        suggested_principles=[13, 15, 19, 35],
        locale=Locale.EN,
    ))

    rows = await repo.list()
    assert [r.id for r in rows] == [row.id]
    assert rows[0].suggested_principles == [13, 15, 19, 35]
    assert rows[0].locale == "en"
    assert rows[0].ai_draft is None


async def test_list_is_newest_first(test_db):
    repo = SessionHistoryRepository(test_db)
    for i in range(3):
        await repo.save(_entry(f"problem {i}"))
    rows = await repo.list()
    assert [r.problem_description for r in rows] == [
        "problem 2", "problem 1", "problem 0",
    ]


async def test_same_problem_replaces_entry(test_db):
    repo = SessionHistoryRepository(test_db)
    first = await repo.save(_entry("Packaging box", ai_explanation="v1"))
    await repo.save(_entry("Other problem"))
    second = await repo.save(_entry("Packaging box", ai_explanation="v2"))

    rows = await repo.list()
    assert len(rows) == 2
    assert rows[0].id == second.id
    assert first.id not in {r.id for r in rows}
    assert rows[0].ai_explanation == "v2"


async def test_evicts_oldest_beyond_limit(test_db):
    repo = SessionHistoryRepository(test_db, limit=3)
    for i in range(5):
        await repo.save(_entry(f"problem {i}"))
    rows = await repo.list()
    assert [r.problem_description for r in rows] == [
        "problem 4", "problem 3", "problem 2",
    ]


async def test_draft_stored_as_json(test_db):
    draft = InnovationDraft.model_validate({
        "introduction": "Intro",
        "solutions": [{
            "title": "T", "description": "D",
            "principleApplied": "Segmentation", "feasibility": "High",
        }],
        "nextSteps": ["Prototype"],
    })
    repo = SessionHistoryRepository(test_db)
    row = await repo.save(_entry("With draft", ai_draft=draft))
    assert row.ai_draft["solutions"][0]["principle_applied"] == "Segmentation"
    assert InnovationDraft.model_validate(row.ai_draft) == draft


async def test_blank_problem_rejected(test_db):
    repo = SessionHistoryRepository(test_db)
    entry = SavedSessionCreate.model_construct(
        problem_description="   ", suggested_principles=[], ai_draft=None,
    )
    with pytest.raises(EmptyProblemError):
        await repo.save(entry)
    assert await repo.list() == []


async def test_delete_entry(test_db):
    repo = SessionHistoryRepository(test_db)
    row = await repo.save(_entry("to delete"))
    await repo.delete(row.id)
    assert await repo.list() == []


async def test_delete_unknown_raises(test_db):
    repo = SessionHistoryRepository(test_db)
    with pytest.raises(ResourceNotFoundError):
        await repo.delete(uuid4())


async def test_clear_returns_count(test_db):
    repo = SessionHistoryRepository(test_db)
    for i in range(4):
        await repo.save(_entry(f"p{i}"))
    assert await repo.clear() == 4
    assert await repo.list() == []
