"""History route tests — list, save, delete, clear.

Invariants:
    - POST returns 201 with the stored entry
    - Same problem text replaces; list stays newest first
    - DELETE unknown id → 404; DELETE collection clears everything
"""

from uuid import uuid4

HISTORY = "/api/v1/history"


def _payload(problem, **kw):
    return {"problem_description": problem, **kw}


async def test_empty_history(client):
    res = await client.get(HISTORY)
    assert res.status_code == 200
    assert res.json() == {"sessions": [], "limit": 15}


async def test_save_returns_201(client):
    res = await client.post(HISTORY, json=_payload(
        "Mobile app battery", improving_param_id=35, worsening_param_id=22,
        suggested_principles=[1, 2], locale="en",
    ))
    assert res.status_code == 201
    body = res.json()
    assert body["problem_description"] == "Mobile app battery"
    assert body["suggested_principles"] == [1, 2]
    assert body["ai_draft"] is None


async def test_save_strips_problem(client):
    res = await client.post(HISTORY, json=_payload("  Packaging box  "))
    assert res.json()["problem_description"] == "Packaging box"


async def test_blank_problem_is_400(client):
    res = await client.post(HISTORY, json=_payload("   "))
    assert res.status_code == 400


async def test_out_of_range_parameter_is_400(client):
    res = await client.post(HISTORY, json=_payload("x", improving_param_id=40))
    assert res.status_code == 400


async def test_resave_same_problem_replaces(client):
    await client.post(HISTORY, json=_payload("A"))
    await client.post(HISTORY, json=_payload("B"))
    await client.post(HISTORY, json=_payload("A", ai_explanation="again"))

    sessions = (await client.get(HISTORY)).json()["sessions"]
    assert [s["problem_description"] for s in sessions] == ["A", "B"]
    assert sessions[0]["ai_explanation"] == "again"


async def test_delete_entry(client):
    saved = (await client.post(HISTORY, json=_payload("A"))).json()
    res = await client.delete(f"{HISTORY}/{saved['id']}")
    assert res.status_code == 204
    assert (await client.get(HISTORY)).json()["sessions"] == []


async def test_delete_unknown_is_404(client):
    res = await client.delete(f"{HISTORY}/{uuid4()}")
    assert res.status_code == 404


async def test_clear_history(client):
    for p in ("A", "B", "C"):
        await client.post(HISTORY, json=_payload(p))
    res = await client.delete(HISTORY)
    assert res.json() == {"removed": 3}
    assert (await client.get(HISTORY)).json()["sessions"] == []
