"""Analysis and draft route tests — tagged results over HTTP.

Invariants:
    - Both endpoints return 200 with status "ok" or "error"
    - Locale detected from problem text when not given
    - save_to_history persists only successful drafts
"""

from triz_master.core.errors import AnthropicAPIError
from tests.services.mock_anthropic import (
    MockAnthropicClient, contradiction_response, draft_response,
)

ENGLISH_PROBLEM = (
    "I want to increase aircraft engine speed, but this leads to massive fuel "
    "consumption and increased engine weight."
)


async def test_analysis_success(client, override_ai):
    mock = override_ai(MockAnthropicClient([contradiction_response(9, 19)]))
    res = await client.post("/api/v1/analysis", json={"problem": ENGLISH_PROBLEM})

    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert body["principle_ids"] == [13, 15, 19, 35]
    assert body["source"] == "curated"
    assert body["locale"] == "en"
    assert body["diagnosis"]["improving_param_id"] == 9
    assert len(mock.calls) == 1


async def test_analysis_explicit_locale_wins(client, override_ai):
    override_ai(MockAnthropicClient([contradiction_response(9, 19)]))
    res = await client.post(
        "/api/v1/analysis", json={"problem": ENGLISH_PROBLEM, "locale": "ar"},
    )
    assert res.json()["locale"] == "ar"


async def test_analysis_failure_is_tagged_error(client, override_ai):
    override_ai(MockAnthropicClient([AnthropicAPIError("down", "connection_error")]))
    res = await client.post("/api/v1/analysis", json={"problem": ENGLISH_PROBLEM})

    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "error"
    assert body["error_code"] == "ANTHROPIC_API_ERROR"
    assert "down" not in body["message"]


async def test_analysis_blank_problem_is_400(client, override_ai):
    mock = override_ai(MockAnthropicClient([]))
    res = await client.post("/api/v1/analysis", json={"problem": "   "})
    assert res.status_code == 400
    assert mock.calls == []


async def test_draft_success_not_saved_by_default(client, override_ai):
    override_ai(MockAnthropicClient([draft_response()]))
    res = await client.post("/api/v1/drafts", json={
        "problem": ENGLISH_PROBLEM, "principle_ids": [13, 15, 19, 35],
    })
    body = res.json()
    assert body["status"] == "ok"
    assert body["principle_names"] == ["The Other Way Around", "Dynamicity"]
    assert body["saved_session_id"] is None

    history = await client.get("/api/v1/history")
    assert history.json()["sessions"] == []


async def test_draft_saved_to_history(client, override_ai):
    override_ai(MockAnthropicClient([draft_response()]))
    res = await client.post("/api/v1/drafts", json={
        "problem": ENGLISH_PROBLEM,
        "principle_ids": [13, 15, 19, 35],
        "save_to_history": True,
        "improving_param_id": 9,
        "worsening_param_id": 19,
        "ai_explanation": "Speed costs energy",
    })
    saved_id = res.json()["saved_session_id"]
    assert saved_id is not None

    sessions = (await client.get("/api/v1/history")).json()["sessions"]
    assert [s["id"] for s in sessions] == [saved_id]
    assert sessions[0]["suggested_principles"] == [13, 15, 19, 35]
    assert sessions[0]["ai_draft"]["introduction"]
    assert sessions[0]["locale"] == "en"


async def test_failed_draft_is_not_saved(client, override_ai):
    override_ai(MockAnthropicClient([AnthropicAPIError("x", "rate_limit")]))
    res = await client.post("/api/v1/drafts", json={
        "problem": ENGLISH_PROBLEM, "principle_ids": [1],
        "save_to_history": True,
    })
    assert res.json()["status"] == "error"
    assert (await client.get("/api/v1/history")).json()["sessions"] == []


async def test_draft_with_unknown_principles_only(client, override_ai):
    mock = override_ai(MockAnthropicClient([]))
    res = await client.post("/api/v1/drafts", json={
        "problem": ENGLISH_PROBLEM, "principle_ids": [35, 36],
    })
    assert res.json()["error_code"] == "NO_KNOWN_PRINCIPLES"
    assert mock.calls == []
