"""Innovation Draft Writer tests — report drafting from problem + principles.

Tests cover:
    - Successful draft returns validated report and rendered principle names
    - Unknown principle ids skipped; all-unknown short-circuits with no API call
    - API failures and malformed payloads become DraftFailure
"""

import pytest

from triz_master.core.domain_types import Locale
from triz_master.core.errors import AnthropicAPIError
from triz_master.core.language_strings import get_draft_failed_message
from triz_master.schemas.analysis import DraftFailure, DraftSuccess
from triz_master.services.draft_writer import InnovationDraftWriter
from tests.services.mock_anthropic import (
    MockAnthropicClient, draft_response, tool_response,
)


async def test_successful_draft():
    client = MockAnthropicClient([draft_response(3)])
    writer = InnovationDraftWriter(client, model="test-model")

    result = await writer.draft("Engine problem", [1, 8, 15, 35], Locale.EN)

    assert isinstance(result, DraftSuccess)
    assert result.principle_names == ["Segmentation", "Counterweight", "Dynamicity"]
    assert len(result.draft.solutions) == 3
    assert result.draft.solutions[0].principle_applied == "Segmentation"
    assert result.draft.next_steps == ["Build a test rig", "Measure fuel flow"]
    assert result.saved_session_id is None


async def test_prompt_carries_names_and_guide():
    client = MockAnthropicClient([draft_response()])
    await InnovationDraftWriter(client, model="m", max_tokens=1234).draft(
        "Engine problem", [13], Locale.EN,
    )
    call = client.calls[0]
    assert call["max_tokens"] == 1234
    assert call["tool_choice"] == {"type": "tool", "name": "write_innovation_report"}
    content = call["messages"][0]["content"]
    assert "The Other Way Around" in content
    assert "Engine problem" in content
    assert "15: Dynamicity - " in content


async def test_all_unknown_principles_skip_api_call():
    client = MockAnthropicClient([])
    result = await InnovationDraftWriter(client, model="m").draft(
        "Engine problem", [35, 36], Locale.AR,
    )
    assert isinstance(result, DraftFailure)
    assert result.error_code == "NO_KNOWN_PRINCIPLES"
    assert result.message == get_draft_failed_message(Locale.AR)
    assert client.calls == []


async def test_api_error_becomes_failure():
    client = MockAnthropicClient([AnthropicAPIError("429", "rate_limit")])
    result = await InnovationDraftWriter(client, model="m").draft("p", [1], Locale.EN)
    assert isinstance(result, DraftFailure)
    assert result.error_code == "ANTHROPIC_API_ERROR"


async def test_draft_without_solutions_becomes_failure():
    client = MockAnthropicClient([tool_response("write_innovation_report", {
        "introduction": "Intro", "solutions": [], "nextSteps": [],
    })])
    result = await InnovationDraftWriter(client, model="m").draft("p", [1], Locale.EN)
    assert isinstance(result, DraftFailure)
    assert result.error_code == "AI_RESPONSE_INVALID"


async def test_draft_without_next_steps_becomes_failure():
    client = MockAnthropicClient([tool_response("write_innovation_report", {
        "introduction": "Intro",
        "solutions": [{
            "title": "T", "description": "D",
            "principleApplied": "Segmentation", "feasibility": "High",
        }],
    })])
    result = await InnovationDraftWriter(client, model="m").draft("p", [1], Locale.EN)
    assert isinstance(result, DraftFailure)
    assert result.error_code == "AI_RESPONSE_INVALID"


@pytest.mark.parametrize("field", ["title", "description", "principleApplied", "feasibility"])
async def test_solution_with_blank_field_becomes_failure(field):
    solution = {
        "title": "T", "description": "D",
        "principleApplied": "Segmentation", "feasibility": "High",
    }
    solution[field] = ""
    client = MockAnthropicClient([tool_response("write_innovation_report", {
        "introduction": "Intro", "solutions": [solution], "nextSteps": ["Prototype"],
    })])
    result = await InnovationDraftWriter(client, model="m").draft("p", [1], Locale.EN)
    assert isinstance(result, DraftFailure)
    assert result.error_code == "AI_RESPONSE_INVALID"
