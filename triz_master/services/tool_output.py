"""Tool Output Extraction — pull a forced tool call's input out of a Messages response.

Invariants:
    - Returns the input dict of the FIRST tool_use block with the expected name
    - Missing block or non-dict input raises AIResponseValidationError (never returns None)
    - Pydantic validation errors are re-raised as AIResponseValidationError

Design Decisions:
    - getattr-based block access: works with SDK objects and test doubles alike
"""

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from triz_master.core.errors import AIResponseValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def extract_tool_input(response: object, tool_name: str) -> dict:
    """Find the tool_use block named `tool_name` and return its input."""
    for block in getattr(response, "content", None) or []:
        if getattr(block, "type", None) != "tool_use":
            continue
        if getattr(block, "name", None) != tool_name:
            continue
        data = getattr(block, "input", None)
        if not isinstance(data, dict):
            raise AIResponseValidationError("tool input is not an object", tool_name)
        return data

    stop_reason = getattr(response, "stop_reason", None)
    raise AIResponseValidationError(
        f"no tool_use block in response (stop_reason={stop_reason})", tool_name,
    )


def parse_tool_output(
    response: object, tool_name: str, model: type[ModelT],
) -> ModelT:
    """Extract and validate a tool call against `model`."""
    data = extract_tool_input(response, tool_name)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(loc) for loc in err["loc"]) for err in e.errors()
        )
        raise AIResponseValidationError(
            f"schema mismatch ({fields})", tool_name,
        ) from e
