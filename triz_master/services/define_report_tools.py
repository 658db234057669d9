"""Report Tool Schemas — Anthropic Tool Use format for the two AI collaborators.

Invariants:
    - report_contradiction input mirrors schemas.analysis.ContradictionDiagnosis
    - write_innovation_report input mirrors schemas.analysis.InnovationDraft
    - Keys are camelCase (front-end contract); pydantic models accept both spellings

Design Decisions:
    - Forced tool_choice instead of "reply in JSON": the SDK returns a parsed dict,
      no markdown-stripping or regex recovery needed
    - Parameter id range (1..39) enforced in schema AND re-checked by pydantic
"""

REPORT_CONTRADICTION = "report_contradiction"
WRITE_INNOVATION_REPORT = "write_innovation_report"

TOOL_REPORT_CONTRADICTION = {
    "name": REPORT_CONTRADICTION,
    "description": (
        "Reports the technical contradiction found in the user's problem, "
        "expressed with the 39 TRIZ engineering parameters. "
        "Call this exactly once."
    ),
    "input_schema": {
        "type": "object",
        "properties": {
            "improvingParamId": {
                "type": "integer",
                "minimum": 1,
                "maximum": 39,
                "description": "Id of the parameter the user wants to improve",
            },
            "worseningParamId": {
                "type": "integer",
                "minimum": 1,
                "maximum": 39,
                "description": (
                    "Id of the parameter that degrades as a side effect"
                ),
            },
            "explanation": {
                "type": "string",
                "description": (
                    "Logical engineering explanation of the contradiction"
                ),
            },
        },
        "required": ["improvingParamId", "worseningParamId", "explanation"],
    },
}

TOOL_WRITE_INNOVATION_REPORT = {
    "name": WRITE_INNOVATION_REPORT,
    "description": (
        "Writes a professional innovation report that applies the given "
        "inventive principles to the user's problem. Call this exactly once."
    ),
    "input_schema": {
        "type": "object",
        "properties": {
            "introduction": {
                "type": "string",
                "description": "Analytical introduction to the contradiction",
            },
            "solutions": {
                "type": "array",
                "minItems": 1,
                "items": {
                    "type": "object",
                    "properties": {
                        "title": {"type": "string"},
                        "description": {"type": "string"},
                        "principleApplied": {
                            "type": "string",
                            "description": "Name of the inventive principle used",
                        },
                        "feasibility": {
                            "type": "string",
                            "description": "Short feasibility assessment",
                        },
                    },
                    "required": [
                        "title", "description",
                        "principleApplied", "feasibility",
                    ],
                },
            },
            "nextSteps": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Ordered action plan steps",
            },
        },
        "required": ["introduction", "solutions", "nextSteps"],
    },
}


def forced_tool_choice(tool_name: str) -> dict:
    """tool_choice value that makes the model call exactly this tool."""
    return {"type": "tool", "name": tool_name}
