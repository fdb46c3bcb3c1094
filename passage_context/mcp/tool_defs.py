"""MCP tool definitions returned by tools/list.

Schemas mirror the pydantic ToolCall variants in ``models.requests``.
"""

from ..models import ToolName

TOOL_DEFINITIONS: list[dict] = [
    {
        "name": ToolName.HEART_OF_DARKNESS.value,
        "description": (
            "Answer questions about Joseph Conrad's novella \"Heart of Darkness\" "
            "using relevant passages from the full text of the book"
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "question": {
                    "type": "string",
                    "description": "The question to answer about Heart of Darkness",
                },
            },
            "required": ["question"],
            "additionalProperties": False,
        },
    },
    {
        "name": ToolName.PASSAGE_QUERY.value,
        "description": (
            "Find passages in Heart of Darkness for a question with a custom "
            "character budget and match window."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "question": {"type": "string", "description": "Question or topic"},
                "max_budget": {
                    "type": "integer",
                    "default": 25000,
                    "minimum": 100,
                    "maximum": 200000,
                    "description": "Maximum characters of context to return",
                },
                "window_radius": {
                    "type": "integer",
                    "default": 1500,
                    "minimum": 0,
                    "maximum": 20000,
                    "description": "Characters of context on each side of a keyword match",
                },
            },
            "required": ["question"],
        },
    },
]
