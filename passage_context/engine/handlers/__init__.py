"""Tool handlers for the passage context engine.

Each handler is a standalone async function that takes:
- call: the validated ToolCall variant
- ctx: HandlerContext with settings, content cache and text loader

And returns:
- ToolResult with data, input_tokens, output_tokens
"""

from .base import HandlerContext, HandlerFunc
from .reference import handle_heart_of_darkness, handle_passage_query, load_reference_text

__all__ = [
    # Base
    "HandlerContext",
    "HandlerFunc",
    # Reference text handlers
    "handle_heart_of_darkness",
    "handle_passage_query",
    "load_reference_text",
]
