"""Enumeration types for the passage context server."""

from enum import StrEnum


class ToolName(StrEnum):
    """Available tools."""

    HEART_OF_DARKNESS = "heart_of_darkness"
    PASSAGE_QUERY = "passage_query"
