"""API layer: FastAPI dependencies shared by the HTTP and MCP routes."""

from .deps import get_context_engine, sanitize_error_message

__all__ = [
    "get_context_engine",
    "sanitize_error_message",
]
