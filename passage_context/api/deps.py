"""FastAPI dependency injection functions.

- Context engine construction
- Error sanitization
"""

import logging

from ..context_engine import ContextEngine

logger = logging.getLogger(__name__)

_engine: ContextEngine | None = None


def get_context_engine() -> ContextEngine:
    """Get or create the shared ContextEngine (lazy initialization)."""
    global _engine
    if _engine is None:
        _engine = ContextEngine()
    return _engine


# ============ ERROR SANITIZATION ============


def sanitize_error_message(error: Exception) -> str:
    """
    Sanitize error messages to prevent information disclosure.

    Returns a generic message for unexpected errors while preserving
    useful information for known error types.
    """
    error_str = str(error)

    # Known safe error patterns that can be returned to client
    safe_patterns = [
        "Unknown tool",
        "Invalid parameter",
        "Error loading reference text",
        "Unsupported file type",
    ]

    for pattern in safe_patterns:
        if pattern.lower() in error_str.lower():
            return error_str

    logger.error(f"Tool execution error: {error}", exc_info=True)

    return "An error occurred while processing your request. Please try again."
