"""Pydantic models for request/response schemas.

    from passage_context.models.enums import ToolName
    from passage_context.models.context import PassageContextResult
"""

# ============ CONTEXT MODELS ============
from .context import DEFAULT_INSTRUCTIONS, PassageContextResult

# ============ ENUMS ============
from .enums import ToolName

# ============ REQUEST MODELS ============
from .requests import (
    HeartOfDarknessCall,
    MCPRequest,
    PassageQueryCall,
    ToolCall,
    parse_tool_call,
)

# ============ RESPONSE MODELS ============
from .responses import (
    HealthResponse,
    MCPResponse,
    ReadyResponse,
    ToolResult,
    UsageInfo,
)

__all__ = [
    # Enums
    "ToolName",
    # Request models
    "HeartOfDarknessCall",
    "MCPRequest",
    "PassageQueryCall",
    "ToolCall",
    "parse_tool_call",
    # Response models
    "HealthResponse",
    "MCPResponse",
    "ReadyResponse",
    "ToolResult",
    "UsageInfo",
    # Context models
    "DEFAULT_INSTRUCTIONS",
    "PassageContextResult",
]
