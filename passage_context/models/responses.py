"""Response models for the passage context server."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class ToolResult(BaseModel):
    """Internal result of a tool handler."""

    data: dict[str, Any] = Field(default_factory=dict, description="Tool output payload")
    input_tokens: int = Field(default=0, ge=0, description="Tokens in the tool input")
    output_tokens: int = Field(default=0, ge=0, description="Tokens in the tool output")


class UsageInfo(BaseModel):
    """Token usage and latency for one request."""

    input_tokens: int = Field(default=0, ge=0)
    output_tokens: int = Field(default=0, ge=0)
    latency_ms: int = Field(default=0, ge=0)


class MCPResponse(BaseModel):
    """Tool execution response."""

    success: bool = Field(..., description="Whether the tool ran successfully")
    result: Any = Field(default=None, description="Tool result payload")
    error: str | None = Field(default=None, description="Error message on failure")
    usage: UsageInfo = Field(default_factory=UsageInfo)


class HealthResponse(BaseModel):
    """Liveness check response."""

    status: str
    version: str
    timestamp: datetime


class ReadyResponse(BaseModel):
    """Readiness check response."""

    status: str
    version: str
    checks: dict[str, bool] = Field(default_factory=dict)
