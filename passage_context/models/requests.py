"""Request models for tool invocation.

Tool inputs arrive as loosely-typed JSON from the model framework. They
are validated once into the ``ToolCall`` tagged union, keyed on ``tool``,
and reduced to a plain question plus numeric options before reaching the
extraction engine.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter

from .enums import ToolName

# ============ CORE REQUEST MODELS ============


class MCPRequest(BaseModel):
    """Tool execution request."""

    tool: ToolName = Field(..., description="The tool to execute")
    params: dict[str, Any] = Field(default_factory=dict, description="Tool parameters")


# ============ TOOL CALLS ============


class HeartOfDarknessCall(BaseModel):
    """Question about Joseph Conrad's Heart of Darkness."""

    tool: Literal["heart_of_darkness"] = "heart_of_darkness"
    question: str = Field(..., description="The question to answer about Heart of Darkness")


class PassageQueryCall(BaseModel):
    """Question with explicit budget and window overrides."""

    tool: Literal["passage_query"] = "passage_query"
    question: str = Field(..., description="The question to find passages for")
    max_budget: int | None = Field(
        default=None,
        ge=100,
        le=200000,
        description="Maximum characters of context to return",
    )
    window_radius: int | None = Field(
        default=None,
        ge=0,
        le=20000,
        description="Characters of context on each side of a keyword match",
    )


ToolCall = Annotated[HeartOfDarknessCall | PassageQueryCall, Field(discriminator="tool")]

tool_call_adapter = TypeAdapter(ToolCall)


def parse_tool_call(tool: ToolName | str, params: dict[str, Any]) -> HeartOfDarknessCall | PassageQueryCall:
    """Validate raw params for ``tool`` into its ToolCall variant.

    Raises:
        pydantic.ValidationError: Params do not match the tool's schema.
    """
    return tool_call_adapter.validate_python({**params, "tool": str(tool)})
