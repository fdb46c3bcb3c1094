"""Passage context result models."""

from pydantic import BaseModel, Field

DEFAULT_INSTRUCTIONS = (
    "Use the provided text passages from Heart of Darkness to answer the question. "
    "These are the most relevant sections based on your question."
)


class PassageContextResult(BaseModel):
    """Payload returned to the model by the passage tools."""

    question: str = Field(..., description="Original question")
    text_length: int = Field(..., ge=0, description="Length of the full reference text")
    context_length: int = Field(..., ge=0, description="Length of the returned context")
    context: str = Field(..., description="Selected passages joined by separators")
    instructions: str = Field(default=DEFAULT_INSTRUCTIONS, description="Guidance for the model")
    keywords: list[str] = Field(default_factory=list, description="Keywords used for the search")
    passages_selected: int = Field(default=0, ge=0, description="Number of passages included")
    fallback_used: bool = Field(
        default=False,
        description="True when no passage matched and head/tail excerpts were returned",
    )
    token_count: int = Field(default=0, ge=0, description="Token count of the context")
