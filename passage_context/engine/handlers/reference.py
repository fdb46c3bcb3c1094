"""Reference text tool handlers.

Handles:
- heart_of_darkness: Passages from Heart of Darkness for a question
- passage_query: Same search with caller-supplied budget and window
"""

import asyncio
import logging

from ...models import HeartOfDarknessCall, PassageContextResult, PassageQueryCall, ToolResult
from ...services.text_loader import DocumentLoadError
from ..core.tokens import count_tokens
from ..extractor import analyze
from ..scoring import HEART_OF_DARKNESS_MAPPINGS
from .base import HandlerContext

logger = logging.getLogger(__name__)


async def load_reference_text(ctx: HandlerContext) -> str:
    """Return the reference text, reading it from disk on a cache miss.

    Raises:
        DocumentLoadError: The file is missing, unreadable or empty.
    """
    file_path = ctx.loader.file_path

    if ctx.cache.has(file_path):
        logger.info("Reference text loaded from cache")
        return ctx.cache.get(file_path)

    text = await asyncio.to_thread(ctx.loader.read)
    if not text:
        raise DocumentLoadError(f"Failed to load reference text: {ctx.loader.file_name}")

    ctx.cache.put(file_path, text)
    logger.info("Reference text loaded from file")
    return text


async def _answer(
    question: str,
    ctx: HandlerContext,
    max_budget: int,
    window_radius: int,
) -> ToolResult:
    try:
        text = await load_reference_text(ctx)
    except DocumentLoadError as e:
        logger.error(f"Error loading reference text: {e}")
        raise DocumentLoadError(f"Error loading reference text: {e}") from e

    extraction = analyze(
        question,
        text,
        max_budget=max_budget,
        window_radius=window_radius,
        mapping=HEART_OF_DARKNESS_MAPPINGS,
    )
    token_count = count_tokens(extraction.context)

    result = PassageContextResult(
        question=question,
        text_length=len(text),
        context_length=len(extraction.context),
        context=extraction.context,
        keywords=extraction.keywords,
        passages_selected=len(extraction.selected),
        fallback_used=extraction.fallback_used,
        token_count=token_count,
    )

    return ToolResult(
        data=result.model_dump(),
        input_tokens=count_tokens(question),
        output_tokens=token_count,
    )


async def handle_heart_of_darkness(call: HeartOfDarknessCall, ctx: HandlerContext) -> ToolResult:
    """Answer a question with passages from Heart of Darkness.

    Uses the configured context budget and passage window.
    """
    return await _answer(
        call.question,
        ctx,
        max_budget=ctx.settings.max_context_length,
        window_radius=ctx.settings.passage_window,
    )


async def handle_passage_query(call: PassageQueryCall, ctx: HandlerContext) -> ToolResult:
    """Passage search with optional budget and window overrides.

    Args:
        call: Validated call with:
            - question: Text to search for
            - max_budget: Optional character budget
            - window_radius: Optional half-width around each match
    """
    return await _answer(
        call.question,
        ctx,
        max_budget=call.max_budget if call.max_budget is not None else ctx.settings.max_context_length,
        window_radius=(
            call.window_radius if call.window_radius is not None else ctx.settings.passage_window
        ),
    )
