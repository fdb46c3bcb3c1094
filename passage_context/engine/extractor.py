"""Context extraction entry point.

Runs the scoring pipeline end to end: question → keywords → occurrences
→ merged candidates → budgeted passages (or head/tail fallback). Pure
CPU work with no I/O; callers load the document and handle caching.
"""

import logging

from .core.document import ExtractionResult
from .scoring import (
    MAX_CONTEXT_LENGTH,
    PASSAGE_WINDOW,
    DomainKeywordMapping,
    build_candidates,
    build_keyword_set,
    fallback_excerpt,
    find_occurrences,
    select_passages,
)

logger = logging.getLogger(__name__)


def analyze(
    question: str,
    document: str,
    max_budget: int = MAX_CONTEXT_LENGTH,
    window_radius: int = PASSAGE_WINDOW,
    mapping: DomainKeywordMapping | None = None,
) -> ExtractionResult:
    """Extract context and keep the intermediate results.

    Args:
        question: Arbitrary user text.
        document: Full reference text.
        max_budget: Character budget for the assembled passages.
        window_radius: Characters added on each side of a match.
        mapping: Optional domain rule table for keyword expansion.

    Returns:
        ExtractionResult with the context plus keywords and candidates.
    """
    if not document:
        return ExtractionResult(context="")

    keywords = build_keyword_set(question, mapping)
    occurrences = find_occurrences(keywords, document)
    candidates = build_candidates(occurrences, len(document), window_radius)
    context, selected = select_passages(candidates, document, max_budget)

    fallback_used = not selected
    if fallback_used:
        context = fallback_excerpt(document, max_budget)

    logger.debug(
        f"Extracted {len(selected)} passages from {len(candidates)} candidates "
        f"({len(occurrences)} matches, fallback={fallback_used})"
    )

    return ExtractionResult(
        context=context.strip(),
        keywords=keywords,
        candidates=candidates,
        selected=selected,
        fallback_used=fallback_used,
    )


def extract_context(
    question: str,
    document: str,
    max_budget: int = MAX_CONTEXT_LENGTH,
    window_radius: int = PASSAGE_WINDOW,
    mapping: DomainKeywordMapping | None = None,
) -> str:
    """Return the context string for a question. See :func:`analyze`."""
    return analyze(question, document, max_budget, window_radius, mapping).context
