"""Keyword extraction for passage search.

Turns a free-text question into the ordered, de-duplicated keyword list
that drives the occurrence scan. Base tokens come first, then keywords
contributed by domain rules.
"""

import logging

from .constants import KEYWORD_LENGTH_THRESHOLD, STOP_WORDS, STRIPPED_PUNCTUATION
from .domain_rules import DomainKeywordMapping

logger = logging.getLogger(__name__)

_PUNCTUATION_TABLE = str.maketrans("", "", STRIPPED_PUNCTUATION)


def extract_keywords(question: str) -> list[str]:
    """Extract base keywords from a question.

    Lowercases, strips ``? . , !``, splits on whitespace and drops short
    tokens and stop words.

    Args:
        question: The raw question text.

    Returns:
        Lowercase keywords in question order (may contain duplicates).
    """
    words = question.lower().translate(_PUNCTUATION_TABLE).split()
    return [w for w in words if len(w) > KEYWORD_LENGTH_THRESHOLD and w not in STOP_WORDS]


def build_keyword_set(
    question: str,
    mapping: DomainKeywordMapping | None = None,
) -> list[str]:
    """Combine base keywords with domain expansions.

    Domain triggers are matched against the original question, not the
    stripped one. An empty result is valid and leads to the fallback
    excerpt downstream.

    Args:
        question: The raw question text.
        mapping: Optional domain rule table.

    Returns:
        De-duplicated keywords, base keywords first.
    """
    keywords: list[str] = []
    for keyword in extract_keywords(question):
        if keyword not in keywords:
            keywords.append(keyword)

    if mapping is not None:
        for keyword in mapping.expand(question):
            if keyword not in keywords:
                keywords.append(keyword)

    logger.debug(f"Keywords for question {question[:60]!r}: {keywords}")
    return keywords
