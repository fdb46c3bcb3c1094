"""Passage scoring pipeline.

Stages, in order:
- Keyword extraction with stop-word filtering and domain rule expansion
- Exhaustive occurrence scan
- Window building with single-pass merging
- Greedy budgeted passage selection with head/tail fallback

Usage:
    from passage_context.engine.scoring import (
        build_keyword_set,
        find_occurrences,
        build_candidates,
        select_passages,
    )
"""

from .constants import (
    FALLBACK_MARKER,
    KEYWORD_LENGTH_THRESHOLD,
    MAX_CONTEXT_LENGTH,
    PASSAGE_SEPARATOR,
    PASSAGE_WINDOW,
    STOP_WORDS,
)
from .domain_rules import (
    HEART_OF_DARKNESS_MAPPINGS,
    DomainKeywordMapping,
    KeywordMappingRule,
)
from .keyword_extractor import build_keyword_set, extract_keywords
from .occurrence_locator import find_occurrences
from .passage_selector import fallback_excerpt, rank_candidates, select_passages
from .window_builder import build_candidates

__all__ = [
    # Constants
    "FALLBACK_MARKER",
    "KEYWORD_LENGTH_THRESHOLD",
    "MAX_CONTEXT_LENGTH",
    "PASSAGE_SEPARATOR",
    "PASSAGE_WINDOW",
    "STOP_WORDS",
    # Domain rules
    "HEART_OF_DARKNESS_MAPPINGS",
    "DomainKeywordMapping",
    "KeywordMappingRule",
    # Keywords
    "build_keyword_set",
    "extract_keywords",
    # Occurrences and windows
    "find_occurrences",
    "build_candidates",
    # Selection
    "fallback_excerpt",
    "rank_candidates",
    "select_passages",
]
