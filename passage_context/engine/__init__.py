"""Passage extraction engine."""

from .cache import ContentCache, InMemoryContentCache, NotCachedError, document_cache
from .extractor import analyze, extract_context

__all__ = [
    "ContentCache",
    "InMemoryContentCache",
    "NotCachedError",
    "document_cache",
    "analyze",
    "extract_context",
]
