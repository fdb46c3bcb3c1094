"""Content cache tests."""

import pytest

from passage_context.engine.cache import InMemoryContentCache, NotCachedError, document_cache


def test_put_then_get():
    cache = InMemoryContentCache()
    cache.put("/data/book.txt", "content")
    assert cache.has("/data/book.txt")
    assert cache.get("/data/book.txt") == "content"


def test_get_missing_raises_not_cached():
    cache = InMemoryContentCache()
    assert not cache.has("/missing.txt")
    with pytest.raises(NotCachedError):
        cache.get("/missing.txt")


def test_put_overwrites():
    cache = InMemoryContentCache()
    cache.put("p", "one")
    cache.put("p", "one")
    assert cache.paths() == ["p"]
    cache.put("p", "two")
    assert cache.get("p") == "two"


def test_clear_single_path_and_all():
    cache = InMemoryContentCache()
    cache.put("a", "1")
    cache.put("b", "2")
    cache.clear("a")
    assert cache.paths() == ["b"]
    cache.clear("not-there")
    cache.clear()
    assert cache.paths() == []


def test_process_wide_cache_is_in_memory():
    assert isinstance(document_cache, InMemoryContentCache)
