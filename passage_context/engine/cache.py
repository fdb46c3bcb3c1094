"""Reference text cache.

Maps a file path to its loaded content for the life of the process.
The cache does no I/O: callers check ``has``, load on a miss, then
``put``. Entries never expire.
"""

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class NotCachedError(KeyError):
    """Raised by ``get`` when a path has not been cached."""


class ContentCache(Protocol):
    """Key-value store for loaded documents."""

    def has(self, path: str) -> bool: ...

    def get(self, path: str) -> str: ...

    def put(self, path: str, content: str) -> None: ...


class InMemoryContentCache:
    """Dict-backed ContentCache.

    Concurrent ``put`` calls for the same path are harmless: a path always
    maps to the same file, so the last write stores identical content.
    """

    def __init__(self) -> None:
        self._contents: dict[str, str] = {}

    def has(self, path: str) -> bool:
        return path in self._contents

    def get(self, path: str) -> str:
        try:
            return self._contents[path]
        except KeyError:
            raise NotCachedError(path) from None

    def put(self, path: str, content: str) -> None:
        self._contents[path] = content
        logger.debug(f"Cached {len(content)} chars for {path}")

    def clear(self, path: str | None = None) -> None:
        """Drop one path, or every entry when ``path`` is None."""
        if path is None:
            self._contents.clear()
        else:
            self._contents.pop(path, None)

    def paths(self) -> list[str]:
        return list(self._contents)


# Process-wide cache shared by the tool handlers.
document_cache = InMemoryContentCache()
