"""ParsedJsonCache: LRU-backed cache of parsed embedded JSON documents.

Fields listed in ``CompareConfig.json_string_paths`` carry JSON documents as
string values.  Diffing them structurally means parsing both strings, and the
unordered array fallback may compare the same element many times through
throwaway sub-comparisons.  This cache keeps each parsed document so a string
is parsed at most once per comparator, as long as it stays in the LRU window.

Each ``ParsedJsonCache`` instance maintains its own ``LRUCache``; there is
no class-level shared state, so two separate comparators never interfere
with each other.  Parsed values are handed out shared; the comparison engine
never mutates them.

Example::

    from json_structural_diff.cache import ParsedJsonCache

    cache = ParsedJsonCache(max_size=128)
    doc = cache.parse('{"a": 1}')        # parsed
    doc_again = cache.parse('{"a": 1}')  # served from memory
"""

from __future__ import annotations

import json
from typing import Any

from cachetools import LRUCache

__all__ = ["ParsedJsonCache"]


class ParsedJsonCache:
    """LRU cache mapping JSON text to its parsed value.

    Args:
        max_size: Maximum number of parsed documents to hold in memory.
            Defaults to 256.  When exceeded, the least-recently-used entry
            is silently evicted.
    """

    def __init__(self, max_size: int = 256) -> None:
        self._cache: LRUCache[str, Any] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, text: str) -> Any:
        """Return the parsed value of ``text``; only uncached text is parsed.

        Raises:
            json.JSONDecodeError: If ``text`` is not valid JSON.  Failures
                are not cached.
        """
        try:
            return self._cache[text]
        except KeyError:
            pass
        value = json.loads(text)
        self._cache[text] = value
        return value
