"""Flat cache of fetched content strings.

Entries are keyed by the string form of a numeric content id or by a raw path.
There is no eviction and no expiry; a repeated fetch of the same key overwrites
the previous value. Rebuilding the site model does not touch the cache.

Example
-------
>>> from sitexml.cache import ContentCache
>>> cache = ContentCache()
>>> cache.put(7, "<p>old</p>")
>>> cache.put("7", "<p>new</p>")
>>> cache.get(7)
'<p>new</p>'
"""

from __future__ import annotations

import typing as typ

from .model import coerce_id

CacheKey = int | str


def cache_key(key: CacheKey) -> str:
    """Return the normalized cache key for a content id or path."""
    content_id = coerce_id(key)
    if content_id is not None:
        return str(content_id)
    return str(key)


class ContentCache:
    """Mapping from content id or path to the last fetched content string."""

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}

    def put(self, key: CacheKey, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous entry."""
        self._entries[cache_key(key)] = value

    def get(self, key: CacheKey) -> str | None:
        """Return the cached value for ``key`` or None when it was never fetched."""
        return self._entries.get(cache_key(key))

    def keys(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int | str):
            return False
        return cache_key(key) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> typ.Iterator[str]:
        return iter(self._entries)


__all__ = ["CacheKey", "ContentCache", "cache_key"]
