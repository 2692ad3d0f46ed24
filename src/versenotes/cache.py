"""Time-limited lookup cache.

Entries are keyed by the reference exactly as typed, after whitespace
and case normalization. Book aliases are not folded together: "Jn 3:16"
and "John 3:16" are separate entries even though they resolve to the
same verses.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from versenotes.config import DEFAULT_CACHE_TTL_MS
from versenotes.reference.parser import normalize_reference_text
from versenotes.store.base import VerseStore
from versenotes.store.models import BibleResult, CacheEntry

logger = logging.getLogger(__name__)


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def cache_key(raw: str) -> str:
    """Normalize a raw reference string into a cache key."""
    return normalize_reference_text(raw).lower()


class LookupCache:
    """Memoizes lookup results in the verse store's cache table."""

    def __init__(
        self,
        store: VerseStore,
        ttl_ms: int = DEFAULT_CACHE_TTL_MS,
        clock: Callable[[], int] = now_ms,
    ):
        self.store = store
        self.ttl_ms = ttl_ms
        self.clock = clock

    def get(self, key: str) -> BibleResult | None:
        """Return the cached result if present and younger than the TTL."""
        entry = self.store.read_cache(key)
        if entry is None:
            logger.debug(f"Cache miss: '{key}'")
            return None
        if not entry.is_fresh(self.clock(), self.ttl_ms):
            logger.debug(f"Cache expired: '{key}'")
            return None
        logger.debug(f"Cache hit: '{key}'")
        return entry.result

    def put(self, key: str, result: BibleResult) -> None:
        """Insert or replace the entry for ``key``, stamped now."""
        self.store.write_cache(CacheEntry(key=key, result=result, timestamp=self.clock()))

    def invalidate(self, key: str) -> bool:
        return self.store.delete_cache(key)

    def clear(self) -> int:
        return self.store.purge_cache()

    def purge_expired(self) -> int:
        """Delete entries that can no longer be served."""
        removed = self.store.purge_cache(older_than=self.clock() - self.ttl_ms + 1)
        if removed:
            logger.info(f"Purged {removed} expired cache entries")
        return removed
