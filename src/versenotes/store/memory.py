"""In-memory verse store for tests and throwaway sessions."""

from __future__ import annotations

import threading
from typing import Iterable

from versenotes.store.base import VerseStore
from versenotes.store.models import CacheEntry, Verse


class MemoryVerseStore(VerseStore):
    """Verse store held in nested dicts: book -> chapter -> verse -> Verse."""

    backend_name = "memory"

    def __init__(self) -> None:
        super().__init__()
        self._lock = threading.Lock()
        self._verses: dict[str, dict[int, dict[int, Verse]]] = {}
        self._cache: dict[str, CacheEntry] = {}

    def _create_schema(self) -> None:
        pass

    def _count_verses(self) -> int:
        return sum(
            len(verses) for chapters in self._verses.values() for verses in chapters.values()
        )

    def _bulk_insert(self, verses: Iterable[Verse]) -> int:
        # Stage first so a bad record leaves the store untouched
        staged: dict[str, dict[int, dict[int, Verse]]] = {}
        inserted = 0
        for verse in verses:
            chapter = staged.setdefault(verse.book, {}).setdefault(verse.chapter, {})
            if verse.verse not in chapter:
                chapter[verse.verse] = verse
                inserted += 1

        with self._lock:
            self._verses = staged
        return inserted

    def _select(
        self, book: str, chapter: int, start: int | None, end: int | None
    ) -> list[Verse]:
        verses = self._verses.get(book, {}).get(chapter, {})
        numbers = sorted(verses)
        if start is not None:
            numbers = [n for n in numbers if start <= n <= end]
        return [verses[n] for n in numbers]

    def _clear_all(self) -> None:
        with self._lock:
            self._verses = {}
            self._cache = {}

    def _read_cache(self, key: str) -> CacheEntry | None:
        return self._cache.get(key)

    def _write_cache(self, entry: CacheEntry) -> None:
        with self._lock:
            self._cache[entry.key] = entry

    def _delete_cache(self, key: str) -> bool:
        with self._lock:
            return self._cache.pop(key, None) is not None

    def _purge_cache(self, older_than: int | None) -> int:
        with self._lock:
            if older_than is None:
                removed = len(self._cache)
                self._cache = {}
                return removed
            stale = [k for k, e in self._cache.items() if e.timestamp < older_than]
            for key in stale:
                del self._cache[key]
            return len(stale)
