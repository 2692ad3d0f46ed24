"""Verse store interface shared by all storage backends.

A store owns two things: the verse corpus and the lookup-cache table.
``initialize()`` creates both and seeds the corpus exactly once; it is
guarded by a lock so concurrent callers never run the bulk import twice.

Contract for calls made before a successful ``initialize()``: every query
and cache operation raises ``NotInitializedError`` immediately. Nothing
blocks waiting for initialization.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable

from versenotes.errors import (
    CorpusFormatError,
    NotInitializedError,
    StorageError,
    StorageInitError,
)
from versenotes.store.models import CacheEntry, Verse

logger = logging.getLogger(__name__)

# Largest chapter/verse number a backend can hold (SQLite INTEGER)
MAX_STORED_NUMBER = 2**63 - 1


class VerseStore:
    """Base class for verse storage backends.

    Subclasses implement the underscore-prefixed primitives; the public
    methods add the initialization gate and argument checks.
    """

    backend_name = "abstract"

    def __init__(self) -> None:
        self._init_lock = threading.Lock()
        self._ready = False

    @property
    def ready(self) -> bool:
        return self._ready

    def initialize(self, verses: Iterable[Verse] = ()) -> None:
        """Create tables and seed the corpus if the verse table is empty.

        Args:
            verses: Seed verses. Only consumed when the store is empty,
                so passing a generator is cheap on warm starts.

        Raises:
            StorageInitError: If the backing storage or seed data fails
        """
        with self._init_lock:
            if self._ready:
                logger.debug(f"{self.backend_name} store already initialized")
                return

            try:
                self._create_schema()
                existing = self._count_verses()
                if existing == 0:
                    logger.info(f"Seeding {self.backend_name} verse store...")
                    inserted = self._bulk_insert(verses)
                    logger.info(f"Imported {inserted} verses")
                else:
                    logger.info(f"Verse store already holds {existing} verses")
            except (StorageError, CorpusFormatError) as e:
                raise StorageInitError(
                    f"Failed to initialize {self.backend_name} verse store: {e}"
                ) from e

            self._ready = True

    def _require_ready(self) -> None:
        if not self._ready:
            raise NotInitializedError()

    # ------------------------------------------------------------------
    # Verses
    # ------------------------------------------------------------------

    def query(
        self,
        book: str,
        chapter: int,
        start_verse: int | None = None,
        end_verse: int | None = None,
    ) -> list[Verse]:
        """Return verses of a chapter, optionally limited to a range.

        ``end_verse`` defaults to ``start_verse``; with neither given the
        whole chapter is returned. Results are ascending by verse number.
        No matching rows gives an empty list.
        """
        self._require_ready()
        if start_verse is None and end_verse is not None:
            raise ValueError("end_verse requires start_verse")
        if start_verse is not None and end_verse is None:
            end_verse = start_verse
        # Numbers past the storable range cannot match any row
        if chapter > MAX_STORED_NUMBER or (
            start_verse is not None and start_verse > MAX_STORED_NUMBER
        ):
            return []
        if end_verse is not None:
            end_verse = min(end_verse, MAX_STORED_NUMBER)
        return self._select(book, chapter, start_verse, end_verse)

    def verse_count(self) -> int:
        self._require_ready()
        return self._count_verses()

    def clear(self) -> None:
        """Drop all verses and cached lookups.

        The store returns to the uninitialized state; the next
        ``initialize()`` reseeds it.
        """
        with self._init_lock:
            self._clear_all()
            self._ready = False
        logger.info(f"Cleared {self.backend_name} verse store")

    # ------------------------------------------------------------------
    # Cache rows
    # ------------------------------------------------------------------

    def read_cache(self, key: str) -> CacheEntry | None:
        self._require_ready()
        return self._read_cache(key)

    def write_cache(self, entry: CacheEntry) -> None:
        self._require_ready()
        self._write_cache(entry)

    def delete_cache(self, key: str) -> bool:
        self._require_ready()
        return self._delete_cache(key)

    def purge_cache(self, older_than: int | None = None) -> int:
        """Delete cache rows stamped before ``older_than`` (all when None)."""
        self._require_ready()
        return self._purge_cache(older_than)

    # ------------------------------------------------------------------
    # Backend primitives
    # ------------------------------------------------------------------

    def _create_schema(self) -> None:
        raise NotImplementedError

    def _count_verses(self) -> int:
        raise NotImplementedError

    def _bulk_insert(self, verses: Iterable[Verse]) -> int:
        raise NotImplementedError

    def _select(
        self, book: str, chapter: int, start: int | None, end: int | None
    ) -> list[Verse]:
        raise NotImplementedError

    def _clear_all(self) -> None:
        raise NotImplementedError

    def _read_cache(self, key: str) -> CacheEntry | None:
        raise NotImplementedError

    def _write_cache(self, entry: CacheEntry) -> None:
        raise NotImplementedError

    def _delete_cache(self, key: str) -> bool:
        raise NotImplementedError

    def _purge_cache(self, older_than: int | None) -> int:
        raise NotImplementedError
