"""Verse storage backends.

The backend is picked when the application is composed (``create_store``),
so tests can run against ``MemoryVerseStore`` while the app persists to
SQLite.
"""

from __future__ import annotations

from versenotes.config import BACKEND_MEMORY, BACKEND_SQLITE, BACKENDS, Settings
from versenotes.store.base import VerseStore
from versenotes.store.memory import MemoryVerseStore
from versenotes.store.models import BibleResult, CacheEntry, Verse
from versenotes.store.sqlite import SQLiteVerseStore


def create_store(settings: Settings) -> VerseStore:
    """Build the verse store selected by ``settings.backend``."""
    if settings.backend == BACKEND_SQLITE:
        return SQLiteVerseStore(settings.db_path)
    if settings.backend == BACKEND_MEMORY:
        return MemoryVerseStore()
    raise ValueError(
        f"Unknown storage backend '{settings.backend}'. "
        f"Expected one of: {', '.join(BACKENDS)}"
    )


__all__ = [
    "BibleResult",
    "CacheEntry",
    "MemoryVerseStore",
    "SQLiteVerseStore",
    "Verse",
    "VerseStore",
    "create_store",
]
