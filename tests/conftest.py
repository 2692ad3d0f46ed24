"""Shared fixtures for verse lookup tests."""

import pytest

from versenotes.cache import LookupCache
from versenotes.ingest.demo_data import DEMO_CORPUS
from versenotes.ingest.loader import iter_corpus_verses
from versenotes.reference.books import BookNameResolver
from versenotes.resolver import VerseResolver
from versenotes.store.memory import MemoryVerseStore
from versenotes.store.sqlite import SQLiteVerseStore


class CountingStore(MemoryVerseStore):
    """Memory store that records how often query() runs."""

    def __init__(self):
        super().__init__()
        self.query_calls = 0

    def query(self, book, chapter, start_verse=None, end_verse=None):
        self.query_calls += 1
        return super().query(book, chapter, start_verse, end_verse)


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, now: int = 1_700_000_000_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_store():
    """Memory store seeded with the demo corpus."""
    store = CountingStore()
    store.initialize(iter_corpus_verses(DEMO_CORPUS))
    return store


@pytest.fixture
def sqlite_store(tmp_path):
    """SQLite store seeded with the demo corpus."""
    store = SQLiteVerseStore(tmp_path / "verses.db")
    store.initialize(iter_corpus_verses(DEMO_CORPUS))
    return store


@pytest.fixture
def resolver(memory_store, clock):
    cache = LookupCache(memory_store, ttl_ms=60_000, clock=clock)
    return VerseResolver(memory_store, cache, books=BookNameResolver())
