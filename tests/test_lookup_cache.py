"""Tests for the time-limited lookup cache."""

import pytest

from versenotes.cache import LookupCache, cache_key
from versenotes.store.models import BibleResult, Verse


TTL = 60_000


@pytest.fixture
def cache(memory_store, clock):
    return LookupCache(memory_store, ttl_ms=TTL, clock=clock)


def _result(reference="John 3:16", text="For God so loved the world"):
    return BibleResult(
        formatted_reference=reference,
        verses=(Verse("John", 3, 16, text),),
    )


class TestCacheKey:
    def test_case_and_whitespace_folded(self):
        assert cache_key("  JOHN   3:16 ") == "john 3:16"
        assert cache_key("John 3:16") == cache_key("john 3:16")

    def test_aliases_are_distinct_keys(self):
        assert cache_key("Jn 3:16") != cache_key("John 3:16")

    def test_dash_variants_folded(self):
        assert cache_key("John 3:16–18") == cache_key("John 3:16-18")

    def test_empty(self):
        assert cache_key("   ") == ""


class TestGetPut:
    def test_miss(self, cache):
        assert cache.get("john 3:16") is None

    def test_hit_within_ttl(self, cache, clock):
        cache.put("john 3:16", _result())
        clock.advance(TTL - 1)
        assert cache.get("john 3:16") == _result()

    def test_expired_at_ttl(self, cache, clock):
        cache.put("john 3:16", _result())
        clock.advance(TTL)
        assert cache.get("john 3:16") is None

    def test_expired_entry_not_deleted_by_get(self, cache, clock, memory_store):
        cache.put("john 3:16", _result())
        clock.advance(TTL * 2)
        cache.get("john 3:16")
        assert memory_store.read_cache("john 3:16") is not None

    def test_last_write_wins(self, cache, clock):
        cache.put("john 3:16", _result(text="first"))
        clock.advance(10)
        cache.put("john 3:16", _result(text="second"))
        assert cache.get("john 3:16").verses[0].text == "second"

    def test_put_refreshes_timestamp(self, cache, clock):
        cache.put("john 3:16", _result())
        clock.advance(TTL - 10)
        cache.put("john 3:16", _result())
        clock.advance(TTL - 10)
        assert cache.get("john 3:16") is not None

    def test_empty_result_is_cacheable(self, cache):
        cache.put("john 999:1", BibleResult("John 999:1"))
        cached = cache.get("john 999:1")
        assert cached is not None
        assert cached.found is False


class TestMaintenance:
    def test_invalidate(self, cache):
        cache.put("john 3:16", _result())
        assert cache.invalidate("john 3:16") is True
        assert cache.get("john 3:16") is None
        assert cache.invalidate("john 3:16") is False

    def test_clear(self, cache):
        cache.put("a", _result())
        cache.put("b", _result())
        assert cache.clear() == 2
        assert cache.get("a") is None

    def test_purge_expired_keeps_fresh_entries(self, cache, clock):
        cache.put("old", _result())
        clock.advance(TTL)
        cache.put("new", _result())

        assert cache.purge_expired() == 1
        assert cache.get("new") is not None
        assert cache.get("old") is None

    def test_purge_expired_on_sqlite(self, sqlite_store, clock):
        cache = LookupCache(sqlite_store, ttl_ms=TTL, clock=clock)
        cache.put("old", _result())
        clock.advance(TTL + 1)
        assert cache.purge_expired() == 1
