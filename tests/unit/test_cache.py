"""Tests for the TTL cache."""

from typing import Any

import pytest

from prof_rag.cache import DEFAULT_TTL_SECONDS, CacheEntry, TTLCache, create_caches
from prof_rag.config.schema import CacheConfig
from prof_rag.exceptions import CacheError


class TestCacheEntry:
    """Tests for CacheEntry."""

    def test_not_expired_without_ttl(self, clock: Any) -> None:
        entry = CacheEntry(cache="c", key="k", value=1, created_at=clock(), clock=clock)
        clock.advance(10**9)
        assert entry.expires_at is None
        assert not entry.is_expired

    def test_expires_after_ttl(self, clock: Any) -> None:
        entry = CacheEntry(
            cache="c", key="k", value=1, created_at=clock(), ttl_seconds=60, clock=clock
        )
        assert entry.expires_at == clock() + 60

        clock.advance(60)
        assert not entry.is_expired
        clock.advance(0.001)
        assert entry.is_expired


class TestTTLCache:
    """Tests for TTLCache."""

    def test_set_and_get(self) -> None:
        cache: TTLCache[str, list[float]] = TTLCache("embeddings")
        cache.set("q", [0.1, 0.2])

        assert cache.get("q") == [0.1, 0.2]
        assert cache.get("other") is None
        assert cache.default_ttl_seconds == DEFAULT_TTL_SECONDS

    def test_entry_records_cache_name(self) -> None:
        cache: TTLCache[str, int] = TTLCache("directory")
        entry = cache.set("directory", 1)
        assert entry.cache == "directory"
        assert entry.key == "directory"

    def test_expired_entry_is_dropped_on_read(self, clock: Any) -> None:
        cache: TTLCache[str, int] = TTLCache("c", default_ttl_seconds=10, clock=clock)
        cache.set("k", 1)

        clock.advance(11)

        assert cache.count() == 1
        assert cache.get("k") is None
        assert cache.count() == 0

    def test_ttl_override(self, clock: Any) -> None:
        cache: TTLCache[str, int] = TTLCache("c", default_ttl_seconds=10, clock=clock)
        cache.set("short", 1)
        cache.set("long", 2, ttl_seconds=100)

        clock.advance(50)

        assert cache.get("short") is None
        assert cache.get("long") == 2

    def test_rejects_non_positive_ttl(self, clock: Any) -> None:
        cache: TTLCache[str, int] = TTLCache("c", default_ttl_seconds=10, clock=clock)
        with pytest.raises(CacheError):
            cache.set("k", 1, ttl_seconds=0)
        assert "k" not in cache

    def test_no_expiry(self, clock: Any) -> None:
        cache: TTLCache[str, int] = TTLCache("c", default_ttl_seconds=None, clock=clock)
        cache.set("k", 1)
        clock.advance(10**9)
        assert cache.get("k") == 1

    def test_last_writer_wins(self) -> None:
        cache: TTLCache[str, int] = TTLCache("c")
        cache.set("k", 1)
        cache.set("k", 2)
        assert cache.get("k") == 2
        assert len(cache) == 1

    def test_contains_respects_expiry(self, clock: Any) -> None:
        cache: TTLCache[str, int] = TTLCache("c", default_ttl_seconds=10, clock=clock)
        cache.set("k", 1)
        assert "k" in cache
        assert cache.exists("k")

        clock.advance(11)
        assert "k" not in cache

    def test_delete_and_clear(self) -> None:
        cache: TTLCache[str, int] = TTLCache("c")
        cache.set("a", 1)
        cache.set("b", 2)

        assert cache.delete("a") is True
        assert cache.delete("a") is False
        assert cache.clear() == 1
        assert len(cache) == 0

    def test_cleanup_expired(self, clock: Any) -> None:
        cache: TTLCache[str, int] = TTLCache("c", default_ttl_seconds=10, clock=clock)
        cache.set("old", 1)
        clock.advance(5)
        cache.set("new", 2)
        clock.advance(6)

        assert cache.cleanup_expired() == 1
        assert cache.get("new") == 2

    def test_writes_drop_expired_entries(self, clock: Any) -> None:
        cache: TTLCache[str, int] = TTLCache("c", default_ttl_seconds=10, clock=clock)
        for i in range(1000):
            cache.set(f"query-{i}", i)
            clock.advance(1)

        assert len(cache) <= 11
        assert cache.get("query-0") is None
        assert cache.get("query-999") == 999

    def test_stats(self, clock: Any) -> None:
        cache: TTLCache[str, int] = TTLCache("c", default_ttl_seconds=10, clock=clock)
        assert cache.stats()["hit_rate"] is None

        cache.set("k", 1)
        cache.get("k")
        cache.get("missing")
        clock.advance(11)
        cache.get("k")

        stats = cache.stats()
        assert stats["name"] == "c"
        assert stats["hits"] == 1
        assert stats["misses"] == 2
        assert stats["hit_rate"] == 1 / 3
        assert stats["entries"] == 0

    def test_repr(self) -> None:
        assert repr(TTLCache("directory")) == "TTLCache(name='directory', entries=0)"


class TestCreateCaches:
    """Tests for create_caches()."""

    def test_defaults(self) -> None:
        caches = create_caches()
        assert caches.directory.name == "directory"
        assert caches.embeddings.name == "embeddings"
        assert caches.directory.default_ttl_seconds == 3600
        assert caches.embeddings.default_ttl_seconds == 3600

    def test_from_config(self) -> None:
        caches = create_caches(CacheConfig(directory_ttl_seconds=60, embedding_ttl_seconds=120))
        assert caches.directory.default_ttl_seconds == 60
        assert caches.embeddings.default_ttl_seconds == 120

    def test_caches_are_independent(self) -> None:
        caches = create_caches()
        caches.directory.set("directory", [])
        assert caches.embeddings.get("directory") is None
