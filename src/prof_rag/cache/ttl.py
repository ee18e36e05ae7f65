"""In-process TTL cache with lazy expiry."""

import time
from typing import Any

from prof_rag.cache.base import Cache, CacheEntry, Clock, K, V
from prof_rag.exceptions import CacheError
from prof_rag.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_TTL_SECONDS = 3600


class TTLCache(Cache[K, V]):
    """Key-value cache whose entries expire a fixed time after insertion.

    Expiry is checked when an entry is read, and every write drops the
    entries that have expired; there is no background sweep.
    Entries are independent, so concurrent readers and writers on the
    event loop only race per key (last writer wins).

    Example:
        embeddings: TTLCache[str, list[float]] = TTLCache("embeddings")
        embeddings.set("who teaches statistics?", vector)
        embeddings.get("who teaches statistics?")
    """

    def __init__(
        self,
        name: str,
        default_ttl_seconds: float | None = DEFAULT_TTL_SECONDS,
        clock: Clock = time.monotonic,
    ) -> None:
        """Initialize the cache.

        Args:
            name: Cache name, used in logs and stats.
            default_ttl_seconds: TTL for entries stored without an override.
                None disables expiry.
            clock: Monotonic time source (injectable for tests).
        """
        self.name = name
        self.default_ttl_seconds = default_ttl_seconds
        self._clock = clock
        self._entries: dict[K, CacheEntry[K, V]] = {}
        self._hits = 0
        self._misses = 0

    def get_entry(self, key: K) -> CacheEntry[K, V] | None:
        """Return the live entry for ``key``, dropping it if expired."""
        entry = self._entries.get(key)
        if entry is None:
            self._misses += 1
            return None

        if entry.is_expired:
            del self._entries[key]
            self._misses += 1
            logger.debug("Cache entry expired", extra={"cache": self.name})
            return None

        self._hits += 1
        return entry

    def get(self, key: K) -> V | None:
        entry = self.get_entry(key)
        return entry.value if entry is not None else None

    def set(self, key: K, value: V, ttl_seconds: float | None = None) -> CacheEntry[K, V]:
        ttl = ttl_seconds if ttl_seconds is not None else self.default_ttl_seconds
        if ttl is not None and ttl <= 0:
            raise CacheError(f"TTL for cache '{self.name}' must be positive, got {ttl}")
        # Keys that are never read again would otherwise stay forever
        self.cleanup_expired()
        entry: CacheEntry[K, V] = CacheEntry(
            cache=self.name,
            key=key,
            value=value,
            created_at=self._clock(),
            ttl_seconds=ttl,
            clock=self._clock,
        )
        self._entries[key] = entry
        return entry

    def delete(self, key: K) -> bool:
        return self._entries.pop(key, None) is not None

    def clear(self) -> int:
        count = len(self._entries)
        self._entries.clear()
        return count

    def cleanup_expired(self) -> int:
        expired = [key for key, entry in self._entries.items() if entry.is_expired]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def count(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        entry = self._entries.get(key)  # type: ignore[call-overload]
        return entry is not None and not entry.is_expired

    def __len__(self) -> int:
        return self.count()

    def stats(self) -> dict[str, Any]:
        lookups = self._hits + self._misses
        return {
            "name": self.name,
            "entries": len(self._entries),
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": self._hits / lookups if lookups else None,
            "default_ttl_seconds": self.default_ttl_seconds,
        }

    def __repr__(self) -> str:
        return f"TTLCache(name={self.name!r}, entries={len(self._entries)})"
