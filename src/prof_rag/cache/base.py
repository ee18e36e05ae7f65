"""Cache protocol and base classes."""

import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")

Clock = Callable[[], float]


@dataclass
class CacheEntry(Generic[K, V]):
    """A cached value with its own expiration.

    Attributes:
        cache: Name of the cache holding the entry (e.g., "directory").
        key: Lookup key within that cache.
        value: The cached value.
        created_at: Clock reading when the entry was stored.
        ttl_seconds: Time-to-live in seconds (None means no expiration).
        clock: Time source used to evaluate expiry.
    """

    cache: str
    key: K
    value: V
    created_at: float = field(default_factory=time.monotonic)
    ttl_seconds: float | None = None
    clock: Clock = field(default=time.monotonic, repr=False, compare=False)

    @property
    def expires_at(self) -> float | None:
        """Clock reading after which the entry is stale."""
        if self.ttl_seconds is None:
            return None
        return self.created_at + self.ttl_seconds

    @property
    def is_expired(self) -> bool:
        """Check if this cache entry has expired."""
        if self.ttl_seconds is None:
            return False
        return self.clock() - self.created_at > self.ttl_seconds


class Cache(ABC, Generic[K, V]):
    """Abstract base class for cache implementations."""

    @abstractmethod
    def get(self, key: K) -> V | None:
        """Retrieve a value from the cache.

        Args:
            key: The cache key to look up.

        Returns:
            The value if found and not expired, None otherwise.
        """
        pass

    @abstractmethod
    def set(self, key: K, value: V, ttl_seconds: float | None = None) -> CacheEntry[K, V]:
        """Store a value in the cache.

        Args:
            key: Lookup key.
            value: Value to cache.
            ttl_seconds: Time-to-live override (optional).

        Returns:
            The created CacheEntry.
        """
        pass

    @abstractmethod
    def delete(self, key: K) -> bool:
        """Delete an entry, returning True if it existed."""
        pass

    @abstractmethod
    def clear(self) -> int:
        """Clear all entries, returning how many were removed."""
        pass

    @abstractmethod
    def cleanup_expired(self) -> int:
        """Remove all expired entries, returning how many were removed."""
        pass

    def exists(self, key: K) -> bool:
        """Check if a key exists in the cache and is not expired."""
        return self.get(key) is not None

    @abstractmethod
    def count(self) -> int:
        """Get the total number of stored entries (expired ones included)."""
        pass

    @abstractmethod
    def stats(self) -> dict[str, Any]:
        """Get cache statistics like hit rate and size."""
        pass
