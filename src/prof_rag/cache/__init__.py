"""In-memory TTL caches for the expanded directory and query embeddings.

Both caches are created once at process start and injected into the
components that use them:

    from prof_rag.cache import create_caches

    caches = create_caches(config.cache)
    expander = DirectoryExpander(source, caches.directory)
    retriever = Retriever(embedder, store, caches.embeddings)
"""

from dataclasses import dataclass

from prof_rag.cache.base import Cache, CacheEntry
from prof_rag.cache.ttl import DEFAULT_TTL_SECONDS, TTLCache
from prof_rag.config.schema import CacheConfig
from prof_rag.directory.types import DirectoryRecord


@dataclass
class Caches:
    """The two independent caches used per process."""

    directory: TTLCache[str, list[DirectoryRecord]]
    embeddings: TTLCache[str, list[float]]


def create_caches(config: CacheConfig | None = None) -> Caches:
    """Create the directory and embedding caches from configuration."""
    config = config or CacheConfig()
    return Caches(
        directory=TTLCache("directory", config.directory_ttl_seconds),
        embeddings=TTLCache("embeddings", config.embedding_ttl_seconds),
    )


__all__ = [
    "Cache",
    "CacheEntry",
    "Caches",
    "DEFAULT_TTL_SECONDS",
    "TTLCache",
    "create_caches",
]
