"""Embedding providers.

Importing this package registers the built-in providers with
``ProviderRegistry``:

    from prof_rag.providers import ProviderRegistry, ProviderType

    embedder = ProviderRegistry.get(ProviderType.OPENAI, api_key="sk-...")
    vector = await embedder.aembed_query("who teaches statistics?")
"""

from prof_rag.providers.base import EmbeddingProvider, EmbeddingResponse, ProviderType
from prof_rag.providers.registry import ProviderRegistry

# Import implementations so their factories register themselves
from prof_rag.providers.mock import MockEmbeddingProvider
from prof_rag.providers.openai import OpenAIEmbeddingProvider

__all__ = [
    "EmbeddingProvider",
    "EmbeddingResponse",
    "MockEmbeddingProvider",
    "OpenAIEmbeddingProvider",
    "ProviderRegistry",
    "ProviderType",
]
