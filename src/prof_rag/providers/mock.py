"""Mock embedding provider for tests and offline runs."""

import asyncio
import hashlib
from typing import Any

from prof_rag.providers.base import EmbeddingProvider, EmbeddingResponse, ProviderType
from prof_rag.providers.registry import ProviderRegistry


class MockEmbeddingProvider(EmbeddingProvider):
    """Deterministic fake embeddings derived from a hash of the text.

    Identical texts always map to identical vectors, which keeps caching
    and retrieval tests predictable. ``failures`` queues exceptions to raise
    on the next calls, one per call, before embedding normally again.
    """

    def __init__(
        self,
        model: str = "mock-embedding",
        dimensions: int = 128,
        latency_ms: int = 0,
        failures: list[Exception] | None = None,
    ) -> None:
        """Initialize mock provider.

        Args:
            model: Model name to report.
            dimensions: Dimension of fake embeddings.
            latency_ms: Simulated latency in milliseconds.
            failures: Exceptions raised by the next calls, in order.
        """
        super().__init__(ProviderType.MOCK, model)
        self._dimensions = dimensions
        self._latency_ms = latency_ms
        self._failures = list(failures or [])
        self._call_history: list[list[str]] = []

    @property
    def call_history(self) -> list[list[str]]:
        """Texts passed to each embedding call."""
        return self._call_history

    @property
    def call_count(self) -> int:
        """Get the number of embedding calls made."""
        return len(self._call_history)

    def vector_for(self, text: str) -> list[float]:
        """The deterministic vector returned for ``text``."""
        hash_bytes = hashlib.sha256(text.encode()).digest()
        extended = hash_bytes * (self._dimensions // len(hash_bytes) + 1)
        return [(b - 128) / 128.0 for b in extended[: self._dimensions]]

    async def aembed(self, texts: list[str]) -> EmbeddingResponse:
        self._call_history.append(list(texts))

        if self._latency_ms > 0:
            await asyncio.sleep(self._latency_ms / 1000)

        if self._failures:
            raise self._failures.pop(0)

        return EmbeddingResponse(
            embeddings=[self.vector_for(text) for text in texts],
            model=self.model_name,
            provider=self.provider_type,
            dimensions=self._dimensions,
            tokens_used=sum(len(t.split()) for t in texts),
        )


@ProviderRegistry.register(ProviderType.MOCK)
def create_mock_provider(
    model: str = "mock-embedding",
    dimensions: int = 128,
    latency_ms: int = 0,
    **kwargs: Any,
) -> MockEmbeddingProvider:
    """Factory function to create a mock provider; extra arguments are ignored."""
    return MockEmbeddingProvider(model=model, dimensions=dimensions, latency_ms=latency_ms)
