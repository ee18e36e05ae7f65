"""Embedding provider interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class ProviderType(str, Enum):
    """Embedding backends known to the registry."""

    OPENAI = "openai"
    MOCK = "mock"


@dataclass
class EmbeddingResponse:
    """Vectors for a batch of texts, in input order."""

    embeddings: list[list[float]]
    model: str
    provider: ProviderType
    dimensions: int
    tokens_used: int | None = None

    def first(self) -> list[float]:
        return self.embeddings[0] if self.embeddings else []


class EmbeddingProvider(ABC):
    """A service that turns text into dense vectors.

    Implementations raise members of the ``ProviderError`` family; the
    retrieval layer retries the transient ones (timeouts, rate limits,
    unavailability) and gives up on the rest.
    """

    def __init__(self, provider_type: ProviderType, model_name: str) -> None:
        self._provider_type = provider_type
        self._model_name = model_name

    @property
    def provider_type(self) -> ProviderType:
        return self._provider_type

    @property
    def model_name(self) -> str:
        return self._model_name

    @abstractmethod
    async def aembed(self, texts: list[str]) -> EmbeddingResponse:
        """Embed ``texts``, one vector each.

        Raises:
            ProviderError: The backend rejected or failed the request.
        """

    async def aembed_query(self, text: str) -> list[float]:
        """Embed a single search query."""
        return (await self.aembed([text])).first()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(provider={self.provider_type.value}, model={self.model_name})"
        )
