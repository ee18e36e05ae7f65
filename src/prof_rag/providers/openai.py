"""OpenAI embeddings through langchain-openai."""

import os
from typing import Any

from prof_rag.exceptions import (
    ProviderAuthError,
    ProviderError,
    ProviderNotAvailableError,
    ProviderRateLimitError,
    ProviderTimeoutError,
)
from prof_rag.providers.base import EmbeddingProvider, EmbeddingResponse, ProviderType
from prof_rag.providers.registry import ProviderRegistry

DEFAULT_EMBEDDING_MODEL = "text-embedding-3-small"

# Substrings of client error messages, checked in order
_ERROR_MARKERS: tuple[tuple[tuple[str, ...], type[ProviderError]], ...] = (
    (("authentication", "invalid api key", "401"), ProviderAuthError),
    (("rate limit", "429"), ProviderRateLimitError),
    (("timeout", "timed out"), ProviderTimeoutError),
    (("connection", "502", "503"), ProviderNotAvailableError),
)


def translate_openai_error(error: Exception) -> ProviderError:
    """Map an OpenAI client failure onto the provider error family."""
    text = str(error).lower()
    for markers, error_cls in _ERROR_MARKERS:
        if any(marker in text for marker in markers):
            return error_cls(f"OpenAI embeddings request failed: {error}")
    return ProviderError(f"OpenAI error: {error}")


class OpenAIEmbeddingProvider(EmbeddingProvider):
    """Embeds text with an OpenAI embedding model.

    The langchain client is created on first use, so constructing the
    provider only checks that a key is available. Install with
    ``pip install prof-rag[openai]``.
    """

    def __init__(
        self,
        model: str = DEFAULT_EMBEDDING_MODEL,
        api_key: str | None = None,
        dimensions: int | None = None,
        timeout: float = 10.0,
        **client_options: Any,
    ) -> None:
        super().__init__(ProviderType.OPENAI, model)
        self._api_key = api_key or os.environ.get("OPENAI_API_KEY")
        if not self._api_key:
            raise ProviderAuthError(
                "No OpenAI API key: set OPENAI_API_KEY or embedding.api_key in the config file"
            )
        self._dimensions = dimensions
        self._timeout = timeout
        self._client_options = client_options
        self._client: Any = None

    def _get_client(self) -> Any:
        if self._client is not None:
            return self._client
        try:
            from langchain_openai import OpenAIEmbeddings
        except ImportError as e:
            raise ProviderError(
                "langchain-openai is not installed; run: pip install prof-rag[openai]"
            ) from e

        options: dict[str, Any] = {
            "model": self.model_name,
            "api_key": self._api_key,
            "timeout": self._timeout,
            # Retries happen in the retrieval layer
            "max_retries": 0,
            **self._client_options,
        }
        if self._dimensions:
            options["dimensions"] = self._dimensions
        self._client = OpenAIEmbeddings(**options)
        return self._client

    async def aembed(self, texts: list[str]) -> EmbeddingResponse:
        client = self._get_client()
        try:
            vectors = await client.aembed_documents(texts)
        except Exception as e:
            raise translate_openai_error(e) from e

        return EmbeddingResponse(
            embeddings=vectors,
            model=self.model_name,
            provider=self.provider_type,
            dimensions=len(vectors[0]) if vectors else 0,
        )


@ProviderRegistry.register(ProviderType.OPENAI)
def create_openai_provider(**options: Any) -> OpenAIEmbeddingProvider:
    return OpenAIEmbeddingProvider(**options)
