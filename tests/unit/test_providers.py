"""Unit tests for embedding providers."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from prof_rag.exceptions import (
    ProviderAuthError,
    ProviderError,
    ProviderNotAvailableError,
    ProviderRateLimitError,
    ProviderTimeoutError,
)
from prof_rag.providers import (
    EmbeddingResponse,
    MockEmbeddingProvider,
    OpenAIEmbeddingProvider,
    ProviderRegistry,
    ProviderType,
)


class TestProviderType:
    """Tests for ProviderType enum."""

    def test_provider_types_exist(self) -> None:
        assert ProviderType.OPENAI == "openai"
        assert ProviderType.MOCK == "mock"


class TestMockEmbeddingProvider:
    """Tests for MockEmbeddingProvider."""

    @pytest.mark.asyncio
    async def test_deterministic_vectors(self) -> None:
        provider = MockEmbeddingProvider(dimensions=16)

        response = await provider.aembed(["a", "b", "a"])

        assert isinstance(response, EmbeddingResponse)
        assert response.dimensions == 16
        assert response.provider == ProviderType.MOCK
        assert response.embeddings[0] == response.embeddings[2]
        assert response.embeddings[0] != response.embeddings[1]
        assert all(len(v) == 16 for v in response.embeddings)

    @pytest.mark.asyncio
    async def test_aembed_query(self) -> None:
        provider = MockEmbeddingProvider(dimensions=8)

        vector = await provider.aembed_query("who teaches stats?")

        assert vector == provider.vector_for("who teaches stats?")
        assert provider.call_history == [["who teaches stats?"]]
        assert provider.call_count == 1

    @pytest.mark.asyncio
    async def test_queued_failures(self) -> None:
        provider = MockEmbeddingProvider(failures=[ProviderTimeoutError("slow")])

        with pytest.raises(ProviderTimeoutError):
            await provider.aembed_query("q")
        assert await provider.aembed_query("q") == provider.vector_for("q")
        assert provider.call_count == 2

    def test_repr(self) -> None:
        assert repr(MockEmbeddingProvider()) == (
            "MockEmbeddingProvider(provider=mock, model=mock-embedding)"
        )


class TestOpenAIEmbeddingProvider:
    """Tests for OpenAIEmbeddingProvider without network access."""

    def test_requires_api_key(self) -> None:
        with pytest.raises(ProviderAuthError):
            OpenAIEmbeddingProvider()

    def test_api_key_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        provider = OpenAIEmbeddingProvider()
        assert provider.model_name == "text-embedding-3-small"
        assert provider.provider_type == ProviderType.OPENAI

    @pytest.mark.asyncio
    async def test_aembed_uses_langchain_model(self) -> None:
        provider = OpenAIEmbeddingProvider(api_key="sk-test")
        model = MagicMock()
        model.aembed_documents = AsyncMock(return_value=[[0.1, 0.2, 0.3]])

        with patch.object(provider, "_get_client", return_value=model):
            response = await provider.aembed(["hello"])

        model.aembed_documents.assert_awaited_once_with(["hello"])
        assert response.embeddings == [[0.1, 0.2, 0.3]]
        assert response.dimensions == 3
        assert response.model == "text-embedding-3-small"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("message", "expected"),
        [
            ("Error code: 401 - invalid api key", ProviderAuthError),
            ("Error code: 429 - rate limit reached", ProviderRateLimitError),
            ("Request timed out.", ProviderTimeoutError),
            ("Connection error.", ProviderNotAvailableError),
            ("something odd", ProviderError),
        ],
    )
    async def test_error_mapping(self, message: str, expected: type[ProviderError]) -> None:
        provider = OpenAIEmbeddingProvider(api_key="sk-test")
        model = MagicMock()
        model.aembed_documents = AsyncMock(side_effect=RuntimeError(message))

        with patch.object(provider, "_get_client", return_value=model):
            with pytest.raises(expected):
                await provider.aembed(["hello"])


class TestProviderRegistry:
    """Tests for ProviderRegistry."""

    def test_builtin_providers_registered(self) -> None:
        assert ProviderRegistry.is_registered(ProviderType.MOCK)
        assert ProviderRegistry.is_registered(ProviderType.OPENAI)
        assert set(ProviderRegistry.list_available()) >= {ProviderType.MOCK, ProviderType.OPENAI}

    def test_get_by_name(self) -> None:
        provider = ProviderRegistry.get("mock", dimensions=4)
        assert isinstance(provider, MockEmbeddingProvider)

    def test_instances_are_cached(self) -> None:
        first = ProviderRegistry.get(ProviderType.MOCK)
        assert ProviderRegistry.get(ProviderType.MOCK) is first
        assert ProviderRegistry.get(ProviderType.MOCK, use_cache=False) is not first

    def test_different_options_different_instances(self) -> None:
        small = ProviderRegistry.get(ProviderType.MOCK, dimensions=4)
        large = ProviderRegistry.get(ProviderType.MOCK, dimensions=32)
        assert small is not large

    def test_unknown_provider(self) -> None:
        with pytest.raises(ProviderNotAvailableError):
            ProviderRegistry.get("ollama")

    def test_provider_errors_propagate(self) -> None:
        with pytest.raises(ProviderAuthError):
            ProviderRegistry.get(ProviderType.OPENAI)

    def test_clear_cache(self) -> None:
        first = ProviderRegistry.get(ProviderType.MOCK)
        ProviderRegistry.clear_cache()
        assert ProviderRegistry.get(ProviderType.MOCK) is not first
