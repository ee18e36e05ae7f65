"""Tests for exception hierarchy."""

import pytest

from prof_rag.exceptions import (
    CacheError,
    ConfigError,
    ConfigNotFoundError,
    ConfigValidationError,
    DirectorySourceError,
    EmbeddingServiceError,
    ProfRagError,
    ProviderAuthError,
    ProviderError,
    ProviderNotAvailableError,
    ProviderRateLimitError,
    ProviderTimeoutError,
    RetrievalError,
    VectorStoreError,
)


class TestProfRagError:
    """Tests for base ProfRagError."""

    def test_default_message(self) -> None:
        error = ProfRagError()
        assert str(error) == "An error occurred"
        assert error.user_message == "An error occurred"
        assert error.exit_code == 1

    def test_custom_message(self) -> None:
        assert str(ProfRagError("Custom error")) == "Custom error"

    def test_custom_user_message(self) -> None:
        error = ProfRagError("Internal", user_message="User-friendly message")
        assert error.user_message == "User-friendly message"
        assert str(error) == "Internal"

    def test_user_message_override_is_per_instance(self) -> None:
        ProviderError("x", user_message="changed")
        assert ProviderError().user_message == "Provider error"


class TestHierarchy:
    """Tests for subclass relationships and exit codes."""

    @pytest.mark.parametrize(
        ("error_cls", "parent", "exit_code"),
        [
            (ProviderError, ProfRagError, 2),
            (ProviderNotAvailableError, ProviderError, 2),
            (ProviderRateLimitError, ProviderError, 3),
            (ProviderAuthError, ProviderError, 4),
            (ProviderTimeoutError, ProviderError, 5),
            (CacheError, ProfRagError, 10),
            (ConfigError, ProfRagError, 20),
            (ConfigNotFoundError, ConfigError, 21),
            (ConfigValidationError, ConfigError, 22),
            (RetrievalError, ProfRagError, 30),
            (EmbeddingServiceError, RetrievalError, 31),
            (VectorStoreError, RetrievalError, 32),
            (DirectorySourceError, ProfRagError, 35),
        ],
    )
    def test_exit_codes(
        self, error_cls: type[ProfRagError], parent: type[ProfRagError], exit_code: int
    ) -> None:
        error = error_cls()
        assert isinstance(error, parent)
        assert error.exit_code == exit_code
        assert error.user_message

    def test_retrieval_errors_are_not_provider_errors(self) -> None:
        assert not issubclass(EmbeddingServiceError, ProviderError)
        assert not issubclass(VectorStoreError, ProviderError)

    def test_catch_all(self) -> None:
        with pytest.raises(ProfRagError):
            raise VectorStoreError("index gone")
