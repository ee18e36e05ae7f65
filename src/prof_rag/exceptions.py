"""Exception hierarchy for prof-rag."""


class ProfRagError(Exception):
    """Base exception for all prof-rag errors."""

    exit_code: int = 1
    user_message: str = "An error occurred"

    def __init__(
        self,
        message: str | None = None,
        *,
        user_message: str | None = None,
    ) -> None:
        super().__init__(message or self.user_message)
        if user_message:
            self.user_message = user_message


# Provider
class ProviderError(ProfRagError):
    """A call to the embedding service or vector store client failed."""

    exit_code = 2
    user_message = "Provider error"


class ProviderNotAvailableError(ProviderError):
    """The backend is unreachable, unregistered or its client is missing."""

    exit_code = 2
    user_message = "Embedding or vector store service is not available"


class ProviderRateLimitError(ProviderError):
    """The backend throttled the request."""

    exit_code = 3
    user_message = "The service is rate limiting requests. Try again shortly."


class ProviderAuthError(ProviderError):
    """Missing or rejected API key."""

    exit_code = 4
    user_message = "Authentication failed. Check OPENAI_API_KEY and PINECONE_API_KEY."


class ProviderTimeoutError(ProviderError):
    """The backend did not answer within the configured timeout."""

    exit_code = 5
    user_message = "The service did not respond in time."


# Retrieval
class RetrievalError(ProfRagError):
    """Retrieval failed after exhausting retries."""

    exit_code = 30
    user_message = "Could not retrieve professor reviews"


class EmbeddingServiceError(RetrievalError):
    """The embedding service could not embed the query."""

    exit_code = 31
    user_message = "Embedding service error"


class VectorStoreError(RetrievalError):
    """The vector store query failed."""

    exit_code = 32
    user_message = "Vector store error"


# Directory
class DirectorySourceError(ProfRagError):
    """The professor directory could not be fetched."""

    exit_code = 35
    user_message = "Professor directory is unavailable"


# Cache
class CacheError(ProfRagError):
    """An in-process cache was used incorrectly."""

    exit_code = 10
    user_message = "Cache error"


# Config
class ConfigError(ProfRagError):
    """The configuration could not be loaded."""

    exit_code = 20
    user_message = "Configuration error"


class ConfigNotFoundError(ConfigError):
    """An explicitly requested config file does not exist."""

    exit_code = 21
    user_message = "Configuration file not found"


class ConfigValidationError(ConfigError):
    """The config file parsed but failed validation."""

    exit_code = 22
    user_message = "Invalid configuration file"
