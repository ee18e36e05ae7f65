"""Pydantic models for prof-rag configuration."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class EmbeddingProviderType(str, Enum):
    """Supported embedding providers."""

    OPENAI = "openai"
    MOCK = "mock"


class VectorStoreType(str, Enum):
    """Supported vector store backends."""

    PINECONE = "pinecone"
    MEMORY = "memory"


class EmbeddingConfig(BaseModel):
    """Embedding service configuration."""

    provider: EmbeddingProviderType = EmbeddingProviderType.OPENAI
    model: str = "text-embedding-3-small"
    dimensions: int = 1536
    api_key: str | None = None  # Use OPENAI_API_KEY env var
    timeout: float = 10.0


class VectorStoreConfig(BaseModel):
    """Vector store configuration."""

    backend: VectorStoreType = VectorStoreType.PINECONE
    api_key: str | None = None  # Use PINECONE_API_KEY env var
    index_name: str = "rag"
    namespace: str | None = None
    top_k: int = Field(default=5, ge=1)
    # Metadata field holding the canonical professor id on each review vector
    filter_field: str = "professor_id"
    timeout: float = 10.0


DEFAULT_HONORIFICS: tuple[str, ...] = (
    "prof",
    "professor",
    "dr",
    "doktor",
    "dozent",
    "herr",
    "frau",
    "mr",
    "ms",
    "mrs",
    "miss",
)


class FieldWeights(BaseModel):
    """Relative weight of each directory field in fuzzy matching."""

    full_name: float = Field(default=2.0, ge=0)
    normalized_name: float = Field(default=2.0, ge=0)
    department: float = Field(default=0.5, ge=0)
    subject: float = Field(default=0.5, ge=0)

    def as_dict(self) -> dict[str, float]:
        return {name: weight for name, weight in self.model_dump().items() if weight > 0}


class MatchingConfig(BaseModel):
    """Fuzzy name matching configuration."""

    # Edit tolerance in [0, 1]; each pattern word allows int(threshold * (len - 1) / 2) edits
    threshold: float = Field(default=0.65, ge=0.0, le=1.0)
    field_weights: FieldWeights = Field(default_factory=FieldWeights)
    honorifics: list[str] = Field(default_factory=lambda: list(DEFAULT_HONORIFICS))
    min_word_length: int = Field(default=3, ge=1)
    max_suggestions: int = Field(default=5, ge=0)

    @field_validator("honorifics")
    @classmethod
    def _lowercase_honorifics(cls, value: list[str]) -> list[str]:
        return [h.strip().lower().rstrip(".") for h in value if h.strip()]


class CacheConfig(BaseModel):
    """TTL cache configuration."""

    directory_ttl_seconds: float = Field(default=3600, gt=0)
    embedding_ttl_seconds: float = Field(default=3600, gt=0)


class RetryConfig(BaseModel):
    """Retry policy for embedding and vector store calls."""

    max_retries: int = Field(default=2, ge=0)
    base_delay: float = Field(default=0.5, ge=0)


class DirectoryConfig(BaseModel):
    """Directory source configuration."""

    page_size: int = Field(default=100, ge=1)
    # Pinecone namespace holding one vector per professor; None uses the seed list
    namespace: str | None = None


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file: Path | None = None  # Default: no file logging
    json_format: bool = False


class ProfRagConfig(BaseModel):
    """Root configuration for prof-rag."""

    embedding: EmbeddingConfig = Field(default_factory=EmbeddingConfig)
    vector_store: VectorStoreConfig = Field(default_factory=VectorStoreConfig)
    directory: DirectoryConfig = Field(default_factory=DirectoryConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    retry: RetryConfig = Field(default_factory=RetryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
