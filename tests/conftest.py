"""Pytest fixtures for prof-rag tests."""

import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

from prof_rag.cache import TTLCache
from prof_rag.config import reset_config
from prof_rag.config.schema import ProfRagConfig
from prof_rag.directory import DirectoryRecord, expand_entries
from prof_rag.providers import MockEmbeddingProvider, ProviderRegistry


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def reset_config_fixture(
    temp_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Isolate tests from the user's config file and service credentials."""
    monkeypatch.setenv("PROFRAG_CONFIG", str(temp_dir / "missing.toml"))
    for var in (
        "PROFRAG_LOG_LEVEL",
        "PROFRAG_EMBEDDING_PROVIDER",
        "OPENAI_API_KEY",
        "PINECONE_API_KEY",
        "PINECONE_INDEX_NAME",
    ):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    ProviderRegistry.clear_cache()
    yield
    reset_config()
    ProviderRegistry.clear_cache()


@pytest.fixture
def default_config() -> ProfRagConfig:
    """Get default configuration."""
    return ProfRagConfig()


@pytest.fixture
def config_file(temp_dir: Path) -> Path:
    """Create a test config file."""
    config_path = temp_dir / "config.toml"
    config_path.write_text("""
[embedding]
provider = "mock"
dimensions = 8

[vector_store]
backend = "memory"
top_k = 3

[matching]
threshold = 0.4
honorifics = ["Prof.", "DR"]

[cache]
directory_ttl_seconds = 60

[retry]
max_retries = 1
base_delay = 0.0
""")
    return config_path


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def raw_directory() -> list[dict[str, Any]]:
    """Raw directory entries in the vector-store listing shape."""
    return [
        {
            "id": "p1",
            "metadata": {
                "name": "Jürgen Müller",
                "department": "Mathematics",
                "subject": "Statistics",
            },
        },
        {
            "id": "p2",
            "metadata": {
                "name": "Anna Schmidt",
                "department": "Computer Science",
                "subject": "Databases",
            },
        },
        {
            "id": "p3",
            "metadata": {
                "name": "Peter Baumann",
                "department": "Computer Science",
                "subject": "Robotics",
            },
        },
    ]


@pytest.fixture
def directory(raw_directory: list[dict[str, Any]]) -> list[DirectoryRecord]:
    """Expanded directory records for ``raw_directory``."""
    return expand_entries(raw_directory)


@pytest.fixture
def embedding_cache() -> TTLCache[str, list[float]]:
    return TTLCache("embeddings")


@pytest.fixture
def directory_cache() -> TTLCache[str, list[DirectoryRecord]]:
    return TTLCache("directory")


@pytest.fixture
def mock_embedder() -> MockEmbeddingProvider:
    return MockEmbeddingProvider(dimensions=8)
