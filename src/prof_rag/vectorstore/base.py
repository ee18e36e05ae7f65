"""Vector store interface and result types."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class VectorMatch:
    """One nearest-neighbor match."""

    id: str
    score: float
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class QueryResult:
    """Matches returned by a vector store query, best first."""

    matches: list[VectorMatch] = field(default_factory=list)


class VectorStore(ABC):
    """Nearest-neighbor search over review embeddings.

    Filters use the Pinecone metadata filter language, e.g.
    ``{"professor_id": {"$in": ["p1", "p2"]}}``.
    """

    @abstractmethod
    async def query(
        self,
        vector: list[float],
        top_k: int,
        include_metadata: bool = True,
        filter: dict[str, Any] | None = None,
    ) -> QueryResult:
        """Return the ``top_k`` nearest neighbors of ``vector``.

        Raises:
            ProviderError: If the store cannot be queried.
        """
        ...
