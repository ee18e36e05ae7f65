"""Pinecone vector store adapter."""

import asyncio
import os
from typing import Any

from prof_rag.exceptions import (
    ProviderAuthError,
    ProviderError,
    ProviderNotAvailableError,
    ProviderRateLimitError,
    ProviderTimeoutError,
)
from prof_rag.vectorstore.base import QueryResult, VectorMatch, VectorStore


def open_index(api_key: str | None, index_name: str) -> Any:
    """Open a Pinecone index handle.

    Requires the pinecone extra:
        pip install prof-rag[pinecone]
    """
    api_key = api_key or os.environ.get("PINECONE_API_KEY")
    if not api_key:
        raise ProviderAuthError(
            "Pinecone API key not provided. "
            "Set PINECONE_API_KEY environment variable or pass api_key parameter."
        )
    try:
        from pinecone import Pinecone
    except ImportError as e:
        raise ProviderError(
            "pinecone not installed. Install with: pip install prof-rag[pinecone]"
        ) from e
    return Pinecone(api_key=api_key).Index(index_name)


class PineconeVectorStore(VectorStore):
    """Queries a Pinecone index of review embeddings.

    The Pinecone client is synchronous; queries run in a worker thread so
    they do not block the event loop.
    """

    def __init__(self, index: Any, namespace: str | None = None) -> None:
        """Initialize the store.

        Args:
            index: A ``pinecone`` Index handle (see ``open_index``).
            namespace: Namespace holding the review vectors.
        """
        self._index = index
        self.namespace = namespace

    @classmethod
    def connect(
        cls,
        index_name: str = "rag",
        api_key: str | None = None,
        namespace: str | None = None,
    ) -> "PineconeVectorStore":
        """Open ``index_name`` and wrap it."""
        return cls(open_index(api_key, index_name), namespace=namespace)

    @property
    def index(self) -> Any:
        return self._index

    def _handle_error(self, e: Exception) -> None:
        """Convert Pinecone client exceptions to provider errors."""
        error_str = str(e).lower()
        status = getattr(e, "status", None)

        if status == 401 or "unauthorized" in error_str or "api key" in error_str:
            raise ProviderAuthError("Pinecone authentication failed. Check your API key.") from e

        if status == 429 or "rate limit" in error_str or "too many requests" in error_str:
            raise ProviderRateLimitError("Pinecone rate limit exceeded.") from e

        if "timeout" in error_str or "timed out" in error_str:
            raise ProviderTimeoutError("Pinecone query timed out") from e

        if status in (500, 502, 503, 504) or "connection" in error_str:
            raise ProviderNotAvailableError(f"Pinecone is not reachable: {e}") from e

        raise ProviderError(f"Pinecone error: {e}") from e

    def _query_sync(
        self,
        vector: list[float],
        top_k: int,
        include_metadata: bool,
        filter: dict[str, Any] | None,
    ) -> QueryResult:
        kwargs: dict[str, Any] = {
            "vector": vector,
            "top_k": top_k,
            "include_metadata": include_metadata,
        }
        if filter:
            kwargs["filter"] = filter
        if self.namespace:
            kwargs["namespace"] = self.namespace

        response = self._index.query(**kwargs)
        return QueryResult(
            matches=[
                VectorMatch(
                    id=match.id,
                    score=float(match.score or 0.0),
                    metadata=dict(match.metadata or {}),
                )
                for match in (response.matches or [])
            ]
        )

    async def query(
        self,
        vector: list[float],
        top_k: int,
        include_metadata: bool = True,
        filter: dict[str, Any] | None = None,
    ) -> QueryResult:
        try:
            return await asyncio.to_thread(
                self._query_sync, vector, top_k, include_metadata, filter
            )
        except Exception as e:
            self._handle_error(e)
            raise
