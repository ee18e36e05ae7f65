"""Retrieval fusion: fuzzy-match candidates gate a semantic vector search.

The query embedding is looked up in (or written to) the embedding cache,
then the vector store is searched for the nearest reviews. When name
matching produced candidate professor ids, the search is restricted to
their reviews; if that restricted search finds nothing, the same search is
repeated without the restriction.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, TypeVar

from prof_rag.cache.ttl import TTLCache
from prof_rag.config.schema import ProfRagConfig
from prof_rag.exceptions import EmbeddingServiceError, RetrievalError, VectorStoreError
from prof_rag.providers.base import EmbeddingProvider
from prof_rag.utils.logging import get_logger, log_with_context
from prof_rag.utils.retry import service_retry
from prof_rag.vectorstore.base import VectorMatch, VectorStore

logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_TOP_K = 5
DEFAULT_FILTER_FIELD = "professor_id"
SNIPPET_CHARS = 300

NO_RESULTS_NOTICE = (
    "No matching professor reviews were found in the knowledge base. "
    "Tell the user that no reviews are available for this request "
    "instead of guessing or inventing professors."
)


def _snippet(text: str, limit: int = SNIPPET_CHARS) -> str:
    text = " ".join(text.split())
    if len(text) <= limit:
        return text
    return text[:limit].rsplit(" ", 1)[0] + "..."


@dataclass
class ContextRecord:
    """One review presented to the language model."""

    id: str
    professor: str
    subject: str
    department: str
    rating: float | None
    review: str
    score: float

    @classmethod
    def from_match(cls, match: VectorMatch) -> "ContextRecord":
        """Build a record from vector metadata.

        Review vectors carry ``professor``, ``subject``, ``stars`` and
        ``review``; older ones use ``professorName`` and ``rating``.
        """
        md = match.metadata
        rating = md.get("stars", md.get("rating"))
        try:
            rating = float(rating) if rating is not None else None
        except (TypeError, ValueError):
            rating = None
        return cls(
            id=match.id,
            professor=str(md.get("professor") or md.get("professorName") or md.get("name") or ""),
            subject=str(md.get("subject") or ""),
            department=str(md.get("department") or ""),
            rating=rating,
            review=_snippet(str(md.get("review") or md.get("reviewText") or "")),
            score=match.score,
        )

    def to_prompt(self) -> str:
        lines = [f"Professor: {self.professor or 'Unknown'}"]
        if self.subject:
            lines.append(f"Subject: {self.subject}")
        if self.department:
            lines.append(f"Department: {self.department}")
        if self.rating is not None:
            lines.append(f"Rating: {self.rating:g}/5")
        if self.review:
            lines.append(f"Review: {self.review}")
        return "\n".join(lines)


@dataclass
class RetrievalContext:
    """Ranked reviews for prompt assembly.

    Attributes:
        records: Reviews, most similar first.
        filtered: The returned records were restricted to candidate ids.
        fell_back: The restricted search was empty and the unrestricted
            search produced ``records``.
    """

    records: list[ContextRecord] = field(default_factory=list)
    filtered: bool = False
    fell_back: bool = False

    @property
    def is_empty(self) -> bool:
        """No reviews were found; the caller must say so honestly."""
        return not self.records

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):  # type: ignore[no-untyped-def]
        return iter(self.records)

    def to_prompt(self) -> str:
        """Render the records as context for the chat prompt."""
        if self.is_empty:
            return NO_RESULTS_NOTICE
        return "\n\n".join(record.to_prompt() for record in self.records)


class Retriever:
    """Embeds queries and runs the filtered/unfiltered vector search."""

    def __init__(
        self,
        embedder: EmbeddingProvider,
        vector_store: VectorStore,
        embedding_cache: TTLCache[str, list[float]],
        top_k: int = DEFAULT_TOP_K,
        filter_field: str = DEFAULT_FILTER_FIELD,
        embedding_timeout: float = 10.0,
        vector_store_timeout: float = 10.0,
        max_retries: int = 2,
        base_delay: float = 0.5,
    ) -> None:
        """Initialize the retriever.

        Args:
            embedder: Embedding service.
            vector_store: Review vector store.
            embedding_cache: Cache of query text -> embedding.
            top_k: Number of reviews to return.
            filter_field: Metadata field holding the professor id.
            embedding_timeout: Per-call timeout for the embedding service.
            vector_store_timeout: Per-call timeout for the vector store.
            max_retries: Extra attempts for transient failures.
            base_delay: Linear backoff unit in seconds.
        """
        self.embedder = embedder
        self.vector_store = vector_store
        self.embedding_cache = embedding_cache
        self.top_k = top_k
        self.filter_field = filter_field
        self.embedding_timeout = embedding_timeout
        self.vector_store_timeout = vector_store_timeout
        self.max_retries = max_retries
        self.base_delay = base_delay

    @classmethod
    def from_config(
        cls,
        config: ProfRagConfig,
        embedder: EmbeddingProvider,
        vector_store: VectorStore,
        embedding_cache: TTLCache[str, list[float]],
    ) -> "Retriever":
        return cls(
            embedder=embedder,
            vector_store=vector_store,
            embedding_cache=embedding_cache,
            top_k=config.vector_store.top_k,
            filter_field=config.vector_store.filter_field,
            embedding_timeout=config.embedding.timeout,
            vector_store_timeout=config.vector_store.timeout,
            max_retries=config.retry.max_retries,
            base_delay=config.retry.base_delay,
        )

    async def _call(
        self,
        operation: str,
        func: Callable[[], Awaitable[T]],
        timeout: float,
        error_type: type[RetrievalError],
    ) -> T:
        """Run one external call with a timeout and the retry policy."""
        try:
            async for attempt in service_retry(
                max_retries=self.max_retries,
                base_delay=self.base_delay,
                operation=operation,
            ):
                with attempt:
                    result = await asyncio.wait_for(func(), timeout)
        except Exception as e:
            log_with_context(
                logger, logging.ERROR, f"{operation} failed", error=repr(e)
            )
            raise error_type(f"{operation} failed: {e}") from e
        return result

    async def embed_query(self, text: str) -> list[float]:
        """Return the embedding of ``text``, from cache when possible.

        Raises:
            EmbeddingServiceError: If the service keeps failing.
        """
        cached = self.embedding_cache.get(text)
        if cached is not None:
            return cached

        vector = await self._call(
            "Query embedding",
            lambda: self.embedder.aembed_query(text),
            self.embedding_timeout,
            EmbeddingServiceError,
        )
        if not vector:
            raise EmbeddingServiceError("Embedding service returned an empty vector")

        self.embedding_cache.set(text, vector)
        return vector

    async def _search(
        self, vector: list[float], filter: dict[str, Any] | None
    ) -> list[VectorMatch]:
        result = await self._call(
            "Vector search",
            lambda: self.vector_store.query(
                vector=vector,
                top_k=self.top_k,
                include_metadata=True,
                filter=filter,
            ),
            self.vector_store_timeout,
            VectorStoreError,
        )
        seen: set[str] = set()
        matches = []
        for match in result.matches:
            if match.id not in seen:
                seen.add(match.id)
                matches.append(match)
        return matches

    async def retrieve(
        self,
        query: str,
        candidate_ids: Iterable[str] | None = None,
        embedding: list[float] | None = None,
    ) -> RetrievalContext:
        """Find the reviews most relevant to ``query``.

        Args:
            query: The raw user message.
            candidate_ids: Professor ids from name matching; empty means
                no restriction.
            embedding: Precomputed query embedding, if already available.

        Returns:
            The retrieval context; ``is_empty`` when nothing was found.

        Raises:
            EmbeddingServiceError: If the query cannot be embedded.
            VectorStoreError: If the vector store keeps failing.
        """
        vector = embedding if embedding is not None else await self.embed_query(query)

        ids = list(dict.fromkeys(candidate_ids or ()))
        filter = {self.filter_field: {"$in": ids}} if ids else None

        matches = await self._search(vector, filter)
        filtered = filter is not None
        fell_back = False

        if not matches and filter is not None:
            log_with_context(
                logger,
                logging.INFO,
                "No reviews for matched professors, searching all reviews",
                candidates=len(ids),
            )
            matches = await self._search(vector, None)
            filtered = False
            fell_back = True

        if not matches:
            logger.info("Vector search returned no reviews")

        return RetrievalContext(
            records=[ContextRecord.from_match(m) for m in matches],
            filtered=filtered,
            fell_back=fell_back,
        )
