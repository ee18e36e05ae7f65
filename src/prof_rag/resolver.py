"""End-to-end professor resolution for one user query.

Loading the directory and embedding the query are independent, so they
run concurrently. Fuzzy matching needs the directory and must finish before
the filtered vector search, which reuses the embedding computed up front.
"""

import asyncio
import logging
from dataclasses import dataclass, field

from prof_rag.cache import create_caches
from prof_rag.config import ProfRagConfig, get_config
from prof_rag.config.schema import MatchingConfig, VectorStoreType
from prof_rag.exceptions import ProfRagError
from prof_rag.directory import (
    DirectoryExpander,
    DirectorySource,
    PineconeDirectorySource,
    StaticDirectorySource,
    faculty_entries,
)
from prof_rag.providers import EmbeddingProvider, ProviderRegistry
from prof_rag.search.fuzzy import FuzzyMatcher, MatchCandidate
from prof_rag.search.patterns import generate_patterns
from prof_rag.search.retrieval import RetrievalContext, Retriever
from prof_rag.utils.logging import get_logger, log_with_context
from prof_rag.vectorstore import InMemoryVectorStore, PineconeVectorStore, VectorStore, open_index

logger = get_logger(__name__)


@dataclass
class ResolutionResult:
    """Everything the chat layer needs to answer one query."""

    query: str
    patterns: list[str] = field(default_factory=list)
    candidates: list[MatchCandidate] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
    context: RetrievalContext = field(default_factory=RetrievalContext)

    @property
    def candidate_ids(self) -> list[str]:
        return [candidate.id for candidate in self.candidates]


class ProfessorResolver:
    """Resolves professor mentions in a query and retrieves their reviews."""

    def __init__(
        self,
        expander: DirectoryExpander,
        matcher: FuzzyMatcher,
        retriever: Retriever,
        matching_config: MatchingConfig | None = None,
    ) -> None:
        self.expander = expander
        self.matcher = matcher
        self.retriever = retriever
        self.matching_config = matching_config or MatchingConfig()

    async def resolve(self, query: str) -> ResolutionResult:
        """Run the full pipeline for ``query``.

        A blank query short-circuits to an empty result without touching
        any external service.

        Raises:
            EmbeddingServiceError: If the query cannot be embedded.
            VectorStoreError: If the vector store keeps failing.
        """
        if not isinstance(query, str) or not query.strip():
            return ResolutionResult(query=query if isinstance(query, str) else "")

        try:
            async with asyncio.TaskGroup() as group:
                directory_task = group.create_task(self.expander.expand())
                embedding_task = group.create_task(self.retriever.embed_query(query))
        except* ProfRagError as errors:
            # The sibling task is cancelled; surface the service error itself
            raise errors.exceptions[0] from None
        directory = directory_task.result()
        embedding = embedding_task.result()

        patterns = generate_patterns(
            query,
            honorifics=self.matching_config.honorifics,
            min_word_length=self.matching_config.min_word_length,
        )
        candidates = sorted(
            self.matcher.match_candidates(patterns, directory),
            key=lambda c: c.score,
        )
        candidate_ids = [c.id for c in candidates]

        context = await self.retriever.retrieve(query, candidate_ids, embedding=embedding)
        suggestions = self.matcher.suggestions(
            candidates, limit=self.matching_config.max_suggestions
        )

        log_with_context(
            logger,
            logging.DEBUG,
            "Resolved query",
            patterns=len(patterns),
            candidates=len(candidates),
            records=len(context),
            fell_back=context.fell_back,
        )
        return ResolutionResult(
            query=query,
            patterns=patterns,
            candidates=candidates,
            suggestions=suggestions,
            context=context,
        )


def create_embedder(config: ProfRagConfig) -> EmbeddingProvider:
    """Create the configured embedding provider."""
    return ProviderRegistry.from_config(config.embedding)


def create_vector_store(config: ProfRagConfig) -> VectorStore:
    """Create the configured vector store."""
    store = config.vector_store
    if store.backend == VectorStoreType.MEMORY:
        return InMemoryVectorStore()
    return PineconeVectorStore.connect(
        index_name=store.index_name,
        api_key=store.api_key,
        namespace=store.namespace,
    )


def create_directory_source(config: ProfRagConfig) -> DirectorySource:
    """Pinecone listing when a directory namespace is set, else the seed faculty list."""
    directory = config.directory
    if directory.namespace and config.vector_store.backend == VectorStoreType.PINECONE:
        index = open_index(config.vector_store.api_key, config.vector_store.index_name)
        return PineconeDirectorySource(
            index, namespace=directory.namespace, page_size=directory.page_size
        )
    return StaticDirectorySource(faculty_entries(), page_size=directory.page_size)


def build_resolver(
    config: ProfRagConfig | None = None,
    directory_source: DirectorySource | None = None,
    embedder: EmbeddingProvider | None = None,
    vector_store: VectorStore | None = None,
) -> ProfessorResolver:
    """Wire a resolver from configuration.

    Any of the external collaborators may be passed in explicitly; the rest
    are created from ``config`` (the global configuration by default).
    Each call creates fresh directory and embedding caches.
    """
    config = config if config is not None else get_config()
    caches = create_caches(config.cache)

    expander = DirectoryExpander(
        directory_source if directory_source is not None else create_directory_source(config),
        caches.directory,
    )
    retriever = Retriever.from_config(
        config,
        embedder=embedder if embedder is not None else create_embedder(config),
        vector_store=vector_store if vector_store is not None else create_vector_store(config),
        embedding_cache=caches.embeddings,
    )
    return ProfessorResolver(
        expander=expander,
        matcher=FuzzyMatcher.from_config(config.matching),
        retriever=retriever,
        matching_config=config.matching,
    )
