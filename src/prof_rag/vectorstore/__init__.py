"""Vector stores holding review embeddings."""

from prof_rag.vectorstore.base import QueryResult, VectorMatch, VectorStore
from prof_rag.vectorstore.memory import InMemoryVectorStore, cosine_similarity, matches_filter
from prof_rag.vectorstore.pinecone import PineconeVectorStore, open_index

__all__ = [
    "InMemoryVectorStore",
    "PineconeVectorStore",
    "QueryResult",
    "VectorMatch",
    "VectorStore",
    "cosine_similarity",
    "matches_filter",
    "open_index",
]
