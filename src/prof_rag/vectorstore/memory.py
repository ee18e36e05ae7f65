"""In-memory vector store using cosine similarity."""

import math
from collections.abc import Iterable
from typing import Any

from prof_rag.vectorstore.base import QueryResult, VectorMatch, VectorStore


def cosine_similarity(vec1: list[float], vec2: list[float]) -> float:
    """Cosine similarity of two vectors, 0.0 for empty or mismatched ones."""
    if not vec1 or not vec2 or len(vec1) != len(vec2):
        return 0.0

    dot_product = sum(a * b for a, b in zip(vec1, vec2, strict=True))
    norm1 = math.sqrt(sum(a * a for a in vec1))
    norm2 = math.sqrt(sum(b * b for b in vec2))

    if norm1 == 0 or norm2 == 0:
        return 0.0

    return dot_product / (norm1 * norm2)


def _matches_condition(value: Any, condition: Any) -> bool:
    if isinstance(condition, dict):
        for operator, operand in condition.items():
            if operator == "$in":
                if value not in operand:
                    return False
            elif operator == "$nin":
                if value in operand:
                    return False
            elif operator == "$eq":
                if value != operand:
                    return False
            elif operator == "$ne":
                if value == operand:
                    return False
            else:
                raise ValueError(f"Unsupported filter operator: {operator}")
        return True
    return value == condition


def matches_filter(vector_id: str, metadata: dict[str, Any], filter: dict[str, Any]) -> bool:
    """Evaluate a Pinecone-style metadata filter.

    Supports ``$in``, ``$nin``, ``$eq``, ``$ne``, bare equality and
    ``$and``. The pseudo-field ``id`` refers to the vector id unless the
    metadata has its own ``id``.
    """
    for key, condition in filter.items():
        if key == "$and":
            if not all(matches_filter(vector_id, metadata, sub) for sub in condition):
                return False
            continue
        value = metadata.get(key, vector_id if key == "id" else None)
        if not _matches_condition(value, condition):
            return False
    return True


class InMemoryVectorStore(VectorStore):
    """Brute-force vector store for tests, demos and small datasets."""

    def __init__(self, vectors: Iterable[dict[str, Any]] | None = None) -> None:
        """Initialize the store.

        Args:
            vectors: Records shaped like Pinecone upserts:
                ``{"id": ..., "values": [...], "metadata": {...}}``.
        """
        self._vectors: dict[str, dict[str, Any]] = {}
        self.queries: list[dict[str, Any]] = []
        if vectors:
            self.upsert(vectors)

    def upsert(self, vectors: Iterable[dict[str, Any]]) -> int:
        """Insert or replace vectors, returning how many were written."""
        count = 0
        for vector in vectors:
            self._vectors[str(vector["id"])] = {
                "values": list(vector["values"]),
                "metadata": dict(vector.get("metadata") or {}),
            }
            count += 1
        return count

    def delete(self, ids: Iterable[str]) -> None:
        for vector_id in ids:
            self._vectors.pop(vector_id, None)

    def __len__(self) -> int:
        return len(self._vectors)

    async def query(
        self,
        vector: list[float],
        top_k: int,
        include_metadata: bool = True,
        filter: dict[str, Any] | None = None,
    ) -> QueryResult:
        self.queries.append({"top_k": top_k, "filter": filter})

        matches = []
        for vector_id, stored in self._vectors.items():
            metadata = stored["metadata"]
            if filter and not matches_filter(vector_id, metadata, filter):
                continue
            matches.append(
                VectorMatch(
                    id=vector_id,
                    score=cosine_similarity(vector, stored["values"]),
                    metadata=dict(metadata) if include_metadata else {},
                )
            )

        matches.sort(key=lambda m: m.score, reverse=True)
        return QueryResult(matches=matches[:top_k])
