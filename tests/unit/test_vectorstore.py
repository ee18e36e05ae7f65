"""Tests for vector store implementations."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from prof_rag.exceptions import (
    ProviderAuthError,
    ProviderError,
    ProviderNotAvailableError,
    ProviderRateLimitError,
    ProviderTimeoutError,
)
from prof_rag.vectorstore import (
    InMemoryVectorStore,
    PineconeVectorStore,
    cosine_similarity,
    matches_filter,
    open_index,
)


@pytest.fixture
def store() -> InMemoryVectorStore:
    return InMemoryVectorStore(
        [
            {"id": "r1", "values": [1.0, 0.0], "metadata": {"professor_id": "p1"}},
            {"id": "r2", "values": [0.7, 0.7], "metadata": {"professor_id": "p2"}},
            {"id": "r3", "values": [0.0, 1.0], "metadata": {"professor_id": "p3"}},
        ]
    )


class TestCosineSimilarity:
    """Tests for cosine_similarity()."""

    def test_identical(self) -> None:
        assert cosine_similarity([1.0, 2.0], [1.0, 2.0]) == pytest.approx(1.0)

    def test_orthogonal(self) -> None:
        assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == 0.0

    @pytest.mark.parametrize(
        ("a", "b"), [([], [1.0]), ([1.0], [1.0, 2.0]), ([0.0, 0.0], [1.0, 1.0])]
    )
    def test_degenerate_vectors(self, a: list[float], b: list[float]) -> None:
        assert cosine_similarity(a, b) == 0.0


class TestMatchesFilter:
    """Tests for the metadata filter evaluator."""

    def test_in(self) -> None:
        assert matches_filter("r1", {"professor_id": "p1"}, {"professor_id": {"$in": ["p1"]}})
        assert not matches_filter("r1", {"professor_id": "p1"}, {"professor_id": {"$in": ["p2"]}})

    def test_equality_forms(self) -> None:
        metadata = {"subject": "Statistics"}
        assert matches_filter("r1", metadata, {"subject": "Statistics"})
        assert matches_filter("r1", metadata, {"subject": {"$eq": "Statistics"}})
        assert matches_filter("r1", metadata, {"subject": {"$ne": "Physics"}})
        assert matches_filter("r1", metadata, {"subject": {"$nin": ["Physics"]}})

    def test_id_pseudo_field(self) -> None:
        assert matches_filter("r1", {}, {"id": {"$in": ["r1"]}})
        assert not matches_filter("r2", {}, {"id": {"$in": ["r1"]}})

    def test_and(self) -> None:
        metadata = {"professor_id": "p1", "subject": "Statistics"}
        flt = {"$and": [{"professor_id": "p1"}, {"subject": {"$in": ["Statistics"]}}]}
        assert matches_filter("r1", metadata, flt)

    def test_unknown_operator(self) -> None:
        with pytest.raises(ValueError):
            matches_filter("r1", {"x": 1}, {"x": {"$gt": 0}})


class TestInMemoryVectorStore:
    """Tests for InMemoryVectorStore."""

    @pytest.mark.asyncio
    async def test_ranks_by_similarity(self, store: InMemoryVectorStore) -> None:
        result = await store.query([1.0, 0.1], top_k=2)

        assert [m.id for m in result.matches] == ["r1", "r2"]
        assert result.matches[0].metadata == {"professor_id": "p1"}

    @pytest.mark.asyncio
    async def test_filter(self, store: InMemoryVectorStore) -> None:
        result = await store.query(
            [1.0, 0.0], top_k=5, filter={"professor_id": {"$in": ["p2", "p3"]}}
        )
        assert [m.id for m in result.matches] == ["r2", "r3"]

    @pytest.mark.asyncio
    async def test_filter_without_matches(self, store: InMemoryVectorStore) -> None:
        result = await store.query([1.0, 0.0], top_k=5, filter={"professor_id": {"$in": ["p9"]}})
        assert result.matches == []

    @pytest.mark.asyncio
    async def test_without_metadata(self, store: InMemoryVectorStore) -> None:
        result = await store.query([1.0, 0.0], top_k=1, include_metadata=False)
        assert result.matches[0].metadata == {}

    @pytest.mark.asyncio
    async def test_records_queries(self, store: InMemoryVectorStore) -> None:
        await store.query([1.0, 0.0], top_k=3, filter={"professor_id": "p1"})
        assert store.queries == [{"top_k": 3, "filter": {"professor_id": "p1"}}]

    def test_upsert_and_delete(self, store: InMemoryVectorStore) -> None:
        assert store.upsert([{"id": "r1", "values": [0.5, 0.5]}]) == 1
        assert len(store) == 3

        store.delete(["r1", "missing"])
        assert len(store) == 2


class TestPineconeVectorStore:
    """Tests for PineconeVectorStore with a fake index."""

    @pytest.mark.asyncio
    async def test_query(self) -> None:
        index = MagicMock()
        index.query.return_value = SimpleNamespace(
            matches=[SimpleNamespace(id="r1", score=0.91, metadata={"professor": "Anna Schmidt"})]
        )
        store = PineconeVectorStore(index, namespace="reviews")

        result = await store.query(
            [0.1, 0.2], top_k=5, filter={"professor_id": {"$in": ["p2"]}}
        )

        assert result.matches[0].id == "r1"
        assert result.matches[0].score == 0.91
        assert result.matches[0].metadata == {"professor": "Anna Schmidt"}
        index.query.assert_called_once_with(
            vector=[0.1, 0.2],
            top_k=5,
            include_metadata=True,
            filter={"professor_id": {"$in": ["p2"]}},
            namespace="reviews",
        )

    @pytest.mark.asyncio
    async def test_query_without_filter_or_namespace(self) -> None:
        index = MagicMock()
        index.query.return_value = SimpleNamespace(matches=None)
        store = PineconeVectorStore(index)

        result = await store.query([0.1], top_k=3)

        assert result.matches == []
        index.query.assert_called_once_with(vector=[0.1], top_k=3, include_metadata=True)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (SimpleNamespace(status=401), ProviderAuthError),
            (SimpleNamespace(status=429), ProviderRateLimitError),
            (SimpleNamespace(status=503), ProviderNotAvailableError),
            (SimpleNamespace(message="read timed out"), ProviderTimeoutError),
            (SimpleNamespace(message="bad request"), ProviderError),
        ],
    )
    async def test_error_mapping(
        self, error: SimpleNamespace, expected: type[ProviderError]
    ) -> None:
        exc = RuntimeError(getattr(error, "message", "pinecone failure"))
        if hasattr(error, "status"):
            exc.status = error.status  # type: ignore[attr-defined]
        index = MagicMock()
        index.query.side_effect = exc

        with pytest.raises(expected):
            await PineconeVectorStore(index).query([0.1], top_k=1)

    def test_open_index_requires_key(self) -> None:
        with pytest.raises(ProviderAuthError):
            open_index(None, "rag")
