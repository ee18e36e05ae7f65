"""Directory sources: where the raw professor list comes from."""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from prof_rag.directory.types import DirectoryPage
from prof_rag.exceptions import DirectorySourceError
from prof_rag.utils.logging import get_logger

logger = get_logger(__name__)


class DirectorySource(ABC):
    """A paginated supplier of raw professor entries."""

    @abstractmethod
    async def fetch_page(self, token: str | None = None) -> DirectoryPage:
        """Fetch one page.

        Args:
            token: Token from the previous page, None for the first page.

        Returns:
            The page and the token of the next one.

        Raises:
            DirectorySourceError: If the page cannot be fetched.
        """
        ...


class StaticDirectorySource(DirectorySource):
    """Serves an in-memory list of entries in fixed-size pages."""

    def __init__(self, entries: Sequence[dict[str, Any]], page_size: int = 100) -> None:
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self._entries = list(entries)
        self.page_size = page_size

    async def fetch_page(self, token: str | None = None) -> DirectoryPage:
        try:
            start = int(token) if token else 0
        except ValueError as e:
            raise DirectorySourceError(f"Invalid page token: {token!r}") from e

        end = start + self.page_size
        next_token = str(end) if end < len(self._entries) else None
        return DirectoryPage(entries=self._entries[start:end], next_token=next_token)


class PineconeDirectorySource(DirectorySource):
    """Lists professor vectors from a Pinecone namespace.

    Each vector is expected to carry ``name``, ``department`` and
    ``subject`` metadata. Listing returns ids only, so every page is
    followed by a ``fetch`` for the metadata.
    """

    def __init__(self, index: Any, namespace: str | None = None, page_size: int = 100) -> None:
        """Initialize the source.

        Args:
            index: A ``pinecone`` Index handle.
            namespace: Namespace holding one vector per professor.
            page_size: Ids listed per page.
        """
        self._index = index
        self.namespace = namespace
        self.page_size = page_size

    def _fetch_page_sync(self, token: str | None) -> DirectoryPage:
        kwargs: dict[str, Any] = {"limit": self.page_size}
        if self.namespace:
            kwargs["namespace"] = self.namespace
        if token:
            kwargs["pagination_token"] = token

        listing = self._index.list_paginated(**kwargs)
        ids = [item.id for item in (listing.vectors or [])]
        pagination = getattr(listing, "pagination", None)
        next_token = getattr(pagination, "next", None) if pagination else None

        if not ids:
            return DirectoryPage(entries=[], next_token=next_token)

        fetch_kwargs: dict[str, Any] = {"ids": ids}
        if self.namespace:
            fetch_kwargs["namespace"] = self.namespace
        fetched = self._index.fetch(**fetch_kwargs)

        entries = []
        for vector_id in ids:
            vector = fetched.vectors.get(vector_id)
            if vector is None:
                continue
            entries.append({"id": vector_id, "metadata": dict(vector.metadata or {})})
        return DirectoryPage(entries=entries, next_token=next_token)

    async def fetch_page(self, token: str | None = None) -> DirectoryPage:
        try:
            return await asyncio.to_thread(self._fetch_page_sync, token)
        except Exception as e:
            raise DirectorySourceError(f"Pinecone directory listing failed: {e}") from e
