"""Expansion of the raw professor directory into searchable name variants."""

import logging
from collections.abc import Iterable
from typing import Any

from prof_rag.cache.ttl import TTLCache
from prof_rag.directory.sources import DirectorySource
from prof_rag.directory.types import DirectoryRecord
from prof_rag.exceptions import DirectorySourceError
from prof_rag.search.normalizer import normalize, variants
from prof_rag.utils.logging import get_logger, log_with_context

logger = get_logger(__name__)

DIRECTORY_CACHE_KEY = "directory"

# A broken source must not loop forever on a repeating token
MAX_PAGES = 10_000


def _text_field(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v).strip() for v in value if str(v).strip())
    return str(value).strip()


def expand_entry(entry: dict[str, Any]) -> list[DirectoryRecord]:
    """Expand one raw entry into its distinct name-variant records.

    Returns an empty list when the entry has no usable name.
    """
    metadata = entry.get("metadata") or {}
    name = _text_field(metadata.get("name"))
    entry_id = entry.get("id")
    if not name or entry_id in (None, ""):
        return []

    _, normalized, simplified = normalize(name)
    department = _text_field(metadata.get("department"))
    subject = _text_field(metadata.get("subject") or metadata.get("subjects"))
    return [
        DirectoryRecord(
            id=str(entry_id),
            full_name=full_name,
            normalized_name=normalized,
            simplified_name=simplified,
            department=department,
            subject=subject,
        )
        for full_name in variants(name)
    ]


def expand_entries(entries: Iterable[dict[str, Any]]) -> list[DirectoryRecord]:
    """Expand raw directory entries, skipping (and logging) nameless ones."""
    records: list[DirectoryRecord] = []
    skipped = 0
    for entry in entries:
        expanded = expand_entry(entry) if isinstance(entry, dict) else []
        if not expanded:
            skipped += 1
            entry_id = entry.get("id") if isinstance(entry, dict) else None
            log_with_context(
                logger, logging.WARNING, "Skipping directory entry without a name", id=entry_id
            )
            continue
        records.extend(expanded)

    if skipped:
        logger.info("Skipped %d directory entries without a name", skipped)
    return records


class DirectoryExpander:
    """Loads the professor directory and caches its expanded form.

    The directory is a single global list, so it lives under one constant
    key. Pages are drained completely before anything is cached; a failed
    fetch returns an empty directory and leaves the cache untouched so the
    next request tries again.
    """

    def __init__(
        self,
        source: DirectorySource,
        cache: TTLCache[str, list[DirectoryRecord]],
        cache_key: str = DIRECTORY_CACHE_KEY,
    ) -> None:
        """Initialize the expander.

        Args:
            source: Paginated raw directory source.
            cache: Directory cache (recommended TTL: one hour).
            cache_key: Key of the directory within the cache.
        """
        self.source = source
        self.cache = cache
        self.cache_key = cache_key

    async def _fetch_all(self) -> list[dict[str, Any]]:
        entries: list[dict[str, Any]] = []
        token: str | None = None
        seen_tokens: set[str] = set()

        for _ in range(MAX_PAGES):
            page = await self.source.fetch_page(token)
            entries.extend(page.entries)
            token = page.next_token
            if not token:
                return entries
            if token in seen_tokens:
                raise DirectorySourceError(f"Directory source repeated page token {token!r}")
            seen_tokens.add(token)

        raise DirectorySourceError(f"Directory source exceeded {MAX_PAGES} pages")

    async def expand(self) -> list[DirectoryRecord]:
        """Return the expanded directory, fetching it on a cache miss.

        Never raises: any source failure degrades to an empty list.
        """
        cached = self.cache.get(self.cache_key)
        if cached is not None:
            return cached

        try:
            entries = await self._fetch_all()
        except Exception as e:
            log_with_context(
                logger,
                logging.ERROR,
                "Professor directory unavailable, continuing without name matching",
                error=repr(e),
            )
            return []

        records = expand_entries(entries)
        self.cache.set(self.cache_key, records)
        log_with_context(
            logger,
            logging.INFO,
            "Professor directory loaded",
            entries=len(entries),
            records=len(records),
        )
        return records
