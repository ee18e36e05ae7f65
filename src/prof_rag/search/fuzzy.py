"""Fuzzy professor-name matching.

Search patterns are matched against the expanded directory with weighted,
multi-field edit-distance matching (rapidfuzz). Every pattern is run
against one index built per query; the best score seen for each canonical
professor id wins.

Scores are distances: 0.0 is a perfect match, 1.0 no similarity.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

from rapidfuzz import utils
from rapidfuzz.distance import Levenshtein

from prof_rag.config.schema import MatchingConfig
from prof_rag.directory.types import DirectoryRecord
from prof_rag.utils.logging import get_logger, log_with_context

logger = get_logger(__name__)

DEFAULT_THRESHOLD = 0.65

DEFAULT_FIELD_WEIGHTS: dict[str, float] = {
    "full_name": 2.0,
    "normalized_name": 2.0,
    "department": 0.5,
    "subject": 0.5,
}

# Stand-in for a zero distance so a perfect field still weighs in the product
_EPSILON = 1e-9

# Patterns this long may also match the start of a longer word
MIN_PREFIX_LENGTH = 4


def _process(value: object) -> str:
    """Lowercase, strip punctuation and collapse whitespace."""
    return " ".join(utils.default_process(str(value or "")).split())


class MatchMode(str, Enum):
    """How a pattern is compared with a field."""

    FUZZY = "fuzzy"
    EXACT = "exact"  # "=pattern"
    INCLUDE = "include"  # "'pattern"


@dataclass
class FuzzyHit:
    """One directory record matched by one pattern."""

    id: str
    score: float
    record: DirectoryRecord
    field: str


@dataclass
class MatchCandidate:
    """Best score seen for a canonical professor id across all patterns."""

    id: str
    score: float
    name: str


def parse_pattern(pattern: str) -> tuple[MatchMode, str]:
    """Split the extended-syntax prefix off a pattern.

    ``=text`` requires an exact field match, ``'text`` a substring match,
    anything else is matched fuzzily.
    """
    if pattern.startswith("="):
        return MatchMode.EXACT, pattern[1:]
    if pattern.startswith("'"):
        return MatchMode.INCLUDE, pattern[1:]
    return MatchMode.FUZZY, pattern


class FuzzyIndex(ABC):
    """A searchable, weighted index over directory records."""

    @abstractmethod
    def build(
        self,
        records: Sequence[DirectoryRecord],
        field_weights: Mapping[str, float],
    ) -> None:
        """Index ``records`` on the weighted fields.

        Args:
            records: Expanded directory records.
            field_weights: Record attribute name -> relative weight.
        """
        ...

    @abstractmethod
    def search(self, pattern: str) -> list[FuzzyHit]:
        """Return hits for ``pattern``, best (lowest score) first."""
        ...


class RapidFuzzIndex(FuzzyIndex):
    """FuzzyIndex scoring Levenshtein edits against word-aligned windows.

    A pattern of ``k`` words is compared with every run of ``k`` consecutive
    words in a field, so a name can sit anywhere in it. Patterns of at least
    ``MIN_PREFIX_LENGTH`` characters may also match the start of a window
    ("stats" finds "statistics"). The field distance is the fewest edits
    divided by the pattern length.

    The pattern's error budget comes from ``threshold``: each word tolerates
    ``threshold * (len(word) - 1) / 2`` edits, rounded down, so three- and
    four-letter words ("the", "who", "best") only match exactly. A record's
    score is the product of its matching fields' distances, each raised to
    the field's normalized weight.
    """

    def __init__(self, threshold: float = DEFAULT_THRESHOLD) -> None:
        """Initialize the index.

        Args:
            threshold: Error tolerance in [0, 1]. Higher values accept
                more edits per pattern word; 0 accepts exact words only.
        """
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be within [0, 1], got {threshold}")
        self.threshold = threshold
        self._entries: list[tuple[DirectoryRecord, list[tuple[str, str, list[str], float]]]] = []

    def build(
        self,
        records: Sequence[DirectoryRecord],
        field_weights: Mapping[str, float],
    ) -> None:
        total = sum(w for w in field_weights.values() if w > 0)
        if total <= 0:
            raise ValueError("at least one field weight must be positive")
        weights = {name: w / total for name, w in field_weights.items() if w > 0}

        self._entries = []
        for record in records:
            fields = []
            for name, weight in weights.items():
                words = _process(getattr(record, name, "")).split()
                if words:
                    fields.append((name, " ".join(words), words, weight))
            if fields:
                self._entries.append((record, fields))

    def error_budget(self, pattern: str) -> int:
        """Edits tolerated for a processed ``pattern``."""
        return sum(int(self.threshold * (len(word) - 1) / 2) for word in pattern.split())

    def _distance(
        self, mode: MatchMode, needle: str, budget: int, text: str, words: list[str]
    ) -> float | None:
        if mode is MatchMode.EXACT:
            return 0.0 if needle == text else None
        if mode is MatchMode.INCLUDE:
            return 0.0 if needle in text else None

        width = needle.count(" ") + 1
        if len(words) <= width:
            windows = [text]
        else:
            windows = [" ".join(words[i : i + width]) for i in range(len(words) - width + 1)]

        size = len(needle)
        edits = budget + 1
        for window in windows:
            edits = min(edits, Levenshtein.distance(needle, window, score_cutoff=budget))
            if size >= MIN_PREFIX_LENGTH and len(window) > size:
                edits = min(
                    edits, Levenshtein.distance(needle, window[:size], score_cutoff=budget)
                )
            if edits == 0:
                break
        if edits > budget:
            return None
        return edits / size

    def search(self, pattern: str) -> list[FuzzyHit]:
        mode, raw = parse_pattern(pattern)
        needle = _process(raw)
        if not needle:
            return []
        budget = self.error_budget(needle)

        hits: list[FuzzyHit] = []
        for record, fields in self._entries:
            score = 1.0
            best_field: str | None = None
            best_distance = 2.0
            for name, text, words, weight in fields:
                distance = self._distance(mode, needle, budget, text, words)
                if distance is None:
                    continue
                score *= max(distance, _EPSILON) ** weight
                if distance < best_distance:
                    best_field, best_distance = name, distance
            if best_field is not None:
                hits.append(FuzzyHit(id=record.id, score=score, record=record, field=best_field))

        hits.sort(key=lambda h: h.score)
        return hits


IndexFactory = Callable[[], FuzzyIndex]


class FuzzyMatcher:
    """Runs query patterns against the directory and merges the results."""

    def __init__(
        self,
        field_weights: Mapping[str, float] | None = None,
        threshold: float = DEFAULT_THRESHOLD,
        index_factory: IndexFactory | None = None,
    ) -> None:
        """Initialize the matcher.

        Args:
            field_weights: Record field -> weight. Defaults to full and
                normalized name 2, department and subject 0.5.
            threshold: Distance threshold for the default rapidfuzz index.
            index_factory: Builds an empty FuzzyIndex; overrides ``threshold``.
        """
        self.field_weights = dict(field_weights or DEFAULT_FIELD_WEIGHTS)
        self.threshold = threshold
        self.index_factory: IndexFactory = index_factory or (
            lambda: RapidFuzzIndex(threshold=self.threshold)
        )

    @classmethod
    def from_config(cls, config: MatchingConfig) -> "FuzzyMatcher":
        """Create a matcher from matching configuration."""
        return cls(field_weights=config.field_weights.as_dict(), threshold=config.threshold)

    def match_candidates(
        self,
        patterns: Iterable[str],
        directory: Sequence[DirectoryRecord],
    ) -> list[MatchCandidate]:
        """Match every pattern and keep the best score per canonical id.

        Never raises; an empty directory, a failing index or malformed
        patterns yield fewer (or no) candidates.

        Returns:
            Candidates in first-seen order.
        """
        if not directory:
            return []

        try:
            index = self.index_factory()
            index.build(directory, self.field_weights)
        except Exception as e:
            log_with_context(
                logger, logging.ERROR, "Could not build fuzzy index", error=repr(e)
            )
            return []

        # The first record emitted per id carries the original spelling
        names: dict[str, str] = {}
        for record in directory:
            names.setdefault(record.id, record.full_name)

        best: dict[str, MatchCandidate] = {}
        for pattern in dict.fromkeys(patterns):
            if not isinstance(pattern, str) or not pattern.strip():
                continue
            try:
                hits = index.search(pattern)
            except Exception as e:
                log_with_context(
                    logger,
                    logging.WARNING,
                    "Fuzzy search failed for pattern",
                    pattern=pattern,
                    error=repr(e),
                )
                continue

            for hit in hits:
                current = best.get(hit.id)
                if current is None or hit.score < current.score:
                    best[hit.id] = MatchCandidate(
                        id=hit.id,
                        score=hit.score,
                        name=names.get(hit.id, hit.record.full_name),
                    )

        logger.debug("Fuzzy matching produced %d candidates", len(best))
        return list(best.values())

    def match(
        self,
        patterns: Iterable[str],
        directory: Sequence[DirectoryRecord],
    ) -> list[str]:
        """Return the unique canonical ids hit by at least one pattern."""
        return [candidate.id for candidate in self.match_candidates(patterns, directory)]

    @staticmethod
    def suggestions(candidates: Iterable[MatchCandidate], limit: int = 5) -> list[str]:
        """Names of the best-scoring candidates, at most ``limit`` of them."""
        names: list[str] = []
        for candidate in sorted(candidates, key=lambda c: c.score):
            if len(names) >= limit:
                break
            if candidate.name not in names:
                names.append(candidate.name)
        return names
