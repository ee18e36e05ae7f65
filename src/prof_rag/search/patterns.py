"""Search pattern generation for free-text professor queries.

A query such as "wie ist Prof. Dr. Schönwälder in networks" is expanded into
patterns at several granularities (whole query, single words, adjacent word
pairs), each at every diacritic fidelity level. This lets a permissive fuzzy
matcher find a professor from a partial name or a name typed without
umlauts.
"""

import re
from collections.abc import Iterable, Sequence
from functools import lru_cache
from typing import Any

from prof_rag.config.schema import DEFAULT_HONORIFICS
from prof_rag.search.normalizer import variants

DEFAULT_MIN_WORD_LENGTH = 3


@lru_cache(maxsize=16)
def _honorific_pattern(honorifics: tuple[str, ...]) -> re.Pattern[str] | None:
    words = sorted({h.lower().rstrip(".") for h in honorifics if h}, key=len, reverse=True)
    if not words:
        return None
    alternation = "|".join(re.escape(w) for w in words)
    return re.compile(rf"\b(?:{alternation})\b\.?", re.IGNORECASE)


def strip_honorifics(text: str, honorifics: Iterable[str] = DEFAULT_HONORIFICS) -> str:
    """Remove titles such as "Prof." or "Frau" anywhere in the text.

    Whitespace left behind is collapsed and trimmed.
    """
    pattern = _honorific_pattern(tuple(honorifics))
    if pattern is not None:
        text = pattern.sub(" ", text)
    return " ".join(text.split())


def generate_patterns(
    raw_query: Any,
    honorifics: Sequence[str] = DEFAULT_HONORIFICS,
    min_word_length: int = DEFAULT_MIN_WORD_LENGTH,
) -> list[str]:
    """Expand a user query into de-duplicated fuzzy search patterns.

    Args:
        raw_query: The user's message. Non-string input yields no patterns.
        honorifics: Titles to strip before matching.
        min_word_length: Shortest single word used as its own pattern.

    Returns:
        Patterns in first-seen order. Empty, or honorific-only, queries
        return an empty list.
    """
    if not isinstance(raw_query, str):
        return []

    stripped = strip_honorifics(raw_query, honorifics)
    if not stripped:
        return []

    patterns: list[str] = []
    patterns.extend(variants(stripped))

    words = stripped.lower().split()
    for word in words:
        if len(word) >= min_word_length:
            patterns.extend(variants(word))

    for first, second in zip(words, words[1:]):
        patterns.extend(variants(f"{first} {second}"))

    return list(dict.fromkeys(patterns))
