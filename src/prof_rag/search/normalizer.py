"""Diacritic normalization for professor names and queries.

German and other Latin-script names are folded to ASCII at two fidelity
levels so that "Müller", "Mueller" and "Muller" can all be matched:

* normalized: multi-character transliteration (ä -> ae, ß -> ss)
* simplified: single base letter (ä -> a); ß keeps "ss"
"""

from typing import Any, NamedTuple

# Lowercase character -> (transliteration, base letter)
_DIACRITICS: dict[str, tuple[str, str]] = {
    "ä": ("ae", "a"),
    "ö": ("oe", "o"),
    "ü": ("ue", "u"),
    "ß": ("ss", "ss"),
    "à": ("a", "a"),
    "á": ("a", "a"),
    "â": ("a", "a"),
    "ã": ("a", "a"),
    "å": ("a", "a"),
    "æ": ("ae", "ae"),
    "ç": ("c", "c"),
    "è": ("e", "e"),
    "é": ("e", "e"),
    "ê": ("e", "e"),
    "ë": ("e", "e"),
    "ì": ("i", "i"),
    "í": ("i", "i"),
    "î": ("i", "i"),
    "ï": ("i", "i"),
    "ñ": ("n", "n"),
    "ò": ("o", "o"),
    "ó": ("o", "o"),
    "ô": ("o", "o"),
    "õ": ("o", "o"),
    "ø": ("o", "o"),
    "œ": ("oe", "oe"),
    "ù": ("u", "u"),
    "ú": ("u", "u"),
    "û": ("u", "u"),
    "ý": ("y", "y"),
    "ÿ": ("y", "y"),
}


def _build_tables() -> tuple[dict[int, str], dict[int, str]]:
    normalized: dict[int, str] = {}
    simplified: dict[int, str] = {}
    for char, (translit, base) in _DIACRITICS.items():
        normalized[ord(char)] = translit
        simplified[ord(char)] = base
        upper = char.upper()
        # "ß".upper() is "SS"; the capital sharp s is its own code point
        if len(upper) == 1 and upper != char:
            normalized[ord(upper)] = translit.capitalize()
            simplified[ord(upper)] = base.upper()
    normalized[ord("ẞ")] = "SS"
    simplified[ord("ẞ")] = "SS"
    return normalized, simplified


_NORMALIZE_TABLE, _SIMPLIFY_TABLE = _build_tables()


class NormalizedText(NamedTuple):
    """The three fidelity levels of one piece of text."""

    original: str
    normalized: str
    simplified: str


EMPTY = NormalizedText("", "", "")


def normalize(text: Any) -> NormalizedText:
    """Normalize text at all three fidelity levels.

    Args:
        text: Text to normalize. Non-string input is treated as empty.

    Returns:
        NormalizedText(original, normalized, simplified).
    """
    if not isinstance(text, str) or not text:
        return EMPTY
    return NormalizedText(
        original=text,
        normalized=text.translate(_NORMALIZE_TABLE),
        simplified=text.translate(_SIMPLIFY_TABLE),
    )


def variants(text: Any) -> list[str]:
    """Return the distinct fidelity levels of ``text``.

    The original is always included, the normalized form only when it
    differs from the original, and the simplified form only when it differs
    from both.
    """
    original, normalized, simplified = normalize(text)
    if not original:
        return []
    result = [original]
    if normalized != original:
        result.append(normalized)
    if simplified not in (original, normalized):
        result.append(simplified)
    return result


def fold(text: Any) -> str:
    """Lowercase, diacritic-free form used for insensitive comparisons."""
    return normalize(text).simplified.lower()
