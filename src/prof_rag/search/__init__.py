"""Name normalization, fuzzy matching and retrieval fusion."""

from prof_rag.search.normalizer import EMPTY, NormalizedText, fold, normalize, variants
from prof_rag.search.patterns import (
    DEFAULT_MIN_WORD_LENGTH,
    generate_patterns,
    strip_honorifics,
)
from prof_rag.search.fuzzy import (
    DEFAULT_FIELD_WEIGHTS,
    DEFAULT_THRESHOLD,
    FuzzyHit,
    FuzzyIndex,
    FuzzyMatcher,
    MatchCandidate,
    MatchMode,
    RapidFuzzIndex,
    parse_pattern,
)
from prof_rag.search.retrieval import (
    NO_RESULTS_NOTICE,
    ContextRecord,
    RetrievalContext,
    Retriever,
)

__all__ = [
    # Normalizer
    "EMPTY",
    "NormalizedText",
    "fold",
    "normalize",
    "variants",
    # Patterns
    "DEFAULT_MIN_WORD_LENGTH",
    "generate_patterns",
    "strip_honorifics",
    # Fuzzy matching
    "DEFAULT_FIELD_WEIGHTS",
    "DEFAULT_THRESHOLD",
    "FuzzyHit",
    "FuzzyIndex",
    "FuzzyMatcher",
    "MatchCandidate",
    "MatchMode",
    "RapidFuzzIndex",
    "parse_pattern",
    # Retrieval
    "NO_RESULTS_NOTICE",
    "ContextRecord",
    "RetrievalContext",
    "Retriever",
]
