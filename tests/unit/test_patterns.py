"""Tests for query pattern generation."""

import pytest

from prof_rag.search.patterns import generate_patterns, strip_honorifics


class TestStripHonorifics:
    """Tests for strip_honorifics()."""

    def test_strips_titles_with_periods(self) -> None:
        assert strip_honorifics("Prof. Dr. Müller") == "Müller"

    def test_strips_anywhere_in_text(self) -> None:
        assert strip_honorifics("Ist Herr Baumann gut?") == "Ist Baumann gut?"

    def test_case_insensitive(self) -> None:
        assert strip_honorifics("PROFESSOR schmidt") == "schmidt"

    def test_does_not_strip_inside_words(self) -> None:
        assert strip_honorifics("Drake Professorin") == "Drake Professorin"

    def test_custom_honorifics(self) -> None:
        assert strip_honorifics("Mx Taylor", ["mx"]) == "Taylor"
        assert strip_honorifics("Prof Taylor", []) == "Prof Taylor"


class TestGeneratePatterns:
    """Tests for generate_patterns()."""

    def test_name_with_titles(self) -> None:
        assert generate_patterns("Prof. Dr. Müller") == [
            "Müller",
            "Mueller",
            "Muller",
            "müller",
            "mueller",
            "muller",
        ]

    def test_words_and_pairs(self) -> None:
        patterns = generate_patterns("stats professor muller")
        assert patterns == ["stats muller", "stats", "muller"]

    def test_deduplicates_preserving_order(self) -> None:
        assert generate_patterns("stats stats") == ["stats stats", "stats"]

    def test_pairs_use_normalized_variants(self) -> None:
        patterns = generate_patterns("Jürgen Schönwälder networks")
        assert "jürgen schönwälder" in patterns
        assert "juergen schoenwaelder" in patterns
        assert "jurgen schonwalder" in patterns
        assert "schönwälder networks" in patterns

    def test_short_words_skipped_but_paired(self) -> None:
        assert generate_patterns("Li is ok") == ["Li is ok", "li is", "is ok"]

    def test_min_word_length(self) -> None:
        assert "li" in generate_patterns("Li Wei", min_word_length=2)

    def test_no_duplicates(self) -> None:
        patterns = generate_patterns("Müller Müller Mueller")
        assert len(patterns) == len(set(patterns))

    @pytest.mark.parametrize("query", ["", "   ", "Prof. Dr.", None, 17])
    def test_empty_queries_yield_no_patterns(self, query: object) -> None:
        assert generate_patterns(query) == []
