"""
Tests for the transcript analyzer.

Validates the highlighted segment view (lossless partition, categories,
empty and no-match input), the aggregate statistics view (counts,
density, rate, category breakdown, zero duration), agreement between
the two views, and the degrade-on-failure behaviour.
"""

from __future__ import annotations

import math
from unittest.mock import patch

import pytest

from fw_common.models import AnalysisResult, FillerCategory, TranscriptSegment

from conftest import make_entry
from filler_analysis.transcript_analyzer import TranscriptAnalyzer, _round1


def _seg(text: str, category: str | None = None) -> TranscriptSegment:
    return TranscriptSegment(text=text, is_filler=category is not None, category=category)


class TestHighlight:
    """Tests for TranscriptAnalyzer.highlight()."""

    def test_us_english_example(self, analyzer: TranscriptAnalyzer) -> None:
        result = analyzer.highlight("Hello um, this is like a test", "en-US")
        assert result == [
            _seg("Hello "),
            _seg("um", "FILLED_PAUSE"),
            _seg(", this is "),
            _seg("like", "DISCOURSE_MARKER"),
            _seg(" a test"),
        ]

    def test_british_english(self, analyzer: TranscriptAnalyzer) -> None:
        result = analyzer.highlight("Hello er, this is a test", "en-GB")
        assert result == [
            _seg("Hello "),
            _seg("er", "FILLED_PAUSE"),
            _seg(", this is a test"),
        ]

    def test_en_gb_does_not_flag_us_only_terms(self, analyzer: TranscriptAnalyzer) -> None:
        result = analyzer.highlight("um well", "en-GB")
        assert result == [_seg("um well")]

    def test_french(self, analyzer: TranscriptAnalyzer) -> None:
        result = analyzer.highlight("euh test", "fr")
        assert result == [_seg("euh", "FILLED_PAUSE"), _seg(" test")]

    def test_empty_text(self, analyzer: TranscriptAnalyzer) -> None:
        assert analyzer.highlight("", "en-US") == [_seg("")]

    def test_whitespace_only_text(self, analyzer: TranscriptAnalyzer) -> None:
        assert analyzer.highlight("   \n\t", "fr") == [_seg("")]

    def test_no_fillers_returns_whole_text(self, analyzer: TranscriptAnalyzer) -> None:
        text = "This is a clean sentence without fillers"
        assert analyzer.highlight(text, "en") == [_seg(text)]

    def test_unknown_locale_returns_whole_text(self, analyzer: TranscriptAnalyzer) -> None:
        assert analyzer.highlight("um like", "ja") == [_seg("um like")]

    def test_preserves_original_casing(self, analyzer: TranscriptAnalyzer) -> None:
        result = analyzer.highlight("UM Um um", "en-US")
        assert [s.text for s in result if s.is_filler] == ["UM", "Um", "um"]

    def test_adjacent_fillers_have_no_empty_segments(self, analyzer: TranscriptAnalyzer) -> None:
        result = analyzer.highlight("um like", "en-US")
        assert result == [
            _seg("um", "FILLED_PAUSE"),
            _seg(" "),
            _seg("like", "DISCOURSE_MARKER"),
        ]
        assert all(s.text for s in result)

    def test_multi_word_term(self, analyzer: TranscriptAnalyzer) -> None:
        result = analyzer.highlight("It's, you know, fine", "en-US")
        assert _seg("you know", "PLACATING_TAG") in result

    def test_default_locale_is_bare_english(self, analyzer: TranscriptAnalyzer) -> None:
        result = analyzer.highlight("er um")
        assert [s.text for s in result if s.is_filler] == ["er", "um"]

    @pytest.mark.parametrize(
        "text",
        [
            "Hello um, this is like a test",
            "  leading and trailing spaces um  ",
            "um",
            "like like like",
            "Line one um\nline two, you know?\n",
            "no fillers at all",
            "Ümlaut um ünïcödé like 日本語",
        ],
    )
    def test_lossless_partition(self, analyzer: TranscriptAnalyzer, text: str) -> None:
        segments = analyzer.highlight(text, "en-US")
        assert "".join(s.text for s in segments) == text

    def test_returns_fresh_segments(self, analyzer: TranscriptAnalyzer) -> None:
        first = analyzer.highlight("um", "en-US")
        second = analyzer.highlight("um", "en-US")
        assert first == second
        assert first[0] is not second[0]


class TestAnalyze:
    """Tests for TranscriptAnalyzer.analyze()."""

    def test_us_english_metrics(self, analyzer: TranscriptAnalyzer) -> None:
        result = analyzer.analyze("Hello um like this is a test with some fillers", 1, "en-US")
        assert result == AnalysisResult(
            total_word_count=10,
            total_filler_count=2,
            filler_density_percent=20.0,
            fillers_per_minute=2.0,
            category_counts={"FILLED_PAUSE": 1, "DISCOURSE_MARKER": 1},
        )

    def test_absent_categories_are_omitted(self, analyzer: TranscriptAnalyzer) -> None:
        result = analyzer.analyze("um like test", 1, "en-US")
        assert "PLACATING_TAG" not in result.category_counts

    def test_empty_text(self, analyzer: TranscriptAnalyzer) -> None:
        assert analyzer.analyze("", 1, "en-US") == AnalysisResult()

    def test_whitespace_only_text(self, analyzer: TranscriptAnalyzer) -> None:
        result = analyzer.analyze(" \n ", 3, "fr")
        assert result.total_word_count == 0
        assert result.category_counts == {}

    def test_zero_duration(self, analyzer: TranscriptAnalyzer) -> None:
        result = analyzer.analyze("Hello um like test", 0, "en-US")
        assert result.total_filler_count == 2
        assert result.fillers_per_minute == 0

    def test_negative_duration(self, analyzer: TranscriptAnalyzer) -> None:
        result = analyzer.analyze("um um", -2, "en-US")
        assert result.fillers_per_minute == 0

    def test_nan_duration(self, analyzer: TranscriptAnalyzer) -> None:
        result = analyzer.analyze("um um", math.nan, "en-US")
        assert result.total_filler_count == 2
        assert result.fillers_per_minute == 0

    def test_no_fillers(self, analyzer: TranscriptAnalyzer) -> None:
        result = analyzer.analyze("a perfectly fluent sentence", 1, "en-US")
        assert result.total_word_count == 4
        assert result.total_filler_count == 0
        assert result.filler_density_percent == 0
        assert result.category_counts == {}

    def test_rounding_to_one_decimal(self, analyzer: TranscriptAnalyzer) -> None:
        result = analyzer.analyze("um a b", 1.5, "en-US")
        assert result.filler_density_percent == 33.3
        assert result.fillers_per_minute == 0.7

    def test_multi_word_term_counts_once(self, analyzer: TranscriptAnalyzer) -> None:
        result = analyzer.analyze("you know it", 1, "en")
        assert result.total_word_count == 3
        assert result.total_filler_count == 1
        assert result.category_counts == {"PLACATING_TAG": 1}

    @pytest.mark.parametrize(
        ("text", "locale"),
        [
            ("Hello um like this is a test with some fillers", "en-US"),
            ("er er, you know, like er", "en-GB"),
            ("euh genre euh", "fr-CA"),
            ("UM, Like, YOU KNOW", "en"),
        ],
    )
    def test_category_counts_sum_to_total(
        self, analyzer: TranscriptAnalyzer, text: str, locale: str,
    ) -> None:
        result = analyzer.analyze(text, 2, locale)
        assert sum(result.category_counts.values()) == result.total_filler_count

    @pytest.mark.parametrize(
        ("text", "locale"),
        [
            ("Hello um, this is like a test", "en-US"),
            ("er er, you know, like er", "en-GB"),
            ("umbrella um drum", "en-US"),
            ("euh test", "fr"),
        ],
    )
    def test_filler_count_matches_highlight(
        self, analyzer: TranscriptAnalyzer, text: str, locale: str,
    ) -> None:
        segments = analyzer.highlight(text, locale)
        result = analyzer.analyze(text, 1, locale)
        assert result.total_filler_count == sum(1 for s in segments if s.is_filler)


class TestConsistency:
    """Tests that both backends agree and every filler is categorised."""

    LEXICON = [
        make_entry(term, FillerCategory.DISCOURSE_MARKER.value, ("en",))
        for term in ("so", "like", "kay")
    ]

    @pytest.mark.parametrize(
        "text",
        [
            "Well \u017fo we went",
            "It was L\u0130KE this",
            "SO, Like, that is it",
            "\u212aay then",
        ],
    )
    def test_backends_agree_on_case_variants(self, text: str) -> None:
        regex = TranscriptAnalyzer(self.LEXICON, "regex")
        aho = TranscriptAnalyzer(self.LEXICON, "aho_corasick")
        assert regex.highlight(text, "en") == aho.highlight(text, "en")
        assert regex.analyze(text, 1, "en") == aho.analyze(text, 1, "en")

    @pytest.mark.parametrize(
        "text",
        ["Well \u017fo we went", "It was L\u0130KE this", "\u212aay then", "so like kay"],
    )
    def test_category_counts_cover_every_filler(self, backend: str, text: str) -> None:
        analyzer = TranscriptAnalyzer(self.LEXICON, backend)
        result = analyzer.analyze(text, 1, "en")
        assert sum(result.category_counts.values()) == result.total_filler_count
        assert all(s.category for s in analyzer.highlight(text, "en") if s.is_filler)

    def test_only_simple_lowercasing_is_applied(self, backend: str) -> None:
        analyzer = TranscriptAnalyzer(self.LEXICON, backend)
        assert analyzer.analyze("Well \u017fo we went", 1, "en").total_filler_count == 0
        assert analyzer.analyze("\u212aay then", 1, "en").category_counts == {
            "DISCOURSE_MARKER": 1,
        }


class TestOpenCategories:
    """Tests for category strings outside the known set."""

    def test_unknown_category_is_counted(self, backend: str) -> None:
        analyzer = TranscriptAnalyzer([make_entry("mhm", "BACKCHANNEL", ("en",))], backend)
        result = analyzer.analyze("mhm mhm okay", 1, "en")
        assert result.category_counts == {"BACKCHANNEL": 2}
        assert analyzer.highlight("mhm", "en")[0].category == "BACKCHANNEL"


class TestDegradedResults:
    """Tests that unexpected failures never reach the caller."""

    def test_highlight_failure_returns_whole_text(self, analyzer: TranscriptAnalyzer) -> None:
        with patch.object(analyzer, "matcher_for", side_effect=RuntimeError("boom")):
            result = analyzer.highlight("um like", "en-US")
        assert result == [_seg("um like")]

    def test_analyze_failure_returns_zeroed_result(self, analyzer: TranscriptAnalyzer) -> None:
        with patch.object(analyzer, "matcher_for", side_effect=RuntimeError("boom")):
            result = analyzer.analyze("um like", 1, "en-US")
        assert result.total_word_count == 0
        assert result.total_filler_count == 0
        assert result.filler_density_percent == 0
        assert result.fillers_per_minute == 0
        assert result.category_counts == {c.value: 0 for c in FillerCategory}

    def test_analyze_bad_duration_type_degrades(self, analyzer: TranscriptAnalyzer) -> None:
        result = analyzer.analyze("um like", "soon", "en-US")  # type: ignore[arg-type]
        assert result.total_filler_count == 0


class TestMatcherCache:
    """Tests for per-locale matcher caching."""

    def test_matcher_reused_for_same_locale(self, analyzer: TranscriptAnalyzer) -> None:
        assert analyzer.matcher_for("en-US") is analyzer.matcher_for("en-US")

    def test_distinct_locales_get_distinct_matchers(self, analyzer: TranscriptAnalyzer) -> None:
        assert analyzer.matcher_for("en-US") is not analyzer.matcher_for("fr")

    def test_cache_is_bounded(self, analyzer: TranscriptAnalyzer) -> None:
        with patch("filler_analysis.transcript_analyzer.MATCHER_CACHE_SIZE", 2):
            first = analyzer.matcher_for("en-US")
            analyzer.matcher_for("en-GB")
            analyzer.matcher_for("fr")
            assert analyzer.matcher_for("en-US") is not first

    def test_unknown_backend_rejected_at_construction(self) -> None:
        with pytest.raises(ValueError):
            TranscriptAnalyzer([], backend="nope")


class TestRound1:
    """Tests for one-decimal rounding."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.0, 0.0), (20.0, 20.0), (0.25, 0.3), (33.333, 33.3), (0.66666, 0.7)],
    )
    def test_rounds_half_up(self, value: float, expected: float) -> None:
        assert _round1(value) == pytest.approx(expected)

    def test_non_finite_becomes_zero(self) -> None:
        assert _round1(math.inf) == 0.0
