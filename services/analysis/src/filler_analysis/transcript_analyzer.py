"""
Transcript analyzer for FillerWatch.

Scans a transcript with the locale's filler matcher and produces either
a lossless sequence of highlighted segments or aggregate statistics
(word count, filler count, density, rate and per-category counts).

Both entry points always return a usable result: unexpected failures
are logged and replaced by a safe default, so a transcript can never
break the caller.
"""

from __future__ import annotations

import math
import threading
from collections.abc import Sequence

import structlog

from fw_common.models import AnalysisResult, FillerCategory, LexiconEntry, TranscriptSegment

from filler_analysis.lexicon_filter import select_for_locale
from filler_analysis.term_matcher import REGEX_BACKEND, TermMatcher, build_matcher

logger = structlog.get_logger()

DEFAULT_LOCALE: str = "en"
MATCHER_CACHE_SIZE: int = 64


def _round1(value: float) -> float:
    """Round half up to one decimal; non-finite values become 0."""
    if not math.isfinite(value):
        return 0.0
    return math.floor(value * 10 + 0.5) / 10


def _degraded_result() -> AnalysisResult:
    return AnalysisResult(
        category_counts={category.value: 0 for category in FillerCategory},
    )


class TranscriptAnalyzer:
    """Filler detection over an injected, read-only lexicon snapshot.

    Compiled matchers are cached per locale.  The analyzer holds no other
    mutable state and may be shared between threads and tasks.

    Args:
        lexicon: Lexicon entries in canonical order.
        backend: Matcher backend name (``"regex"`` or ``"aho_corasick"``).
    """

    def __init__(
        self,
        lexicon: Sequence[LexiconEntry],
        backend: str = REGEX_BACKEND,
    ) -> None:
        self._lexicon: tuple[LexiconEntry, ...] = tuple(lexicon)
        self._backend = backend
        self._matchers: dict[str, TermMatcher] = {}
        self._lock = threading.Lock()
        # Fail fast on an unknown backend name.
        build_matcher([], backend)

    @property
    def lexicon(self) -> tuple[LexiconEntry, ...]:
        return self._lexicon

    @property
    def backend(self) -> str:
        return self._backend

    def matcher_for(self, locale: str) -> TermMatcher:
        """Return the (cached) matcher for *locale*."""
        with self._lock:
            matcher = self._matchers.get(locale)
        if matcher is not None:
            return matcher

        entries = select_for_locale(self._lexicon, locale)
        if not entries:
            logger.warning("lexicon_empty_for_locale", locale=locale)
        matcher = build_matcher(entries, self._backend)

        with self._lock:
            if len(self._matchers) >= MATCHER_CACHE_SIZE:
                self._matchers.pop(next(iter(self._matchers)))
            self._matchers[locale] = matcher
        return matcher

    # ── segment view ──

    def highlight(self, text: str, locale: str = DEFAULT_LOCALE) -> list[TranscriptSegment]:
        """Split *text* into plain and filler segments.

        Concatenating the ``text`` of the returned segments reproduces
        *text* exactly.

        Args:
            text: Raw transcript text.
            locale: Locale used to select lexicon entries.

        Returns:
            At least one segment.  Empty or whitespace-only input yields a
            single empty plain segment.
        """
        if not text or not text.strip():
            return [TranscriptSegment(text="", is_filler=False, category=None)]

        try:
            return self._segments(text, locale)
        except Exception:
            logger.exception("highlight_failed", locale=locale, text_length=len(text))
            return [TranscriptSegment(text=text, is_filler=False, category=None)]

    def _segments(self, text: str, locale: str) -> list[TranscriptSegment]:
        matcher = self.matcher_for(locale)
        segments: list[TranscriptSegment] = []
        last_end = 0

        for match in matcher.finditer(text):
            if match.start > last_end:
                segments.append(TranscriptSegment(text=text[last_end:match.start]))
            segments.append(
                TranscriptSegment(
                    text=match.text,
                    is_filler=True,
                    category=match.category,
                )
            )
            last_end = match.end

        if last_end < len(text):
            segments.append(TranscriptSegment(text=text[last_end:]))
        return segments

    # ── aggregate view ──

    def analyze(
        self,
        text: str,
        duration_minutes: float,
        locale: str = DEFAULT_LOCALE,
    ) -> AnalysisResult:
        """Compute filler statistics for *text*.

        Args:
            text: Raw transcript text.
            duration_minutes: Length of the speech in minutes; values that
                are not positive give a rate of ``0``.
            locale: Locale used to select lexicon entries.

        Returns:
            The :class:`AnalysisResult`; all zeros for empty input.
        """
        if not text or not text.strip():
            return AnalysisResult()

        try:
            return self._statistics(text, duration_minutes, locale)
        except Exception:
            logger.exception("analysis_failed", locale=locale, text_length=len(text))
            return _degraded_result()

    def _statistics(
        self, text: str, duration_minutes: float, locale: str,
    ) -> AnalysisResult:
        matcher = self.matcher_for(locale)

        total_word_count = len(text.split())
        total_filler_count = 0
        category_counts: dict[str, int] = {}

        for match in matcher.finditer(text):
            total_filler_count += 1
            if match.category is not None:
                category_counts[match.category] = category_counts.get(match.category, 0) + 1

        density = (
            total_filler_count / total_word_count * 100 if total_word_count > 0 else 0.0
        )
        rate = total_filler_count / duration_minutes if duration_minutes > 0 else 0.0

        return AnalysisResult(
            total_word_count=total_word_count,
            total_filler_count=total_filler_count,
            filler_density_percent=_round1(density),
            fillers_per_minute=_round1(rate),
            category_counts=category_counts,
        )
