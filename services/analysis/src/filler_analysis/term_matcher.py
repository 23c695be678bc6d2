"""
Filler term matchers for FillerWatch.

Compiles a set of lexicon entries into a single case-insensitive,
whole-word matcher and resolves each hit back to its filler category.
Two interchangeable backends are provided: a compiled regex alternation
(default) and a pyahocorasick automaton with whole-word filtering.

Both backends compare case-folded text (see :func:`fold_case`), so they
agree on every input, and both resolve overlapping terms the same way:
the leftmost hit wins, then the longest term at that position, then
lexicon order. Each match carries the category of the term that
produced it.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import structlog

from fw_common.models import LexiconEntry

from filler_analysis.aho_corasick_index import AhoCorasickIndex, fold_case

logger = structlog.get_logger()

REGEX_BACKEND = "regex"
AHO_CORASICK_BACKEND = "aho_corasick"

# Matches nothing, not even the empty string.
_NEVER = re.compile(r"(?!)")


@dataclass(frozen=True)
class TermMatch:
    """A whole-word filler occurrence in a transcript.

    Attributes:
        start: Start character index in the transcript.
        end: End character index in the transcript (exclusive).
        text: The matched text with its original casing.
        category: Category of the matched term, or ``None`` if blank.
    """

    start: int
    end: int
    text: str
    category: str | None = None


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


class TermMatcher(ABC):
    """Base class for compiled filler-term matchers.

    Args:
        entries: Lexicon entries to match; unmatchable entries are
            ignored and case-insensitive duplicate terms keep the
            category of the first entry.
    """

    backend: str = ""

    def __init__(self, entries: Sequence[LexiconEntry]) -> None:
        self._categories: dict[str, str] = {}
        for entry in entries:
            if entry.is_matchable:
                self._categories.setdefault(fold_case(entry.term), entry.category)
        # Longest first; sorted() is stable so ties keep lexicon order.
        self._terms: list[str] = sorted(self._categories, key=len, reverse=True)

    @abstractmethod
    def finditer(self, text: str) -> Iterator[TermMatch]:
        """Yield non-overlapping whole-word matches in *text*, left to right."""
        ...  # pragma: no cover

    def category_for(self, matched_text: str) -> str | None:
        """Return the category of the term that produced *matched_text*."""
        return self._categories.get(fold_case(matched_text)) or None

    def _match(self, text: str, start: int, end: int, term: str) -> TermMatch:
        return TermMatch(
            start=start,
            end=end,
            text=text[start:end],
            category=self._categories.get(term) or None,
        )

    @property
    def term_count(self) -> int:
        """Number of distinct terms compiled into the matcher."""
        return len(self._terms)

    @property
    def is_empty(self) -> bool:
        """Whether the matcher can never produce a match."""
        return not self._terms


class RegexTermMatcher(TermMatcher):
    """Single compiled alternation of escaped, case-folded terms.

    Alternatives are ordered longest first, so the engine's
    first-alternative rule yields the longest term at each position.
    Each term sits in its own group; the matching group names the term.
    The pattern runs over the :func:`fold_case` form of the transcript,
    not with ``re.IGNORECASE``.
    """

    backend = REGEX_BACKEND

    def __init__(self, entries: Sequence[LexiconEntry]) -> None:
        super().__init__(entries)
        if self._terms:
            alternation = "|".join(f"({re.escape(term)})" for term in self._terms)
            self._pattern = re.compile(rf"(?<!\w)(?:{alternation})(?!\w)")
        else:
            self._pattern = _NEVER

    def finditer(self, text: str) -> Iterator[TermMatch]:
        for m in self._pattern.finditer(fold_case(text)):
            term = self._terms[m.lastindex - 1]
            yield self._match(text, m.start(), m.end(), term)


class AhoCorasickTermMatcher(TermMatcher):
    """Aho-Corasick scan followed by whole-word and overlap filtering."""

    backend = AHO_CORASICK_BACKEND

    def __init__(self, entries: Sequence[LexiconEntry]) -> None:
        super().__init__(entries)
        self._index = AhoCorasickIndex()
        self._index.build(self._terms)

    def finditer(self, text: str) -> Iterator[TermMatch]:
        folded = fold_case(text)
        hits = [
            hit
            for hit in self._index.search(folded)
            if self._on_word_boundaries(folded, hit.start, hit.end)
        ]
        hits.sort(key=lambda hit: (hit.start, hit.start - hit.end))
        last_end = 0
        for hit in hits:
            if hit.start < last_end:
                continue
            last_end = hit.end
            yield self._match(text, hit.start, hit.end, hit.term)

    @staticmethod
    def _on_word_boundaries(text: str, start: int, end: int) -> bool:
        if start > 0 and _is_word_char(text[start - 1]):
            return False
        if end < len(text) and _is_word_char(text[end]):
            return False
        return True

    @property
    def index(self) -> AhoCorasickIndex:
        """Access the underlying Aho-Corasick index."""
        return self._index


_BACKENDS: dict[str, type[TermMatcher]] = {
    REGEX_BACKEND: RegexTermMatcher,
    AHO_CORASICK_BACKEND: AhoCorasickTermMatcher,
}


def build_matcher(
    entries: Sequence[LexiconEntry], backend: str = REGEX_BACKEND,
) -> TermMatcher:
    """Compile *entries* into a whole-word, case-insensitive matcher.

    Args:
        entries: Lexicon entries (typically already filtered by locale).
        backend: ``"regex"`` or ``"aho_corasick"``.

    Returns:
        A :class:`TermMatcher`; with no entries it never matches.

    Raises:
        ValueError: If *backend* is not a known backend name.
    """
    try:
        matcher_cls = _BACKENDS[backend]
    except KeyError:
        raise ValueError(f"Unknown matcher backend: {backend!r}") from None
    matcher = matcher_cls(entries)
    logger.debug("term_matcher_built", backend=backend, term_count=matcher.term_count)
    return matcher
