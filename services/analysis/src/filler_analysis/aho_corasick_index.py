"""
Aho-Corasick automaton index for FillerWatch.

Builds a pyahocorasick automaton over lower-cased filler terms for
O(n) multi-term scanning of a transcript. The index reports every raw
hit, including hits inside longer words; whole-word filtering and
overlap resolution happen in the term matcher.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import ahocorasick
import structlog

logger = structlog.get_logger()


@dataclass(frozen=True)
class AhoMatch:
    """Result of an Aho-Corasick hit.

    Attributes:
        term: The lower-cased term that matched.
        start: Start character index in the haystack.
        end: End character index in the haystack (exclusive).
    """

    term: str
    start: int
    end: int


def fold_case(text: str) -> str:
    """Lower-case *text* without changing its length.

    Characters whose lower-case form is longer than one code point
    (e.g. ``"İ"``) are kept as-is so indices stay aligned with *text*.
    """
    lowered = text.lower()
    if len(lowered) == len(text):
        return lowered
    folded: list[str] = []
    for ch in text:
        low = ch.lower()
        folded.append(low if len(low) == 1 else ch)
    return "".join(folded)


class AhoCorasickIndex:
    """Manages a pyahocorasick ``Automaton`` for multi-term matching.

    Terms are stored and searched case-folded with :func:`fold_case`.
    """

    def __init__(self) -> None:
        self._automaton: ahocorasick.Automaton | None = None
        self._pattern_count: int = 0

    # ── public API ──

    def build(self, terms: Iterable[str]) -> None:
        """Build (or rebuild) the automaton from *terms*.

        Args:
            terms: Filler terms; empty strings and case-insensitive
                duplicates are ignored.
        """
        automaton = ahocorasick.Automaton()
        count = 0
        for term in terms:
            key = fold_case(term)
            if not key or automaton.exists(key):
                continue
            automaton.add_word(key, key)
            count += 1
        if count:
            automaton.make_automaton()
            self._automaton = automaton
        else:
            self._automaton = None
        self._pattern_count = count
        logger.debug("aho_corasick_index_built", pattern_count=count)

    def search(self, text: str) -> list[AhoMatch]:
        """Return every raw hit of a term in *text*.

        Args:
            text: Haystack text; case-folded internally.

        Returns:
            :class:`AhoMatch` instances, ordered by end index.
        """
        if self._automaton is None or not text:
            return []
        results: list[AhoMatch] = []
        for end_index, term in self._automaton.iter(fold_case(text)):
            end = end_index + 1
            results.append(AhoMatch(term=term, start=end - len(term), end=end))
        return results

    @property
    def pattern_count(self) -> int:
        """Number of distinct terms currently loaded."""
        return self._pattern_count

    @property
    def is_ready(self) -> bool:
        """Whether the automaton has been built and contains terms."""
        return self._automaton is not None
