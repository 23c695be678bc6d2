"""
FillerWatch filler analysis service.

Selects locale-specific filler terms from the lexicon, compiles them
into a whole-word matcher (regex or Aho-Corasick), and turns raw
transcripts into highlighted segments and aggregate filler statistics.
"""

from filler_analysis.lexicon_filter import available_locales, select_for_locale
from filler_analysis.term_matcher import TermMatch, TermMatcher, build_matcher
from filler_analysis.transcript_analyzer import DEFAULT_LOCALE, TranscriptAnalyzer

__all__ = [
    "DEFAULT_LOCALE",
    "TermMatch",
    "TermMatcher",
    "TranscriptAnalyzer",
    "available_locales",
    "build_matcher",
    "select_for_locale",
]
