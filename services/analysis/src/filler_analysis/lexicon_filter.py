"""
Locale-based lexicon filtering for FillerWatch.

Selects the lexicon entries that apply to a caller's locale using
BCP-47 tag prefix matching, in both directions: a bare language
("en") selects regional entries ("en-US"), and a regional locale
("en-US") selects entries tagged with its bare language ("en").
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from fw_common.models import LexiconEntry


def tag_matches_locale(tag: str, locale: str) -> bool:
    """Return whether lexicon *tag* applies to *locale*.

    The two strings match when they are equal, or when one is a prefix
    of the other immediately followed by a ``-`` subtag separator.
    Comparison is exact; no case folding is applied.
    """
    if not tag or not locale:
        return False
    if tag == locale:
        return True
    return tag.startswith(locale + "-") or locale.startswith(tag + "-")


def select_for_locale(
    lexicon: Iterable[LexiconEntry], locale: str,
) -> list[LexiconEntry]:
    """Return the matchable entries of *lexicon* that apply to *locale*.

    Args:
        lexicon: The full lexicon, in its canonical order.
        locale: Caller locale such as ``"en"``, ``"en-US"`` or ``"fr-FR"``.

    Returns:
        Entries in lexicon order; empty if nothing applies.
    """
    return [
        entry
        for entry in lexicon
        if entry.is_matchable
        and any(tag_matches_locale(tag, locale) for tag in entry.locale_tags)
    ]


def available_locales(lexicon: Sequence[LexiconEntry]) -> list[str]:
    """Return the sorted, distinct locale tags of matchable entries."""
    tags = {
        tag
        for entry in lexicon
        if entry.is_matchable
        for tag in entry.locale_tags
        if tag
    }
    return sorted(tags)
