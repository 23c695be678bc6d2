"""
Filler lexicon loader for FillerWatch.

Loads the lexicon snapshot from a JSON array of entry objects, either a
file on disk or the default lexicon packaged with the service.  Items
that do not form a usable entry are skipped with a warning; only an
unreadable or structurally invalid file is an error.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from importlib import resources
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from fw_common.models import LexiconEntry

logger = structlog.get_logger()

DEFAULT_LEXICON_RESOURCE: str = "lexicon.json"


class LexiconLoadError(Exception):
    """Raised when a lexicon file cannot be read or is not a JSON array."""


def parse_lexicon(items: Iterable[Any]) -> tuple[LexiconEntry, ...]:
    """Validate raw lexicon items into an immutable snapshot.

    Args:
        items: Decoded JSON items, expected to be objects.

    Returns:
        Matchable entries in their original order.
    """
    entries: list[LexiconEntry] = []
    for position, item in enumerate(items):
        if not isinstance(item, dict):
            logger.warning("lexicon_entry_skipped", position=position, reason="not_an_object")
            continue
        try:
            entry = LexiconEntry.model_validate(item)
        except ValidationError as exc:
            logger.warning(
                "lexicon_entry_skipped",
                position=position,
                reason="invalid",
                error_count=exc.error_count(),
            )
            continue
        if not entry.is_matchable:
            logger.warning(
                "lexicon_entry_skipped",
                position=position,
                reason="missing_term_or_tags",
            )
            continue
        entries.append(entry)
    return tuple(entries)


def _read_source(path: str | Path | None) -> tuple[str, str]:
    if path:
        source = str(path)
        try:
            return source, Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise LexiconLoadError(f"Cannot read lexicon file {source}: {exc}") from exc

    resource = resources.files("filler_analysis.data").joinpath(DEFAULT_LEXICON_RESOURCE)
    return f"package:{DEFAULT_LEXICON_RESOURCE}", resource.read_text(encoding="utf-8")


def load_lexicon(path: str | Path | None = None) -> tuple[LexiconEntry, ...]:
    """Load the lexicon snapshot.

    Args:
        path: JSON file to read; falsy loads the packaged default lexicon.

    Returns:
        Matchable entries in file order.

    Raises:
        LexiconLoadError: If the file is missing, unreadable, not valid
            JSON, or not a JSON array.
    """
    source, raw = _read_source(path)
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise LexiconLoadError(f"Lexicon {source} is not valid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise LexiconLoadError(f"Lexicon {source} must be a JSON array of entries")

    lexicon = parse_lexicon(data)
    logger.info(
        "lexicon_loaded",
        source=source,
        entries=len(lexicon),
        skipped=len(data) - len(lexicon),
    )
    return lexicon
