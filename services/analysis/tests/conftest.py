"""Shared fixtures for filler analysis service tests."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Make helpers in this module importable from test files
# (needed with --import-mode=importlib).
sys.path.append(str(Path(__file__).resolve().parent))

# Set env vars before any fw_common import.
os.environ.setdefault("FW_LOG_LEVEL", "WARNING")
os.environ.setdefault("FW_LOG_JSON", "false")

from fw_common.models import FillerCategory, LexiconEntry  # noqa: E402

from filler_analysis.term_matcher import AHO_CORASICK_BACKEND, REGEX_BACKEND  # noqa: E402
from filler_analysis.transcript_analyzer import TranscriptAnalyzer  # noqa: E402

BACKENDS = [REGEX_BACKEND, AHO_CORASICK_BACKEND]


def make_entry(
    term: str,
    category: str = FillerCategory.FILLED_PAUSE.value,
    tags: tuple[str, ...] = ("en-US",),
    language: str = "en",
) -> LexiconEntry:
    """Helper to create a LexiconEntry for tests."""
    return LexiconEntry(
        category=category,
        term=term,
        language=language,
        locale_tags=tags,
        notes="test entry",
    )


SAMPLE_LEXICON: tuple[LexiconEntry, ...] = (
    make_entry("um", FillerCategory.FILLED_PAUSE.value, ("en-US",)),
    make_entry("er", FillerCategory.FILLED_PAUSE.value, ("en-GB", "en-AU", "en-NZ")),
    make_entry("like", FillerCategory.DISCOURSE_MARKER.value, ("en-US", "en-GB")),
    make_entry("you know", FillerCategory.PLACATING_TAG.value, ("en",)),
    make_entry("euh", FillerCategory.FILLED_PAUSE.value, ("fr", "fr-FR", "fr-CA"), "fr"),
)


# ─── Fixtures ────────────────────────────────────────────────


@pytest.fixture()
def sample_lexicon() -> tuple[LexiconEntry, ...]:
    """A small lexicon spanning US/GB English and French."""
    return SAMPLE_LEXICON


@pytest.fixture(params=BACKENDS)
def backend(request: pytest.FixtureRequest) -> str:
    """Each matcher backend in turn."""
    return request.param


@pytest.fixture()
def analyzer(backend: str, sample_lexicon: tuple[LexiconEntry, ...]) -> TranscriptAnalyzer:
    """A TranscriptAnalyzer over the sample lexicon, once per backend."""
    return TranscriptAnalyzer(sample_lexicon, backend=backend)
