"""
Transcript analysis result models for FillerWatch.

Defines the Pydantic models returned by the transcript analyzer: the
highlighted segment view and the aggregate statistics view.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class TranscriptSegment(BaseModel):
    """A contiguous run of transcript text, classified as filler or not.

    Attributes:
        text: The segment text, with the transcript's original casing.
        is_filler: Whether the segment is a detected filler term.
        category: Filler category, or ``None`` for plain text.
    """

    text: str = Field(..., description="Segment text.")
    is_filler: bool = Field(default=False, description="Whether this is a filler.")
    category: str | None = Field(default=None, description="Filler category.")


class AnalysisResult(BaseModel):
    """Aggregate filler statistics for one transcript.

    Attributes:
        total_word_count: Whitespace-delimited token count.
        total_filler_count: Number of filler occurrences.
        filler_density_percent: Fillers per 100 words (one decimal).
        fillers_per_minute: Fillers per minute of speech (one decimal).
        category_counts: Occurrences per category that appeared.
    """

    total_word_count: int = Field(default=0, ge=0, description="Word count.")
    total_filler_count: int = Field(default=0, ge=0, description="Filler count.")
    filler_density_percent: float = Field(
        default=0.0,
        ge=0.0,
        description="Fillers per 100 words.",
    )
    fillers_per_minute: float = Field(
        default=0.0,
        ge=0.0,
        description="Fillers per minute of speech.",
    )
    category_counts: dict[str, int] = Field(
        default_factory=dict,
        description="Occurrences per category.",
    )
