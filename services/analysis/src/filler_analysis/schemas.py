"""
Analysis API schemas for FillerWatch.

Pydantic request/response models for the highlight, analyze and locale
listing endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from fw_common.models import TranscriptSegment


class HighlightRequest(BaseModel):
    text: str = Field(..., description="Raw transcript text.")
    locale: str | None = Field(default=None, min_length=1, max_length=35)


class HighlightResponse(BaseModel):
    locale: str
    segments: list[TranscriptSegment]


class AnalyzeRequest(HighlightRequest):
    duration_minutes: float = Field(..., ge=0.0, description="Speech duration in minutes.")


class LocalesResponse(BaseModel):
    locales: list[str]
    total: int
