"""
Transcript analysis API router for FillerWatch.

Endpoints for highlighting filler words in a transcript, computing
aggregate filler statistics, and listing the locales the loaded
lexicon covers.
"""

from __future__ import annotations

import asyncio
import time

from fastapi import APIRouter, Depends, HTTPException

from fw_common.config import Settings
from fw_common.models import AnalysisResult

from filler_analysis import metrics
from filler_analysis.dependencies import get_analyzer, get_app_settings
from filler_analysis.lexicon_filter import available_locales
from filler_analysis.schemas import (
    AnalyzeRequest,
    HighlightRequest,
    HighlightResponse,
    LocalesResponse,
)
from filler_analysis.transcript_analyzer import TranscriptAnalyzer

router = APIRouter(tags=["analysis"])


def _check_length(text: str, settings: Settings) -> None:
    if len(text) > settings.max_transcript_chars:
        raise HTTPException(
            status_code=422,
            detail=f"Transcript exceeds {settings.max_transcript_chars} characters",
        )


@router.post("/highlight", response_model=HighlightResponse)
async def highlight_transcript(
    body: HighlightRequest,
    analyzer: TranscriptAnalyzer = Depends(get_analyzer),
    settings: Settings = Depends(get_app_settings),
) -> HighlightResponse:
    _check_length(body.text, settings)
    locale = body.locale or settings.default_locale

    start = time.monotonic()
    segments = await asyncio.to_thread(analyzer.highlight, body.text, locale)
    metrics.analysis_duration_seconds.labels(endpoint="highlight").observe(
        time.monotonic() - start,
    )
    metrics.analysis_requests_total.labels(endpoint="highlight").inc()

    return HighlightResponse(locale=locale, segments=segments)


@router.post("/analyze", response_model=AnalysisResult)
async def analyze_transcript(
    body: AnalyzeRequest,
    analyzer: TranscriptAnalyzer = Depends(get_analyzer),
    settings: Settings = Depends(get_app_settings),
) -> AnalysisResult:
    _check_length(body.text, settings)
    locale = body.locale or settings.default_locale

    start = time.monotonic()
    result = await asyncio.to_thread(
        analyzer.analyze, body.text, body.duration_minutes, locale,
    )
    metrics.analysis_duration_seconds.labels(endpoint="analyze").observe(
        time.monotonic() - start,
    )
    metrics.analysis_requests_total.labels(endpoint="analyze").inc()
    for category, count in result.category_counts.items():
        if count:
            metrics.analysis_fillers_detected_total.labels(category=category).inc(count)

    return result


@router.get("/locales", response_model=LocalesResponse)
async def list_locales(
    analyzer: TranscriptAnalyzer = Depends(get_analyzer),
) -> LocalesResponse:
    locales = available_locales(analyzer.lexicon)
    return LocalesResponse(locales=locales, total=len(locales))
