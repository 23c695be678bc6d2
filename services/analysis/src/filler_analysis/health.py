"""
Health check endpoint for the FillerWatch analysis service.

Exposes a /health endpoint returning service status, lexicon size and
the active matcher backend.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from filler_analysis.dependencies import get_analyzer
from filler_analysis.transcript_analyzer import TranscriptAnalyzer

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    analyzer: TranscriptAnalyzer = Depends(get_analyzer),
) -> dict[str, Any]:
    """Return basic liveness status."""
    return {
        "status": "ok",
        "service": "filler-analysis",
        "lexicon_entries": len(analyzer.lexicon),
        "matcher_backend": analyzer.backend,
    }
