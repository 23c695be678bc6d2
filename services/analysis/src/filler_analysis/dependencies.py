"""
FastAPI dependency providers for the FillerWatch analysis service.

The analyzer and settings are stored on ``app.state`` by
:func:`filler_analysis.main.create_app`.
"""

from __future__ import annotations

from fastapi import Request

from fw_common.config import Settings, get_settings

from filler_analysis.transcript_analyzer import TranscriptAnalyzer


async def get_analyzer(request: Request) -> TranscriptAnalyzer:
    """Return the shared analyzer from app state."""
    return request.app.state.analyzer


async def get_app_settings(request: Request) -> Settings:
    """Return the settings the app was built with."""
    return getattr(request.app.state, "settings", None) or get_settings()
