"""
Analysis service entry point for FillerWatch.

Loads the filler lexicon once at startup, builds the shared transcript
analyzer, registers the analysis and health routes, and exposes
Prometheus metrics.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
import uvicorn
from fastapi import FastAPI
from prometheus_client import make_asgi_app

from fw_common.config import Settings, get_settings
from fw_common.logging import configure_logging

from filler_analysis import routes
from filler_analysis.health import router as health_router
from filler_analysis.lexicon_loader import load_lexicon
from filler_analysis.logging_middleware import LoggingMiddleware
from filler_analysis.transcript_analyzer import TranscriptAnalyzer

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging on startup and log the service lifecycle."""
    settings: Settings = app.state.settings
    configure_logging(settings.log_level, json_output=settings.log_json)
    logger.info(
        "analysis_service_starting",
        lexicon_entries=len(app.state.analyzer.lexicon),
        matcher_backend=app.state.analyzer.backend,
    )
    yield
    logger.info("analysis_service_stopping")


def build_analyzer(settings: Settings) -> TranscriptAnalyzer:
    """Load the configured lexicon and wrap it in an analyzer."""
    lexicon = load_lexicon(settings.lexicon_path or None)
    return TranscriptAnalyzer(lexicon, backend=settings.matcher_backend)


def create_app(
    analyzer: TranscriptAnalyzer | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        analyzer: Analyzer to serve; built from *settings* when omitted.
        settings: Service settings; the cached singleton when omitted.
    """
    settings = settings or get_settings()
    if analyzer is None:
        analyzer = build_analyzer(settings)

    app = FastAPI(title="FillerWatch Analysis", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.analyzer = analyzer

    app.include_router(routes.router, prefix="/api/v1")
    app.include_router(health_router)
    app.mount("/metrics", make_asgi_app())
    app.add_middleware(LoggingMiddleware)
    return app


app = create_app()

if __name__ == "__main__":
    _settings = get_settings()
    uvicorn.run(
        app,
        host=_settings.api_host,
        port=_settings.api_port,
        log_level=_settings.log_level.lower(),
    )
