"""
Structured logging setup for FillerWatch.

Configures structlog for JSON-formatted structured logging. Every log
line includes timestamp, level, service name, and event. Request
context bound with ``structlog.contextvars`` is merged into each line.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog


def _add_service(service: str) -> structlog.types.Processor:
    """Return a processor that stamps *service* onto every event."""

    def processor(
        logger: Any, method_name: str, event_dict: structlog.types.EventDict,
    ) -> structlog.types.EventDict:
        event_dict.setdefault("service", service)
        return event_dict

    return processor


def configure_logging(
    level: str = "INFO",
    json_output: bool = True,
    service: str = "filler-analysis",
) -> None:
    """Configure structlog for the current process.

    Args:
        level: Minimum level name to emit (``DEBUG`` … ``CRITICAL``).
        json_output: Emit JSON lines; otherwise use the console renderer.
        service: Value of the ``service`` key added to every event.
    """
    renderer: structlog.types.Processor
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _add_service(service),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper()),
        ),
    )
