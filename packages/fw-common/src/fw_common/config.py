"""
Environment-based configuration management for FillerWatch.

Uses pydantic-settings to load configuration values from environment
variables and .env files. The analysis service and its tooling import
their settings from this module to ensure consistent configuration
handling.

All environment variables are prefixed with ``FW_`` to avoid collisions.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Central configuration loaded from ``FW_``-prefixed environment variables.

    Attributes:
        lexicon_path: Path to a JSON lexicon file (empty = packaged default).
        default_locale: Locale used when a caller does not supply one.
        matcher_backend: Term-matching backend (``regex`` or ``aho_corasick``).
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_json: Render log lines as JSON (``False`` = console renderer).
        api_host: Bind address for the analysis service.
        api_port: Bind port for the analysis service.
        max_transcript_chars: Largest transcript accepted over HTTP.
    """

    model_config = SettingsConfigDict(
        env_prefix="FW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Lexicon ──
    lexicon_path: str = Field(
        default="",
        description="Path to a JSON lexicon file (empty = packaged default).",
    )
    default_locale: str = Field(
        default="en",
        min_length=1,
        max_length=35,
        description="Locale used when a caller does not supply one.",
    )

    # ── Matching ──
    matcher_backend: Literal["regex", "aho_corasick"] = Field(
        default="regex",
        description="Term-matching backend.",
    )

    # ── Logging ──
    log_level: str = Field(default="INFO", description="Logging level.")
    log_json: bool = Field(default=True, description="Render log lines as JSON.")

    # ── API ──
    api_host: str = Field(default="0.0.0.0", description="Service bind address.")
    api_port: int = Field(default=8010, ge=1, le=65535, description="Service bind port.")
    max_transcript_chars: int = Field(
        default=200_000,
        ge=1,
        description="Largest transcript accepted over HTTP.",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached application settings singleton.

    Returns:
        The global ``Settings`` instance.
    """
    return Settings()
