"""
fw-common: Shared library for FillerWatch.

Provides the common data models, configuration management and
structured logging setup used by the filler analysis service.
"""

from fw_common.config import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
