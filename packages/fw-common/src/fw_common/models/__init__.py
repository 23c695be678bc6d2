"""
Shared Pydantic data models for FillerWatch.

This package contains the lexicon entry model and the transcript
analysis result models.
"""

from fw_common.models.analysis import AnalysisResult, TranscriptSegment
from fw_common.models.lexicon import FillerCategory, LexiconEntry

__all__ = [
    "AnalysisResult",
    "FillerCategory",
    "LexiconEntry",
    "TranscriptSegment",
]
