"""
Prometheus metrics for the FillerWatch analysis service.
"""

from __future__ import annotations

from prometheus_client import Counter, Histogram

analysis_requests_total = Counter(
    "filler_analysis_requests_total",
    "Total analysis requests served",
    ["endpoint"],
)
analysis_fillers_detected_total = Counter(
    "filler_analysis_fillers_detected_total",
    "Filler occurrences detected by the analyze endpoint",
    ["category"],
)
analysis_duration_seconds = Histogram(
    "filler_analysis_duration_seconds",
    "Time spent analysing one transcript",
    ["endpoint"],
)
