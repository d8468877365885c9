"""Per-space metric accumulators."""

from .cyclomatic import MIN_SENTINEL, CyclomaticStats, CyclomaticSummary, compute

__all__ = [
    "MIN_SENTINEL",
    "CyclomaticStats",
    "CyclomaticSummary",
    "compute",
]
