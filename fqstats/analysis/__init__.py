"""
FqStats v0.1.0

Analysis module for FqStats.

Aggregates extracted sequences into summary statistics (N50, extrema, GC).
"""

from .sequence_stats import SequenceStats, summarize, calculate_n50

__all__ = [
    "SequenceStats",
    "summarize",
    "calculate_n50",
]
