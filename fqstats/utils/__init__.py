"""
Utilities module for FqStats.

This module provides the glue around the core stages:
- sequence_utils.py: base-composition helpers used by the aggregator
- pipeline.py: processing pipeline (file/buffer -> SequenceStats)
- formatting.py: presentation formatting for the CLI

pipeline and formatting depend on fqstats.analysis and are imported from
their own modules.
"""

from .sequence_utils import count_gc, gc_fraction

__all__ = [
    "count_gc",
    "gc_fraction",
]
