#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
FqStats v0.1.0

Statistics aggregator: folds a stream of sequences into a SequenceStats
record (count, total bases, length extrema, mean, N50, optional GC).

Author: FqStats Development Team
License: MIT License - See LICENSE
"""

from __future__ import annotations
import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Optional

from ..utils.sequence_utils import count_gc, gc_fraction

logger = logging.getLogger(__name__)


# ============================================================================
#                           STATISTICS RECORD
# ============================================================================

@dataclass(frozen=True)
class SequenceStats:
    """
    Summary statistics for one sequence file.
    
    Attributes:
        name: Source name (usually the file name)
        total_sequences: Number of sequence records
        total_bases: Sum of all record lengths
        mean_length: Mean record length (None when there are no records)
        longest: Longest record length (0 when there are no records)
        shortest: Shortest record length (None when there are no records)
        n50: N50 of record lengths (0 when there are no records)
        gc_fraction: G+C over all bases (None unless requested and bases > 0)
        file_format: Detected format name ('fasta'/'fastq'), if known
    """
    name: str
    total_sequences: int = 0
    total_bases: int = 0
    mean_length: Optional[float] = None
    longest: int = 0
    shortest: Optional[int] = None
    n50: int = 0
    gc_fraction: Optional[float] = None
    file_format: Optional[str] = None
    
    @property
    def is_empty(self) -> bool:
        """True if no sequence records were found."""
        return self.total_sequences == 0
    
    def to_dict(self) -> Dict[str, Any]:
        """Export as a plain dictionary (JSON/YAML friendly)."""
        return asdict(self)
    
    def __repr__(self) -> str:
        """String representation."""
        return (f"SequenceStats(name='{self.name}', sequences={self.total_sequences}, "
                f"bases={self.total_bases}, n50={self.n50})")


# ============================================================================
#                              N50
# ============================================================================

def calculate_n50(lengths: Iterable[int], total: Optional[int] = None) -> int:
    """
    Calculate N50 of a collection of lengths.
    
    Lengths are sorted longest first and summed until the running total
    reaches half of all bases. Half is floor(total / 2), so for an odd total
    the threshold rounds down.
    
    Args:
        lengths: Record lengths (any order)
        total: Precomputed sum of lengths (computed if omitted)
    
    Returns:
        N50 length, or 0 if there are no lengths
    
    Example:
        >>> calculate_n50([4, 6])
        6
    """
    sorted_lengths = sorted(lengths, reverse=True)
    if total is None:
        total = sum(sorted_lengths)
    half_total = total // 2
    
    running_sum = 0
    for length in sorted_lengths:
        running_sum += length
        if running_sum >= half_total:
            return length
    
    return 0


# ============================================================================
#                           AGGREGATION
# ============================================================================

def summarize(
    name: str,
    records: Iterable[str],
    compute_gc: bool = False,
    file_format: Optional[str] = None,
) -> SequenceStats:
    """
    Compute summary statistics over a stream of sequences.
    
    The stream is consumed once. Zero records is a valid outcome and yields
    a stats record with undefined (None) mean and shortest length.
    
    Args:
        name: Source name stored in the result
        records: Sequence strings (e.g. from fqstats.io.parse)
        compute_gc: Also compute the overall GC fraction
        file_format: Detected format name to store in the result
    
    Returns:
        Immutable SequenceStats
    """
    lengths: List[int] = []
    total_bases = 0
    longest = 0
    shortest: Optional[int] = None
    gc_count = 0
    
    for sequence in records:
        length = len(sequence)
        lengths.append(length)
        total_bases += length
        
        if length > longest:
            longest = length
        if shortest is None or length < shortest:
            shortest = length
        
        if compute_gc:
            gc_count += count_gc(sequence)
    
    total_sequences = len(lengths)
    if total_sequences == 0:
        logger.info(f"No sequences found in {name}")
        return SequenceStats(name=name, file_format=file_format)
    
    stats = SequenceStats(
        name=name,
        total_sequences=total_sequences,
        total_bases=total_bases,
        mean_length=total_bases / total_sequences,
        longest=longest,
        shortest=shortest,
        n50=calculate_n50(lengths, total_bases),
        gc_fraction=gc_fraction(gc_count, total_bases) if compute_gc else None,
        file_format=file_format,
    )
    logger.info(f"Summarized {name}: {total_sequences:,} sequences, "
                f"{total_bases:,} bases, N50 {stats.n50:,}")
    return stats

# FqStats v0.1.0
# Any usage is subject to this software's license.
