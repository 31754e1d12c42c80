"""
FqStats v0.1.0

Sequence utility functions for FqStats.

Provides base-composition helpers shared by the statistics aggregator.
"""

from typing import Optional


def count_gc(sequence: str) -> int:
    """
    Count G and C bases in a sequence (either case).
    
    Args:
        sequence: DNA sequence string
        
    Returns:
        Number of G/C/g/c characters
        
    Example:
        >>> count_gc("ATgC")
        2
    """
    return (sequence.count('G') + sequence.count('C')
            + sequence.count('g') + sequence.count('c'))


def gc_fraction(gc_count: int, total_bases: int) -> Optional[float]:
    """
    Turn a GC count into a fraction of total bases.
    
    Args:
        gc_count: Number of G/C bases
        total_bases: Number of bases counted
        
    Returns:
        GC fraction (0.0 to 1.0), or None if there are no bases
    """
    if total_bases <= 0:
        return None
    return gc_count / total_bases


__all__ = [
    'count_gc',
    'gc_fraction',
]
