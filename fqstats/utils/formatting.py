"""
FqStats v0.1.0

Presentation helpers for the command line.

The core returns raw numbers; separators, percentages and "N/A" for
undefined values are applied here only.
"""

from typing import List, Optional, Union

from ..analysis.sequence_stats import SequenceStats

NOT_AVAILABLE = "N/A"

TSV_COLUMNS = [
    'name',
    'file_format',
    'total_sequences',
    'total_bases',
    'mean_length',
    'longest',
    'shortest',
    'n50',
    'gc_fraction',
]


def format_number(value: Optional[Union[int, float]]) -> str:
    """
    Format a number with thousands separators.
    
    Floats are truncated to whole numbers, as for an average length.
    
    Example:
        >>> format_number(1234567)
        '1,234,567'
    """
    if value is None:
        return NOT_AVAILABLE
    return f"{int(value):,}"


def format_fraction(value: Optional[float], decimals: int = 2) -> str:
    """Format a 0-1 fraction as a percentage ('N/A' if undefined)."""
    if value is None:
        return NOT_AVAILABLE
    return f"{value * 100:.{decimals}f}%"


def format_stats_summary(stats: SequenceStats) -> str:
    """
    Render statistics as an aligned, human-readable block.
    
    Args:
        stats: Statistics to render
    
    Returns:
        Multi-line summary
    """
    rows = [
        ("Filename", stats.name),
        ("Format", stats.file_format.upper() if stats.file_format else NOT_AVAILABLE),
        ("Total Sequences", format_number(stats.total_sequences)),
        ("Total Bases", format_number(stats.total_bases)),
        ("N50", format_number(stats.n50)),
        ("Average Length", format_number(stats.mean_length)),
        ("Longest Sequence", format_number(stats.longest)),
        ("Shortest Sequence", format_number(stats.shortest)),
    ]
    if stats.gc_fraction is not None:
        rows.append(("GC Content", format_fraction(stats.gc_fraction)))
    
    width = max(len(label) for label, _ in rows)
    return "\n".join(f"{label:<{width}}  {value}" for label, value in rows)


def format_stats_tsv(stats: SequenceStats) -> str:
    """Render statistics as a TSV header line plus one value line."""
    record = stats.to_dict()
    values: List[str] = []
    for column in TSV_COLUMNS:
        value = record[column]
        values.append("" if value is None else str(value))
    return "\t".join(TSV_COLUMNS) + "\n" + "\t".join(values)


__all__ = [
    'NOT_AVAILABLE',
    'format_number',
    'format_fraction',
    'format_stats_summary',
    'format_stats_tsv',
]
