"""
FqStats v0.1.0

Tests for CLI presentation helpers.
"""

from fqstats.analysis.sequence_stats import SequenceStats, summarize
from fqstats.utils.formatting import (
    format_fraction,
    format_number,
    format_stats_summary,
    format_stats_tsv,
)


class TestNumberFormatting:
    """Test number and percentage formatting."""
    
    def test_thousands_separator(self):
        assert format_number(987654321) == "987,654,321"
        assert format_number(12) == "12"
    
    def test_float_truncated(self):
        assert format_number(123.95) == "123"
    
    def test_undefined(self):
        assert format_number(None) == "N/A"
        assert format_fraction(None) == "N/A"
    
    def test_fraction_as_percentage(self):
        assert format_fraction(0.41237) == "41.24%"
        assert format_fraction(1.0, decimals=0) == "100%"


class TestStatsRendering:
    """Test rendering of whole statistics records."""
    
    def test_summary_lines(self):
        stats = SequenceStats(
            name="sample.fastq.gz",
            total_sequences=1234567,
            total_bases=987654321,
            mean_length=123.45,
            longest=54321,
            shortest=12,
            n50=45678,
            file_format="fastq",
        )
        text = format_stats_summary(stats)
        
        assert "sample.fastq.gz" in text
        assert "1,234,567" in text
        assert "987,654,321" in text
        assert "45,678" in text
        assert "FASTQ" in text
        assert "GC Content" not in text
    
    def test_summary_empty_input(self):
        text = format_stats_summary(summarize("empty.fa", []))
        
        shortest_line = [line for line in text.splitlines() if line.startswith("Shortest")][0]
        assert shortest_line.endswith("N/A")
    
    def test_summary_with_gc(self):
        text = format_stats_summary(summarize("x.fa", ["GGCC", "ATAT"], compute_gc=True))
        assert "50.00%" in text
    
    def test_tsv(self):
        stats = summarize("x.fa", ["ACGT", "GGCCAA"], file_format="fasta")
        header, values = format_stats_tsv(stats).split("\n")
        
        assert header.split("\t")[0] == "name"
        row = dict(zip(header.split("\t"), values.split("\t")))
        assert row["n50"] == "6"
        assert row["mean_length"] == "5.0"
        assert row["gc_fraction"] == ""
