"""
Sequence file I/O for FqStats.

Handles the first two processing stages:
- decompress.py: gzip detection/decompression and strict ASCII decoding
- parser.py: FASTA/FASTQ detection and lazy sequence extraction
"""

from .decompress import (
    RawInput,
    decode,
    declares_compression,
    is_gzip_data,
    GZIP_MAGIC,
    COMPRESSED_EXTENSIONS,
)
from .parser import (
    SequenceFormat,
    parse,
    parse_with_format,
    detect_format,
    iter_fasta_sequences,
    iter_fastq_sequences,
)

__all__ = [
    # Decompression adapter
    "RawInput",
    "decode",
    "declares_compression",
    "is_gzip_data",
    "GZIP_MAGIC",
    "COMPRESSED_EXTENSIONS",
    
    # Format parser
    "SequenceFormat",
    "parse",
    "parse_with_format",
    "detect_format",
    "iter_fasta_sequences",
    "iter_fastq_sequences",
]
