#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
FqStats v0.1.0

Package initialization and public API.

Summary statistics (count, total bases, length extrema, mean, N50, GC)
for FASTA/FASTQ files, plain or gzip-compressed.

Author: FqStats Development Team
License: MIT License - See LICENSE
"""

from .version import __version__
from .errors import (
    FqStatsError,
    DecodeError,
    NotActuallyCompressedError,
    InvalidEncodingError,
    DecompressionError,
    ParseError,
    EmptyInputError,
    InputReadError,
)
from .io import RawInput, SequenceFormat, decode, parse, detect_format
from .analysis import SequenceStats, summarize, calculate_n50
from .utils.pipeline import process_input, process_file, classify_extension

__all__ = [
    "__version__",
    # Errors
    "FqStatsError",
    "DecodeError",
    "NotActuallyCompressedError",
    "InvalidEncodingError",
    "DecompressionError",
    "ParseError",
    "EmptyInputError",
    "InputReadError",
    # Core stages
    "RawInput",
    "SequenceFormat",
    "decode",
    "parse",
    "detect_format",
    "SequenceStats",
    "summarize",
    "calculate_n50",
    # Pipeline
    "process_input",
    "process_file",
    "classify_extension",
]

# FqStats v0.1.0
# Any usage is subject to this software's license.
