#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
FqStats v0.1.0

Processing pipeline: raw bytes -> decoded text -> sequences -> statistics.

Each call is independent and holds no state across calls, so separate files
may be processed concurrently by the caller.

Author: FqStats Development Team
License: MIT License - See LICENSE
"""

import logging
from pathlib import Path, PurePath
from typing import Optional, Tuple, Union

from ..analysis.sequence_stats import SequenceStats, summarize
from ..errors import InputReadError
from ..io.decompress import COMPRESSED_EXTENSIONS, RawInput, decode
from ..io.parser import SequenceFormat, parse_with_format

logger = logging.getLogger(__name__)

# Extension -> format hint (classification only, never enforced)
FORMAT_EXTENSIONS = {
    '.fasta': SequenceFormat.FASTA,
    '.fa': SequenceFormat.FASTA,
    '.fastq': SequenceFormat.FASTQ,
    '.fq': SequenceFormat.FASTQ,
}


def classify_extension(name: str) -> Tuple[Optional[SequenceFormat], bool]:
    """
    Classify a file name by its extension.
    
    Recognises .fasta, .fa, .fastq and .fq, each optionally followed by .gz.
    
    Args:
        name: File name or path
    
    Returns:
        Tuple of (format hint or None if unrecognised, compressed flag)
    
    Examples:
        >>> classify_extension("reads.fq.gz")
        (<SequenceFormat.FASTQ: 'fastq'>, True)
    """
    suffixes = [s.lower() for s in PurePath(name).suffixes]
    compressed = bool(suffixes) and suffixes[-1] in COMPRESSED_EXTENSIONS
    if compressed:
        suffixes = suffixes[:-1]
    
    file_format = FORMAT_EXTENSIONS.get(suffixes[-1]) if suffixes else None
    return file_format, compressed


def process_input(raw: RawInput, compute_gc: bool = False) -> SequenceStats:
    """
    Run the full pipeline over an in-memory buffer.
    
    Args:
        raw: Raw file contents and originating name
        compute_gc: Also compute the overall GC fraction
    
    Returns:
        SequenceStats named after raw.name
    
    Raises:
        DecodeError: From the decompression adapter
        ParseError: From the format parser
    """
    format_hint, _ = classify_extension(raw.name)
    if format_hint is None:
        logger.warning(f"Unrecognised extension for {raw.name}; detecting format from content")
    
    text = decode(raw)
    file_format, sequences = parse_with_format(text)
    
    if format_hint is not None and format_hint is not file_format:
        logger.warning(
            f"{raw.name} is named as {format_hint.value.upper()} "
            f"but content looks like {file_format.value.upper()}"
        )
    
    return summarize(raw.name, sequences, compute_gc=compute_gc,
                     file_format=file_format.value)


def read_input(filepath: Union[str, Path]) -> RawInput:
    """
    Read a file's bytes into a RawInput.
    
    Args:
        filepath: Path to sequence file
    
    Returns:
        RawInput named after the file's base name
    
    Raises:
        InputReadError: If the file cannot be read
    """
    filepath = Path(filepath)
    
    try:
        data = filepath.read_bytes()
    except OSError as e:
        raise InputReadError(filepath, e.strerror or str(e)) from e
    
    logger.debug(f"Read {len(data):,} bytes from {filepath}")
    return RawInput(data=data, name=filepath.name)


def process_file(filepath: Union[str, Path], compute_gc: bool = False) -> SequenceStats:
    """
    Read a sequence file from disk and compute its statistics.
    
    Args:
        filepath: Path to FASTA/FASTQ file (can be gzipped)
        compute_gc: Also compute the overall GC fraction
    
    Returns:
        SequenceStats named after the file's base name
    
    Raises:
        InputReadError: If the file cannot be read
        DecodeError: From the decompression adapter
        ParseError: From the format parser
    
    Examples:
        >>> stats = process_file("assembly.fa.gz", compute_gc=True)
        >>> print(stats.n50, stats.gc_fraction)
    """
    logger.info(f"Processing {filepath}")
    return process_input(read_input(filepath), compute_gc=compute_gc)

# FqStats v0.1.0
# Any usage is subject to this software's license.
