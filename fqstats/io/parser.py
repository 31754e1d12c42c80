#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
FqStats v0.1.0

Format detection and sequence extraction for FASTA/FASTQ text.

Detection looks at the first line only: a leading '@' means FASTQ, anything
else means FASTA. FASTQ extraction assumes the canonical 4-line layout
(header, sequence, '+', quality) and does not validate it. A FASTA file whose
first line starts with '@' is therefore read as FASTQ.

Author: FqStats Development Team
License: MIT License - See LICENSE
"""

import logging
import re
from enum import Enum
from typing import Iterable, Iterator, List, Tuple

from ..errors import EmptyInputError

logger = logging.getLogger(__name__)

# Each of these characters ends a line on its own, so "\r\n" leaves an empty
# line behind; empty lines are skipped during extraction. Other control
# characters, including the \x1c-\x1e separators, stay inside the line.
_LINE_BREAK = re.compile(r"[\n\v\f\r\x85\u2028\u2029]")


class SequenceFormat(Enum):
    """Sequence file formats recognised by the parser."""
    FASTA = "fasta"
    FASTQ = "fastq"


def _split_lines(text: str) -> List[str]:
    if not text:
        raise EmptyInputError()
    return _LINE_BREAK.split(text)


def _format_of_first_line(first_line: str) -> SequenceFormat:
    if first_line.startswith('@'):
        return SequenceFormat.FASTQ
    return SequenceFormat.FASTA


def detect_format(text: str) -> SequenceFormat:
    """
    Detect the format of sequence text from its first line.
    
    Args:
        text: Decoded file content
    
    Returns:
        SequenceFormat.FASTQ if the first line starts with '@', else FASTA
    
    Raises:
        EmptyInputError: If the text has no lines
    """
    return _format_of_first_line(_split_lines(text)[0])


# =============================================================================
# EXTRACTION
# =============================================================================

def iter_fastq_sequences(lines: Iterable[str]) -> Iterator[str]:
    """
    Yield sequence lines from FASTQ lines.
    
    Empty lines are skipped. Counting non-empty lines from 1, every line whose
    position is 2 modulo 4 is a sequence line.
    
    Args:
        lines: FASTQ lines without line terminators
    
    Yields:
        Sequence strings
    """
    line_count = 0
    for line in lines:
        if not line:
            continue
        
        line_count += 1
        if line_count % 4 == 2:
            yield line


def iter_fasta_sequences(lines: Iterable[str]) -> Iterator[str]:
    """
    Yield sequences from FASTA lines.
    
    A '>' line closes the sequence being built; all other non-empty lines are
    concatenated onto it. Empty sequences are never yielded.
    
    Args:
        lines: FASTA lines without line terminators
    
    Yields:
        Sequence strings
    """
    chunks: List[str] = []
    for line in lines:
        if not line:
            continue
        
        if line.startswith('>'):
            if chunks:
                yield ''.join(chunks)
                chunks = []
        else:
            chunks.append(line)
    
    if chunks:
        yield ''.join(chunks)


def parse_with_format(text: str) -> Tuple[SequenceFormat, Iterator[str]]:
    """
    Parse decoded text and report the detected format alongside the stream.
    
    Args:
        text: Decoded file content
    
    Returns:
        Tuple of (detected format, iterator over sequence strings)
    
    Raises:
        EmptyInputError: If the text has no lines
    """
    lines = _split_lines(text)
    file_format = _format_of_first_line(lines[0])
    logger.debug(f"Detected {file_format.value.upper()} input ({len(lines):,} lines)")
    
    if file_format is SequenceFormat.FASTQ:
        return file_format, iter_fastq_sequences(lines)
    return file_format, iter_fasta_sequences(lines)


def parse(text: str) -> Iterator[str]:
    """
    Parse decoded FASTA/FASTQ text into a lazy stream of sequences.
    
    Empty input is rejected immediately; the returned iterator is single-pass
    and yields sequences in input order.
    
    Args:
        text: Decoded file content
    
    Returns:
        Iterator over sequence strings (headers discarded)
    
    Raises:
        EmptyInputError: If the text has no lines
    
    Examples:
        >>> list(parse(">a\\nAC\\nGT\\n>b\\nGG\\n"))
        ['ACGT', 'GG']
    """
    return parse_with_format(text)[1]

# FqStats v0.1.0
# Any usage is subject to this software's license.
