#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
FqStats v0.1.0

Decompression adapter.

Turns a raw byte buffer plus its originating file name into ASCII text:
- Files named *.gz are checked for the gzip magic bytes and decompressed
- A *.gz name over non-gzip bytes is reported as mislabeled, not corrupt
- Everything else passes through unchanged
- The resulting bytes must be pure ASCII

Author: FqStats Development Team
License: MIT License - See LICENSE
"""

# =============================================================================
# SECTION 1: IMPORTS AND DEPENDENCIES
# =============================================================================

import gzip
import logging
import zlib
from dataclasses import dataclass
from pathlib import PurePath

from ..errors import (
    DecompressionError,
    InvalidEncodingError,
    NotActuallyCompressedError,
)

logger = logging.getLogger(__name__)

GZIP_MAGIC = b'\x1f\x8b'
COMPRESSED_EXTENSIONS = ('.gz', '.gzip')


# =============================================================================
# SECTION 2: RAW INPUT
# =============================================================================

@dataclass(frozen=True)
class RawInput:
    """
    Raw file contents handed over by the caller.
    
    Attributes:
        data: File contents as bytes
        name: Originating file name; its extension is the declared extension
    """
    data: bytes
    name: str = ""
    
    @property
    def extension(self) -> str:
        """Lower-cased final extension of the file name ('' if none)."""
        return PurePath(self.name).suffix.lower()
    
    def __repr__(self) -> str:
        """String representation (never dumps the buffer)."""
        return f"RawInput(name='{self.name}', size={len(self.data)})"


# =============================================================================
# SECTION 3: DETECTION HELPERS
# =============================================================================

def declares_compression(name: str) -> bool:
    """
    Check whether a file name claims gzip compression.
    
    Args:
        name: File name or path
    
    Returns:
        True if the final extension is .gz (or .gzip)
    """
    return PurePath(name).suffix.lower() in COMPRESSED_EXTENSIONS


def is_gzip_data(data: bytes) -> bool:
    """
    Check the gzip magic bytes at the start of a buffer.
    
    Args:
        data: Raw bytes
    
    Returns:
        True if the buffer starts with 1f 8b
    """
    return data[:2] == GZIP_MAGIC


# =============================================================================
# SECTION 4: DECODING
# =============================================================================

def _decode_ascii(data: bytes) -> str:
    try:
        return data.decode('ascii')
    except UnicodeDecodeError as e:
        raise InvalidEncodingError(e.start) from e


def decode(raw: RawInput) -> str:
    """
    Decode raw input into ASCII text, decompressing gzip when declared.
    
    Decompression is all-or-nothing: either the full text is returned or an
    error is raised.
    
    Args:
        raw: Raw input buffer and its file name
    
    Returns:
        Decoded text
    
    Raises:
        NotActuallyCompressedError: Name says .gz but the magic bytes disagree
        DecompressionError: Gzip stream is truncated or corrupt
        InvalidEncodingError: Content contains a non-ASCII byte
    
    Examples:
        >>> decode(RawInput(b">a\\nACGT\\n", "a.fa"))
        '>a\\nACGT\\n'
    """
    data = raw.data
    
    if declares_compression(raw.name):
        if not is_gzip_data(data):
            raise NotActuallyCompressedError(raw.name)
        
        try:
            data = gzip.decompress(data)
        except (OSError, EOFError, zlib.error) as e:
            raise DecompressionError(str(e) or e.__class__.__name__) from e
        
        logger.debug(
            f"Decompressed {raw.name}: {len(raw.data):,} -> {len(data):,} bytes"
        )
    
    return _decode_ascii(data)

# FqStats v0.1.0
# Any usage is subject to this software's license.
