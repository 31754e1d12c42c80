#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
FqStats v0.1.0

Exception hierarchy for FqStats.

Every error is terminal for the processing call that raised it. The string
form of each exception is a human-readable message suitable for display.

Author: FqStats Development Team
License: MIT License - See LICENSE
"""

from pathlib import PurePath


class FqStatsError(Exception):
    """Base class for all FqStats errors."""
    pass


# ============================================================================
# Decoding errors
# ============================================================================

class DecodeError(FqStatsError):
    """Raised when raw input bytes cannot be turned into text."""
    pass


class NotActuallyCompressedError(DecodeError):
    """Raised when a file is named as gzip but its bytes are not gzip data."""

    def __init__(self, name: str = ""):
        self.name = name
        suffix = PurePath(name).suffix.lower() or ".gz"
        super().__init__(f"File has {suffix} extension but is not gzipped")


class InvalidEncodingError(DecodeError):
    """Raised when decoded content contains a non-ASCII byte."""

    def __init__(self, offset: int):
        self.offset = offset
        super().__init__(
            f"Failed to decode file content (non-ASCII byte at offset {offset})"
        )


class DecompressionError(DecodeError):
    """Raised when gzip data is present but cannot be decompressed."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Failed to decompress gzip data: {reason}")


# ============================================================================
# Parsing errors
# ============================================================================

class ParseError(FqStatsError):
    """Raised when decoded text cannot be parsed into sequence records."""
    pass


class EmptyInputError(ParseError):
    """Raised when the input contains no lines at all."""

    def __init__(self):
        super().__init__("File is empty")


# ============================================================================
# Caller-side errors
# ============================================================================

class InputReadError(FqStatsError):
    """Raised when the input file cannot be read."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read {path}: {reason}")


class ConfigValidationError(FqStatsError):
    """Raised when configuration loading or validation fails."""
    pass

# FqStats v0.1.0
# Any usage is subject to this software's license.
