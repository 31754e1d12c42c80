#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
FqStats v0.1.0

Tests for the decompression adapter.

Author: FqStats Development Team
License: MIT License - See LICENSE
"""

import gzip

import pytest

from fqstats.errors import (
    DecodeError,
    DecompressionError,
    InvalidEncodingError,
    NotActuallyCompressedError,
)
from fqstats.io.decompress import (
    RawInput,
    declares_compression,
    decode,
    is_gzip_data,
)


class TestDetectionHelpers:
    """Test gzip name and magic-byte detection."""
    
    def test_declares_compression(self):
        """Only a final .gz/.gzip extension declares compression."""
        assert declares_compression("reads.fastq.gz")
        assert declares_compression("READS.FQ.GZ")
        assert declares_compression("reads.gzip")
        assert not declares_compression("reads.fastq")
        assert not declares_compression("reads.gz.fastq")
        assert not declares_compression("")
    
    def test_is_gzip_data(self):
        """Magic bytes 1f 8b identify gzip data."""
        assert is_gzip_data(gzip.compress(b"ACGT"))
        assert not is_gzip_data(b">a\nACGT\n")
        assert not is_gzip_data(b"\x1f")
        assert not is_gzip_data(b"")
    
    def test_raw_input_extension(self):
        """RawInput exposes its lower-cased final extension."""
        assert RawInput(b"", "Sample.FA").extension == ".fa"
        assert RawInput(b"", "sample.fa.gz").extension == ".gz"
        assert RawInput(b"").extension == ""
    
    def test_raw_input_repr_hides_data(self):
        """repr reports the size, not the buffer."""
        raw = RawInput(b"ACGT" * 1000, "big.fa")
        assert "size=4000" in repr(raw)
        assert "ACGT" not in repr(raw)


class TestDecode:
    """Test decoding of plain and compressed buffers."""
    
    def test_plain_passthrough(self, simple_fasta):
        """Uncompressed input is returned unchanged."""
        raw = RawInput(simple_fasta.encode("ascii"), "sample.fasta")
        assert decode(raw) == simple_fasta
    
    def test_gzip_round_trip(self, multiline_fasta):
        """Gzip-compressed FASTA decodes to the original text exactly."""
        payload = multiline_fasta.encode("ascii")
        raw = RawInput(gzip.compress(payload), "sample.fasta.gz")
        
        assert decode(raw).encode("ascii") == payload
    
    def test_uppercase_gz_extension(self, simple_fastq):
        """Extension matching is case-insensitive."""
        raw = RawInput(gzip.compress(simple_fastq.encode("ascii")), "READS.FQ.GZ")
        assert decode(raw) == simple_fastq
    
    def test_gz_name_with_plain_content(self, simple_fasta):
        """A .gz name over plain text is reported as mislabeled."""
        raw = RawInput(simple_fasta.encode("ascii"), "sample.fa.gz")
        
        with pytest.raises(NotActuallyCompressedError) as excinfo:
            decode(raw)
        
        assert str(excinfo.value) == "File has .gz extension but is not gzipped"
        assert excinfo.value.name == "sample.fa.gz"

    def test_gzip_name_with_plain_content(self, simple_fasta):
        """The message names the extension actually used."""
        raw = RawInput(simple_fasta.encode("ascii"), "sample.fa.GZIP")

        with pytest.raises(NotActuallyCompressedError) as excinfo:
            decode(raw)

        assert str(excinfo.value) == "File has .gzip extension but is not gzipped"
    
    def test_empty_gz_file_is_mislabeled(self):
        """An empty buffer named .gz has no magic bytes."""
        with pytest.raises(NotActuallyCompressedError):
            decode(RawInput(b"", "empty.fq.gz"))
    
    def test_gzip_content_without_gz_name(self, simple_fasta):
        """Gzip bytes are not decompressed unless the name says so."""
        raw = RawInput(gzip.compress(simple_fasta.encode("ascii")), "sample.fasta")
        
        # 0x8b at offset 1 is not ASCII
        with pytest.raises(InvalidEncodingError) as excinfo:
            decode(raw)
        
        assert excinfo.value.offset == 1
    
    def test_truncated_gzip(self, simple_fasta):
        """A truncated gzip stream is a decompression failure."""
        compressed = gzip.compress(simple_fasta.encode("ascii"))
        raw = RawInput(compressed[:len(compressed) // 2], "sample.fa.gz")
        
        with pytest.raises(DecompressionError):
            decode(raw)
    
    def test_corrupt_gzip_header(self):
        """Magic bytes followed by garbage fail to decompress."""
        raw = RawInput(b"\x1f\x8bnot really gzip", "sample.fa.gz")
        
        with pytest.raises(DecompressionError) as excinfo:
            decode(raw)
        
        assert "decompress" in str(excinfo.value)
    
    def test_non_ascii_rejected(self):
        """Any byte outside ASCII is rejected with its offset."""
        raw = RawInput(">a\nACGT\n>é\nGG\n".encode("utf-8"), "sample.fa")
        
        with pytest.raises(InvalidEncodingError) as excinfo:
            decode(raw)
        
        assert excinfo.value.offset == 9
        assert "Failed to decode" in str(excinfo.value)
    
    def test_non_ascii_inside_gzip_rejected(self):
        """The ASCII check also applies after decompression."""
        raw = RawInput(gzip.compress("@r\nAC\xffGT\n".encode("latin-1")), "r.fq.gz")
        
        with pytest.raises(InvalidEncodingError):
            decode(raw)
    
    def test_errors_share_base_class(self):
        """All adapter failures are DecodeErrors."""
        for error_type in (NotActuallyCompressedError, InvalidEncodingError, DecompressionError):
            assert issubclass(error_type, DecodeError)

# FqStats v0.1.0
# Any usage is subject to this software's license.
