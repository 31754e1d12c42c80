#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
FqStats v0.1.0

Pytest configuration and shared fixtures.

Author: FqStats Development Team
License: MIT License - See LICENSE
"""

import gzip

import pytest


@pytest.fixture
def simple_fasta():
    """Two-record FASTA with lengths 4 and 6."""
    return ">a\nACGT\n>b\nGGCCAA\n"


@pytest.fixture
def multiline_fasta():
    """FASTA with wrapped sequence lines and blank lines."""
    return (
        ">contig1 first contig\n"
        "ACGTACGTAC\n"
        "GTACGT\n"
        "\n"
        ">contig2\n"
        "TTTTAAAA\n"
        ">contig3\n"
        "GGGGCCCCGGGGCCCCGGGG\n"
        "CC\n"
    )


@pytest.fixture
def simple_fastq():
    """Generate simple FASTQ reads for testing."""
    return """@read1
ATCGATCGATCG
+
IIIIIIIIIIII
@read2
GCTAGCTAGCTA
+
IIIIIIIIIIII
@read3
GGCC
+
IIII
"""


@pytest.fixture
def fasta_file(tmp_path, simple_fasta):
    """Plain FASTA file on disk."""
    path = tmp_path / "sample.fasta"
    path.write_text(simple_fasta)
    return path


@pytest.fixture
def fastq_gz_file(tmp_path, simple_fastq):
    """Gzip-compressed FASTQ file on disk."""
    path = tmp_path / "reads.fastq.gz"
    path.write_bytes(gzip.compress(simple_fastq.encode("ascii")))
    return path


@pytest.fixture
def mislabeled_gz_file(tmp_path, simple_fasta):
    """Plain FASTA text saved under a .gz name."""
    path = tmp_path / "sample.fa.gz"
    path.write_text(simple_fasta)
    return path

# FqStats v0.1.0
# Any usage is subject to this software's license.
