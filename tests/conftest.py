#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
wgsimcheck v0.1.0

Pytest configuration and shared fixtures.

Author: wgsimcheck Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest
from pathlib import Path
import tempfile
import shutil

from wgsimcheck.core.genome import ContigOffsetResolver, ContigRecord, ContigTable
from wgsimcheck.core.errors import ContigLookupError


class FakeResolver(ContigOffsetResolver):
    """Dict-backed resolver standing in for a real genome index."""

    def __init__(self, offsets):
        self.offsets = dict(offsets)
        self.lookups = []

    def offset_of_contig(self, name):
        self.lookups.append(name)
        return self.offsets.get(name)

    def contig_at_location(self, location):
        best = None
        for name, base in self.offsets.items():
            if base <= location and (best is None or base > best.base_offset):
                best = ContigRecord(name=name, base_offset=base)
        if best is None:
            raise ContigLookupError(f"no contig at {location}")
        return best


@pytest.fixture
def temp_output_dir():
    """Create temporary output directory for tests."""
    temp_dir = tempfile.mkdtemp(prefix="wgsimcheck_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def fake_resolver():
    """chr1 at 1000, scaffold_7 at 5000."""
    return FakeResolver({"chr1": 1000, "scaffold_7": 5000})


@pytest.fixture
def contig_table():
    """Three contigs laid out end to end: chrA (0-999), chr_B (1000-2499), chrC (2500-2999)."""
    return ContigTable.from_lengths([("chrA", 1000), ("chr_B", 1500), ("chrC", 500)])


@pytest.fixture
def reference_sequences():
    """Small ACGT-only reference with one contig containing an underscore."""
    unit = "ACGTTGCAAGCTTCGA"
    return {
        "chr1": unit * 40,        # 640 bp
        "scaffold_7": unit * 25,  # 400 bp
    }


@pytest.fixture
def reference_fasta(temp_output_dir, reference_sequences):
    """Write reference_sequences to a FASTA file."""
    path = temp_output_dir / "ref.fa"
    with open(path, "w") as f:
        for name, seq in reference_sequences.items():
            f.write(f">{name}\n")
            for i in range(0, len(seq), 60):
                f.write(seq[i:i + 60] + "\n")
    return path


@pytest.fixture
def reference_fai(temp_output_dir, reference_sequences):
    """samtools-style .fai for reference_sequences (offset columns are nominal)."""
    path = temp_output_dir / "ref.fa.fai"
    with open(path, "w") as f:
        for name, seq in reference_sequences.items():
            f.write(f"{name}\t{len(seq)}\t0\t60\t61\n")
    return path

# wgsimcheck v0.1.0
# Any usage is subject to this software's license.
