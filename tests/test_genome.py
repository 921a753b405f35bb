#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
wgsimcheck v0.1.0

Tests for the contig table.

Author: wgsimcheck Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import gzip

import pytest

from wgsimcheck.core.errors import ContigLookupError
from wgsimcheck.core.genome import ContigRecord, ContigTable


class TestContigTableLayout:
    """Test construction of the absolute coordinate layout."""

    def test_cumulative_offsets(self, contig_table):
        assert contig_table.offset_of_contig("chrA") == 0
        assert contig_table.offset_of_contig("chr_B") == 1000
        assert contig_table.offset_of_contig("chrC") == 2500
        assert contig_table.genome_length == 3000

    def test_unknown_contig_offset(self, contig_table):
        assert contig_table.offset_of_contig("chrZ") is None

    def test_gap_between_contigs(self):
        table = ContigTable.from_lengths([("a", 100), ("b", 50)], gap=10)

        assert table.offset_of_contig("b") == 110
        assert table.genome_length == 160

    def test_container_protocol(self, contig_table):
        assert len(contig_table) == 3
        assert "chr_B" in contig_table
        assert "chrZ" not in contig_table
        assert [c.name for c in contig_table] == ["chrA", "chr_B", "chrC"]
        assert contig_table.get("chrC") == ContigRecord("chrC", 2500, 500)

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError):
            ContigTable.from_lengths([("a", 10), ("a", 20)])

    def test_non_positive_length_rejected(self):
        with pytest.raises(ValueError):
            ContigTable.from_lengths([("a", 0)])

    def test_from_offsets_mapping(self):
        table = ContigTable.from_offsets({"chr2": 500, "chr1": 0})

        assert [c.name for c in table] == ["chr1", "chr2"]
        assert table.get("chr1").length is None


class TestContigAtLocation:
    """Test location -> contig lookups."""

    @pytest.mark.parametrize("location,name", [
        (0, "chrA"),
        (999, "chrA"),
        (1000, "chr_B"),
        (2499, "chr_B"),
        (2500, "chrC"),
        (2999, "chrC"),
    ])
    def test_boundaries(self, contig_table, location, name):
        assert contig_table.contig_at_location(location).name == name

    def test_past_end(self, contig_table):
        with pytest.raises(ContigLookupError):
            contig_table.contig_at_location(3000)

    def test_negative_location(self, contig_table):
        with pytest.raises(ContigLookupError):
            contig_table.contig_at_location(-1)

    def test_location_in_gap(self):
        table = ContigTable.from_lengths([("a", 100), ("b", 50)], gap=10)

        with pytest.raises(ContigLookupError):
            table.contig_at_location(105)
        assert table.contig_at_location(110).name == "b"

    def test_unknown_lengths_extend_to_next_contig(self):
        table = ContigTable.from_offsets([("chr1", 1000), ("chr2", 5000)])

        assert table.contig_at_location(4999).name == "chr1"
        assert table.contig_at_location(10 ** 9).name == "chr2"
        with pytest.raises(ContigLookupError):
            table.contig_at_location(999)

    def test_empty_table(self):
        with pytest.raises(ContigLookupError):
            ContigTable([]).contig_at_location(0)


class TestContigTableFromFiles:
    """Test loading contig layouts from reference files."""

    def test_from_fasta(self, reference_fasta):
        table = ContigTable.from_fasta(reference_fasta)

        assert [c.name for c in table] == ["chr1", "scaffold_7"]
        assert table.offset_of_contig("scaffold_7") == 640
        assert table.genome_length == 1040

    def test_from_gzipped_fasta(self, temp_output_dir):
        path = temp_output_dir / "ref.fa.gz"
        with gzip.open(path, "wt") as f:
            f.write(">c1\nACGT\n>c2\nAC\n")

        table = ContigTable.from_fasta(path)

        assert table.offset_of_contig("c2") == 4

    def test_from_fai(self, reference_fai):
        table = ContigTable.from_fai(reference_fai, gap=100)

        assert table.offset_of_contig("scaffold_7") == 740

    def test_missing_files(self, temp_output_dir):
        with pytest.raises(FileNotFoundError):
            ContigTable.from_fasta(temp_output_dir / "missing.fa")
        with pytest.raises(FileNotFoundError):
            ContigTable.from_fai(temp_output_dir / "missing.fa.fai")

# wgsimcheck v0.1.0
# Any usage is subject to this software's license.
