#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
wgsimcheck v0.1.0

Tests for sequence manipulation utilities.

Author: wgsimcheck Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from wgsimcheck.utils.sequence_utils import reverse_complement, has_ambiguous_bases


class TestReverseComplement:
    """Test reverse complement functions."""

    def test_reverse_complement_basic(self):
        """Test basic reverse complement."""
        assert reverse_complement("ATCG") == "CGAT"

    def test_reverse_complement_palindrome(self):
        """Test reverse complement of palindromic sequence."""
        sequence = "GAATTC"  # EcoRI site
        assert reverse_complement(sequence) == sequence

    def test_lowercase_and_n(self):
        assert reverse_complement("acgN") == "Ncgt"


class TestAmbiguousBases:
    """Test detection of non-ACGT bases."""

    def test_clean_sequence(self):
        assert not has_ambiguous_bases("ACGTacgt")

    def test_n_detected(self):
        assert has_ambiguous_bases("ACGNT")

    def test_empty(self):
        assert not has_ambiguous_bases("")
