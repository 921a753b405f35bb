#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
wgsimcheck v0.1.0

Tests for wgsim read ID parsing.

Author: wgsimcheck Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging

import pytest

from wgsimcheck.core.errors import FailureKind, IdFailure, IdTooLongError
from wgsimcheck.core.id_parser import CodecSettings, ParsedID, parse_wgsim_id


class TestWellFormedIds:
    """Test parsing of valid wgsim IDs."""

    def test_paired_id(self):
        """Test a standard wgsim paired-end name."""
        parsed = parse_wgsim_id("chr1_64253297_64253619_3:0:0_2:1:0_0/1")

        assert parsed == ParsedID("chr1", 64253297, 64253619)
        assert parsed.ok
        assert not parsed.is_single_end

    def test_contig_with_underscore(self):
        """Test that contig names containing '_' survive the backward scan."""
        parsed = parse_wgsim_id("scaffold_7_50_150_0:0:0_0:0:0_0/1")

        assert parsed.contig_name == "scaffold_7"
        assert parsed.begin == 50
        assert parsed.end == 150

    def test_contig_with_several_underscores(self):
        parsed = parse_wgsim_id("NZ_CP027599.1_88140_93139_0:0:0_0:0:0_2/1")

        assert parsed.contig_name == "NZ_CP027599.1"
        assert (parsed.begin, parsed.end) == (88140, 93139)

    def test_suffix_with_underscores_and_colons(self):
        """Underscores after the first colon are ignored."""
        parsed = parse_wgsim_id("chrX_10_20_0::0:0_2:0:a0_0/2")

        assert parsed == ParsedID("chrX", 10, 20)

    def test_single_end_id(self):
        """Test that an empty end field collapses to begin."""
        parsed = parse_wgsim_id("chr2_500__0:0:0_0/1")

        assert parsed == ParsedID("chr2", 500, 500, is_single_end=True)
        assert parsed.is_single_end

    def test_one_base_paired_id_is_not_single_end(self):
        """Equal offsets alone do not make an ID single-end."""
        parsed = parse_wgsim_id("chr1_10_10_0:0:0_0:0:0_0/1")

        assert (parsed.begin, parsed.end) == (10, 10)
        assert not parsed.is_single_end

    def test_begin_greater_than_end_is_kept(self):
        """The parser reports offsets as written; ordering is the normalizer's job."""
        parsed = parse_wgsim_id("chr1_300_100_0:0:0")

        assert (parsed.begin, parsed.end) == (300, 100)

    def test_bytes_input(self):
        parsed = parse_wgsim_id(b"chr1_100_200_0::0:0_2:0:a0_0/1")

        assert parsed == ParsedID("chr1", 100, 200)


class TestMalformedIds:
    """Test rejection of malformed IDs."""

    def test_no_colon(self):
        result = parse_wgsim_id("chr1_100_200_0")

        assert isinstance(result, IdFailure)
        assert not result.ok
        assert result.kind == FailureKind.MALFORMED_DELIMITERS
        assert "colon" in result.detail

    def test_no_underscore(self):
        result = parse_wgsim_id("abc123")

        assert result.kind == FailureKind.MALFORMED_DELIMITERS

    def test_no_underscore_before_colon(self):
        result = parse_wgsim_id("abc:123_4_5")

        assert result.kind == FailureKind.MALFORMED_DELIMITERS
        assert "underscore before colon" in result.detail

    def test_missing_second_underscore(self):
        result = parse_wgsim_id("chr1_0:0:0")

        assert result.kind == FailureKind.MALFORMED_DELIMITERS
        assert "second underscore" in result.detail

    def test_missing_third_underscore(self):
        result = parse_wgsim_id("100_200_0:0:0")

        assert result.kind == FailureKind.MALFORMED_DELIMITERS
        assert "third underscore" in result.detail

    def test_non_numeric_begin(self):
        result = parse_wgsim_id("chr1_abc_200_0::0")

        assert result.kind == FailureKind.NUMERIC_PARSE_FAILURE
        assert "offset1" in result.detail

    def test_non_numeric_end(self):
        result = parse_wgsim_id("chr1_100_2x0_0::0")

        assert result.kind == FailureKind.NUMERIC_PARSE_FAILURE
        assert "offset2" in result.detail

    def test_empty_begin(self):
        result = parse_wgsim_id("chr1__200_0::0")

        assert result.kind == FailureKind.NUMERIC_PARSE_FAILURE

    def test_zero_offset_rejected(self):
        """Offsets are 1-based."""
        result = parse_wgsim_id("chr1_0_200_0::0")

        assert result.kind == FailureKind.NUMERIC_PARSE_FAILURE

    def test_signed_offset_rejected(self):
        result = parse_wgsim_id("chr1_+5_200_0::0")

        assert result.kind == FailureKind.NUMERIC_PARSE_FAILURE

    def test_failure_keeps_raw_id(self):
        result = parse_wgsim_id("chr1_abc_200_0::0")

        assert result.raw_id == "chr1_abc_200_0::0"
        assert "chr1_abc_200_0::0" in str(result)

    def test_failure_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING):
            parse_wgsim_id("abc123")

        assert "abc123" in caplog.text
        assert "couldn't find a colon" in caplog.text


class TestLengthLimits:
    """Test ID and contig name length bounds."""

    def test_id_at_max_length_accepted(self):
        read_id = "chr1_1_2_0:" + "x" * (1023 - len("chr1_1_2_0:"))
        assert len(read_id) == 1023

        assert parse_wgsim_id(read_id).ok

    def test_id_over_max_length_rejected(self):
        read_id = "chr1_1_2_0:" + "x" * (1024 - len("chr1_1_2_0:"))

        result = parse_wgsim_id(read_id)

        assert result.kind == FailureKind.INPUT_TOO_LONG

    def test_id_over_max_length_raises_when_fail_fast(self):
        read_id = "chr1_1_2_0:" + "x" * 2000
        settings = CodecSettings(fail_fast=True)

        with pytest.raises(IdTooLongError):
            parse_wgsim_id(read_id, settings)

    def test_contig_name_at_limit(self):
        name = "c" * 199
        parsed = parse_wgsim_id(f"{name}_1_2_0:0")

        assert parsed.contig_name == name

    def test_contig_name_over_limit(self):
        name = "c" * 200
        result = parse_wgsim_id(f"{name}_1_2_0:0")

        assert result.kind == FailureKind.CONTIG_NAME_TOO_LONG

    def test_custom_limits(self):
        settings = CodecSettings(max_id_length=20, max_contig_name_length=3)

        assert parse_wgsim_id("chr1_1_2_0:0", settings).kind == FailureKind.CONTIG_NAME_TOO_LONG
        assert parse_wgsim_id("chr_1_2_0:0:0:0:0:0:0", settings).kind == FailureKind.INPUT_TOO_LONG

    def test_settings_from_config(self):
        config = {'parsing': {'max_id_length': 50, 'max_contig_name_length': 10, 'fail_fast': True}}

        settings = CodecSettings.from_config(config)

        assert settings == CodecSettings(50, 10, True)

    def test_settings_from_empty_config(self):
        assert CodecSettings.from_config({}) == CodecSettings()

# wgsimcheck v0.1.0
# Any usage is subject to this software's license.
