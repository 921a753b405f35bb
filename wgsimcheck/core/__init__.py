"""
wgsimcheck v0.1.0

Read ID codec and misalignment judgment.

This module provides:
- Contig layout lookups (ContigTable)
- wgsim read ID parsing and generation
- True interval normalization and misalignment checks

Author: wgsimcheck Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from .errors import (
    FailureKind,
    IdFailure,
    WgsimCheckError,
    IdTooLongError,
    ContigLookupError,
)
from .genome import ContigRecord, ContigOffsetResolver, ContigTable
from .id_parser import CodecSettings, ParsedID, decode_read_id, parse_wgsim_id
from .normalizer import TrueInterval, normalize_offsets
from .judge import (
    MisalignmentVerdict,
    is_misaligned,
    judge_locations,
    judge_read,
    read_misaligned,
)
from .id_generator import generate_wgsim_id, generate_wgsim_id_at_location

__all__ = [
    # Errors
    "FailureKind",
    "IdFailure",
    "WgsimCheckError",
    "IdTooLongError",
    "ContigLookupError",
    # Genome layout
    "ContigRecord",
    "ContigOffsetResolver",
    "ContigTable",
    # Parsing
    "CodecSettings",
    "ParsedID",
    "decode_read_id",
    "parse_wgsim_id",
    # Normalization and judgment
    "TrueInterval",
    "normalize_offsets",
    "MisalignmentVerdict",
    "is_misaligned",
    "judge_locations",
    "judge_read",
    "read_misaligned",
    # Generation
    "generate_wgsim_id",
    "generate_wgsim_id_at_location",
]
