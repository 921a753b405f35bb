#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
wgsimcheck v0.1.0

Package initialization and version metadata.

Author: wgsimcheck Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from .version import __version__
from .core import (
    CodecSettings,
    ContigRecord,
    ContigOffsetResolver,
    ContigTable,
    FailureKind,
    IdFailure,
    ParsedID,
    TrueInterval,
    MisalignmentVerdict,
    parse_wgsim_id,
    normalize_offsets,
    is_misaligned,
    judge_read,
    read_misaligned,
    generate_wgsim_id,
    generate_wgsim_id_at_location,
)

__all__ = [
    "__version__",
    "CodecSettings",
    "ContigRecord",
    "ContigOffsetResolver",
    "ContigTable",
    "FailureKind",
    "IdFailure",
    "ParsedID",
    "TrueInterval",
    "MisalignmentVerdict",
    "parse_wgsim_id",
    "normalize_offsets",
    "is_misaligned",
    "judge_read",
    "read_misaligned",
    "generate_wgsim_id",
    "generate_wgsim_id_at_location",
]

# wgsimcheck v0.1.0
# Any usage is subject to this software's license.
