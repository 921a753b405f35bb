#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
wgsimcheck v0.1.0

Parser for wgsim-style read IDs.

A wgsim read ID looks like::

    contig_begin_end_otherStuff

where ``otherStuff`` starts with the first ':' in the string. The contig
name may itself contain '_' and the trailing part may contain both ':' and
'_', so the only reliable anchor is the first colon: step back over three
underscores from there, read the two offsets in between, and everything in
front of the third underscore is the contig name. Single-end reads leave the
end field empty (``chr1_100__0:...``).

Author: wgsimcheck Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .errors import FailureKind, IdFailure, IdTooLongError

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = '_'
SUFFIX_DELIMITER = ':'

DEFAULT_MAX_ID_LENGTH = 1023
DEFAULT_MAX_CONTIG_NAME_LENGTH = 199

RawId = Union[str, bytes]


@dataclass(frozen=True)
class CodecSettings:
    """
    Limits applied while scanning read IDs.

    Attributes:
        max_id_length: Longest accepted read ID
        max_contig_name_length: Longest accepted contig name
        fail_fast: Raise IdTooLongError for oversized IDs instead of
                   returning a failure value
    """
    max_id_length: int = DEFAULT_MAX_ID_LENGTH
    max_contig_name_length: int = DEFAULT_MAX_CONTIG_NAME_LENGTH
    fail_fast: bool = False

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "CodecSettings":
        """Build settings from the 'parsing' section of a loaded config."""
        parsing = config.get('parsing', {})
        return cls(
            max_id_length=int(parsing.get('max_id_length', DEFAULT_MAX_ID_LENGTH)),
            max_contig_name_length=int(
                parsing.get('max_contig_name_length', DEFAULT_MAX_CONTIG_NAME_LENGTH)
            ),
            fail_fast=bool(parsing.get('fail_fast', False)),
        )


DEFAULT_SETTINGS = CodecSettings()


@dataclass(frozen=True)
class ParsedID:
    """
    Contig name and 1-based offsets recovered from a read ID.

    For single-end IDs ``end`` equals ``begin`` and ``is_single_end`` is set,
    since the second offset field was empty.
    """
    contig_name: str
    begin: int
    end: int
    is_single_end: bool = False

    @property
    def ok(self) -> bool:
        return True


def decode_read_id(raw_id: RawId) -> str:
    """Return a read ID as text; bytes are decoded one character per byte."""
    if isinstance(raw_id, bytes):
        return raw_id.decode('latin-1')
    return raw_id


def _fail(kind: FailureKind, raw_id: str, detail: str) -> IdFailure:
    logger.warning(f"Failed to parse read id '{raw_id}', {detail}.")
    return IdFailure(kind=kind, raw_id=raw_id, detail=detail)


def _parse_offset(field: str) -> Optional[int]:
    """Parse a 1-based base-10 offset; None if the field is not one."""
    if not field or not field.isascii() or not field.isdigit():
        return None
    value = int(field)
    return value if value >= 1 else None


def parse_wgsim_id(raw_id: RawId, settings: Optional[CodecSettings] = None) -> Union[ParsedID, IdFailure]:
    """
    Recover contig name and offsets from a wgsim-style read ID.

    Args:
        raw_id: Read ID without the leading FASTQ '@'
        settings: Length limits (defaults to 1023/199, no fail-fast)

    Returns:
        ParsedID on success, IdFailure describing the failed step otherwise

    Raises:
        IdTooLongError: Only when ``settings.fail_fast`` is set and the ID
                        exceeds ``settings.max_id_length``

    Example:
        >>> parse_wgsim_id("scaffold_7_50_150_0:0:0_0:0:0_0/1")
        ParsedID(contig_name='scaffold_7', begin=50, end=150, is_single_end=False)
    """
    settings = settings or DEFAULT_SETTINGS
    read_id = decode_read_id(raw_id)

    if len(read_id) > settings.max_id_length:
        if settings.fail_fast:
            raise IdTooLongError(read_id, settings.max_id_length)
        return _fail(
            FailureKind.INPUT_TOO_LONG, read_id,
            f"ID is longer than {settings.max_id_length} characters"
        )

    first_colon = read_id.find(SUFFIX_DELIMITER)
    if first_colon < 0:
        return _fail(FailureKind.MALFORMED_DELIMITERS, read_id, "couldn't find a colon")

    underscore_1 = read_id.rfind(FIELD_SEPARATOR, 0, first_colon)
    if underscore_1 < 0:
        return _fail(FailureKind.MALFORMED_DELIMITERS, read_id,
                     "couldn't find underscore before colon")

    underscore_2 = read_id.rfind(FIELD_SEPARATOR, 0, underscore_1)
    if underscore_2 < 0:
        return _fail(FailureKind.MALFORMED_DELIMITERS, read_id,
                     "couldn't find second underscore before colon")

    underscore_3 = read_id.rfind(FIELD_SEPARATOR, 0, underscore_2)
    if underscore_3 < 0:
        return _fail(FailureKind.MALFORMED_DELIMITERS, read_id,
                     "couldn't find third underscore before colon")

    begin = _parse_offset(read_id[underscore_3 + 1:underscore_2])
    if begin is None:
        return _fail(FailureKind.NUMERIC_PARSE_FAILURE, read_id, "couldn't parse offset1")

    single_end = underscore_1 == underscore_2 + 1
    if single_end:
        # No second offset
        end = begin
    else:
        end = _parse_offset(read_id[underscore_2 + 1:underscore_1])
        if end is None:
            return _fail(FailureKind.NUMERIC_PARSE_FAILURE, read_id, "couldn't parse offset2")

    contig_name = read_id[:underscore_3]
    if len(contig_name) > settings.max_contig_name_length:
        return _fail(FailureKind.CONTIG_NAME_TOO_LONG, read_id,
                     "contig name too big or misparsed")

    return ParsedID(contig_name=contig_name, begin=begin, end=end, is_single_end=single_end)


__all__ = [
    'CodecSettings',
    'DEFAULT_SETTINGS',
    'ParsedID',
    'RawId',
    'decode_read_id',
    'parse_wgsim_id',
]

# wgsimcheck v0.1.0
# Any usage is subject to this software's license.
