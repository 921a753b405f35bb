#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
wgsimcheck v0.1.0

Misalignment judgment for wgsim-simulated reads.

A read mapped to ``location`` is misaligned when the location lies more than
``max_k`` bases outside the read's true interval:

    misaligned  <=>  location > high + max_k  or  location + max_k < low

Author: wgsimcheck Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

import numpy as np

from .errors import IdFailure
from .genome import ContigOffsetResolver
from .id_parser import CodecSettings, RawId, decode_read_id, parse_wgsim_id
from .normalizer import TrueInterval, normalize_offsets

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MisalignmentVerdict:
    """
    Outcome of checking one mapped read against its true origin.

    Attributes:
        misaligned: True if the mapping falls outside the tolerated window
        interval: True interval decoded from the read ID
        location: Observed 0-based genome location
        max_k: Tolerance used
    """
    misaligned: bool
    interval: TrueInterval
    location: int
    max_k: int

    @property
    def ok(self) -> bool:
        return True

    @property
    def distance(self) -> int:
        """Bases between the observed location and the true interval (0 if inside)."""
        if self.location < self.interval.low:
            return self.interval.low - self.location
        if self.location > self.interval.high:
            return self.location - self.interval.high
        return 0


def _check_max_k(max_k: int):
    if max_k < 0:
        raise ValueError(f"max_k must be non-negative, got {max_k}")


def is_misaligned(location: int, interval: TrueInterval, max_k: int) -> bool:
    """
    Decide whether a mapping location is inconsistent with a true interval.

    Example:
        >>> is_misaligned(1205, TrueInterval(1099, 1199), 5)
        True
    """
    _check_max_k(max_k)
    return location > interval.high + max_k or location + max_k < interval.low


def judge_locations(locations: Sequence[int], interval: TrueInterval, max_k: int) -> np.ndarray:
    """Vectorized is_misaligned over many candidate locations for one read."""
    _check_max_k(max_k)
    locs = np.asarray(locations, dtype=np.int64)
    return (locs > interval.high + max_k) | (locs + max_k < interval.low)


def judge_read(raw_id: RawId, location: int, resolver: ContigOffsetResolver, max_k: int,
               settings: Optional[CodecSettings] = None) -> Union[MisalignmentVerdict, IdFailure]:
    """
    Parse a read ID, resolve its true interval and judge one mapping location.

    Args:
        raw_id: wgsim-style read ID
        location: 0-based absolute genome location the aligner reported
        resolver: Contig offset lookup for the reference the aligner used
        max_k: Positional tolerance (edit distance budget)
        settings: ID scanning limits

    Returns:
        MisalignmentVerdict, or the IdFailure that stopped parsing/normalization
    """
    _check_max_k(max_k)
    read_id = decode_read_id(raw_id)

    parsed = parse_wgsim_id(read_id, settings)
    if not parsed.ok:
        return parsed

    interval = normalize_offsets(parsed, resolver, raw_id=read_id)
    if not interval.ok:
        return interval

    return MisalignmentVerdict(
        misaligned=is_misaligned(location, interval, max_k),
        interval=interval,
        location=location,
        max_k=max_k,
    )


def read_misaligned(read: Any, location: int, resolver: ContigOffsetResolver, max_k: int,
                    settings: Optional[CodecSettings] = None) -> Union[MisalignmentVerdict, IdFailure]:
    """judge_read for any read object exposing its name as ``read.id``."""
    return judge_read(read.id, location, resolver, max_k, settings)

# wgsimcheck v0.1.0
# Any usage is subject to this software's license.
