"""
wgsimcheck v0.1.0

Conversion of parsed read IDs into absolute genome intervals.

Author: wgsimcheck Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from dataclasses import dataclass
from typing import Union

from .errors import FailureKind, IdFailure
from .genome import ContigOffsetResolver
from .id_parser import ParsedID

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrueInterval:
    """0-based absolute genome interval a simulated read came from (inclusive)."""
    low: int
    high: int

    def __post_init__(self):
        if self.low > self.high:
            raise ValueError(f"Interval low {self.low} exceeds high {self.high}")

    @property
    def ok(self) -> bool:
        return True

    def __len__(self) -> int:
        return self.high - self.low + 1

    def __contains__(self, location: int) -> bool:
        return self.low <= location <= self.high


def normalize_offsets(parsed: ParsedID, resolver: ContigOffsetResolver,
                      raw_id: str) -> Union[TrueInterval, IdFailure]:
    """
    Map a parsed ID's 1-based contig offsets to 0-based genome coordinates.

    Args:
        parsed: Output of parse_wgsim_id
        resolver: Contig name -> base offset lookup
        raw_id: Original read ID, carried into the failure value

    Returns:
        TrueInterval, or an UNKNOWN_CONTIG failure
    """
    contig_offset = resolver.offset_of_contig(parsed.contig_name)
    if contig_offset is None:
        logger.warning(f"Couldn't find contig name '{parsed.contig_name}' of read id '{raw_id}' in the genome.")
        return IdFailure(
            kind=FailureKind.UNKNOWN_CONTIG,
            raw_id=raw_id,
            detail=f"contig '{parsed.contig_name}' not found",
        )

    # IDs are 1-based, genome coordinates 0-based
    begin = parsed.begin + contig_offset - 1
    end = parsed.end + contig_offset - 1
    return TrueInterval(low=min(begin, end), high=max(begin, end))

# wgsimcheck v0.1.0
# Any usage is subject to this software's license.
