"""
wgsimcheck v0.1.0

Generation of minimal wgsim-style read IDs for synthetic reads.

Only contig, begin, end and the mate suffix carry information; the rest are
fixed placeholders so tools expecting the full wgsim grammar still accept the
name.

Author: wgsimcheck Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from .genome import ContigOffsetResolver, ContigRecord

PLACEHOLDER_FIELDS = "0::0:0_2:0:a0_0"


def generate_wgsim_id(contig: ContigRecord, offset_in_contig: int,
                      read_length: int, first_half: bool) -> str:
    """
    Format the ID of a read starting ``offset_in_contig`` bases into a contig.

    Args:
        contig: Source contig
        offset_in_contig: 0-based start of the read within the contig
        read_length: Bases covered by the read (or fragment)
        first_half: True for mate 1, False for mate 2

    Returns:
        ID that parse_wgsim_id maps back to
        (contig.name, offset_in_contig + 1, offset_in_contig + read_length)

    Example:
        >>> generate_wgsim_id(ContigRecord("chr1", 1000), 99, 101, True)
        'chr1_100_200_0::0:0_2:0:a0_0/1'
    """
    if offset_in_contig < 0:
        raise ValueError(f"offset_in_contig must be non-negative, got {offset_in_contig}")
    if read_length <= 0:
        raise ValueError(f"read_length must be positive, got {read_length}")

    mate = 1 if first_half else 2
    return (
        f"{contig.name}_{offset_in_contig + 1}_{offset_in_contig + read_length}"
        f"_{PLACEHOLDER_FIELDS}/{mate}"
    )


def generate_wgsim_id_at_location(resolver: ContigOffsetResolver, genome_location: int,
                                  read_length: int, first_half: bool) -> str:
    """Like generate_wgsim_id, starting from a 0-based absolute genome location."""
    contig = resolver.contig_at_location(genome_location)
    return generate_wgsim_id(contig, genome_location - contig.base_offset, read_length, first_half)

# wgsimcheck v0.1.0
# Any usage is subject to this software's license.
