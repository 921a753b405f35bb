"""
Read Simulator for Aligner Correctness Tests

Samples reads from a reference genome and names them with wgsim-style IDs so
that the true origin of every read travels with it through an aligner. Single
reads are named after the bases they cover; paired reads share the ID of
their fragment and differ only in the /1 and /2 mate suffix.

Author: wgsimcheck Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from __future__ import annotations
import random
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ..core.errors import ContigLookupError
from ..core.genome import ContigTable
from ..core.id_generator import generate_wgsim_id_at_location
from ..io.fastq import SimRead
from ..utils.sequence_utils import has_ambiguous_bases, reverse_complement

logger = logging.getLogger(__name__)


# ============================================================================
#                           CONFIGURATION
# ============================================================================

@dataclass
class SimulationConfig:
    """Configuration for synthetic read simulation."""
    num_reads: int = 1000  # Reads (or pairs) to generate
    read_length: int = 100  # Read length (bp)
    paired: bool = False
    insert_size_mean: int = 300  # Fragment length mean (paired only)
    insert_size_std: int = 30
    error_rate: float = 0.0  # Substitution error rate
    skip_ambiguous: bool = True  # Resample fragments containing N
    max_attempts_per_read: int = 100
    random_seed: Optional[int] = None

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "SimulationConfig":
        """Build from the 'simulation' section of a loaded config."""
        section = dict(config.get('simulation', {}))
        known = {k: v for k, v in section.items() if k in cls.__dataclass_fields__}
        return cls(**known)

    def validate(self):
        if self.num_reads < 0:
            raise ValueError(f"num_reads must be non-negative, got {self.num_reads}")
        if self.read_length <= 0:
            raise ValueError(f"read_length must be positive, got {self.read_length}")
        if self.paired and self.insert_size_mean < self.read_length:
            raise ValueError("insert_size_mean must be at least read_length for paired reads")
        if not 0.0 <= self.error_rate <= 1.0:
            raise ValueError(f"error_rate must be in [0, 1], got {self.error_rate}")


# ============================================================================
#                     ERROR INTRODUCTION
# ============================================================================

def introduce_substitution_errors(sequence: str, error_rate: float, rng: random.Random) -> str:
    """Introduce random substitution errors."""
    if error_rate <= 0:
        return sequence

    seq_list = list(sequence)
    for i, original in enumerate(seq_list):
        if rng.random() < error_rate:
            bases = [b for b in 'ACGT' if b != original]
            seq_list[i] = rng.choice(bases)
    return ''.join(seq_list)


# ============================================================================
#                     SIMULATION
# ============================================================================

class ReadSimulator:
    """
    Draw reads uniformly from a reference laid out by a ContigTable.

    A draw picks an absolute genome location; draws that land in an
    inter-contig gap, run off the end of a contig or (optionally) cover an
    ambiguous base are resampled.
    """

    def __init__(self, sequences: Dict[str, str], table: ContigTable,
                 config: Optional[SimulationConfig] = None):
        self.sequences = sequences
        self.table = table
        self.config = config or SimulationConfig()
        self.config.validate()
        self.rng = random.Random(self.config.random_seed)

        for record in table:
            if record.name not in sequences:
                raise ValueError(f"Contig '{record.name}' has no sequence")
            if record.length is not None and record.length != len(sequences[record.name]):
                raise ValueError(
                    f"Contig '{record.name}' length {record.length} does not match "
                    f"sequence length {len(sequences[record.name])}"
                )

    def _fragment_length(self) -> int:
        if not self.config.paired:
            return self.config.read_length
        length = int(round(self.rng.gauss(self.config.insert_size_mean, self.config.insert_size_std)))
        return max(self.config.read_length, length)

    def _draw_fragment(self) -> Tuple[int, str]:
        """Return (absolute location, fragment sequence) of one usable draw."""
        genome_length = self.table.genome_length

        for _ in range(self.config.max_attempts_per_read):
            span = self._fragment_length()
            if span > genome_length:
                continue
            location = self.rng.randrange(genome_length - span + 1)
            try:
                contig = self.table.contig_at_location(location)
            except ContigLookupError:
                continue

            offset = location - contig.base_offset
            sequence = self.sequences[contig.name]
            if offset + span > len(sequence):
                continue

            fragment = sequence[offset:offset + span]
            if self.config.skip_ambiguous and has_ambiguous_bases(fragment):
                continue
            return location, fragment

        raise ValueError(
            f"Could not place a {self.config.read_length} bp read after "
            f"{self.config.max_attempts_per_read} attempts; contigs too short or too ambiguous?"
        )

    def _make_read(self, read_id: str, sequence: str) -> SimRead:
        sequence = introduce_substitution_errors(sequence, self.config.error_rate, self.rng)
        return SimRead(id=read_id, sequence=sequence, quality='I' * len(sequence))

    def simulate_single(self) -> List[SimRead]:
        """Simulate single-end reads."""
        reads = []
        for _ in range(self.config.num_reads):
            location, fragment = self._draw_fragment()
            read_id = generate_wgsim_id_at_location(self.table, location, len(fragment), True)
            reads.append(self._make_read(read_id, fragment))
        return reads

    def simulate_pairs(self) -> Tuple[List[SimRead], List[SimRead]]:
        """Simulate paired-end reads; mate 2 comes from the reverse strand."""
        read_length = self.config.read_length
        mates1, mates2 = [], []
        for _ in range(self.config.num_reads):
            location, fragment = self._draw_fragment()
            id1 = generate_wgsim_id_at_location(self.table, location, len(fragment), True)
            id2 = generate_wgsim_id_at_location(self.table, location, len(fragment), False)
            mates1.append(self._make_read(id1, fragment[:read_length]))
            mates2.append(self._make_read(id2, reverse_complement(fragment[-read_length:])))
        return mates1, mates2

    def simulate(self) -> Tuple[List[SimRead], Optional[List[SimRead]]]:
        """
        Simulate reads according to the configuration.

        Returns:
            (mate 1 reads, mate 2 reads or None for single-end)
        """
        mode = "paired-end" if self.config.paired else "single-end"
        logger.info(f"Simulating {self.config.num_reads:,} {mode} reads "
                    f"({self.config.read_length} bp) from {len(self.table)} contigs...")

        if self.config.paired:
            mates1, mates2 = self.simulate_pairs()
            return mates1, mates2
        return self.simulate_single(), None
