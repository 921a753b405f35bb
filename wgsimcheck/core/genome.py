#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
wgsimcheck v0.1.0

Contig layout of a reference genome.

The aligner side works in a single linear coordinate space across the whole
concatenated genome, while wgsim read names carry contig-relative offsets.
``ContigOffsetResolver`` is the narrow lookup interface the codec needs to
move between the two; ``ContigTable`` is the in-memory implementation.

Author: wgsimcheck Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

import numpy as np

from .errors import ContigLookupError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContigRecord:
    """
    A named contig and where it starts in absolute genome coordinates.

    Attributes:
        name: Contig name as written in the FASTA header
        base_offset: 0-based absolute location of the contig's first base
        length: Contig length in bases (None when only offsets are known)
    """
    name: str
    base_offset: int
    length: Optional[int] = None

    @property
    def end_offset(self) -> Optional[int]:
        """Absolute location one past the contig's last base."""
        if self.length is None:
            return None
        return self.base_offset + self.length


class ContigOffsetResolver(ABC):
    """Lookups between contig names and absolute genome locations."""

    @abstractmethod
    def offset_of_contig(self, name: str) -> Optional[int]:
        """Return the contig's base offset, or None if the name is unknown."""
        pass

    @abstractmethod
    def contig_at_location(self, location: int) -> ContigRecord:
        """Return the contig containing an absolute genome location."""
        pass


class ContigTable(ContigOffsetResolver):
    """
    Read-only contig table.

    Name lookups go through a dict; location lookups binary-search a sorted
    array of base offsets. The table is never mutated after construction,
    so one instance can be shared between threads.
    """

    def __init__(self, contigs: Iterable[ContigRecord]):
        records = sorted(contigs, key=lambda c: c.base_offset)
        by_name: Dict[str, ContigRecord] = {}
        for record in records:
            if record.base_offset < 0:
                raise ValueError(f"Negative base offset for contig '{record.name}'")
            if record.name in by_name:
                raise ValueError(f"Duplicate contig name: {record.name}")
            by_name[record.name] = record

        self._contigs: Tuple[ContigRecord, ...] = tuple(records)
        self._by_name = by_name
        self._starts = np.array([c.base_offset for c in records], dtype=np.int64)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_lengths(cls, lengths: Iterable[Tuple[str, int]], gap: int = 0) -> "ContigTable":
        """
        Lay contigs out end to end in the given order.

        Args:
            lengths: (name, length) pairs in genome order
            gap: Bases of padding inserted after each contig

        Returns:
            ContigTable with cumulative base offsets
        """
        if gap < 0:
            raise ValueError(f"Contig gap must be non-negative, got {gap}")

        records = []
        offset = 0
        for name, length in lengths:
            if length <= 0:
                raise ValueError(f"Contig '{name}' has non-positive length {length}")
            records.append(ContigRecord(name=name, base_offset=offset, length=length))
            offset += length + gap
        return cls(records)

    @classmethod
    def from_offsets(cls, offsets: Union[Mapping[str, int], Iterable[Tuple[str, int]]]) -> "ContigTable":
        """Build a table from explicit (name, base_offset) pairs; lengths stay unknown."""
        if isinstance(offsets, Mapping):
            offsets = offsets.items()
        return cls(ContigRecord(name=name, base_offset=base) for name, base in offsets)

    @classmethod
    def from_sequences(cls, sequences: Mapping[str, str], gap: int = 0) -> "ContigTable":
        """Build a table from an ordered name -> sequence mapping."""
        return cls.from_lengths(((name, len(seq)) for name, seq in sequences.items()), gap=gap)

    @classmethod
    def from_fasta(cls, filepath: Union[str, Path], gap: int = 0) -> "ContigTable":
        """Build a table from the records of a (possibly gzipped) FASTA file."""
        from ..io.fastq import iter_fasta_lengths

        table = cls.from_lengths(iter_fasta_lengths(filepath), gap=gap)
        logger.info(f"Loaded {len(table)} contigs ({table.genome_length:,} bp) from {filepath}")
        return table

    @classmethod
    def from_fai(cls, filepath: Union[str, Path], gap: int = 0) -> "ContigTable":
        """Build a table from a samtools faidx index (name and length columns)."""
        filepath = Path(filepath)
        if not filepath.exists():
            raise FileNotFoundError(f"FASTA index not found: {filepath}")

        lengths: List[Tuple[str, int]] = []
        with open(filepath, 'r') as f:
            for line_num, line in enumerate(f, 1):
                if not line.strip():
                    continue
                fields = line.rstrip('\n').split('\t')
                if len(fields) < 2:
                    raise ValueError(f"{filepath}:{line_num}: expected at least 2 columns")
                lengths.append((fields[0], int(fields[1])))

        table = cls.from_lengths(lengths, gap=gap)
        logger.info(f"Loaded {len(table)} contigs from index {filepath}")
        return table

    # ------------------------------------------------------------------
    # ContigOffsetResolver
    # ------------------------------------------------------------------

    def offset_of_contig(self, name: str) -> Optional[int]:
        record = self._by_name.get(name)
        return None if record is None else record.base_offset

    def contig_at_location(self, location: int) -> ContigRecord:
        if location < 0 or not self._contigs:
            raise ContigLookupError(f"Genome location {location} is outside the genome")

        idx = int(np.searchsorted(self._starts, location, side='right')) - 1
        if idx < 0:
            raise ContigLookupError(f"Genome location {location} precedes the first contig")

        record = self._contigs[idx]
        end = record.end_offset
        if end is not None and location >= end:
            raise ContigLookupError(
                f"Genome location {location} falls past the end of contig '{record.name}'"
            )
        return record

    # ------------------------------------------------------------------
    # Container helpers
    # ------------------------------------------------------------------

    def get(self, name: str) -> Optional[ContigRecord]:
        return self._by_name.get(name)

    @property
    def genome_length(self) -> int:
        """Size of the absolute coordinate space covered by contigs of known length."""
        if not self._contigs:
            return 0
        last = self._contigs[-1]
        return last.end_offset if last.end_offset is not None else last.base_offset

    def __len__(self) -> int:
        return len(self._contigs)

    def __iter__(self) -> Iterator[ContigRecord]:
        return iter(self._contigs)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"ContigTable(contigs={len(self._contigs)}, genome_length={self.genome_length})"

# wgsimcheck v0.1.0
# Any usage is subject to this software's license.
