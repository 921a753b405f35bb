#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
FASTQ/FASTA I/O for wgsimcheck.

Consolidated module containing:
- The SimRead record used for synthetic reads
- FASTQ reading (read IDs and full records) and writing
- FASTA reference loading
"""

# =============================================================================
# SECTION 1: IMPORTS AND DEPENDENCIES
# =============================================================================

import gzip
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, TextIO, Tuple, Union

from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

logger = logging.getLogger(__name__)


# =============================================================================
# SECTION 2: READ DATA STRUCTURE
# =============================================================================

@dataclass
class SimRead:
    """
    Sequencing read with a wgsim-style name.

    Attributes:
        id: Read identifier (no leading '@')
        sequence: DNA sequence
        quality: Quality string (Phred+33), None for FASTA records
    """
    id: str
    sequence: str
    quality: Optional[str] = None

    def __post_init__(self):
        self.sequence = self.sequence.upper()
        if self.quality is not None and len(self.quality) != len(self.sequence):
            raise ValueError(
                f"Read {self.id}: sequence length {len(self.sequence)} != "
                f"quality length {len(self.quality)}"
            )

    @property
    def length(self) -> int:
        """Get read length."""
        return len(self.sequence)

    def __len__(self) -> int:
        return len(self.sequence)


# =============================================================================
# SECTION 3: FILE UTILITIES
# =============================================================================

def is_gzipped(filepath: Union[str, Path]) -> bool:
    """
    Check if file is gzip compressed.

    Args:
        filepath: Path to file

    Returns:
        True if file is gzipped
    """
    filepath = Path(filepath)
    return filepath.suffix in ('.gz', '.gzip')


def open_file(filepath: Union[str, Path], mode: str = 'r') -> TextIO:
    """
    Open file with automatic gzip detection.

    Args:
        filepath: Path to file
        mode: File mode ('r' or 'w')

    Returns:
        File handle
    """
    filepath = Path(filepath)

    if is_gzipped(filepath):
        if 'r' in mode:
            return gzip.open(filepath, 'rt')
        else:
            return gzip.open(filepath, 'wt')
    else:
        return open(filepath, mode)


# =============================================================================
# SECTION 4: FASTQ FILE I/O
# =============================================================================

def read_fastq(filepath: Union[str, Path], sample_size: Optional[int] = None) -> Iterator[SimRead]:
    """
    Read FASTQ file and yield SimRead objects.

    Args:
        filepath: Path to FASTQ file (can be gzipped)
        sample_size: Maximum number of reads to yield (None = all)

    Yields:
        SimRead objects
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"FASTQ file not found: {filepath}")

    count = 0
    with open_file(filepath, 'r') as handle:
        for record in SeqIO.parse(handle, "fastq"):
            if sample_size and count >= sample_size:
                break

            quality = "".join(chr(q + 33) for q in record.letter_annotations.get("phred_quality", []))
            yield SimRead(id=record.id, sequence=str(record.seq), quality=quality or None)
            count += 1


def iter_read_ids(filepath: Union[str, Path], sample_size: Optional[int] = None) -> Iterator[str]:
    """Yield just the read IDs of a FASTQ file."""
    for read in read_fastq(filepath, sample_size=sample_size):
        yield read.id


def write_fastq(reads: Iterable[SimRead], filepath: Union[str, Path], compress: bool = False) -> int:
    """
    Write SimRead objects to FASTQ file.

    Args:
        reads: Iterable of SimRead objects
        filepath: Output FASTQ file path
        compress: Whether to gzip compress output

    Returns:
        Number of reads written
    """
    filepath = Path(filepath)

    # Add .gz extension if compressing
    if compress and not is_gzipped(filepath):
        filepath = Path(str(filepath) + '.gz')

    filepath.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with open_file(filepath, 'w') as handle:
        for read in reads:
            quality_scores = [ord(c) - 33 for c in read.quality] if read.quality else [40] * read.length

            record = SeqRecord(
                seq=Seq(read.sequence),
                id=read.id,
                description="",
                letter_annotations={"phred_quality": quality_scores}
            )

            SeqIO.write(record, handle, "fastq")
            count += 1

    logger.info(f"Wrote {count:,} reads to {filepath}")
    return count


# =============================================================================
# SECTION 5: FASTA REFERENCE I/O
# =============================================================================

def load_reference(filepath: Union[str, Path]) -> Dict[str, str]:
    """
    Load a reference FASTA into an ordered name -> sequence dict.

    Args:
        filepath: Path to FASTA file (can be gzipped)

    Returns:
        Dict of contig name to upper-case sequence, in file order
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"FASTA file not found: {filepath}")

    sequences: Dict[str, str] = {}
    with open_file(filepath, 'r') as handle:
        for record in SeqIO.parse(handle, "fasta"):
            if record.id in sequences:
                raise ValueError(f"Duplicate contig name in {filepath}: {record.id}")
            sequences[record.id] = str(record.seq).upper()

    return sequences


def iter_fasta_lengths(filepath: Union[str, Path]) -> Iterator[Tuple[str, int]]:
    """Yield (name, length) for each record of a FASTA file."""
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"FASTA file not found: {filepath}")

    with open_file(filepath, 'r') as handle:
        for record in SeqIO.parse(handle, "fasta"):
            yield record.id, len(record.seq)
