"""
Read I/O module for wgsimcheck.

Handles reading and writing simulated reads and loading reference FASTA files.
"""

from .fastq import (
    SimRead,
    is_gzipped,
    open_file,
    read_fastq,
    iter_read_ids,
    write_fastq,
    load_reference,
    iter_fasta_lengths,
)

__all__ = [
    "SimRead",
    "is_gzipped",
    "open_file",
    "read_fastq",
    "iter_read_ids",
    "write_fastq",
    "load_reference",
    "iter_fasta_lengths",
]
