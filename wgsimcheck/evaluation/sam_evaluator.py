#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
wgsimcheck v0.1.0

Alignment correctness evaluation for wgsim-simulated reads.

Reads the SAM/BAM output of an aligner run on simulated reads, decodes each
read's true interval from its name and tallies correct and misaligned
mappings overall and stratified by MAPQ.

Author: wgsimcheck Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from collections import Counter, defaultdict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

import numpy as np
import pandas as pd
import pysam

from ..core.errors import FailureKind, IdFailure
from ..core.genome import ContigOffsetResolver
from ..core.id_parser import CodecSettings
from ..core.judge import MisalignmentVerdict, judge_read

logger = logging.getLogger(__name__)


# ============================================================================
#                           ALIGNMENT INPUT
# ============================================================================

def iter_alignments(filepath: Union[str, Path]) -> Iterator[pysam.AlignedSegment]:
    """
    Yield every record of a SAM or BAM file, unmapped reads included.

    BAM is chosen by the .bam suffix; SAM may be plain or gzipped. No index
    is needed.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Alignment file not found: {filepath}")

    mode = "rb" if filepath.suffix == ".bam" else "r"
    with pysam.AlignmentFile(str(filepath), mode, check_sq=False) as samfile:
        for segment in samfile.fetch(until_eof=True):
            yield segment


def is_judged(segment: pysam.AlignedSegment) -> bool:
    """Primary records only; secondary and supplementary lines repeat a read."""
    return not (segment.is_secondary or segment.is_supplementary)


def is_aligned(segment: pysam.AlignedSegment) -> bool:
    """Return true iff read aligned"""
    return not segment.is_unmapped and segment.reference_name is not None


# ============================================================================
#                           SUMMARY
# ============================================================================

@dataclass
class EvaluationSummary:
    """
    Counts of correct and misaligned mappings.

    Attributes:
        total: Primary records seen
        unmapped: Primary records with no alignment
        correct: Mappings within max_k of the true interval
        misaligned: Mappings outside the tolerated window
        unknown_reference: Mappings to a reference name missing from the table
        failures: Read IDs that could not be decoded, by failure kind
        per_mapq: mapq -> [correct, misaligned]
    """
    total: int = 0
    unmapped: int = 0
    correct: int = 0
    misaligned: int = 0
    unknown_reference: int = 0
    failures: Counter = field(default_factory=Counter)
    per_mapq: Dict[int, List[int]] = field(default_factory=lambda: defaultdict(lambda: [0, 0]))

    @property
    def mapped(self) -> int:
        return self.correct + self.misaligned

    @property
    def failed(self) -> int:
        return sum(self.failures.values())

    @property
    def error_rate(self) -> float:
        """Fraction of judged mappings that are misaligned."""
        return self.misaligned / self.mapped if self.mapped else 0.0

    def record(self, verdict: MisalignmentVerdict, mapq: int):
        if verdict.misaligned:
            self.misaligned += 1
            self.per_mapq[mapq][1] += 1
        else:
            self.correct += 1
            self.per_mapq[mapq][0] += 1

    def to_dataframe(self) -> pd.DataFrame:
        """
        Per-MAPQ table, highest MAPQ first, with cumulative counts.

        Columns: mapq, cor, incor, n, cum_cor, cum_incor, cum, cum_error_rate
        """
        columns = ['mapq', 'cor', 'incor', 'n', 'cum_cor', 'cum_incor', 'cum', 'cum_error_rate']
        if not self.per_mapq:
            return pd.DataFrame(columns=columns)

        mapqs = sorted(self.per_mapq, reverse=True)
        cors = np.array([self.per_mapq[m][0] for m in mapqs], dtype=np.int64)
        incors = np.array([self.per_mapq[m][1] for m in mapqs], dtype=np.int64)

        tab = pd.DataFrame({'mapq': mapqs, 'cor': cors, 'incor': incors})
        tab['n'] = tab['cor'] + tab['incor']
        tab['cum_cor'] = np.cumsum(cors)
        tab['cum_incor'] = np.cumsum(incors)
        tab['cum'] = tab['cum_cor'] + tab['cum_incor']
        tab['cum_error_rate'] = tab['cum_incor'] / tab['cum']
        return tab[columns]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total': self.total,
            'unmapped': self.unmapped,
            'correct': self.correct,
            'misaligned': self.misaligned,
            'unknown_reference': self.unknown_reference,
            'failed': self.failed,
            'failures': {kind.value: n for kind, n in self.failures.items()},
            'error_rate': self.error_rate,
        }


# ============================================================================
#                           EVALUATOR
# ============================================================================

class AlignmentEvaluator:
    """
    Judge SAM/BAM records against the true origins encoded in their read names.

    Args:
        resolver: Contig table of the reference the aligner used
        max_k: Positional tolerance for a mapping to count as correct
        settings: Read ID scanning limits
    """

    def __init__(self, resolver: ContigOffsetResolver, max_k: int,
                 settings: Optional[CodecSettings] = None):
        if max_k < 0:
            raise ValueError(f"max_k must be non-negative, got {max_k}")
        self.resolver = resolver
        self.max_k = max_k
        self.settings = settings
        self.summary = EvaluationSummary()

    def evaluate_record(self, segment: pysam.AlignedSegment) -> Optional[Union[MisalignmentVerdict, IdFailure]]:
        """
        Judge one alignment record and add it to the running summary.

        Returns:
            The verdict or failure, or None for records that were not judged
            (secondary/supplementary, unmapped, unknown reference)
        """
        if not is_judged(segment):
            return None

        self.summary.total += 1
        if not is_aligned(segment):
            self.summary.unmapped += 1
            return None

        contig_offset = self.resolver.offset_of_contig(segment.reference_name)
        if contig_offset is None:
            logger.warning(f"Read {segment.query_name} mapped to unknown reference '{segment.reference_name}'")
            self.summary.unknown_reference += 1
            return None

        location = contig_offset + segment.reference_start
        result = judge_read(segment.query_name, location, self.resolver, self.max_k, self.settings)
        if not result.ok:
            self.summary.failures[result.kind] += 1
            return result

        self.summary.record(result, segment.mapping_quality)
        return result

    def evaluate_file(self, filepath: Union[str, Path]) -> EvaluationSummary:
        """Judge every record of a SAM or BAM file."""
        for segment in iter_alignments(filepath):
            self.evaluate_record(segment)

        s = self.summary
        logger.info(
            f"Evaluated {s.total:,} primary records: {s.correct:,} correct, "
            f"{s.misaligned:,} misaligned, {s.unmapped:,} unmapped, {s.failed:,} unparseable"
        )
        return s


def failure_counts(summary: EvaluationSummary) -> Dict[str, int]:
    """Failure counts keyed by every FailureKind value (zeros included)."""
    return {kind.value: summary.failures.get(kind, 0) for kind in FailureKind}
