"""
Evaluation of aligner output against wgsim ground truth.
"""

from .sam_evaluator import (
    iter_alignments,
    is_judged,
    is_aligned,
    EvaluationSummary,
    AlignmentEvaluator,
    failure_counts,
)

__all__ = [
    "iter_alignments",
    "is_judged",
    "is_aligned",
    "EvaluationSummary",
    "AlignmentEvaluator",
    "failure_counts",
]
