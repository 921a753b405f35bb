"""
wgsimcheck v0.1.0

Sequence utility functions for wgsimcheck.
"""

_COMPLEMENT = str.maketrans("ACGTNacgtn", "TGCANtgcan")


def reverse_complement(sequence: str) -> str:
    """
    Generate reverse complement of DNA sequence.

    Example:
        >>> reverse_complement("ATCG")
        'CGAT'
    """
    return sequence.translate(_COMPLEMENT)[::-1]


def has_ambiguous_bases(sequence: str) -> bool:
    """True if the sequence contains anything other than A/C/G/T."""
    return any(base not in "ACGT" for base in sequence.upper())


__all__ = [
    'reverse_complement',
    'has_ambiguous_bases',
]
