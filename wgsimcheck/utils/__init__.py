"""
Utilities module for wgsimcheck.
"""

from .sequence_utils import reverse_complement, has_ambiguous_bases

__all__ = [
    "reverse_complement",
    "has_ambiguous_bases",
]
