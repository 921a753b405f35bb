"""
wgsimcheck v0.1.0

Failure values and exceptions for the read ID codec.

Malformed IDs and unknown contigs are ordinary data problems: the codec hands
them back as ``IdFailure`` values so callers can skip or flag the read.
Exceptions are reserved for contract violations the caller has to deal with.

Author: wgsimcheck Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from dataclasses import dataclass
from enum import Enum


class FailureKind(Enum):
    """Why a read ID could not be turned into a true interval."""
    INPUT_TOO_LONG = "input_too_long"
    MALFORMED_DELIMITERS = "malformed_delimiters"
    NUMERIC_PARSE_FAILURE = "numeric_parse_failure"
    CONTIG_NAME_TOO_LONG = "contig_name_too_long"
    UNKNOWN_CONTIG = "unknown_contig"


@dataclass(frozen=True)
class IdFailure:
    """
    Recoverable failure for a single read ID.

    Attributes:
        kind: Failure category
        raw_id: The offending ID, as given
        detail: Human-readable description of the step that failed
    """
    kind: FailureKind
    raw_id: str
    detail: str

    @property
    def ok(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.detail} (read id '{self.raw_id}')"


class WgsimCheckError(Exception):
    """Base class for wgsimcheck exceptions."""
    pass


class IdTooLongError(WgsimCheckError):
    """Raised instead of returning INPUT_TOO_LONG when fail-fast is enabled."""

    def __init__(self, raw_id: str, max_length: int):
        self.raw_id = raw_id
        self.max_length = max_length
        super().__init__(
            f"Got a read ID that was too long ({len(raw_id)} > {max_length}); "
            f"it starts with {raw_id[:64]!r}"
        )


class ContigLookupError(WgsimCheckError):
    """Raised when a genome location does not fall inside any contig."""
    pass
