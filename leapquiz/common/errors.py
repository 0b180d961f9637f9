"""Error types raised by the quiz core.

Parsing never raises for individual bad rows; only aggregate conditions and
selection failures surface as these exceptions.
"""

from typing import Optional


class QuizError(Exception):
    """Base class for recoverable quiz errors."""


class SourceUnavailable(QuizError):
    """The HTML source could not be fetched."""


class MalformedInput(QuizError):
    """Imported data is not usable (not an array, or no valid records)."""


class InvalidRangeInput(QuizError):
    """Range start/end missing or not numeric."""


class EmptySelection(QuizError):
    """A range or partition combination matched no records."""

    def __init__(self, start: Optional[int], end: Optional[int]):
        self.start = start
        self.end = end
        super().__init__(f"No words found in No. {start}-{end}")


class UnknownPartition(QuizError, KeyError):
    """Partition key is not part of the catalog."""

    def __str__(self) -> str:
        return f"Unknown partition: {self.args[0]!r}"


class PersistenceFailure(QuizError):
    """Key-value store read/write/remove failed."""


__all__ = [
    "QuizError",
    "SourceUnavailable",
    "MalformedInput",
    "InvalidRangeInput",
    "EmptySelection",
    "UnknownPartition",
    "PersistenceFailure",
]
