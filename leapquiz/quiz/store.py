"""Authoritative in-memory word list."""

from typing import Iterable, Optional, Tuple

from leapquiz.schema.base import WordRecord


class WordStore:
    """Ordered collection of validated records, ascending by id.

    The store only sorts; records must be validated before ``load``.
    Replacement is wholesale, never partial.
    """

    def __init__(self, records: Iterable[WordRecord] = ()):
        self._records: Tuple[WordRecord, ...] = ()
        self.load(records)

    def load(self, records: Iterable[WordRecord]) -> None:
        self._records = tuple(sorted(records, key=lambda r: r.id))

    def max_id(self) -> Optional[int]:
        """Largest id, or None when the store is empty."""
        if not self._records:
            return None
        return self._records[-1].id

    def all(self) -> Tuple[WordRecord, ...]:
        return self._records

    def in_range(self, start: int, end: int) -> Tuple[WordRecord, ...]:
        """Records with start <= id <= end."""
        return tuple(r for r in self._records if start <= r.id <= end)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(self._records)
