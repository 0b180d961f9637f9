"""Range and partition filtering over the word store.

Every filter, whether an explicit range or a set of parts, is applied as one
inclusive id interval. Failed applications leave the previous state intact.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from leapquiz.common.errors import EmptySelection, InvalidRangeInput, UnknownPartition
from leapquiz.common.utils import parse_leading_int, unique_preserve_order
from leapquiz.quiz.store import WordStore
from leapquiz.schema.base import WordRecord
from leapquiz.schema.partitions import PARTITIONS, PartitionDefinition


Interval = Tuple[int, int]


@dataclass
class SelectionState:
    """Active filter. No range means the whole store."""
    active_range: Optional[Interval] = None
    active_partitions: List[str] = field(default_factory=list)

    @property
    def is_active(self) -> bool:
        return self.active_range is not None


def resolve_partition(key: str, store: WordStore) -> Interval:
    """Return the (start, end) of a part; open ends resolve to the store's max id (0 if empty)."""
    part = PARTITIONS.get(key)
    if part is None:
        raise UnknownPartition(key)
    return part.start, _resolve_end(part, store)


def _resolve_end(part: PartitionDefinition, store: WordStore) -> int:
    if part.open_ended:
        return store.max_id() or 0
    return part.end


def combine_partitions(keys: Iterable[str], store: WordStore) -> Interval:
    """Enclosing interval of several parts: min of starts, max of resolved ends."""
    intervals = [resolve_partition(key, store) for key in keys]
    if not intervals:
        raise ValueError("combine_partitions needs at least one key")
    return min(s for s, _ in intervals), max(e for _, e in intervals)


def parse_range_bound(value: object, name: str) -> int:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidRangeInput(f"Enter both a start and an end No. ({name} is missing)")
    number = parse_leading_int(value)
    if number is None:
        raise InvalidRangeInput(f"{name.capitalize()} No. must be a number, got {value!r}")
    return number


class RangeSelector:
    """Holds the SelectionState and the filtered subset it produces."""

    def __init__(self, store: WordStore):
        self.state = SelectionState()
        self.subset: Tuple[WordRecord, ...] = store.all()

    def _apply_interval(self, store: WordStore, start: int, end: int) -> Tuple[WordRecord, ...]:
        low, high = min(start, end), max(start, end)
        filtered = store.in_range(low, high)
        if not filtered:
            raise EmptySelection(low, high)
        self.subset = filtered
        self.state.active_range = (low, high)
        return filtered

    def apply_explicit_range(self, store: WordStore, start: object, end: object) -> Tuple[WordRecord, ...]:
        """Filter to an explicit range; start and end may arrive in either order.

        Raises InvalidRangeInput or EmptySelection without touching the state.
        """
        start_num = parse_range_bound(start, "start")
        end_num = parse_range_bound(end, "end")
        filtered = self._apply_interval(store, start_num, end_num)
        self.state.active_partitions = []
        return filtered

    def toggle_combined_partitions(self, selected_keys: Sequence[str], store: WordStore) -> Tuple[WordRecord, ...]:
        """Filter to the enclosing interval of the selected parts.

        An empty selection clears the filter.
        """
        keys = unique_preserve_order(selected_keys)
        if not keys:
            return self.reset(store)
        start, end = combine_partitions(keys, store)
        filtered = self._apply_interval(store, start, end)
        self.state.active_partitions = keys
        return filtered

    def reset(self, store: WordStore) -> Tuple[WordRecord, ...]:
        self.state = SelectionState()
        self.subset = store.all()
        return self.subset

    def reapply(self, store: WordStore) -> Tuple[WordRecord, ...]:
        """Re-derive the subset from new store contents.

        Parts re-resolve against the new max id; an explicit range is applied
        again as stored. Raises EmptySelection (state unchanged) if nothing matches.
        """
        if self.state.active_partitions:
            return self.toggle_combined_partitions(self.state.active_partitions, store)
        if self.state.active_range is not None:
            start, end = self.state.active_range
            return self.apply_explicit_range(store, start, end)
        return self.reset(store)
