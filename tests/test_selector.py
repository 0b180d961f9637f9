from __future__ import annotations

import pytest

from leapquiz.common.errors import EmptySelection, InvalidRangeInput, UnknownPartition
from leapquiz.quiz.selector import RangeSelector, combine_partitions, resolve_partition
from leapquiz.quiz.store import WordStore
from leapquiz.schema.partitions import PARTITIONS
from tests.helpers import make_records


def ids(records):
    return [r.id for r in records]


def test_explicit_range_order_normalized(big_store):
    forward = RangeSelector(big_store)
    backward = RangeSelector(big_store)

    a = forward.apply_explicit_range(big_store, 10, 50)
    b = backward.apply_explicit_range(big_store, 50, 10)

    assert a == b
    assert ids(a) == list(range(10, 51))
    assert backward.state.active_range == (10, 50)
    assert backward.state.active_partitions == []


def test_explicit_range_accepts_text(big_store):
    selector = RangeSelector(big_store)

    selector.apply_explicit_range(big_store, " 7", "9")

    assert ids(selector.subset) == [7, 8, 9]


@pytest.mark.parametrize("start, end", [(None, 5), ("", 5), (1, "  "), ("abc", 5), (1, "end")])
def test_invalid_range_input_leaves_state(big_store, start, end):
    selector = RangeSelector(big_store)
    selector.apply_explicit_range(big_store, 1, 10)

    with pytest.raises(InvalidRangeInput):
        selector.apply_explicit_range(big_store, start, end)

    assert selector.state.active_range == (1, 10)
    assert len(selector.subset) == 10


def test_empty_range_leaves_state_unchanged(big_store):
    selector = RangeSelector(big_store)
    selector.toggle_combined_partitions(["part2"], big_store)
    before = (selector.state.active_range, list(selector.state.active_partitions), selector.subset)

    with pytest.raises(EmptySelection) as exc:
        selector.apply_explicit_range(big_store, 5000, 6000)

    assert (exc.value.start, exc.value.end) == (5000, 6000)
    assert (selector.state.active_range, selector.state.active_partitions, selector.subset) == before


def test_partition_merge_uses_enclosing_interval(big_store):
    selector = RangeSelector(big_store)

    subset = selector.toggle_combined_partitions(["part1", "part3"], big_store)

    assert combine_partitions(["part1", "part3"], big_store) == (1, 1400)
    assert selector.state.active_range == (1, 1400)
    assert selector.state.active_partitions == ["part1", "part3"]
    assert len(subset) == 1400


def test_open_ended_partition_resolves_to_max_id(big_store):
    assert PARTITIONS["part4"].open_ended and not PARTITIONS["part3"].open_ended
    assert resolve_partition("part4", big_store) == (1401, 2200)
    assert resolve_partition("part2", big_store) == (401, 1000)


def test_open_ended_partition_on_empty_store():
    empty = WordStore()
    selector = RangeSelector(empty)

    assert resolve_partition("part4", empty) == (1401, 0)
    with pytest.raises(EmptySelection):
        selector.toggle_combined_partitions(["part4"], empty)
    assert selector.state.active_range is None


def test_unknown_partition(big_store):
    selector = RangeSelector(big_store)

    with pytest.raises(UnknownPartition):
        selector.toggle_combined_partitions(["part9"], big_store)


def test_empty_key_set_clears_filter(big_store):
    selector = RangeSelector(big_store)
    selector.toggle_combined_partitions(["part1"], big_store)

    subset = selector.toggle_combined_partitions([], big_store)

    assert selector.state.active_range is None
    assert selector.state.active_partitions == []
    assert len(subset) == 2200


def test_reapply_after_smaller_reimport(big_store):
    selector = RangeSelector(big_store)
    selector.apply_explicit_range(big_store, 100, 300)

    smaller = WordStore(make_records(range(1, 201)))
    subset = selector.reapply(smaller)
    assert ids(subset) == list(range(100, 201))

    tiny = WordStore(make_records(range(1, 51)))
    with pytest.raises(EmptySelection):
        selector.reapply(tiny)
    assert selector.state.active_range == (100, 300)


def test_reapply_reresolves_open_partition(big_store):
    selector = RangeSelector(big_store)
    selector.toggle_combined_partitions(["part4"], big_store)
    assert selector.state.active_range == (1401, 2200)

    grown = WordStore(make_records(range(1, 2501)))
    selector.reapply(grown)

    assert selector.state.active_range == (1401, 2500)
    assert selector.state.active_partitions == ["part4"]
