import pytest
from collections import OrderedDict
from pydantic import ValidationError
from dictkit.core.errors import EmptyMappingError
from dictkit.functional.ops import (
    has,
    map_values,
    map_entries,
    each,
    filter_items,
    is_empty,
    merge,
    group_by,
    all_items,
    any_items,
    shift,
    count_where,
    count_by,
    reduce,
    pick,
    partition,
)


@pytest.fixture
def scores():
    return {"alice": 3, "bob": 5, "carol": 3, "dave": 8}


class Boom(Exception):
    pass


def explode(key, value):
    raise Boom(key)


def test_has():
    assert has({"a": 1}, "a")
    assert not has({"a": 1}, "b")
    # Falsy values are still present
    assert has({"a": None}, "a")


def test_is_empty():
    assert is_empty({})
    assert not is_empty({"a": 1})


def test_map_values_keeps_key_set(scores):
    doubled = map_values(scores, lambda k, v: v * 2)

    assert doubled.keys() == scores.keys()
    assert doubled == {"alice": 6, "bob": 10, "carol": 6, "dave": 16}


def test_map_values_passes_key(scores):
    labelled = map_values(scores, lambda k, v: f"{k}={v}")
    assert labelled["bob"] == "bob=5"


def test_map_entries_swaps_pairs():
    assert map_entries({"a": 1, "b": 2}, lambda k, v: (v, k)) == {1: "a", 2: "b"}


def test_map_entries_duplicate_key_last_wins(scores):
    # Every pair maps to the same key; dave comes last
    collapsed = map_entries(scores, lambda k, v: ("all", k))
    assert collapsed == {"all": "dave"}


def test_each_visits_every_pair_in_order(scores):
    seen = []
    result = each(scores, lambda k, v: seen.append((k, v)))

    assert result is None
    assert seen == list(scores.items())


def test_filter_items_true_and_false(scores):
    assert filter_items(scores, lambda k, v: True) == scores
    assert filter_items(scores, lambda k, v: False) == {}


def test_filter_items_selects_pairs(scores):
    assert filter_items(scores, lambda k, v: v == 3) == {"alice": 3, "carol": 3}


def test_merge_later_wins():
    assert merge({"a": 1}, {"a": 2}) == {"a": 2}
    assert merge({"a": 1, "b": 2}, {"b": 3, "c": 4}) == {"a": 1, "b": 3, "c": 4}


def test_merge_many_in_argument_order():
    merged = merge({"a": 1}, {"a": 2, "b": 2}, {"b": 3}, {"c": 4})
    assert merged == {"a": 2, "b": 3, "c": 4}


def test_merge_single_returns_copy():
    original = {"a": 1}
    merged = merge(original)

    assert merged == original
    assert merged is not original


def test_merge_accepts_any_mapping():
    merged = merge(OrderedDict(a=1), {"b": 2})
    assert type(merged) is dict
    assert merged == {"a": 1, "b": 2}


def test_merge_rejects_non_mapping():
    with pytest.raises(ValidationError):
        merge({"a": 1}, [("b", 2)])


def test_group_by_values():
    grouped = group_by({"x": 1, "y": 2, "z": 1}, lambda k, v: v)
    assert grouped == {1: [1, 1], 2: [2]}


def test_group_by_keeps_iteration_order(scores):
    grouped = group_by(scores, lambda k, v: "odd" if v % 2 else "even")

    assert list(grouped) == ["odd", "even"]
    assert grouped["odd"] == [3, 5, 3]
    assert grouped["even"] == [8]


def test_group_by_empty():
    assert group_by({}, lambda k, v: v) == {}


def test_all_and_any_on_empty():
    assert all_items({}, lambda k, v: False) is True
    assert any_items({}, lambda k, v: True) is False


def test_all_and_any(scores):
    assert all_items(scores, lambda k, v: v > 0)
    assert not all_items(scores, lambda k, v: v > 3)
    assert any_items(scores, lambda k, v: v > 7)
    assert not any_items(scores, lambda k, v: v > 8)


def test_all_short_circuits(scores):
    calls = []

    def test(key, value):
        calls.append(key)
        return key != "bob"

    assert not all_items(scores, test)
    assert calls == ["alice", "bob"]


def test_any_short_circuits(scores):
    calls = []

    def test(key, value):
        calls.append(key)
        return value == 5

    assert any_items(scores, test)
    assert calls == ["alice", "bob"]


def test_shift_removes_first_pair(scores):
    pair = shift(scores)

    assert pair == ("alice", 3)
    assert "alice" not in scores
    assert len(scores) == 3


def test_shift_drains_mapping(scores):
    before = dict(scores)
    n = len(scores)

    for _ in range(n):
        key, value = shift(scores)
        assert before[key] == value

    assert scores == {}
    with pytest.raises(EmptyMappingError):
        shift(scores)


def test_shift_empty_is_key_error():
    with pytest.raises(KeyError, match="empty dict"):
        shift({})


def test_count_where(scores):
    assert count_where(scores, lambda k, v: v == 3) == 2
    assert count_where({}, lambda k, v: True) == 0


def test_count_by(scores):
    assert count_by(scores, lambda k, v: v) == {3: 2, 5: 1, 8: 1}


def test_reduce(scores):
    assert reduce(scores, lambda acc, k, v: acc + v, 0) == 19
    assert reduce({}, lambda acc, k, v: acc + v, 42) == 42


def test_pick(scores):
    assert pick(scores, "dave", "alice", "zoe") == {"dave": 8, "alice": 3}
    assert list(pick(scores, "dave", "alice")) == ["dave", "alice"]
    assert pick(scores) == {}


def test_partition(scores):
    high, low = partition(scores, lambda k, v: v > 4)

    assert high == {"bob": 5, "dave": 8}
    assert low == {"alice": 3, "carol": 3}


@pytest.mark.parametrize(
    "call",
    [
        lambda m: map_values(m, explode),
        lambda m: map_entries(m, explode),
        lambda m: each(m, explode),
        lambda m: filter_items(m, explode),
        lambda m: group_by(m, explode),
        lambda m: all_items(m, explode),
        lambda m: any_items(m, explode),
        lambda m: count_by(m, explode),
        lambda m: partition(m, explode),
    ],
)
def test_callback_errors_propagate(scores, call):
    with pytest.raises(Boom):
        call(scores)


@pytest.mark.parametrize(
    "call",
    [
        lambda m: map_values(m, lambda k, v: v + 1),
        lambda m: map_entries(m, lambda k, v: (v, k)),
        lambda m: filter_items(m, lambda k, v: v > 3),
        lambda m: merge(m, {"alice": 0}),
        lambda m: group_by(m, lambda k, v: v),
        lambda m: partition(m, lambda k, v: v > 3),
        lambda m: pick(m, "alice"),
    ],
)
def test_input_not_mutated(scores, call):
    snapshot = dict(scores)
    result = call(scores)

    assert scores == snapshot
    assert result is not scores
