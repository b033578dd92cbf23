"""Functional primitives for dictkit.

Stateless helpers over ``Mapping`` objects. Callbacks always receive
``(key, value)``; results are fresh dicts so the helpers compose into
pipelines without touching their inputs (``shift`` excepted).
"""

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
from dictkit.functional.sets import intersection, difference

__all__ = [
    "has",
    "map_values",
    "map_entries",
    "each",
    "filter_items",
    "is_empty",
    "merge",
    "group_by",
    "all_items",
    "any_items",
    "shift",
    "count_where",
    "count_by",
    "reduce",
    "pick",
    "partition",
    "intersection",
    "difference",
]
