"""Convenience operations for Python dictionaries.

Use the free functions from :mod:`dictkit.functional` on any mapping, or wrap
a dict in :class:`dictkit.Dictionary` to call them as methods.
"""

from dictkit.logger.logger import logger, setup_logger
from dictkit.core import Dictionary, DictkitError, EmptyMappingError
from dictkit.functional import (
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
    intersection,
    difference,
)

__version__ = "0.1.0"

__all__ = [
    "Dictionary",
    "DictkitError",
    "EmptyMappingError",
    "logger",
    "setup_logger",
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
