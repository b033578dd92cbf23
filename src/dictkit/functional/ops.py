"""Dictionary operations as free functions.

Every function takes the mapping as its first argument and, where a callback
is involved, calls it as ``fn(key, value)`` once per pair in the mapping's
iteration order (insertion order for ``dict``). None of them mutate their
input except :func:`shift`.

A callback that raises aborts the operation on the spot; the exception
reaches the caller unchanged and no partial result is returned.

Examples:
    >>> from dictkit.functional.ops import group_by, merge
    >>> merge({"a": 1, "b": 2}, {"b": 3, "c": 4})
    {'a': 1, 'b': 3, 'c': 4}
    >>> group_by({"x": 1, "y": 2, "z": 1}, lambda k, v: v)
    {1: [1, 1], 2: [2]}
"""

import logging
import typing as tp

from dictkit.core.errors import EmptyMappingError
from dictkit.core.types import A, K, T, V, MAPPING_LIST_ADAPTER, Pair, Predicate

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
]

logger = logging.getLogger(__name__)


def has(mapping: tp.Mapping[K, V], key: K) -> bool:
    """Check whether ``key`` is present in ``mapping``."""
    return key in mapping


def map_values(
    mapping: tp.Mapping[K, V], fn: tp.Callable[[K, V], V]
) -> tp.Dict[K, V]:
    """Build a dict with the same keys and values produced by ``fn``.

    Args:
        mapping: Source mapping.
        fn: Called as ``fn(key, value)``; its result becomes the new value.

    Returns:
        A new dict whose key set equals that of ``mapping``.
    """
    return {key: fn(key, value) for key, value in mapping.items()}


def map_entries(
    mapping: tp.Mapping[K, V], fn: tp.Callable[[K, V], Pair]
) -> tp.Dict[tp.Any, tp.Any]:
    """Build a dict from the ``(key, value)`` pairs returned by ``fn``.

    When ``fn`` yields the same key for two input pairs, the one reached later
    in iteration order wins.

    Args:
        mapping: Source mapping.
        fn: Called as ``fn(key, value)``; must return a 2-tuple.

    Returns:
        A new dict of the mapped pairs.
    """
    mapped = {}
    for key, value in mapping.items():
        new_key, new_value = fn(key, value)
        mapped[new_key] = new_value
    return mapped


def each(mapping: tp.Mapping[K, V], fn: tp.Callable[[K, V], tp.Any]) -> None:
    """Call ``fn(key, value)`` for every pair, for its side effects."""
    for key, value in mapping.items():
        fn(key, value)


def filter_items(mapping: tp.Mapping[K, V], test: Predicate) -> tp.Dict[K, V]:
    """Keep the pairs for which ``test(key, value)`` is truthy.

    Args:
        mapping: Source mapping.
        test: Predicate called as ``test(key, value)``.

    Returns:
        A new dict holding exactly the accepted pairs.
    """
    return {key: value for key, value in mapping.items() if test(key, value)}


def is_empty(mapping: tp.Mapping[K, V]) -> bool:
    """Check whether ``mapping`` has no entries."""
    return len(mapping) == 0


def merge(mapping: tp.Mapping[K, V], *others: tp.Mapping[K, V]) -> tp.Dict[K, V]:
    """Overlay ``mapping`` and each of ``others`` left to right.

    On a key collision the value from the later mapping wins, across the whole
    sequence ``mapping, others[0], others[1], ...``.

    Args:
        mapping: Base mapping.
        *others: Mappings applied on top, in argument order.

    Returns:
        A new dict with the merged contents.

    Raises:
        pydantic.ValidationError: If any argument is not a mapping.
    """
    sources = MAPPING_LIST_ADAPTER.validate_python([mapping, *others])
    logger.debug(f"Merging {len(sources)} mappings")

    merged = {}
    for source in sources:
        merged.update(source)
    return merged


def group_by(
    mapping: tp.Mapping[K, V], group: tp.Callable[[K, V], T]
) -> tp.Dict[T, tp.List[V]]:
    """Bucket the values of ``mapping`` by ``group(key, value)``.

    Buckets are created the first time their group key shows up; values are
    appended in iteration order.

    Args:
        mapping: Source mapping.
        group: Called as ``group(key, value)``; must return a hashable.

    Returns:
        A new dict from group key to the list of values in that group.
    """
    grouped: tp.Dict[T, tp.List[V]] = {}
    for key, value in mapping.items():
        grouped.setdefault(group(key, value), []).append(value)
    return grouped


def all_items(mapping: tp.Mapping[K, V], test: Predicate) -> bool:
    """Check that ``test(key, value)`` holds for every pair.

    Stops at the first failing pair. ``True`` for an empty mapping.
    """
    for key, value in mapping.items():
        if not test(key, value):
            return False
    return True


def any_items(mapping: tp.Mapping[K, V], test: Predicate) -> bool:
    """Check that ``test(key, value)`` holds for at least one pair.

    Stops at the first passing pair. ``False`` for an empty mapping.
    """
    for key, value in mapping.items():
        if test(key, value):
            return True
    return False


def shift(mapping: tp.MutableMapping[K, V]) -> Pair:
    """Remove and return the first pair of ``mapping``.

    This is the only operation in the module that mutates its argument.

    Args:
        mapping: Mutable mapping to take the pair from.

    Returns:
        The removed ``(key, value)`` tuple.

    Raises:
        EmptyMappingError: If ``mapping`` is empty.
    """
    try:
        key = next(iter(mapping))
    except StopIteration:
        logger.debug(f"shift() on empty {type(mapping).__name__}")
        raise EmptyMappingError(type(mapping)) from None

    value = mapping.pop(key)
    logger.debug(f"Shifted key {key!r}, {len(mapping)} entries left")
    return key, value


def count_where(mapping: tp.Mapping[K, V], test: Predicate) -> int:
    """Count the pairs for which ``test(key, value)`` holds."""
    return sum(1 for key, value in mapping.items() if test(key, value))


def count_by(
    mapping: tp.Mapping[K, V], group: tp.Callable[[K, V], T]
) -> tp.Dict[T, int]:
    """Count the pairs falling into each ``group(key, value)`` bucket."""
    counts: tp.Dict[T, int] = {}
    for key, value in mapping.items():
        bucket = group(key, value)
        counts[bucket] = counts.get(bucket, 0) + 1
    return counts


def reduce(
    mapping: tp.Mapping[K, V], fn: tp.Callable[[A, K, V], A], initial: A
) -> A:
    """Fold the pairs of ``mapping`` into one value.

    Args:
        mapping: Source mapping.
        fn: Called as ``fn(accumulator, key, value)``; returns the next
            accumulator.
        initial: Starting accumulator, returned as-is for an empty mapping.

    Returns:
        The final accumulator.
    """
    accumulator = initial
    for key, value in mapping.items():
        accumulator = fn(accumulator, key, value)
    return accumulator


def pick(mapping: tp.Mapping[K, V], *keys: K) -> tp.Dict[K, V]:
    """Select the pairs whose key is in ``keys``, in the order of ``keys``.

    Keys missing from ``mapping`` are skipped.
    """
    return {key: mapping[key] for key in keys if key in mapping}


def partition(
    mapping: tp.Mapping[K, V], test: Predicate
) -> tp.Tuple[tp.Dict[K, V], tp.Dict[K, V]]:
    """Split ``mapping`` into the pairs passing ``test`` and the rest.

    Returns:
        A tuple ``(accepted, rejected)`` of new dicts.
    """
    accepted: tp.Dict[K, V] = {}
    rejected: tp.Dict[K, V] = {}
    for key, value in mapping.items():
        if test(key, value):
            accepted[key] = value
        else:
            rejected[key] = value
    return accepted, rejected
