"""``dict`` subclass exposing the dictkit operations as methods."""

import typing as tp

from dictkit.core.types import A, K, T, V, Pair, Predicate
from dictkit.functional import ops, sets

__all__ = ["Dictionary"]


class Dictionary(tp.Dict[K, V]):
    """A ``dict`` with the dictkit operations attached.

    Built exactly like ``dict``. Methods that produce a mapping return a new
    ``Dictionary`` and leave ``self`` untouched; :meth:`shift` is the one
    method that mutates ``self``.

    Example:
        >>> d = Dictionary(a=1, b=2)
        >>> d.filter(lambda k, v: v > 1)
        Dictionary({'b': 2})
    """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict.__repr__(self)})"

    def has(self, key: K) -> bool:
        return ops.has(self, key)

    def is_empty(self) -> bool:
        return ops.is_empty(self)

    def map_values(self, fn: tp.Callable[[K, V], V]) -> "Dictionary[K, V]":
        return Dictionary(ops.map_values(self, fn))

    def map_entries(self, fn: tp.Callable[[K, V], Pair]) -> "Dictionary":
        return Dictionary(ops.map_entries(self, fn))

    def each(self, fn: tp.Callable[[K, V], tp.Any]) -> None:
        ops.each(self, fn)

    def filter(self, test: Predicate) -> "Dictionary[K, V]":
        return Dictionary(ops.filter_items(self, test))

    def merge(self, *others: tp.Mapping[K, V]) -> "Dictionary[K, V]":
        return Dictionary(ops.merge(self, *others))

    def group_by(self, group: tp.Callable[[K, V], T]) -> "Dictionary[T, tp.List[V]]":
        return Dictionary(ops.group_by(self, group))

    def all(self, test: Predicate) -> bool:
        return ops.all_items(self, test)

    def any(self, test: Predicate) -> bool:
        return ops.any_items(self, test)

    def shift(self) -> Pair:
        """Remove and return the first ``(key, value)`` pair.

        Raises:
            EmptyMappingError: If the dictionary is empty.
        """
        return ops.shift(self)

    def count_where(self, test: Predicate) -> int:
        return ops.count_where(self, test)

    def count_by(self, group: tp.Callable[[K, V], T]) -> "Dictionary[T, int]":
        return Dictionary(ops.count_by(self, group))

    def reduce(self, fn: tp.Callable[[A, K, V], A], initial: A) -> A:
        return ops.reduce(self, fn, initial)

    def pick(self, *keys: K) -> "Dictionary[K, V]":
        return Dictionary(ops.pick(self, *keys))

    def partition(
        self, test: Predicate
    ) -> tp.Tuple["Dictionary[K, V]", "Dictionary[K, V]"]:
        accepted, rejected = ops.partition(self, test)
        return Dictionary(accepted), Dictionary(rejected)

    def intersection(self, *others: tp.Mapping[K, V]) -> "Dictionary[K, V]":
        return Dictionary(sets.intersection(self, *others))

    def difference(self, *others: tp.Mapping[K, V]) -> "Dictionary[K, V]":
        return Dictionary(sets.difference(self, *others))
