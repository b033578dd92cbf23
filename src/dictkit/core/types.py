"""Reusable type definitions for dictkit.

Type Aliases:
    Pair: A ``(key, value)`` tuple taken from or put into a mapping.
    Predicate: A ``(key, value) -> bool`` callback.
    MappingList: A non-empty list whose every element is a ``Mapping``.

``MappingList`` is a pydantic constrained type; validate with
``MAPPING_LIST_ADAPTER.validate_python``.
"""

import typing as tp
from collections.abc import Mapping
import annotated_types as at
from pydantic import TypeAdapter
from pydantic.functional_validators import BeforeValidator

__all__ = [
    "K",
    "V",
    "T",
    "A",
    "Pair",
    "Predicate",
    "MappingList",
    "MAPPING_LIST_ADAPTER",
]

K = tp.TypeVar("K")
V = tp.TypeVar("V")
T = tp.TypeVar("T")
A = tp.TypeVar("A")

Pair = tp.Tuple[K, V]
Predicate = tp.Callable[[K, V], bool]


def validate_mappings(items: tp.Sequence[tp.Any]) -> tp.Sequence[tp.Any]:
    """Validator to ensure every item is a mapping.

    Args:
        items: Sequence of candidate mappings.
    Returns:
        The original sequence if validation passes.
    Raises:
        ValueError: If an item is not a ``collections.abc.Mapping``.
    """
    for position, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise ValueError(
                f"Expected a mapping at position {position}, got '{type(item).__name__}'."
            )
    return items


# A list of mappings with at least one element (the receiver itself)
MappingList = tp.Annotated[
    tp.List[tp.Any], at.MinLen(1), BeforeValidator(validate_mappings)
]

MAPPING_LIST_ADAPTER = TypeAdapter(MappingList)
