"""Set algebra over mappings, treating each mapping as a set of pairs.

Two pairs are equal when their keys are equal and their values compare
equal, so ``{"a": 1}`` and ``{"a": 2}`` share no pair. Results keep the
iteration order of the first mapping.
"""

import logging
import typing as tp

from dictkit.core.types import K, V, MAPPING_LIST_ADAPTER

__all__ = ["intersection", "difference"]

logger = logging.getLogger(__name__)

_MISSING = object()


def _contains_pair(mapping: tp.Mapping[K, V], key: K, value: V) -> bool:
    other = mapping.get(key, _MISSING)
    return other is not _MISSING and other == value


def intersection(
    mapping: tp.Mapping[K, V], *others: tp.Mapping[K, V]
) -> tp.Dict[K, V]:
    """Keep the pairs of ``mapping`` found in every one of ``others``.

    Args:
        mapping: Mapping whose pairs are tested.
        *others: Mappings each pair must also appear in.

    Returns:
        A new dict; a plain copy of ``mapping`` when ``others`` is empty.

    Raises:
        pydantic.ValidationError: If any argument is not a mapping.
    """
    mapping, *others = MAPPING_LIST_ADAPTER.validate_python([mapping, *others])
    logger.debug(f"Intersecting with {len(others)} mappings")
    return {
        key: value
        for key, value in mapping.items()
        if all(_contains_pair(other, key, value) for other in others)
    }


def difference(
    mapping: tp.Mapping[K, V], *others: tp.Mapping[K, V]
) -> tp.Dict[K, V]:
    """Keep the pairs of ``mapping`` found in none of ``others``.

    Args:
        mapping: Mapping whose pairs are tested.
        *others: Mappings whose pairs are removed.

    Returns:
        A new dict; a plain copy of ``mapping`` when ``others`` is empty.

    Raises:
        pydantic.ValidationError: If any argument is not a mapping.
    """
    mapping, *others = MAPPING_LIST_ADAPTER.validate_python([mapping, *others])
    logger.debug(f"Subtracting {len(others)} mappings")
    return {
        key: value
        for key, value in mapping.items()
        if not any(_contains_pair(other, key, value) for other in others)
    }
