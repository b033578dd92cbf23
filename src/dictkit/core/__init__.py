"""Core types, errors and the ``Dictionary`` wrapper."""

from dictkit.core.errors import DictkitError, EmptyMappingError
from dictkit.core.config import Settings, settings
from dictkit.core.dictionary import Dictionary

__all__ = [
    "DictkitError",
    "EmptyMappingError",
    "Settings",
    "settings",
    "Dictionary",
]
