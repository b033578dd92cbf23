"""Exceptions raised by dictkit."""

__all__ = ["DictkitError", "EmptyMappingError"]


class DictkitError(Exception):
    """Base class for every error raised by dictkit itself."""


class EmptyMappingError(DictkitError, KeyError):
    """Raised when a pair is requested from a mapping that has none.

    Subclasses ``KeyError`` so callers already handling ``dict.popitem``
    failures catch it too.
    """

    def __init__(self, mapping_type: type):
        self.mapping_type = mapping_type
        super().__init__(f"shift() called on an empty {mapping_type.__name__}")

    def __reduce__(self):
        # args holds the message, not the constructor argument
        return type(self), (self.mapping_type,)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]
