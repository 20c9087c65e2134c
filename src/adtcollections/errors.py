"""Exception classes for adtcollections."""


class ADTError(Exception):
    """Base exception for all adtcollections errors."""


class NullArgumentError(ADTError, ValueError):
    """Raised when an element, list, or buffer argument is None."""


class IndexOutOfRangeError(ADTError, IndexError):
    """Raised when an index falls outside the valid range of an operation."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"index: {index}, size: {size}")
        self.index = index
        self.size = size


class EmptyCollectionError(ADTError, LookupError):
    """Raised by pop/peek/dequeue when the structure has no elements."""


class IterationExhaustedError(ADTError, StopIteration):
    """Raised when an iterator is advanced past its last element."""
