"""Type definitions for adtcollections."""

from typing import Final, TypeVar

# Element type
T = TypeVar("T")

# Returned by search() when no element matches
NOT_FOUND: Final = -1


class _Missing:
    """Marker for an omitted optional argument, distinct from None."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()
