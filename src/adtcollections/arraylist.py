"""Array-backed list with amortized O(1) append."""

import logging
from collections.abc import Iterable
from typing import Any

from adtcollections.contracts import ADTIterator, ListADT, copy_into, ensure_not_none
from adtcollections.errors import IndexOutOfRangeError
from adtcollections.types import MISSING, T

logger = logging.getLogger(__name__)

# Default and minimum number of slots in a fresh buffer
DEFAULT_CAPACITY = 10


class ArrayListIterator(ADTIterator[T]):
    """Iterator over a copy of the live elements taken when it was created."""

    def __init__(self, snapshot: list[T]) -> None:
        self._snapshot = snapshot
        self._cursor = 0

    def has_next(self) -> bool:
        return self._cursor < len(self._snapshot)

    def _advance(self) -> T:
        element = self._snapshot[self._cursor]
        self._cursor += 1
        return element


class ArrayList(ListADT[T]):
    """
    List stored in a contiguous buffer of slots.

    Slots 0..size-1 hold the elements in order; the remaining slots hold None
    and are never read as elements. The buffer grows to 2 * capacity + 1 when
    full and never shrinks.
    """

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY) -> None:
        """
        Initialize an empty list.

        Args:
            initial_capacity: Number of slots to allocate up front. Values
                below DEFAULT_CAPACITY are raised to it.

        Raises:
            ValueError: If initial_capacity is negative
        """
        if initial_capacity < 0:
            raise ValueError("initial_capacity must be >= 0")
        self._buffer: list[T | None] = [None] * max(initial_capacity, DEFAULT_CAPACITY)
        self._size = 0

    @property
    def capacity(self) -> int:
        """Number of allocated slots."""
        return len(self._buffer)

    def _ensure_capacity(self, min_capacity: int) -> None:
        """Reallocate the buffer if it has fewer than min_capacity slots."""
        old_capacity = len(self._buffer)
        if old_capacity >= min_capacity:
            return
        new_capacity = max(old_capacity * 2 + 1, min_capacity)
        buffer: list[T | None] = [None] * new_capacity
        buffer[: self._size] = self._buffer[: self._size]
        self._buffer = buffer
        logger.debug("grew buffer from %d to %d slots", old_capacity, new_capacity)

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self._size:
            raise IndexOutOfRangeError(index, self._size)

    def _check_insert_index(self, index: int) -> None:
        if index < 0 or index > self._size:
            raise IndexOutOfRangeError(index, self._size)

    def _element_at(self, index: int) -> T:
        return self._buffer[index]  # type: ignore[return-value]

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        for i in range(self._size):
            self._buffer[i] = None
        self._size = 0

    def add(self, element: T) -> bool:
        ensure_not_none(element, "element")
        self._ensure_capacity(self._size + 1)
        self._buffer[self._size] = element
        self._size += 1
        return True

    def insert(self, index: int, element: T) -> bool:
        ensure_not_none(element, "element")
        self._check_insert_index(index)
        self._ensure_capacity(self._size + 1)
        # Shift index..size-1 one slot right
        self._buffer[index + 1 : self._size + 1] = self._buffer[index : self._size]
        self._buffer[index] = element
        self._size += 1
        return True

    def add_all(self, other: Iterable[T]) -> bool:
        ensure_not_none(other, "other")
        # Materialize first so a None element is rejected before anything is appended
        incoming = list(other)
        for element in incoming:
            ensure_not_none(element, "element")
        self._ensure_capacity(self._size + len(incoming))
        for element in incoming:
            self.add(element)
        return bool(incoming)

    def get(self, index: int) -> T:
        self._check_index(index)
        return self._element_at(index)

    def set(self, index: int, element: T) -> T:
        ensure_not_none(element, "element")
        self._check_index(index)
        old = self._element_at(index)
        self._buffer[index] = element
        return old

    def remove_at(self, index: int) -> T:
        self._check_index(index)
        removed = self._element_at(index)
        # Shift index+1..size-1 one slot left, then clear the vacated slot
        self._buffer[index : self._size - 1] = self._buffer[index + 1 : self._size]
        self._size -= 1
        self._buffer[self._size] = None
        return removed

    def remove(self, element: T) -> T | None:
        ensure_not_none(element, "element")
        for i in range(self._size):
            if element == self._buffer[i]:
                return self.remove_at(i)
        return None

    def contains(self, element: T) -> bool:
        ensure_not_none(element, "element")
        return any(element == self._buffer[i] for i in range(self._size))

    def to_array(self, buffer: Any = MISSING) -> list[T | None]:
        if buffer is MISSING:
            return self._buffer[: self._size]
        return copy_into(self._buffer[: self._size], self._size, buffer)  # type: ignore[arg-type]

    def iterator(self) -> ArrayListIterator[T]:
        """Return an iterator over a snapshot; later mutation is not observed."""
        return ArrayListIterator(self._buffer[: self._size])  # type: ignore[arg-type]
