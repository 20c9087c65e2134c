"""LIFO stack backed by an ArrayList."""

from typing import Any

from adtcollections.arraylist import DEFAULT_CAPACITY, ArrayList
from adtcollections.contracts import ADTIterator, StackADT, copy_into, ensure_not_none
from adtcollections.errors import EmptyCollectionError
from adtcollections.types import MISSING, NOT_FOUND, T


class StackIterator(ADTIterator[T]):
    """
    Walks the backing list by descending index, top to bottom.

    The cursor reads the live list rather than a copy, so elements popped
    after the iterator was created are skipped once the cursor passes size.
    """

    def __init__(self, items: ArrayList[T]) -> None:
        self._items = items
        self._index = items.size() - 1

    def has_next(self) -> bool:
        self._index = min(self._index, self._items.size() - 1)
        return self._index >= 0

    def _advance(self) -> T:
        element = self._items.get(self._index)
        self._index -= 1
        return element


class Stack(StackADT[T]):
    """
    Unbounded stack. The top is the last index of the backing ArrayList.

    Two stacks compare equal when they hold equal elements in the same
    top-to-bottom order.
    """

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY) -> None:
        """
        Initialize an empty stack.

        Args:
            initial_capacity: Initial slot count of the backing ArrayList
        """
        self._items: ArrayList[T] = ArrayList(initial_capacity)

    def new_stack(self) -> "Stack[T]":
        return Stack()

    def push(self, element: T) -> None:
        ensure_not_none(element, "element")
        self._items.add(element)

    def pop(self) -> T:
        if self._items.is_empty():
            raise EmptyCollectionError("stack is empty")
        return self._items.remove_at(self._items.size() - 1)

    def peek(self) -> T:
        if self._items.is_empty():
            raise EmptyCollectionError("stack is empty")
        return self._items.get(self._items.size() - 1)

    def clear(self) -> None:
        self._items.clear()

    def is_empty(self) -> bool:
        return self._items.is_empty()

    def size(self) -> int:
        return self._items.size()

    def contains(self, element: T) -> bool:
        ensure_not_none(element, "element")
        return self._items.contains(element)

    def search(self, element: T) -> int:
        size = self._items.size()
        for position, index in enumerate(range(size - 1, -1, -1), start=1):
            if self._items.get(index) == element:
                return position
        return NOT_FOUND

    def to_array(self, buffer: Any = MISSING) -> list[T | None]:
        top_down = reversed(self._items.to_array())
        return copy_into(top_down, self._items.size(), buffer)  # type: ignore[arg-type]

    def iterator(self) -> StackIterator[T]:
        return StackIterator(self._items)

    def is_full(self) -> bool:
        """Always False: the stack has no fixed capacity."""
        return False
