"""Abstract list, stack and queue contracts shared by every container."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, Generic

from adtcollections.errors import IterationExhaustedError, NullArgumentError
from adtcollections.types import MISSING, T


def ensure_not_none(value: object, what: str) -> None:
    """Raise NullArgumentError if value is None."""
    if value is None:
        raise NullArgumentError(f"{what} must not be None")


def copy_into(items: Iterable[T], size: int, buffer: Any = MISSING) -> list[T | None]:
    """
    Copy exactly size items into an output list.

    With no buffer a fresh list of length size is returned. A buffer that is
    large enough is filled in place and returned; when it is strictly larger
    the slot just past the last element is set to None. A buffer that is too
    small is left untouched and a right-sized list is returned instead.

    Raises:
        NullArgumentError: If buffer is None
    """
    if buffer is MISSING:
        return list(items)
    ensure_not_none(buffer, "buffer")
    target: list[T | None] = buffer if len(buffer) >= size else [None] * size
    for i, item in enumerate(items):
        target[i] = item
    if len(target) > size:
        target[size] = None
    return target


class ADTIterator(ABC, Generic[T]):
    """Iterator over a container, usable with next() and for loops."""

    @abstractmethod
    def has_next(self) -> bool:
        """Return True if another element is available."""

    @abstractmethod
    def _advance(self) -> T:
        """Return the current element and move the cursor (has_next() is True)."""

    def __next__(self) -> T:
        if not self.has_next():
            raise IterationExhaustedError("no more elements")
        return self._advance()

    def __iter__(self) -> "ADTIterator[T]":
        return self


class _ContainerADT(ABC, Generic[T]):
    """Operations common to lists, stacks and queues."""

    @abstractmethod
    def size(self) -> int:
        """Return the number of elements."""

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True if there are no elements."""

    @abstractmethod
    def contains(self, element: T) -> bool:
        """
        Return True if some element compares equal to element.

        Raises:
            NullArgumentError: If element is None
        """

    @abstractmethod
    def to_array(self, buffer: Any = MISSING) -> list[T | None]:
        """
        Return the elements in iteration order.

        Without arguments a new list of exactly size() elements is returned.
        A buffer list is reused if it is large enough (see copy_into).

        Raises:
            NullArgumentError: If buffer is passed as None
        """

    @abstractmethod
    def iterator(self) -> ADTIterator[T]:
        """Return an iterator; whether it observes later mutation depends on the container."""

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __iter__(self) -> ADTIterator[T]:
        return self.iterator()

    def __contains__(self, element: object) -> bool:
        # None is never stored, so `None in c` is simply False
        if element is None:
            return False
        return self.contains(element)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"{type(self).__name__}([{', '.join(repr(e) for e in self)}])"

    def _same_sequence(self, other: "_ContainerADT[Any]") -> bool:
        """Pairwise comparison in iteration order."""
        if self.size() != other.size():
            return False
        return all(mine == theirs for mine, theirs in zip(self, other))


class ListADT(_ContainerADT[T]):
    """Indexed list contract, implemented by ArrayList and DoublyLinkedList."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every element."""

    @abstractmethod
    def add(self, element: T) -> bool:
        """
        Append element at the end.

        Raises:
            NullArgumentError: If element is None
        """

    @abstractmethod
    def insert(self, index: int, element: T) -> bool:
        """
        Insert element at index, shifting later elements towards the end.

        Valid indexes are 0..size() inclusive; size() appends.

        Raises:
            NullArgumentError: If element is None
            IndexOutOfRangeError: If index is outside 0..size()
        """

    @abstractmethod
    def add_all(self, other: Iterable[T]) -> bool:
        """
        Append every element of other, in its iteration order.

        Returns:
            True if at least one element was appended

        Raises:
            NullArgumentError: If other, or any of its elements, is None
        """

    @abstractmethod
    def get(self, index: int) -> T:
        """
        Return the element at index.

        Raises:
            IndexOutOfRangeError: If index is outside 0..size()-1
        """

    @abstractmethod
    def set(self, index: int, element: T) -> T:
        """
        Replace the element at index and return the previous one.

        Raises:
            NullArgumentError: If element is None
            IndexOutOfRangeError: If index is outside 0..size()-1
        """

    @abstractmethod
    def remove_at(self, index: int) -> T:
        """
        Remove and return the element at index.

        Raises:
            IndexOutOfRangeError: If index is outside 0..size()-1
        """

    @abstractmethod
    def remove(self, element: T) -> T | None:
        """
        Remove the first element equal to element.

        Returns:
            The removed element, or None if nothing matched

        Raises:
            NullArgumentError: If element is None
        """


class StackADT(_ContainerADT[T]):
    """LIFO contract. Iteration and to_array() run from top to bottom."""

    @abstractmethod
    def new_stack(self) -> "StackADT[T]":
        """Return a new, empty stack of the same concrete type."""

    @abstractmethod
    def push(self, element: T) -> None:
        """
        Put element on top.

        Raises:
            NullArgumentError: If element is None
        """

    @abstractmethod
    def pop(self) -> T:
        """
        Remove and return the top element.

        Raises:
            EmptyCollectionError: If the stack is empty
        """

    @abstractmethod
    def peek(self) -> T:
        """
        Return the top element without removing it.

        Raises:
            EmptyCollectionError: If the stack is empty
        """

    @abstractmethod
    def clear(self) -> None:
        """Remove every element."""

    @abstractmethod
    def search(self, element: T) -> int:
        """Return the 1-based distance from the top, or NOT_FOUND."""

    @abstractmethod
    def is_full(self) -> bool:
        """Return True if no further push can succeed."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StackADT):
            return NotImplemented
        return self._same_sequence(other)


class QueueADT(_ContainerADT[T]):
    """FIFO contract. Iteration and to_array() run from front to rear."""

    @abstractmethod
    def new_queue(self) -> "QueueADT[T]":
        """Return a new, empty queue of the same concrete type."""

    @abstractmethod
    def enqueue(self, element: T) -> None:
        """
        Add element at the rear.

        Raises:
            NullArgumentError: If element is None
        """

    @abstractmethod
    def dequeue(self) -> T:
        """
        Remove and return the front element.

        Raises:
            EmptyCollectionError: If the queue is empty
        """

    @abstractmethod
    def peek(self) -> T:
        """
        Return the front element without removing it.

        Raises:
            EmptyCollectionError: If the queue is empty
        """

    @abstractmethod
    def dequeue_all(self) -> None:
        """Remove every element."""

    @abstractmethod
    def search(self, element: T) -> int:
        """Return the 1-based distance from the front, or NOT_FOUND."""

    @abstractmethod
    def is_full(self) -> bool:
        """Return True if no further enqueue can succeed."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueueADT):
            return NotImplemented
        return self._same_sequence(other)
