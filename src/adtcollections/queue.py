"""FIFO queue backed by a DoublyLinkedList."""

from typing import Any

from adtcollections.contracts import QueueADT, ensure_not_none
from adtcollections.errors import EmptyCollectionError
from adtcollections.linkedlist import DoublyLinkedList, LinkedListIterator
from adtcollections.types import MISSING, NOT_FOUND, T


class Queue(QueueADT[T]):
    """
    Unbounded queue. The front is the head of the backing list, the rear its tail.

    Iteration is the backing list's live cursor, front to rear.
    """

    def __init__(self) -> None:
        self._items: DoublyLinkedList[T] = DoublyLinkedList()

    def new_queue(self) -> "Queue[T]":
        return Queue()

    def enqueue(self, element: T) -> None:
        ensure_not_none(element, "element")
        self._items.add(element)

    def dequeue(self) -> T:
        if self._items.is_empty():
            raise EmptyCollectionError("queue is empty")
        return self._items.remove_at(0)

    def peek(self) -> T:
        if self._items.is_empty():
            raise EmptyCollectionError("queue is empty")
        return self._items.get(0)

    def dequeue_all(self) -> None:
        self._items.clear()

    def is_empty(self) -> bool:
        return self._items.is_empty()

    def size(self) -> int:
        return self._items.size()

    def contains(self, element: T) -> bool:
        ensure_not_none(element, "element")
        return self._items.contains(element)

    def search(self, element: T) -> int:
        # Single pass over the live cursor rather than get(i) per position
        for position, item in enumerate(self._items, start=1):
            if item == element:
                return position
        return NOT_FOUND

    def to_array(self, buffer: Any = MISSING) -> list[T | None]:
        return self._items.to_array(buffer)

    def iterator(self) -> LinkedListIterator[T]:
        return self._items.iterator()

    def is_full(self) -> bool:
        """Always False: the queue has no fixed capacity."""
        return False
