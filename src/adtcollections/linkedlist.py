"""Doubly-linked list implementing the indexed list contract."""

import logging
from collections.abc import Iterable, Iterator
from typing import Any, Generic

from adtcollections.contracts import ADTIterator, ListADT, copy_into, ensure_not_none
from adtcollections.errors import IndexOutOfRangeError
from adtcollections.types import MISSING, T

logger = logging.getLogger(__name__)


class Node(Generic[T]):
    """A node in the doubly-linked list."""

    __slots__ = ("element", "prev", "next")

    def __init__(
        self,
        element: T | None,
        prev: "Node[T] | None" = None,
        next: "Node[T] | None" = None,
    ) -> None:
        self.element = element
        self.prev = prev
        self.next = next


class LinkedListIterator(ADTIterator[T]):
    """
    Live cursor that follows next links from the head.

    Elements inserted after the cursor are seen. If the node under the cursor
    is removed (or the list cleared) the node is emptied and iteration stops
    there.
    """

    def __init__(self, start: Node[T] | None) -> None:
        self._current = start

    def has_next(self) -> bool:
        # Unlinked nodes have their element cleared, and None is never stored
        return self._current is not None and self._current.element is not None

    def _advance(self) -> T:
        node = self._current
        self._current = node.next  # type: ignore[union-attr]
        return node.element  # type: ignore[union-attr,return-value]


class DoublyLinkedList(ListADT[T]):
    """
    Doubly-linked list with head and tail pointers.

    Nodes are created and unlinked internally; no method accepts or returns a
    Node, so a node belongs to exactly one list for its whole life. Index
    lookups walk from whichever end is closer.
    """

    def __init__(self) -> None:
        self._head: Node[T] | None = None
        self._tail: Node[T] | None = None
        self._size = 0

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self._size:
            raise IndexOutOfRangeError(index, self._size)

    def _node_at(self, index: int) -> Node[T]:
        """Return the node at index, walking at most size // 2 links. O(n)."""
        self._check_index(index)
        if index < self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next  # type: ignore[union-attr]
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev  # type: ignore[union-attr]
        return node  # type: ignore[return-value]

    def _nodes(self) -> Iterator[Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _elements(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.element  # type: ignore[misc]

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        node = self._head
        while node is not None:
            following = node.next
            node.element = None
            node.prev = None
            node.next = None
            node = following
        logger.debug("cleared %d nodes", self._size)
        self._head = None
        self._tail = None
        self._size = 0

    def add(self, element: T) -> bool:
        """Append element after the tail. O(1)."""
        ensure_not_none(element, "element")
        node = Node(element, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return True

    def insert(self, index: int, element: T) -> bool:
        ensure_not_none(element, "element")
        if index < 0 or index > self._size:
            raise IndexOutOfRangeError(index, self._size)

        if index == self._size:
            return self.add(element)

        if index == 0:
            node = Node(element, next=self._head)
            # Non-empty here, otherwise index == size above
            self._head.prev = node  # type: ignore[union-attr]
            self._head = node
            self._size += 1
            return True

        # Link in front of the node currently at index
        current = self._node_at(index)
        node = Node(element, prev=current.prev, next=current)
        current.prev.next = node  # type: ignore[union-attr]
        current.prev = node
        self._size += 1
        return True

    def add_all(self, other: Iterable[T]) -> bool:
        ensure_not_none(other, "other")
        incoming = list(other)
        for element in incoming:
            ensure_not_none(element, "element")
        for element in incoming:
            self.add(element)
        return bool(incoming)

    def get(self, index: int) -> T:
        return self._node_at(index).element  # type: ignore[return-value]

    def set(self, index: int, element: T) -> T:
        ensure_not_none(element, "element")
        node = self._node_at(index)
        old = node.element
        node.element = element
        return old  # type: ignore[return-value]

    def remove_at(self, index: int) -> T:
        node = self._node_at(index)
        removed = node.element

        if self._size == 1:
            self._head = None
            self._tail = None
        elif node is self._head:
            self._head = node.next
            self._head.prev = None  # type: ignore[union-attr]
        elif node is self._tail:
            self._tail = node.prev
            self._tail.next = None  # type: ignore[union-attr]
        else:
            node.prev.next = node.next  # type: ignore[union-attr]
            node.next.prev = node.prev  # type: ignore[union-attr]

        node.element = None
        node.prev = None
        node.next = None
        self._size -= 1
        return removed  # type: ignore[return-value]

    def remove(self, element: T) -> T | None:
        ensure_not_none(element, "element")
        for index, node in enumerate(self._nodes()):
            if node.element == element:
                return self.remove_at(index)
        return None

    def contains(self, element: T) -> bool:
        ensure_not_none(element, "element")
        return any(node.element == element for node in self._nodes())

    def to_array(self, buffer: Any = MISSING) -> list[T | None]:
        return copy_into(self._elements(), self._size, buffer)

    def iterator(self) -> LinkedListIterator[T]:
        """Return a live cursor starting at the head."""
        return LinkedListIterator(self._head)
