"""adtcollections - Array-backed and linked lists with stack and queue adapters."""

import logging

from adtcollections.arraylist import DEFAULT_CAPACITY, ArrayList
from adtcollections.contracts import ADTIterator, ListADT, QueueADT, StackADT
from adtcollections.errors import (
    ADTError,
    EmptyCollectionError,
    IndexOutOfRangeError,
    IterationExhaustedError,
    NullArgumentError,
)
from adtcollections.linkedlist import DoublyLinkedList
from adtcollections.queue import Queue
from adtcollections.stack import Stack
from adtcollections.types import NOT_FOUND

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.0.1"

__all__ = [
    "ArrayList",
    "DoublyLinkedList",
    "Stack",
    "Queue",
    "ListADT",
    "StackADT",
    "QueueADT",
    "ADTIterator",
    "ADTError",
    "NullArgumentError",
    "IndexOutOfRangeError",
    "EmptyCollectionError",
    "IterationExhaustedError",
    "DEFAULT_CAPACITY",
    "NOT_FOUND",
]
