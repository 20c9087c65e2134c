"""Tests for the ArrayList-backed stack."""

import pytest

from adtcollections import (
    NOT_FOUND,
    EmptyCollectionError,
    IterationExhaustedError,
    NullArgumentError,
    Queue,
    Stack,
    StackADT,
)


def make_stack(*elements: str) -> Stack[str]:
    """Push elements in order, so the last one ends up on top."""
    stack = Stack[str]()
    for element in elements:
        stack.push(element)
    return stack


def test_stack_creation() -> None:
    """Test creating a stack."""
    stack = Stack[int]()
    assert stack.size() == 0
    assert stack.is_empty()
    assert not stack
    assert not stack.is_full()


def test_push_and_pop_lifo() -> None:
    """Test last in, first out."""
    stack = Stack[str]()
    stack.push("a")
    stack.push("b")
    assert stack.size() == 2
    assert stack.pop() == "b"
    assert stack.pop() == "a"
    assert stack.is_empty()


def test_peek_does_not_remove() -> None:
    """Test peeking at the top."""
    stack = make_stack("a", "b")
    assert stack.peek() == "b"
    assert stack.size() == 2


def test_empty_access_raises() -> None:
    """Test pop and peek on a cleared stack."""
    stack = make_stack("a")
    stack.clear()
    with pytest.raises(EmptyCollectionError):
        stack.pop()
    with pytest.raises(EmptyCollectionError):
        stack.peek()


def test_empty_collection_is_lookup_error() -> None:
    """Test that EmptyCollectionError can be caught as LookupError."""
    with pytest.raises(LookupError):
        Stack[int]().pop()


def test_push_none_rejected() -> None:
    """Test that None is refused and the size is unchanged."""
    stack = make_stack("a")
    with pytest.raises(NullArgumentError):
        stack.push(None)  # type: ignore[arg-type]
    assert stack.size() == 1


def test_push_beyond_initial_capacity() -> None:
    """Test the stack is unbounded."""
    stack = Stack[int](initial_capacity=2)
    for i in range(100):
        stack.push(i)
    assert stack.size() == 100
    assert stack.peek() == 99
    assert not stack.is_full()


def test_contains() -> None:
    """Test membership checks."""
    stack = make_stack("a", "b")
    assert stack.contains("a")
    assert not stack.contains("z")
    assert "b" in stack
    with pytest.raises(NullArgumentError):
        stack.contains(None)  # type: ignore[arg-type]


def test_search_is_one_based_from_top() -> None:
    """Test search distances."""
    stack = make_stack("a", "b", "c")
    assert stack.search("c") == 1
    assert stack.search("b") == 2
    assert stack.search("a") == 3
    assert stack.search("missing") == NOT_FOUND == -1


def test_search_finds_topmost_duplicate() -> None:
    """Test search stops at the match closest to the top."""
    stack = make_stack("a", "b", "a")
    assert stack.search("a") == 1


def test_search_none_not_found() -> None:
    """Test searching for None reports not found instead of raising."""
    stack = make_stack("a")
    assert stack.search(None) == NOT_FOUND  # type: ignore[arg-type]
    assert stack.size() == 1


def test_to_array_top_to_bottom() -> None:
    """Test array order starts at the top."""
    stack = make_stack("a", "b", "c")
    assert stack.to_array() == ["c", "b", "a"]
    assert stack.size() == 3


def test_to_array_buffers() -> None:
    """Test buffer reuse and replacement."""
    stack = make_stack("a", "b")

    larger: list[str | None] = ["x", "x", "x", "x"]
    assert stack.to_array(larger) is larger
    assert larger == ["b", "a", None, "x"]

    smaller: list[str | None] = ["x"]
    result = stack.to_array(smaller)
    assert result is not smaller
    assert result == ["b", "a"]

    with pytest.raises(NullArgumentError):
        stack.to_array(None)


def test_iterator_top_to_bottom() -> None:
    """Test iteration order and exhaustion."""
    stack = make_stack("a", "b", "c")
    assert list(stack) == ["c", "b", "a"]

    it = stack.iterator()
    for _ in range(3):
        next(it)
    assert not it.has_next()
    with pytest.raises(IterationExhaustedError):
        next(it)


def test_iterator_reads_live_list() -> None:
    """Test the cursor skips elements popped after it was created."""
    stack = make_stack("a", "b", "c", "d")
    it = stack.iterator()
    assert next(it) == "d"

    stack.pop()
    stack.pop()
    assert list(it) == ["b", "a"]


def test_equality() -> None:
    """Test stacks built the same way compare equal."""
    assert make_stack("a", "b") == make_stack("a", "b")
    assert Stack[str]() == Stack[str]()
    assert make_stack("a", "b") != make_stack("b", "a")
    assert make_stack("a", "b") != make_stack("a")
    assert make_stack("a") != ["a"]


def test_stack_not_equal_to_queue() -> None:
    """Test a stack and a queue never compare equal."""
    queue = Queue[str]()
    queue.enqueue("a")
    assert make_stack("a") != queue


def test_stack_is_unhashable() -> None:
    """Test that mutable stacks cannot be hashed."""
    with pytest.raises(TypeError):
        hash(Stack[int]())


def test_new_stack() -> None:
    """Test the factory returns a fresh empty stack."""
    stack = make_stack("a")
    fresh = stack.new_stack()
    assert isinstance(fresh, Stack)
    assert isinstance(fresh, StackADT)
    assert fresh.is_empty()
    assert fresh is not stack

    fresh.push("b")
    assert stack.to_array() == ["a"]


def test_repr() -> None:
    """Test the readable representation lists top first."""
    assert repr(make_stack("a", "b")) == "Stack(['b', 'a'])"
