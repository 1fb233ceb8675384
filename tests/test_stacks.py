import pytest

from structlabs.stacks import (
    INIT_CAPACITY,
    ArrayStack,
    ListStack,
    StackEmptyError,
    StackFullError,
)


def test_last_in_first_out():
    for stack in (ArrayStack(5), ListStack(5)):
        for char in "([{":
            stack.push(char)
        assert len(stack) == 3
        assert [stack.pop() for _ in range(3)] == ["{", "[", "("]
        assert len(stack) == 0


def test_overflow_at_max_count():
    for stack in (ArrayStack(2), ListStack(2)):
        stack.push("a")
        stack.push("b")
        with pytest.raises(StackFullError):
            stack.push("c")
        assert len(stack) == 2


def test_pop_from_empty():
    with pytest.raises(StackEmptyError):
        ArrayStack(3).pop()
    with pytest.raises(StackEmptyError):
        ListStack(3).pop()


def test_rejects_non_character():
    with pytest.raises(ValueError):
        ArrayStack(3).push("ab")
    with pytest.raises(ValueError):
        ListStack(3).push("ab")


def test_peak_tracks_largest_count():
    for stack in (ArrayStack(10), ListStack(10)):
        for char in "abc":
            stack.push(char)
        stack.pop()
        stack.pop()
        stack.push("d")
        assert stack.peak == 3


def test_array_format_top_to_bottom():
    stack = ArrayStack(5)
    for char in "abc":
        stack.push(char)
    assert stack.format() == "c b a \n"


def test_array_empty_format():
    assert ArrayStack(1).format() == "\n"


def test_array_capacity_doubles_and_never_shrinks():
    stack = ArrayStack(20)
    for _ in range(INIT_CAPACITY):
        stack.push("x")
    assert stack.capacity == INIT_CAPACITY
    stack.push("x")
    assert stack.capacity == 2 * INIT_CAPACITY
    while len(stack):
        stack.pop()
    assert stack.capacity == 2 * INIT_CAPACITY
    assert stack.memory_size > ArrayStack(20).memory_size


def test_list_format_shows_nodes_and_freed():
    stack = ListStack(5)
    stack.push("a")
    stack.push("b")
    lines = stack.format().splitlines()
    assert lines[0].startswith("element: b located: 0x")
    assert lines[1].startswith("element: a located: 0x")
    assert lines[2] == "free: "
    stack.pop()
    assert len(stack.freed) == 1
    assert f"free: {stack.freed[0]} \n\n" in stack.format()
    assert stack.format().startswith("element: a located: ")


def test_list_memory_grows_with_peak():
    small = ListStack(5)
    small.push("a")
    large = ListStack(5)
    for char in "abc":
        large.push(char)
    assert large.memory_size > small.memory_size