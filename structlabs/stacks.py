"""Bounded character stacks, one on a growing array and one on a linked list."""

from __future__ import annotations

from dataclasses import dataclass

INIT_CAPACITY = 4
ELEMENT_SIZE = 1
NODE_SIZE = 8 + ELEMENT_SIZE
ARRAY_STACK_HEADER = 64
LIST_STACK_HEADER = 32


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that holds its maximum count."""


class StackEmptyError(LookupError):
    """Raised when popping from an empty stack."""


def _check_value(value: str) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"a stack element is a single character, got {value!r}")
    return value


class ArrayStack:
    """A stack of characters on an array that doubles its capacity when full."""

    def __init__(self, max_count: int) -> None:
        self.max_count = max_count
        self._items: list[str] = []
        self.capacity = INIT_CAPACITY
        self.peak = 0

    def push(self, value: str) -> None:
        """Put a character on top; raises StackFullError at the maximum count."""
        _check_value(value)
        if len(self._items) == self.max_count:
            raise StackFullError("stack overflow")
        if len(self._items) == self.capacity:
            self.capacity *= 2
        self._items.append(value)
        self.peak = max(self.peak, len(self._items))

    def pop(self) -> str:
        """Take the top character; raises StackEmptyError when empty."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def format(self) -> str:
        """Render the characters from top to bottom."""
        return "".join(f"{value} " for value in reversed(self._items)) + "\n"

    @property
    def memory_size(self) -> int:
        """Bytes taken by the stack and its allocated array."""
        return self.capacity * ELEMENT_SIZE + ARRAY_STACK_HEADER

    def __len__(self) -> int:
        return len(self._items)


@dataclass(eq=False)
class _Node:
    value: str
    next: _Node | None

    @property
    def address(self) -> str:
        return f"0x{id(self):x}"


class ListStack:
    """A stack of characters on a singly linked list that remembers freed nodes."""

    def __init__(self, max_count: int) -> None:
        self.max_count = max_count
        self._head: _Node | None = None
        self._count = 0
        self._freed: list[str] = []
        self.peak = 0

    def push(self, value: str) -> None:
        """Put a character on top; raises StackFullError at the maximum count."""
        _check_value(value)
        if self._count == self.max_count:
            raise StackFullError("stack overflow")
        self._head = _Node(value, self._head)
        self._count += 1
        self.peak = max(self.peak, self._count)

    def pop(self) -> str:
        """Take the top character; raises StackEmptyError when empty."""
        if self._head is None:
            raise StackEmptyError("stack is empty")
        node = self._head
        self._freed.append(node.address)
        self._head = node.next
        self._count -= 1
        return node.value

    @property
    def freed(self) -> tuple[str, ...]:
        """Addresses of the nodes popped so far, oldest first."""
        return tuple(self._freed)

    def _nodes(self):
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def format(self) -> str:
        """Render every node with its address, then the freed addresses."""
        lines = "".join(
            f"element: {node.value} located: {node.address}\n" for node in self._nodes()
        )
        freed = "".join(f"{address} " for address in self._freed)
        return f"{lines}free: {freed}\n\n"

    @property
    def memory_size(self) -> int:
        """Bytes taken by the stack header and its largest number of nodes."""
        return self.peak * NODE_SIZE + LIST_STACK_HEADER

    def __len__(self) -> int:
        return self._count