"""Bounded or unbounded stacks and queues of values."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class ContainerOverflow(OverflowError):
    """Raised when a value is added to a container that is full."""


class ContainerUnderflow(IndexError):
    """Raised when a value is taken from a container that is empty."""


def _checked_capacity(capacity: int | None) -> int | None:
    if capacity is not None and capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    return capacity


class Stack:
    """A last-in, first-out stack; ``capacity`` of None means unbounded."""

    def __init__(self, capacity: int | None = None) -> None:
        self.capacity = _checked_capacity(capacity)
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if self.capacity is not None and len(self._items) >= self.capacity:
            raise ContainerOverflow("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the value on top of the stack."""
        if not self._items:
            raise ContainerUnderflow("stack underflow")
        return self._items.pop()

    def __iter__(self) -> Iterator[Any]:
        """Yield values from the top of the stack to the bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


class Queue:
    """A first-in, first-out queue; ``capacity`` of None means unbounded."""

    def __init__(self, capacity: int | None = None) -> None:
        self.capacity = _checked_capacity(capacity)
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear of the queue."""
        if self.capacity is not None and len(self._items) >= self.capacity:
            raise ContainerOverflow("queue overflow")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front of the queue."""
        if not self._items:
            raise ContainerUnderflow("queue underflow")
        return self._items.popleft()

    def __iter__(self) -> Iterator[Any]:
        """Yield values from the front of the queue to the rear."""
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)