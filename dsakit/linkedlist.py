"""Singly and doubly linked lists of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class _SingleNode:
    value: Any
    next: _SingleNode | None = None


@dataclass
class _DoubleNode:
    value: Any
    prev: _DoubleNode | None = None
    next: _DoubleNode | None = None


class SinglyLinkedList:
    """A singly linked list with a tail pointer for constant-time appends."""

    def __init__(self, values: Iterable[Any] | None = None) -> None:
        self._head: _SingleNode | None = None
        self._tail: _SingleNode | None = None
        self._size = 0
        if values is not None:
            for value in values:
                self.append(value)

    def _nodes(self) -> Iterator[_SingleNode]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = _SingleNode(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``; raise ValueError if absent."""
        previous: _SingleNode | None = None
        for node in self._nodes():
            if node.value == value:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                if node is self._tail:
                    self._tail = previous
                self._size -= 1
                return
            previous = node
        raise ValueError(f"{value!r} not found in the list")

    def positions(self, value: Any) -> list[int]:
        """Return the 1-based positions of every node holding ``value``."""
        return [
            position
            for position, node in enumerate(self._nodes(), start=1)
            if node.value == value
        ]

    def sort(self) -> None:
        """Sort the list in place by exchanging node values."""
        for node in self._nodes():
            other = node.next
            while other is not None:
                if other.value < node.value:
                    node.value, other.value = other.value, node.value
                other = other.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"


class DoublyLinkedList:
    """A doubly linked list that can be walked in both directions."""

    def __init__(self, values: Iterable[Any] | None = None) -> None:
        self._head: _DoubleNode | None = None
        self._tail: _DoubleNode | None = None
        self._size = 0
        if values is not None:
            for value in values:
                self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = _DoubleNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def format_forward(self) -> str:
        """Render the list from head to tail."""
        return "".join(f"{value} ->" for value in self) + "NULL"

    def format_backward(self) -> str:
        """Render the list from tail to head."""
        return "NULL" + "".join(f"<-{value}" for value in reversed(self))