"""An unbalanced binary search tree of comparable values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    value: Any
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """Binary search tree; values equal to a node go into its right subtree."""

    def __init__(self, values: Iterable[Any] | None = None) -> None:
        self._root: _Node | None = None
        self._size = 0
        if values is not None:
            for value in values:
                self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value`` to the tree."""
        node = _Node(value)
        self._size += 1
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def __contains__(self, value: Any) -> bool:
        current = self._root
        while current is not None:
            if value == current.value:
                return True
            current = current.left if value < current.value else current.right
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return self.inorder()

    def inorder(self) -> Iterator[Any]:
        """Yield values left subtree, node, right subtree (ascending order)."""
        pending: list[_Node] = []
        current = self._root
        while pending or current is not None:
            while current is not None:
                pending.append(current)
                current = current.left
            current = pending.pop()
            yield current.value
            current = current.right

    def preorder(self) -> Iterator[Any]:
        """Yield values node first, then left subtree, then right subtree."""
        pending = [self._root] if self._root is not None else []
        while pending:
            node = pending.pop()
            yield node.value
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)

    def postorder(self) -> Iterator[Any]:
        """Yield values left subtree, right subtree, then node."""
        pending = [self._root] if self._root is not None else []
        reversed_order: list[Any] = []
        while pending:
            node = pending.pop()
            reversed_order.append(node.value)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        yield from reversed(reversed_order)