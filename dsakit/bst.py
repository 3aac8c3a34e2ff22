"""Binary search tree where equal values are placed to the right."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import takewhile
from typing import Any

__all__ = ["BinarySearchTree"]


@dataclass(slots=True, eq=False)
class _Node:
    value: Any
    left: _Node | None = None
    right: _Node | None = None


def _in_order_from(stack: list[_Node]) -> Iterator[Any]:
    node: _Node | None = None
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


class BinarySearchTree:
    """An unbalanced binary search tree that keeps duplicates."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Insert ``value``; smaller values go left, others right."""
        node = _Node(value)
        if self._root is None:
            self._root = node
            return True
        current = self._root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = node
                    return True
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return True
                current = current.right

    def contains(self, value: Any) -> bool:
        """Return True if some node holds ``value``."""
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def in_order(self) -> list[Any]:
        """Return the values left, root, right: ascending order."""
        return list(self)

    def pre_order(self) -> list[Any]:
        """Return the values root, left, right."""
        result = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def post_order(self) -> list[Any]:
        """Return the values left, right, root."""
        result = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def delete(self, value: Any) -> bool:
        """Remove one node holding ``value``; return False if none does.

        A node with two children takes the value of its in-order successor,
        which is then removed instead.
        """
        parent: _Node | None = None
        node = self._root
        while node is not None and not (node.value == value):
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            parent, node = successor_parent, successor
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        return True

    def find_all(self, value: Any) -> list[Any]:
        """Return every stored value equal to ``value``."""
        return list(takewhile(lambda v: v == value, self._from(value)))

    def less_or_equal(self, limit: Any) -> list[Any]:
        """Return, in ascending order, every value not above ``limit``."""
        return list(takewhile(lambda v: v <= limit, self))

    def greater_or_equal(self, limit: Any) -> list[Any]:
        """Return, in ascending order, every value not below ``limit``."""
        return list(self._from(limit))

    def _from(self, limit: Any) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while node is not None:
            if node.value >= limit:
                stack.append(node)
                node = node.left
            else:
                node = node.right
        return _in_order_from(stack)

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while node is not None:
            stack.append(node)
            node = node.left
        return _in_order_from(stack)