"""Doubly linked list with head and tail references."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["DoublyLinkedList"]


@dataclass(slots=True, eq=False)
class _Node:
    value: Any
    next: _Node | None = None
    prev: _Node | None = None


class DoublyLinkedList:
    """A sequence of values linked in both directions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._length = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def prepend(self, value: Any) -> None:
        """Add ``value`` at the front of the list."""
        node = _Node(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._length += 1

    def delete_last(self) -> Any:
        """Remove and return the last value; IndexError if empty."""
        if self._tail is None:
            raise IndexError("delete from empty list")
        node = self._tail
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._length -= 1
        return node.value

    def delete_first(self) -> Any:
        """Remove and return the first value; IndexError if empty."""
        if self._head is None:
            raise IndexError("delete from empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._length -= 1
        return node.value

    def _node_at(self, index: int) -> _Node:
        if not 0 <= index < self._length:
            raise IndexError("list index out of range")
        if index < self._length // 2:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._length - 1 - index):
                node = node.prev
        return node

    def get(self, index: int) -> Any:
        """Return the value at ``index``, walking from the nearer end."""
        return self._node_at(index).value

    def set(self, index: int, value: Any) -> None:
        """Replace the value at ``index``; IndexError if out of range."""
        self._node_at(index).value = value

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` before position ``index`` (0..len inclusive)."""
        if not 0 <= index <= self._length:
            raise IndexError("list index out of range")
        if index == 0:
            self.prepend(value)
        elif index == self._length:
            self.append(value)
        else:
            before = self._node_at(index - 1)
            after = before.next
            node = _Node(value, next=after, prev=before)
            before.next = node
            after.prev = node
            self._length += 1

    def delete_node(self, index: int) -> Any:
        """Remove and return the value at ``index``; IndexError if out of range."""
        if not 0 <= index < self._length:
            raise IndexError("list index out of range")
        if index == 0:
            return self.delete_first()
        if index == self._length - 1:
            return self.delete_last()
        node = self._node_at(index)
        node.prev.next = node.next
        node.next.prev = node.prev
        self._length -= 1
        return node.value

    def is_palindrome(self) -> bool:
        """Return True if the values read the same in both directions."""
        return all(a == b for a, b in zip(self, reversed(self)))

    def reverse(self) -> None:
        """Reverse the list in place."""
        node = self._head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self._head, self._tail = self._tail, self._head

    def partition(self, x: Any) -> None:
        """Move values below ``x`` before the rest, keeping relative order."""
        if self._head is None:
            return
        less = _Node(None)
        more = _Node(None)
        less_end, more_end = less, more
        node = self._head
        while node is not None:
            following = node.next
            node.next = None
            if node.value < x:
                less_end.next = node
                node.prev = less_end
                less_end = node
            else:
                more_end.next = node
                node.prev = more_end
                more_end = node
            node = following
        less_end.next = more.next
        if more.next is not None:
            more.next.prev = less_end
        self._head = less.next
        self._head.prev = None
        self._tail = more_end if more.next is not None else less_end

    def reverse_between(self, m: int, n: int) -> None:
        """Reverse the values at positions ``m`` through ``n`` inclusive."""
        if self._head is None or m == n:
            return
        if not 0 <= m <= n < self._length:
            raise IndexError("positions out of range")
        dummy = _Node(None, next=self._head)
        self._head.prev = dummy
        previous = dummy
        for _ in range(m):
            previous = previous.next
        start = previous.next
        moving = start.next
        for _ in range(n - m):
            start.next = moving.next
            if moving.next is not None:
                moving.next.prev = start
            moving.next = previous.next
            previous.next.prev = moving
            previous.next = moving
            moving.prev = previous
            moving = start.next
        self._head = dummy.next
        self._head.prev = None
        if start.next is None:
            self._tail = start

    def swap_pairs(self) -> None:
        """Swap every two adjacent nodes."""
        if self._head is None or self._head.next is None:
            return
        dummy = _Node(None, next=self._head)
        self._head.prev = dummy
        previous = dummy
        while previous.next is not None and previous.next.next is not None:
            first = previous.next
            second = first.next
            previous.next = second
            second.prev = previous
            first.next = second.next
            if second.next is not None:
                second.next.prev = first
            second.next = first
            first.prev = second
            previous = first
        self._head = dummy.next
        self._head.prev = None
        if previous.next is None:
            self._tail = previous

    def __len__(self) -> int:
        return self._length

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

    def __str__(self) -> str:
        if self._head is None:
            return "empty"
        return " -> ".join(str(value) for value in self)