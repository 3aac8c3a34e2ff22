"""Singly linked list with head and tail references."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["SinglyLinkedList"]


@dataclass(slots=True, eq=False)
class _Node:
    value: Any
    next: _Node | None = None


class SinglyLinkedList:
    """A sequence of values linked in one direction."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._length = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def prepend(self, value: Any) -> None:
        """Add ``value`` at the front of the list."""
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._length += 1

    def delete_first(self) -> Any:
        """Remove and return the first value; IndexError if empty."""
        if self._head is None:
            raise IndexError("delete from empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._length -= 1
        return node.value

    def delete_last(self) -> Any:
        """Remove and return the last value; IndexError if empty."""
        if self._head is None or self._tail is None:
            raise IndexError("delete from empty list")
        node = self._tail
        if self._head is node:
            self._head = self._tail = None
        else:
            previous = self._head
            while previous.next is not node:
                previous = previous.next
            previous.next = None
            self._tail = previous
        self._length -= 1
        return node.value

    def _node_at(self, index: int) -> _Node:
        if not 0 <= index < self._length:
            raise IndexError("list index out of range")
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def get(self, index: int) -> Any:
        """Return the value at ``index``; IndexError if out of range."""
        return self._node_at(index).value

    def set(self, index: int, value: Any) -> None:
        """Replace the value at ``index``; IndexError if out of range."""
        self._node_at(index).value = value

    def search(self, value: Any) -> int:
        """Return the index of the last item equal to ``value``, or -1."""
        found = -1
        for index, item in enumerate(self):
            if item == value:
                found = index
        return found

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
            before.next = _Node(value, before.next)
            self._length += 1

    def delete_node(self, index: int) -> Any:
        """Remove and return the value at ``index``; IndexError if out of range."""
        if not 0 <= index < self._length:
            raise IndexError("list index out of range")
        if index == 0:
            return self.delete_first()
        if index == self._length - 1:
            return self.delete_last()
        previous = self._node_at(index - 1)
        node = previous.next
        previous.next = node.next
        self._length -= 1
        return node.value

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous = None
        node = self._head
        self._tail = self._head
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self._head = previous

    def find_middle(self) -> Any:
        """Return the middle value (the second of two middles); IndexError if empty."""
        if self._head is None:
            raise IndexError("middle of empty list")
        slow = fast = self._head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
        return slow.value

    def has_loop(self) -> bool:
        """Return True if following the links ever revisits a node."""
        slow = fast = self._head
        while fast is not None and fast.next is not None:
            fast = fast.next.next
            slow = slow.next
            if fast is slow:
                return True
        return False

    def find_kth_from_end(self, k: int) -> Any:
        """Return the ``k``-th value counted from the end (1 is the last)."""
        if not 1 <= k <= self._length:
            raise IndexError("k out of range")
        fast = slow = self._head
        for _ in range(k):
            fast = fast.next
        while fast is not None:
            slow = slow.next
            fast = fast.next
        return slow.value

    def remove_duplicates(self) -> None:
        """Keep only the first occurrence of every value."""
        current = self._head
        while current is not None:
            runner = current
            while runner.next is not None:
                if runner.next.value == current.value:
                    if runner.next is self._tail:
                        self._tail = runner
                    runner.next = runner.next.next
                    self._length -= 1
                else:
                    runner = runner.next
            current = current.next

    def binary_to_decimal(self) -> int:
        """Read the values as binary digits, most significant first."""
        number = 0
        for digit in self:
            number = number * 2 + digit
        return number

    def partition(self, x: Any) -> None:
        """Move values below ``x`` before the rest, keeping relative order."""
        if self._head is None:
            return
        less = _Node(None)
        more = _Node(None)
        less_end, more_end = less, more
        node = self._head
        while node is not None:
            if node.value < x:
                less_end.next = node
                less_end = node
            else:
                more_end.next = node
                more_end = node
            node = node.next
        more_end.next = None
        less_end.next = more.next
        self._head = less.next
        self._tail = more_end if more.next is not None else less_end

    def reverse_between(self, m: int, n: int) -> None:
        """Reverse the values at positions ``m`` through ``n`` inclusive."""
        if self._head is None or m == n:
            return
        if not 0 <= m <= n < self._length:
            raise IndexError("positions out of range")
        dummy = _Node(None, self._head)
        previous = dummy
        for _ in range(m):
            previous = previous.next
        start = previous.next
        moving = start.next
        for _ in range(n - m):
            start.next = moving.next
            moving.next = previous.next
            previous.next = moving
            moving = start.next
        self._head = dummy.next
        if start.next is None:
            self._tail = start

    def swap_pairs(self) -> None:
        """Swap every two adjacent nodes."""
        if self._head is None or self._head.next is None:
            return
        dummy = _Node(None, self._head)
        previous = dummy
        while previous.next is not None and previous.next.next is not None:
            first = previous.next
            second = first.next
            previous.next = second
            first.next = second.next
            second.next = first
            previous = first
        self._head = dummy.next
        if previous.next is None:
            self._tail = previous

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        if self._head is None:
            return "empty"
        return " -> ".join(str(value) for value in self)