"""FIFO queue built on a singly linked chain of nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["LinkedQueue"]


@dataclass(slots=True)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedQueue:
    """A first-in first-out queue."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._first: _Node | None = None
        self._last: _Node | None = None
        self._length = 0
        for value in values:
            self.enqueue(value)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back of the queue."""
        node = _Node(value)
        if self._last is None:
            self._first = node
        else:
            self._last.next = node
        self._last = node
        self._length += 1

    def dequeue(self) -> Any:
        """Remove and return the front value; IndexError if empty."""
        if self._first is None:
            raise IndexError("dequeue from empty queue")
        node = self._first
        self._first = node.next
        if self._first is None:
            self._last = None
        self._length -= 1
        return node.value

    def first(self) -> Any:
        """Return the front value; IndexError if empty."""
        if self._first is None:
            raise IndexError("empty queue")
        return self._first.value

    def last(self) -> Any:
        """Return the back value; IndexError if empty."""
        if self._last is None:
            raise IndexError("empty queue")
        return self._last.value

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self._first
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        if self._first is None:
            return "Empty Queue"
        return "->\n".join(str(value) for value in self)