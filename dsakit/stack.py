"""LIFO stack on linked nodes and a few classic stack exercises."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = [
    "LinkedStack",
    "reverse_string",
    "is_balanced_parentheses",
    "sort_stack",
]


@dataclass(slots=True)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedStack:
    """A last-in first-out stack."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._top: _Node | None = None
        self._height = 0
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._top = _Node(value, self._top)
        self._height += 1

    def pop(self) -> Any:
        """Remove and return the top value; IndexError if empty."""
        if self._top is None:
            raise IndexError("pop from empty stack")
        node = self._top
        self._top = node.next
        self._height -= 1
        return node.value

    def top(self) -> Any:
        """Return the top value without removing it; IndexError if empty."""
        if self._top is None:
            raise IndexError("empty stack")
        return self._top.value

    def __len__(self) -> int:
        return self._height

    def __iter__(self) -> Iterator[Any]:
        node = self._top
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        if self._top is None:
            return "Empty Stack"
        return " -> ".join(str(value) for value in self)


def reverse_string(text: str) -> str:
    """Return ``text`` reversed by pushing every character on a stack."""
    return "".join(LinkedStack(text))


def is_balanced_parentheses(text: str) -> bool:
    """Return True if every '(' in ``text`` is closed by a later ')'."""
    open_count = 0
    for char in text:
        if char == "(":
            open_count += 1
        elif char == ")":
            if open_count == 0:
                return False
            open_count -= 1
    return open_count == 0


def sort_stack(stack: LinkedStack) -> LinkedStack:
    """Drain ``stack`` into a new stack whose top is its largest value."""
    output = LinkedStack()
    while stack:
        current = stack.pop()
        while output and output.top() > current:
            stack.push(output.pop())
        output.push(current)
    return output