"""Linear and binary search over sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = ["linear_search", "binary_search", "binary_search_recursive"]


def linear_search(values: Sequence[Any], target: Any) -> int:
    """Return the index of the first item equal to ``target``, or -1."""
    return next((i for i, value in enumerate(values) if value == target), -1)


def binary_search(values: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in the sorted ``values``, or -1."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if target < values[mid]:
            high = mid - 1
        elif target > values[mid]:
            low = mid + 1
        else:
            return mid
    return -1


def binary_search_recursive(
    values: Sequence[Any],
    target: Any,
    first: int = 0,
    last: int | None = None,
) -> int:
    """Recursively search sorted ``values[first:last+1]`` for ``target``.

    Returns an index of ``target`` or -1 when it is absent.
    """
    if last is None:
        last = len(values) - 1
    if first > last:
        return -1
    mid = (first + last) // 2
    if values[mid] == target:
        return mid
    if target < values[mid]:
        return binary_search_recursive(values, target, first, mid - 1)
    return binary_search_recursive(values, target, mid + 1, last)