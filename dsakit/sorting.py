"""In-place comparison sorts and their building blocks."""

from __future__ import annotations

import heapq
from collections.abc import MutableSequence
from typing import Any

__all__ = [
    "bubble_sort",
    "selection_sort",
    "insertion_sort",
    "merge",
    "merge_sort",
    "pivot",
    "quick_sort",
    "hoare_quick_sort",
    "shell_sort",
]


def _swap(values: MutableSequence[Any], first: int, second: int) -> None:
    values[first], values[second] = values[second], values[first]


def bubble_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place by repeatedly swapping adjacent pairs."""
    for end in range(len(values) - 1, 0, -1):
        for j in range(end):
            if values[j] > values[j + 1]:
                _swap(values, j, j + 1)


def selection_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place by selecting the minimum of the unsorted tail."""
    size = len(values)
    for i in range(size):
        min_index = min(range(i, size), key=values.__getitem__)
        if min_index != i:
            _swap(values, i, min_index)


def insertion_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place by inserting each item into the sorted prefix."""
    for i in range(1, len(values)):
        current = values[i]
        j = i - 1
        while j >= 0 and current < values[j]:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = current


def merge(values: MutableSequence[Any], left: int, mid: int, right: int) -> None:
    """Merge the sorted runs ``values[left:mid+1]`` and ``values[mid+1:right+1]``.

    The merge is stable: on ties the item from the left run comes first.
    """
    if not 0 <= left <= mid + 1 <= right + 1 <= len(values):
        raise IndexError("merge bounds out of range")
    left_run = list(values[left : mid + 1])
    right_run = list(values[mid + 1 : right + 1])
    values[left : right + 1] = list(heapq.merge(left_run, right_run))


def _merge_sort(values: MutableSequence[Any], left: int, right: int) -> None:
    if left >= right:
        return
    mid = left + (right - left) // 2
    _merge_sort(values, left, mid)
    _merge_sort(values, mid + 1, right)
    merge(values, left, mid, right)


def merge_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place with a stable top-down merge sort."""
    _merge_sort(values, 0, len(values) - 1)


def pivot(values: MutableSequence[Any], pivot_index: int, end_index: int) -> int:
    """Partition ``values[pivot_index:end_index+1]`` around its first item.

    Items smaller than the pivot end up before it, the rest after it.
    Returns the pivot's final index.
    """
    swap_index = pivot_index
    for i in range(pivot_index + 1, end_index + 1):
        if values[i] < values[pivot_index]:
            swap_index += 1
            _swap(values, swap_index, i)
    _swap(values, pivot_index, swap_index)
    return swap_index


def _quick_sort(values: MutableSequence[Any], left: int, right: int) -> None:
    if left >= right:
        return
    pivot_index = pivot(values, left, right)
    _quick_sort(values, left, pivot_index - 1)
    _quick_sort(values, pivot_index + 1, right)


def quick_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place with quicksort, pivoting on the first item."""
    _quick_sort(values, 0, len(values) - 1)


def _hoare_quick_sort(values: MutableSequence[Any], left: int, right: int) -> None:
    i, j = left, right
    middle = values[(left + right) // 2]
    while i <= j:
        while values[i] < middle:
            i += 1
        while values[j] > middle:
            j -= 1
        if i <= j:
            _swap(values, i, j)
            i += 1
            j -= 1
    if left < j:
        _hoare_quick_sort(values, left, j)
    if right > i:
        _hoare_quick_sort(values, i, right)


def hoare_quick_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place with two-pointer quicksort on the middle item."""
    if len(values) > 1:
        _hoare_quick_sort(values, 0, len(values) - 1)


def shell_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place with Shell sort using halving gaps."""
    size = len(values)
    gap = size // 2
    while gap > 0:
        for i in range(gap, size):
            j = i - gap
            while j >= 0 and values[j] > values[j + gap]:
                _swap(values, j, j + gap)
                j -= gap
        gap //= 2