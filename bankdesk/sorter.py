"""In-place quicksort of a list ordered by a three-way comparator."""

from __future__ import annotations

from typing import Callable, MutableSequence, TypeVar

T = TypeVar("T")


def quick_sort(items: MutableSequence[T], comparator: Callable[[T, T], int]) -> None:
    """Sort ``items`` in place; ``comparator`` returns <0, 0 or >0 like ``cmp``."""
    _quick_sort(items, 0, len(items) - 1, comparator)


def _quick_sort(
    items: MutableSequence[T], left: int, right: int, comparator: Callable[[T, T], int]
) -> None:
    if left >= right:
        return
    i, j = left, right
    pivot = items[(left + right) // 2]
    while i <= j:
        while comparator(items[i], pivot) < 0:
            i += 1
        while comparator(items[j], pivot) > 0:
            j -= 1
        if i <= j:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    if left < j:
        _quick_sort(items, left, j, comparator)
    if i < right:
        _quick_sort(items, i, right, comparator)