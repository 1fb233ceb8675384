"""In-place comparison sorts driven by a three-way comparator.

Each comparator takes two items and returns a positive number when the
first is greater, a negative number when it is smaller and zero when the
two are equal.  Without a comparator the items' natural order is used.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any

Comparator = Callable[[Any, Any], int]


def _natural(first: Any, second: Any) -> int:
    return (first > second) - (first < second)


def min_max_sort(items: MutableSequence[Any], compare: Comparator | None = None) -> None:
    """Selection sort: move the largest remaining item to the end each pass."""
    cmp = compare or _natural
    for end in range(len(items) - 1, 0, -1):
        best = end
        for index in range(end, -1, -1):
            if cmp(items[index], items[best]) > 0:
                best = index
        if best != end:
            items[best], items[end] = items[end], items[best]


def quicksort(items: MutableSequence[Any], compare: Comparator | None = None) -> None:
    """Hoare-style quicksort around the middle element, tracking the pivot's moves."""
    cmp = compare or _natural
    pending = [(0, len(items))] if items else []
    while pending:
        start, count = pending.pop()
        last = count - 1
        low, high, mid = 0, last, last // 2
        while low <= high:
            while cmp(items[start + mid], items[start + low]) > 0:
                low += 1
            while cmp(items[start + high], items[start + mid]) > 0:
                high -= 1
            if low <= high:
                if low == mid:
                    mid = high
                elif high == mid:
                    mid = low
                items[start + low], items[start + high] = (
                    items[start + high],
                    items[start + low],
                )
                low += 1
                high -= 1
        if high > 0:
            pending.append((start, high + 1))
        if low < last:
            pending.append((start + low, last - low + 1))


def _sift_down(items: MutableSequence[Any], root: int, bottom: int, cmp: Comparator) -> None:
    child = 2 * root + 1
    if child < bottom and cmp(items[child + 1], items[child]) > 0:
        child += 1
    while child <= bottom and cmp(items[child], items[root]) > 0:
        items[root], items[child] = items[child], items[root]
        root = child
        child = 2 * child + 1
        if child < bottom and cmp(items[child + 1], items[child]) > 0:
            child += 1


def heap_sort(items: MutableSequence[Any], compare: Comparator | None = None) -> None:
    """Heap sort with a max-heap built in place."""
    cmp = compare or _natural
    if not items:
        return
    bottom = len(items) - 1
    for root in range(len(items) // 2 - 1, -1, -1):
        _sift_down(items, root, bottom, cmp)
    while bottom > 0:
        items[0], items[bottom] = items[bottom], items[0]
        bottom -= 1
        _sift_down(items, 0, bottom, cmp)