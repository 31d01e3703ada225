"""In-place O(n log n) sorts with pluggable comparisons, and binary search."""

from __future__ import annotations

import operator
from typing import Any, Callable, MutableSequence, Sequence

Compare = Callable[[Any, Any], bool]


def _hoare_partition(items: MutableSequence, low: int, high: int, less: Compare) -> int:
    pivot = items[low]
    i = low - 1
    j = high + 1
    while True:
        i += 1
        while less(items[i], pivot):
            i += 1
        j -= 1
        while less(pivot, items[j]):
            j -= 1
        if i >= j:
            return j
        items[i], items[j] = items[j], items[i]


def quick_sort(items: MutableSequence, less: Compare = operator.lt) -> MutableSequence:
    """Sort ``items`` in place with quicksort and return them.

    ``less`` must be a strict ordering; the first element of each range
    is the pivot.
    """
    ranges = [(0, len(items) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low < high:
            split = _hoare_partition(items, low, high, less)
            ranges.append((low, split))
            ranges.append((split + 1, high))
    return items


def merge_sort(items: MutableSequence, less_equal: Compare = operator.le) -> MutableSequence:
    """Sort ``items`` in place with top-down merge sort and return them.

    The sort is stable when ``less_equal`` is a non-strict ordering.
    """

    def merge(low: int, mid: int, high: int) -> None:
        left = items[low : mid + 1]
        right = items[mid + 1 : high + 1]
        i = j = 0
        out = low
        while i < len(left) and j < len(right):
            if less_equal(left[i], right[j]):
                items[out] = left[i]
                i += 1
            else:
                items[out] = right[j]
                j += 1
            out += 1
        for value in left[i:] + right[j:]:
            items[out] = value
            out += 1

    def sort(low: int, high: int) -> None:
        if low >= high:
            return
        mid = low + (high - low) // 2
        sort(low, mid)
        sort(mid + 1, high)
        merge(low, mid, high)

    sort(0, len(items) - 1)
    return items


def merge_sort_copy(items: MutableSequence, less_equal: Compare = operator.le) -> MutableSequence:
    """Sort ``items`` in place with merge sort that swaps roles with one copy.

    A single copy of the data is made; each level merges from one buffer
    into the other, so no temporary lists are made while merging.
    """

    def merge(source: MutableSequence, low: int, mid: int, high: int, target: MutableSequence) -> None:
        first, second = low, mid
        for k in range(low, high):
            if first < mid and (second >= high or less_equal(source[first], source[second])):
                target[k] = source[first]
                first += 1
            else:
                target[k] = source[second]
                second += 1

    def split(source: MutableSequence, low: int, high: int, target: MutableSequence) -> None:
        if high - low <= 1:
            return
        mid = low + (high - low) // 2
        split(target, low, mid, source)
        split(target, mid, high, source)
        merge(source, low, mid, high, target)

    buffer = list(items)
    split(buffer, 0, len(items), items)
    return items


def _sift_down(items: MutableSequence, size: int, index: int, greater: Compare) -> None:
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < size and greater(items[left], items[largest]):
            largest = left
        if right < size and greater(items[right], items[largest]):
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def heap_sort(items: MutableSequence, greater: Compare = operator.gt) -> MutableSequence:
    """Sort ``items`` in place with heapsort and return them.

    With the default ``greater`` the result is ascending.
    """
    size = len(items)
    for index in range(size // 2, -1, -1):
        _sift_down(items, size, index, greater)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0, greater)
    return items


def binary_search(items: Sequence, value: Any) -> int:
    """Return the index of ``value`` in ascending ``items``, or -1 if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == value:
            return mid
        if items[mid] < value:
            low = mid + 1
        else:
            high = mid - 1
    return -1