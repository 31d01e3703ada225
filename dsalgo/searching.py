"""Searching problems: merging into a buffer, rotated search, rank tracking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, MutableSequence, Optional, Sequence


def merge_sorted(a: MutableSequence, size_a: int, b: Sequence, size_b: int) -> MutableSequence:
    """Merge the first ``size_b`` items of sorted ``b`` into sorted ``a``.

    ``a`` holds ``size_a`` sorted items followed by room for ``size_b``
    more; it is filled from the back in place and returned.  Raises
    ValueError when ``a`` is not exactly that long.
    """
    if len(a) != size_a + size_b:
        raise ValueError("first sequence must have exactly enough room for the second")
    if size_b > len(b):
        raise ValueError("second sequence is shorter than its stated size")

    index_a = size_a - 1
    index_b = size_b - 1
    out = size_a + size_b - 1
    while index_b >= 0:
        if index_a >= 0 and a[index_a] > b[index_b]:
            a[out] = a[index_a]
            index_a -= 1
        else:
            a[out] = b[index_b]
            index_b -= 1
        out -= 1
    return a


def search_rotated(items: Sequence, value: Any) -> int:
    """Return an index of ``value`` in a rotated ascending sequence, or -1."""

    def search(left: int, right: int) -> int:
        if right < left:
            return -1
        mid = (left + right) // 2
        if items[mid] == value:
            return mid

        if items[left] < items[mid]:
            if items[left] <= value < items[mid]:
                return search(left, mid - 1)
            return search(mid + 1, right)
        if items[mid] < items[right]:
            if items[mid] < value <= items[right]:
                return search(mid + 1, right)
            return search(left, mid - 1)

        # One half is all repeats.
        if items[mid] != items[right]:
            return search(mid + 1, right)
        found = search(left, mid - 1)
        return found if found != -1 else search(mid + 1, right)

    return search(0, len(items) - 1)


@dataclass(eq=False)
class _RankedNode:
    val: Any
    left: Optional["_RankedNode"] = None
    right: Optional["_RankedNode"] = None
    left_size: int = 0


class RankTracker:
    """Tracks a stream of values and reports how many are at most a given one."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_RankedNode] = None
        for value in values:
            self.track(value)

    def track(self, value: Any) -> None:
        """Record ``value`` from the stream."""
        if self._root is None:
            self._root = _RankedNode(value)
            return
        node = self._root
        while True:
            if value <= node.val:
                node.left_size += 1
                if node.left is None:
                    node.left = _RankedNode(value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = _RankedNode(value)
                    return
                node = node.right

    def rank(self, value: Any) -> int:
        """Return the number of tracked values <= ``value``, not counting itself.

        Raises KeyError when ``value`` has not been tracked.
        """
        rank = 0
        node = self._root
        while node is not None:
            if value == node.val:
                return rank + node.left_size
            if value < node.val:
                node = node.left
            else:
                rank += node.left_size + 1
                node = node.right
        raise KeyError(value)