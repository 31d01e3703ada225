"""A binary-heap priority queue with a pluggable ordering."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional

Compare = Callable[[Any, Any], bool]
SetPriority = Callable[[Any, Any], Any]


def _greater(a: Any, b: Any) -> bool:
    return a > b


class PriorityQueue:
    """A heap-ordered queue; by default the smallest item is at the front.

    ``compare(a, b)`` returns True when ``a`` belongs below ``b`` in the
    heap, so the default ``a > b`` gives a min-queue and ``a < b`` a
    max-queue.  ``set_priority(item, new_priority)`` returns the item
    updated to the new priority; without it the item is replaced by the
    new priority itself, which suits queues of plain numbers.
    """

    def __init__(
        self,
        values: Iterable[Any] = (),
        compare: Optional[Compare] = None,
        set_priority: Optional[SetPriority] = None,
    ) -> None:
        self._items: list = []
        self._compare: Compare = compare if compare is not None else _greater
        self._set_priority: Optional[SetPriority] = set_priority
        for value in values:
            self.push(value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the items in heap order, not priority order."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"PriorityQueue({self._items!r})"

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def push(self, value: Any) -> None:
        """Add ``value`` to the queue."""
        self._items.append(value)
        self._swim_up(len(self._items) - 1)

    def front(self) -> Any:
        """Return the item with the highest priority without removing it."""
        if not self._items:
            raise IndexError("front of an empty priority queue")
        return self._items[0]

    def pop(self) -> Any:
        """Remove and return the item with the highest priority."""
        if not self._items:
            raise IndexError("pop from an empty priority queue")
        return self._remove_at(0)

    def modify_priority(self, value: Any, new_priority: Any) -> None:
        """Give the first item equal to ``value`` a new priority.

        Nothing happens when no such item is queued; raises IndexError
        when the queue is empty.
        """
        if not self._items:
            raise IndexError("modify_priority on an empty priority queue")
        index = self._index_of(value)
        if index is None:
            return
        if self._set_priority is None:
            self._items[index] = new_priority
        else:
            self._items[index] = self._set_priority(self._items[index], new_priority)
        self._swim_up(index)
        self._sink_down(index)

    def erase(self, value: Any) -> None:
        """Remove the first item equal to ``value``.

        Nothing happens when no such item is queued; raises IndexError
        when the queue is empty.
        """
        if not self._items:
            raise IndexError("erase from an empty priority queue")
        index = self._index_of(value)
        if index is not None:
            self._remove_at(index)

    def _index_of(self, value: Any) -> Optional[int]:
        for index, item in enumerate(self._items):
            if item == value:
                return index
        return None

    def _remove_at(self, index: int) -> Any:
        items = self._items
        last = len(items) - 1
        items[index], items[last] = items[last], items[index]
        removed = items.pop()
        if index < len(items):
            self._swim_up(index)
            self._sink_down(index)
        return removed

    def _swim_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if not self._compare(items[parent], items[index]):
                return
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def _sink_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            best = index
            left = 2 * index + 1
            right = left + 1
            if left < size and self._compare(items[best], items[left]):
                best = left
            if right < size and self._compare(items[best], items[right]):
                best = right
            if best == index:
                return
            items[index], items[best] = items[best], items[index]
            index = best