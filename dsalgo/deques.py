"""A fixed-capacity circular deque and a doubly linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


class CircularDeque:
    """A double-ended queue stored in a ring buffer of fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._buffer: list = [None] * capacity
        self._head = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self._size):
            yield self._buffer[(self._head + offset) % self.capacity]

    def __repr__(self) -> str:
        return f"CircularDeque({list(self)!r}, capacity={self.capacity})"

    def clear(self) -> None:
        """Remove every item, keeping the capacity."""
        self._buffer = [None] * self.capacity
        self._head = 0
        self._size = 0

    def _check_room(self) -> None:
        if self._size == self.capacity:
            raise IndexError("Queue is full!")

    def _check_items(self) -> None:
        if self._size == 0:
            raise IndexError("deque is empty")

    def _tail_index(self) -> int:
        return (self._head + self._size - 1) % self.capacity

    def push_front(self, value: Any) -> None:
        """Add ``value`` at the front; raises IndexError when full."""
        self._check_room()
        self._head = (self._head - 1) % self.capacity
        self._buffer[self._head] = value
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Add ``value`` at the back; raises IndexError when full."""
        self._check_room()
        self._buffer[(self._head + self._size) % self.capacity] = value
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the front item."""
        self._check_items()
        value = self._buffer[self._head]
        self._buffer[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._size -= 1
        return value

    def pop_back(self) -> Any:
        """Remove and return the back item."""
        self._check_items()
        index = self._tail_index()
        value = self._buffer[index]
        self._buffer[index] = None
        self._size -= 1
        return value

    def front(self) -> Any:
        """Return the front item."""
        self._check_items()
        return self._buffer[self._head]

    def back(self) -> Any:
        """Return the back item."""
        self._check_items()
        return self._buffer[self._tail_index()]


@dataclass(eq=False)
class _Node:
    value: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class DoublyLinkedList:
    """A list of linked nodes with constant-time work at both ends."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.right

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.left

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def clear(self) -> None:
        """Remove every item."""
        self._head = self._tail = None
        self._size = 0

    def _check_items(self) -> None:
        if self._size == 0:
            raise IndexError("list is empty")

    def front(self) -> Any:
        """Return the first item."""
        self._check_items()
        return self._head.value

    def back(self) -> Any:
        """Return the last item."""
        self._check_items()
        return self._tail.value

    def push_back(self, value: Any) -> None:
        """Append ``value``."""
        node = _Node(value, left=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.right = node
        self._tail = node
        self._size += 1

    def push_front(self, value: Any) -> None:
        """Prepend ``value``."""
        node = _Node(value, right=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.left = node
        self._head = node
        self._size += 1

    def pop_back(self) -> Any:
        """Remove and return the last item."""
        self._check_items()
        node = self._tail
        self._tail = node.left
        if self._tail is None:
            self._head = None
        else:
            self._tail.right = None
        self._size -= 1
        return node.value

    def pop_front(self) -> Any:
        """Remove and return the first item."""
        self._check_items()
        node = self._head
        self._head = node.right
        if self._head is None:
            self._tail = None
        else:
            self._head.left = None
        self._size -= 1
        return node.value

    def _node_at(self, pos: int) -> _Node:
        node = self._head
        for _ in range(pos):
            node = node.right
        return node

    def insert(self, pos: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at index ``pos``.

        ``pos`` may range from 0 to the length; raises IndexError otherwise.
        """
        if not 0 <= pos <= self._size:
            raise IndexError("insert position out of range")
        if pos == 0:
            self.push_front(value)
        elif pos == self._size:
            self.push_back(value)
        else:
            before = self._node_at(pos - 1)
            node = _Node(value, left=before, right=before.right)
            before.right.left = node
            before.right = node
            self._size += 1

    def erase(self, pos: int) -> Any:
        """Remove and return the item at index ``pos``; raises IndexError if out of range."""
        if not 0 <= pos < self._size:
            raise IndexError("erase position out of range")
        if pos == 0:
            return self.pop_front()
        if pos == self._size - 1:
            return self.pop_back()
        node = self._node_at(pos)
        node.left.right = node.right
        node.right.left = node.left
        self._size -= 1
        return node.value