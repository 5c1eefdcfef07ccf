"""A fixed-capacity FIFO that refuses items when full."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """Bounded first-in first-out queue."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: deque[T] = deque()

    @property
    def capacity(self) -> int:
        """Maximum number of items the buffer holds."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def push_back(self, item: T) -> bool:
        """Append an item; return False if the buffer is already full."""
        if len(self._items) == self._capacity:
            return False
        self._items.append(item)
        return True

    def front(self) -> T | None:
        """Return the oldest item, or None if the buffer is empty."""
        return self._items[0] if self._items else None

    def back(self) -> T | None:
        """Return the most recently pushed item, or None if empty."""
        return self._items[-1] if self._items else None

    def pop_front(self) -> T | None:
        """Remove and return the oldest item, or None if empty."""
        return self._items.popleft() if self._items else None