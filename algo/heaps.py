"""Binary min-heap and max-heap of integers."""

from __future__ import annotations

import heapq


class MinHeap:
    """A heap whose root is always its smallest item."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Add a value to the heap."""
        heapq.heappush(self._items, value)

    def pop(self) -> int:
        """Remove and return the smallest value."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        return heapq.heappop(self._items)

    def peek(self) -> int:
        """Return the smallest value without removing it."""
        if not self._items:
            raise IndexError("peek into an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)


class MaxHeap:
    """A heap whose root is always its largest item."""

    def __init__(self) -> None:
        # Values are stored negated so that heapq's min-heap serves as a max-heap.
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Add a value to the heap."""
        heapq.heappush(self._items, -value)

    def pop(self) -> int:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        return -heapq.heappop(self._items)

    def peek(self) -> int:
        """Return the largest value without removing it."""
        if not self._items:
            raise IndexError("peek into an empty heap")
        return -self._items[0]

    def __len__(self) -> int:
        return len(self._items)