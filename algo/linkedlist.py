"""A double-ended linked list of arbitrary values."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class LinkedList:
    """A sequence that supports cheap insertion and removal at both ends."""

    def __init__(self) -> None:
        self._elements: deque[Any] = deque()

    def push_back(self, value: Any) -> Any:
        """Append a value at the back and return it."""
        self._elements.append(value)
        return value

    def push_front(self, value: Any) -> Any:
        """Insert a value at the front and return it."""
        self._elements.appendleft(value)
        return value

    def front(self) -> Any:
        """Return the first value."""
        if not self._elements:
            raise IndexError("front of an empty list")
        return self._elements[0]

    def back(self) -> Any:
        """Return the last value."""
        if not self._elements:
            raise IndexError("back of an empty list")
        return self._elements[-1]

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if not self._elements:
            raise IndexError("pop from an empty list")
        return self._elements.popleft()

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if not self._elements:
            raise IndexError("pop from an empty list")
        return self._elements.pop()

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def to_list(self) -> list[Any]:
        """Return all values, front to back, as a Python list."""
        return list(self._elements)