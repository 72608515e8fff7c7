"""First-in-first-out queue and last-in-first-out stack."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterator
from typing import Any, TextIO


class Queue:
    """A first-in-first-out queue."""

    def __init__(self) -> None:
        self._elements: deque[Any] = deque()

    def push(self, value: Any) -> None:
        """Add a value at the back of the queue."""
        self._elements.append(value)

    def pop(self) -> Any:
        """Remove and return the value at the front of the queue."""
        if not self._elements:
            raise IndexError("pop from an empty queue")
        return self._elements.popleft()

    def front(self) -> Any:
        """Return the value at the front of the queue."""
        if not self._elements:
            raise IndexError("front of an empty queue")
        return self._elements[0]

    def back(self) -> Any:
        """Return the value at the back of the queue."""
        if not self._elements:
            raise IndexError("back of an empty queue")
        return self._elements[-1]

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def print_all(self, file: TextIO | None = None) -> None:
        """Print every value, front to back, one per line."""
        out = file if file is not None else sys.stdout
        for value in self._elements:
            print(value, file=out)


class Stack:
    """A last-in-first-out stack."""

    def __init__(self) -> None:
        self._elements: list[Any] = []

    def push(self, value: Any) -> None:
        """Put a value on top of the stack."""
        self._elements.append(value)

    def pop(self) -> Any:
        """Remove and return the value on top of the stack."""
        if not self._elements:
            raise IndexError("pop from an empty stack")
        return self._elements.pop()

    def top(self) -> Any:
        """Return the value on top of the stack."""
        if not self._elements:
            raise IndexError("top of an empty stack")
        return self._elements[-1]

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._elements)

    def print_all(self, file: TextIO | None = None) -> None:
        """Print every value, bottom to top, one per line."""
        out = file if file is not None else sys.stdout
        for value in self._elements:
            print(value, file=out)