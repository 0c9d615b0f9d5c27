"""A fixed-capacity integer queue that shifts its elements on removal."""

from __future__ import annotations

from collections.abc import Iterator

from dsdrills.stack import EmptyError, FullError


class ArrayIntQueue:
    """A queue whose front element always sits at index 0."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[int] = []

    def enqueue(self, x: int) -> None:
        """Add ``x`` at the rear."""
        if self.is_full():
            raise FullError("queue is full")
        self._items.append(x)

    def dequeue(self) -> int:
        """Remove and return the front element, moving the rest forward."""
        if self.is_empty():
            raise EmptyError("queue is empty")
        return self._items.pop(0)

    def peek(self) -> int:
        """Return the front element without removing it."""
        if self.is_empty():
            raise EmptyError("queue is empty")
        return self._items[0]

    def clear(self) -> None:
        self._items.clear()

    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def search(self, x: int) -> int | None:
        """Return the index of the first ``x`` from the front, or None."""
        return next((i for i, value in enumerate(self._items) if value == x), None)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __str__(self) -> str:
        return " ".join(str(value) for value in self._items)