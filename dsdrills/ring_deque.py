"""A fixed-capacity double-ended integer queue kept in a ring buffer."""

from __future__ import annotations

from collections.abc import Iterator

from dsdrills.stack import EmptyError, FullError


class IntDeque:
    """A deque of integers in a circular array, usable from either end."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._data = [0] * capacity
        self._front = 0
        self._rear = 0
        self._num = 0

    def enqueue_front(self, x: int) -> None:
        """Add ``x`` before the front element."""
        if self.is_full():
            raise FullError("deque is full")
        self._front = (self._front - 1) % self._capacity
        self._data[self._front] = x
        self._num += 1

    def enqueue_rear(self, x: int) -> None:
        """Add ``x`` after the rear element."""
        if self.is_full():
            raise FullError("deque is full")
        self._data[self._rear] = x
        self._rear = (self._rear + 1) % self._capacity
        self._num += 1

    def dequeue_front(self) -> int:
        """Remove and return the front element."""
        if self.is_empty():
            raise EmptyError("deque is empty")
        x = self._data[self._front]
        self._front = (self._front + 1) % self._capacity
        self._num -= 1
        return x

    def dequeue_rear(self) -> int:
        """Remove and return the rear element."""
        if self.is_empty():
            raise EmptyError("deque is empty")
        self._rear = (self._rear - 1) % self._capacity
        self._num -= 1
        return self._data[self._rear]

    def peek_front(self) -> int:
        if self.is_empty():
            raise EmptyError("deque is empty")
        return self._data[self._front]

    def peek_rear(self) -> int:
        if self.is_empty():
            raise EmptyError("deque is empty")
        return self._data[(self._rear - 1) % self._capacity]

    def clear(self) -> None:
        self._num = self._front = self._rear = 0

    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._num

    def is_empty(self) -> bool:
        return self._num <= 0

    def is_full(self) -> bool:
        return self._num >= self._capacity

    def _positions(self) -> Iterator[int]:
        for offset in range(self._num):
            yield (self._front + offset) % self._capacity

    def search(self, x: int) -> int | None:
        """Return the array index of the first ``x`` from the front, or None."""
        return next((pos for pos in self._positions() if self._data[pos] == x), None)

    def search_logical(self, x: int) -> int | None:
        """Return how many places behind the front the first ``x`` is, or None."""
        return next(
            (i for i, pos in enumerate(self._positions()) if self._data[pos] == x),
            None,
        )

    def __iter__(self) -> Iterator[int]:
        """Iterate from front to rear."""
        return iter([self._data[pos] for pos in self._positions()])

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)