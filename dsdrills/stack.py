"""A fixed-capacity integer stack."""

from __future__ import annotations

from collections.abc import Iterator


class EmptyError(IndexError):
    """Raised when taking an element from an empty container."""


class FullError(OverflowError):
    """Raised when adding an element to a container that is full."""


class IntStack:
    """A stack of integers that holds at most ``capacity`` elements."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[int] = []

    def push(self, x: int) -> None:
        """Put ``x`` on top of the stack."""
        if self.is_full():
            raise FullError("stack is full")
        self._items.append(x)

    def pop(self) -> int:
        """Remove and return the top element."""
        if self.is_empty():
            raise EmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top element without removing it."""
        if self.is_empty():
            raise EmptyError("stack is empty")
        return self._items[-1]

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def capacity(self) -> int:
        """Return the maximum number of elements."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def search(self, x: int) -> int | None:
        """Return the index (from the bottom) of the topmost ``x``, or None."""
        return next(
            (i for i, value in reversed(list(enumerate(self._items))) if value == x),
            None,
        )

    def __iter__(self) -> Iterator[int]:
        """Iterate from bottom to top."""
        return iter(list(self._items))

    def __str__(self) -> str:
        return " ".join(str(value) for value in self._items)

    def __repr__(self) -> str:
        return f"IntStack(capacity={self._capacity}, items={self._items!r})"