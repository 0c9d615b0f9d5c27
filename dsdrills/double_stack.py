"""Two integer stacks sharing one fixed-size array from opposite ends."""

from __future__ import annotations

from enum import Enum

from dsdrills.stack import EmptyError, FullError


class Side(Enum):
    """Which of the two stacks an operation applies to."""

    A = 0
    B = 1


class SharedStack:
    """Stack A grows from the start of the array, stack B from its end."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._data = [0] * capacity
        self._top_a = 0
        self._top_b = capacity - 1

    def push(self, side: Side, x: int) -> None:
        """Push ``x`` onto the chosen stack."""
        side = Side(side)
        if self.is_full():
            raise FullError("stack is full")
        if side is Side.A:
            self._data[self._top_a] = x
            self._top_a += 1
        else:
            self._data[self._top_b] = x
            self._top_b -= 1

    def pop(self, side: Side) -> int:
        """Remove and return the top of the chosen stack."""
        side = Side(side)
        if self.is_empty(side):
            raise EmptyError(f"stack {side.name} is empty")
        if side is Side.A:
            self._top_a -= 1
            return self._data[self._top_a]
        self._top_b += 1
        return self._data[self._top_b]

    def peek(self, side: Side) -> int:
        """Return the top of the chosen stack without removing it."""
        side = Side(side)
        if self.is_empty(side):
            raise EmptyError(f"stack {side.name} is empty")
        if side is Side.A:
            return self._data[self._top_a - 1]
        return self._data[self._top_b + 1]

    def clear(self, side: Side) -> None:
        """Empty the chosen stack."""
        if Side(side) is Side.A:
            self._top_a = 0
        else:
            self._top_b = self._capacity - 1

    def capacity(self) -> int:
        """Return the size of the shared array."""
        return self._capacity

    def size(self, side: Side) -> int:
        """Return the number of elements on the chosen stack."""
        if Side(side) is Side.A:
            return self._top_a
        return self._capacity - self._top_b - 1

    def is_empty(self, side: Side) -> bool:
        return self.size(side) <= 0

    def is_full(self) -> bool:
        return self._top_a >= self._top_b + 1

    def search(self, side: Side, x: int) -> int | None:
        """Return the array index of the topmost ``x`` on the chosen stack, or None."""
        if Side(side) is Side.A:
            positions = range(self._top_a - 1, -1, -1)
        else:
            positions = range(self._top_b + 1, self._capacity)
        return next((i for i in positions if self._data[i] == x), None)

    def items(self, side: Side) -> list[int]:
        """Return the chosen stack's elements from bottom to top."""
        if Side(side) is Side.A:
            return self._data[: self._top_a]
        return list(reversed(self._data[self._top_b + 1:]))

    def format(self, side: Side) -> str:
        """Return the chosen stack's elements, bottom to top, separated by spaces."""
        return " ".join(str(value) for value in self.items(side))