"""A fixed-size integer array and the queue and stack built on it."""

from __future__ import annotations

from dsdrills.stack import EmptyError, FullError


class BaseArray:
    """A fixed number of integer slots addressed by index."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._mem = [0] * capacity

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._mem):
            raise IndexError(f"index {index} out of range")

    def put(self, index: int, val: int) -> None:
        """Store ``val`` at ``index``."""
        self._check(index)
        self._mem[index] = val

    def get(self, index: int) -> int:
        """Return the value at ``index``."""
        self._check(index)
        return self._mem[index]

    def capacity(self) -> int:
        return len(self._mem)


class ArrayQueue(BaseArray):
    """A first-in first-out queue whose front sits at slot 0."""

    def __init__(self, capacity: int = 100) -> None:
        super().__init__(capacity)
        self._size = 0

    def enqueue(self, x: int) -> None:
        if self._size >= self.capacity():
            raise FullError("queue is full")
        self.put(self._size, x)
        self._size += 1

    def dequeue(self) -> int:
        """Remove and return the front element, moving the rest forward."""
        if self._size == 0:
            raise EmptyError("queue is empty")
        front = self.get(0)
        for index in range(1, self._size):
            self.put(index - 1, self.get(index))
        self._size -= 1
        return front

    def __len__(self) -> int:
        return self._size


class ArrayStack(BaseArray):
    """A last-in first-out stack on a fixed array."""

    def __init__(self, capacity: int = 100) -> None:
        super().__init__(capacity)
        self._size = 0

    def push(self, x: int) -> None:
        if self._size >= self.capacity():
            raise FullError("stack is full")
        self.put(self._size, x)
        self._size += 1

    def pop(self) -> int:
        if self._size == 0:
            raise EmptyError("stack is empty")
        self._size -= 1
        return self.get(self._size)

    def __len__(self) -> int:
        return self._size