"""Recursion exercises solved without recursion: factorial, gcd, recur3, eight queens."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

BOARD_SIZE = 8


def factorial(n: int) -> int:
    """Return n! computed by repeated multiplication; 1 for n <= 1."""
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def _c_remainder(x: int, y: int) -> int:
    """Remainder that takes the sign of the dividend, as truncating division gives."""
    r = abs(x) % abs(y)
    return -r if x < 0 else r


def gcd(x: int, y: int) -> int:
    """Return the greatest common divisor of x and y by Euclid's algorithm."""
    while y != 0:
        x, y = y, _c_remainder(x, y)
    return x


def gcd_array(values: Iterable[int]) -> int:
    """Return the greatest common divisor of every value.

    The values are folded from the right: gcd(a0, gcd(a1, ... gcd(an-2, an-1))).
    """
    items = list(values)
    if not items:
        raise ValueError("gcd_array needs at least one value")
    result = items[-1]
    for value in reversed(items[:-1]):
        result = gcd(value, result)
    return result


def recur3(n: int) -> list[int]:
    """Return what recur3(n) prints, in order, using an explicit stack.

    recur3(n) is: if n > 0, recur3(n - 1), recur3(n - 2), then print n.
    """
    printed: list[int] = []
    frames: list[tuple[int, int]] = [(n, 0)]
    while frames:
        k, stage = frames.pop()
        if k <= 0:
            continue
        if stage == 0:
            frames.append((k, 1))
            frames.append((k - 1, 0))
        elif stage == 1:
            frames.append((k, 2))
            frames.append((k - 2, 0))
        else:
            printed.append(k)
    return printed


def eight_queens() -> list[tuple[int, ...]]:
    """Return every placement of eight non-attacking queens.

    Each placement gives, for columns 0..7, the row of the queen in that
    column. Placements come in the order a backtracking search finds them.
    """
    solutions: list[tuple[int, ...]] = []
    pos = [0] * BOARD_SIZE
    row_used = [False] * BOARD_SIZE
    rising_used = [False] * (2 * BOARD_SIZE - 1)
    falling_used = [False] * (2 * BOARD_SIZE - 1)

    def place(col: int) -> None:
        for row in range(BOARD_SIZE):
            rising = col + row
            falling = col - row + BOARD_SIZE - 1
            if row_used[row] or rising_used[rising] or falling_used[falling]:
                continue
            pos[col] = row
            if col == BOARD_SIZE - 1:
                solutions.append(tuple(pos))
                continue
            row_used[row] = rising_used[rising] = falling_used[falling] = True
            place(col + 1)
            row_used[row] = rising_used[rising] = falling_used[falling] = False

    place(0)
    return solutions


def format_queens(positions: Sequence[int]) -> str:
    """Format queen rows, each right-aligned in a field two wide."""
    return "".join(f"{row:2d}" for row in positions)