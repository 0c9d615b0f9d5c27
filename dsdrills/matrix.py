"""Small integer matrices as lists of rows."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[int]]


def sequential_matrix(rows: int, cols: int, start: int = 1, step: int = 1) -> Matrix:
    """Return a rows x cols matrix filled row by row with start, start+step, ..."""
    if rows < 0 or cols < 0:
        raise ValueError("matrix dimensions must not be negative")
    return [[start + step * (r * cols + c) for c in range(cols)] for r in range(rows)]


def _shape(m: Sequence[Sequence[int]]) -> tuple[int, int]:
    rows = len(m)
    cols = len(m[0]) if rows else 0
    if any(len(row) != cols for row in m):
        raise ValueError("matrix rows differ in length")
    return rows, cols


def add_matrices(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the element-wise sum of two matrices of the same shape."""
    if _shape(a) != _shape(b):
        raise ValueError("matrices differ in shape")
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def multiply_matrices(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the matrix product a x b."""
    _, cols_a = _shape(a)
    rows_b, cols_b = _shape(b)
    if cols_a != rows_b:
        raise ValueError("inner dimensions do not match")
    columns = list(zip(*b)) if rows_b else [()] * cols_b
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def format_matrix(m: Sequence[Sequence[int]]) -> str:
    """Return each row's values followed by a space, one row per line."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in m)