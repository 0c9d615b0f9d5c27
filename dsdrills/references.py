"""Small functions that hand back several results at once."""

from __future__ import annotations

from collections.abc import Iterable


def average(values: Iterable[int]) -> int:
    """Return the integer mean of ``values``, truncated toward zero."""
    items = list(values)
    if not items:
        raise ValueError("average of no values")
    total = sum(items)
    quotient = abs(total) // len(items)
    return -quotient if total < 0 else quotient


def bigger(a: int, b: int) -> int | None:
    """Return the larger of ``a`` and ``b``, or None when they are equal."""
    if a == b:
        return None
    return a if a > b else b


def find_char(s: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None if absent."""
    if len(c) != 1:
        raise ValueError("c must be a single character")
    index = s.find(c)
    return None if index < 0 else index


def add_sub(a: int, b: int) -> tuple[int, int]:
    """Return the sum and the difference of ``a`` and ``b``."""
    return a + b, a - b