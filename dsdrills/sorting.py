"""Bubble sort, non-recursive quick sort and heap sort, with optional traces."""

from __future__ import annotations

from collections.abc import Iterable
from typing import MutableSequence, TextIO

from dsdrills.stack import IntStack


def bubble_sort(a: MutableSequence[int]) -> None:
    """Sort ``a`` in place, ascending, bubbling large values to the end."""
    for last in range(len(a) - 1, 0, -1):
        for j in range(last):
            if a[j] > a[j + 1]:
                a[j], a[j + 1] = a[j + 1], a[j]


def _spaced(values: Iterable[int]) -> str:
    return "".join(f"{value} " for value in values)


def quick_sort(a: MutableSequence[int], out: TextIO | None = None) -> None:
    """Sort ``a`` in place with a stack-driven quick sort.

    When ``out`` is given, every push and split of a sub-range is written to it.
    """
    if not a:
        return
    right = len(a) - 1
    lstack = IntStack(len(a))
    rstack = IntStack(len(a))

    def emit(text: str) -> None:
        if out is not None:
            out.write(text)

    def push(lo: int, hi: int) -> None:
        lstack.push(lo)
        rstack.push(hi)
        emit(f"a[{lo}] ~ a[{hi}]를 나누는 문제를 스택에 푸시합니다.\n")
        emit(f"Lstack:{_spaced(lstack)}\n")
        emit(f"Rstack:{_spaced(rstack)}\n")

    push(0, right)
    while not lstack.is_empty():
        left = lstack.pop()
        right = rstack.pop()
        pl, pr = left, right
        pivot = a[(left + right) // 2]
        emit(f"스택에서 나누는 문제를 꺼냈습니다. a[{left}] ~ a[{right}]를 나눕니다.\n")

        while True:
            while a[pl] < pivot:
                pl += 1
            while a[pr] > pivot:
                pr -= 1
            if pl <= pr:
                a[pl], a[pr] = a[pr], a[pl]
                pl += 1
                pr -= 1
            if pl > pr:
                break

        if left < pr:
            push(left, pr)
        if pl < right:
            push(pl, right)


def _pad(width: int) -> str:
    return " " * abs(width)


def format_heap(a: list[int] | tuple[int, ...]) -> str:
    """Draw the array as a binary tree, two-digit values joined by ／ and ＼."""
    n = len(a)
    if n == 0:
        return "\n\n"
    height = n.bit_length()
    parts: list[str] = []

    def levels() -> None:
        i = 0
        width = 1
        for level in range(height):
            parts.append(_pad(2 ** (height - level) - 2))
            for _ in range(width):
                parts.append(f"{a[i]:02d}")
                i += 1
                if i >= n:
                    return
                parts.append(_pad(2 ** (height - level + 1) - 2))
            parts.append("\n")

            parts.append(_pad(2 ** (height - level) - 3))
            for k in range(width):
                if 2 * k + i < n:
                    parts.append("／")
                if 2 * k + i + 1 < n:
                    parts.append("＼")
                parts.append(_pad(2 ** (height - level + 1) - 4))
            parts.append("\n")
            width *= 2

    levels()
    parts.append("\n\n")
    return "".join(parts)


def _downheap(a: MutableSequence[int], left: int, right: int) -> None:
    root = a[left]
    parent = left
    while parent < (right + 1) // 2:
        cl = parent * 2 + 1
        cr = cl + 1
        child = cr if cr <= right and a[cr] > a[cl] else cl
        if root >= a[child]:
            break
        a[parent] = a[child]
        parent = child
    a[parent] = root


def heap_sort(a: MutableSequence[int], out: TextIO | None = None) -> None:
    """Sort ``a`` in place with heap sort.

    When ``out`` is given, the heap is drawn before each sift-down.
    """
    n = len(a)

    def show() -> None:
        if out is not None:
            out.write(format_heap(list(a)))

    if out is not None:
        out.write("배열로 힙을 만듭니다.\n\n")
    for i in range((n - 1) // 2, -1, -1):
        show()
        _downheap(a, i, n - 1)

    if out is not None:
        out.write("힙을 바탕으로 정렬합니다.\n\n")
    for i in range(n - 1, 0, -1):
        a[0], a[i] = a[i], a[0]
        show()
        _downheap(a, 0, i - 1)