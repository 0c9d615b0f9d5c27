"""Polynomials as ordered lists of terms, added by merging on exponent."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Term:
    """One term ``coef * x ** expo``."""

    coef: float
    expo: int


class Polynomial:
    """A sequence of terms, kept in the order they were appended.

    Addition assumes both operands list their exponents in descending order.
    """

    def __init__(self, terms: Iterable[Term | tuple[float, int]] = ()) -> None:
        self._terms: list[Term] = []
        for term in terms:
            if isinstance(term, Term):
                self.append(term.coef, term.expo)
            else:
                self.append(*term)

    def append(self, coef: float, expo: int) -> None:
        """Add a term after the last one."""
        self._terms.append(Term(float(coef), int(expo)))

    def __add__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        result = Polynomial()
        left = iter(self._terms)
        right = iter(other._terms)
        p = next(left, None)
        q = next(right, None)
        while p is not None and q is not None:
            if p.expo == q.expo:
                result.append(p.coef + q.coef, p.expo)
                p = next(left, None)
                q = next(right, None)
            elif p.expo > q.expo:
                result.append(p.coef, p.expo)
                p = next(left, None)
            else:
                result.append(q.coef, q.expo)
                q = next(right, None)
        for rest_head, rest in ((p, left), (q, right)):
            if rest_head is not None:
                result.append(rest_head.coef, rest_head.expo)
                for term in rest:
                    result.append(term.coef, term.expo)
        return result

    def __iter__(self) -> Iterator[Term]:
        return iter(list(self._terms))

    def __len__(self) -> int:
        return len(self._terms)

    def __str__(self) -> str:
        return " + ".join(f"{t.coef:2.1f}x^{t.expo}" for t in self._terms)

    def __repr__(self) -> str:
        return f"Polynomial({self._terms!r})"