"""Value types with arithmetic operators: rectangles, powers, points and complex numbers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """A rectangle; two rectangles are equal when width and height match."""

    width: int
    height: int


@dataclass(frozen=True)
class Power:
    """A pair of kick and punch strengths."""

    kick: int = 0
    punch: int = 0

    def __add__(self, other: object) -> Power:
        if not isinstance(other, Power):
            return NotImplemented
        return Power(self.kick + other.kick, self.punch + other.punch)

    def __sub__(self, other: object) -> Power:
        if not isinstance(other, Power):
            return NotImplemented
        return Power(self.kick - other.kick, self.punch - other.punch)


def add_power(a: Power, b: Power) -> Power:
    """Return the component-wise sum of two powers."""
    return Power(a.kick + b.kick, a.punch + b.punch)


@dataclass(frozen=True)
class Point2D:
    """A point in the plane with integer coordinates."""

    x: int = 0
    y: int = 0

    def __add__(self, other: object) -> Point2D:
        if not isinstance(other, Point2D):
            return NotImplemented
        return Point2D(self.x + other.x, self.y + other.y)


class Complex:
    """A complex number built from its imaginary part first, then its real part."""

    __slots__ = ("re", "im")

    def __init__(self, im: float = 0.0, re: float = 0.0) -> None:
        self.re = float(re)
        self.im = float(im)

    def __add__(self, other: object) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.im + other.im, self.re + other.re)

    def __sub__(self, other: object) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.im - other.im, self.re - other.re)

    def __mul__(self, other: object) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        re = self.re * other.re - self.im * other.im
        im = self.re * other.im + self.im * other.re
        return Complex(im, re)

    def __truediv__(self, other: object) -> Complex:
        """Divide; raises ZeroDivisionError when ``other`` is zero."""
        if not isinstance(other, Complex):
            return NotImplemented
        denominator = other.im * other.im + other.re * other.re
        re = (self.re * other.re + self.im * other.im) / denominator
        im = (self.im * other.re - self.re * other.im) / denominator
        return Complex(im, re)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.re == other.re and self.im == other.im

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        if self.im >= 0:
            return f"{self.re:.5g} + j{self.im:.5g}"
        return f"{self.re:.5g} - j{-self.im:.5g}"

    def __repr__(self) -> str:
        return f"Complex(im={self.im!r}, re={self.re!r})"


def add_complex(a: Complex, b: Complex) -> Complex:
    """Return the sum of two complex numbers."""
    return Complex(a.im + b.im, a.re + b.re)