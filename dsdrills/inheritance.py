"""Points with colour and circles with names, built by inheritance."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

PI = 3.14


@dataclass
class Point:
    """A point in the plane."""

    x: int = 0
    y: int = 0

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


@dataclass
class ColorPoint(Point):
    """A point that also has a colour."""

    color: str = ""

    def __str__(self) -> str:
        return f"{self.color}:{super().__str__()}"


class Circle:
    """A circle with an integer radius."""

    def __init__(self, radius: int = 1) -> None:
        self.radius = radius

    def area(self) -> float:
        return PI * self.radius * self.radius

    def __repr__(self) -> str:
        return f"Circle({self.radius!r})"


class NamedCircle(Circle):
    """A circle that carries a name."""

    def __init__(self, radius: int = 0, name: str = "") -> None:
        super().__init__(radius)
        self.name = name

    def __str__(self) -> str:
        return f"반지름이 {self.radius}인{self.name}"

    def __repr__(self) -> str:
        return f"NamedCircle({self.radius!r}, {self.name!r})"


def largest_circle(circles: Iterable[Circle]) -> Circle:
    """Return the first circle with the largest area."""
    items = list(circles)
    if not items:
        raise ValueError("no circles given")
    return max(items, key=lambda circle: circle.radius)