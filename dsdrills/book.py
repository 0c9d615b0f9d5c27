"""A book with operators for adjusting its price and comparing it."""

from __future__ import annotations


class Book:
    """A book with a title, a price and a number of pages."""

    def __init__(self, title: str = "", price: int = 0, pages: int = 0) -> None:
        self.title = title
        self.price = price
        self.pages = pages

    def __iadd__(self, increment: int) -> Book:
        """Raise the price by ``increment``."""
        self.price += increment
        return self

    def __isub__(self, decrement: int) -> Book:
        """Lower the price by ``decrement``."""
        self.price -= decrement
        return self

    def __eq__(self, other: object) -> bool:
        """Compare with a price (int), a title (str) or another book.

        Two books are equal when their titles and page counts match.
        """
        if isinstance(other, Book):
            return self.pages == other.pages and self.title == other.title
        if isinstance(other, str):
            return self.title == other
        if isinstance(other, int):
            return self.price == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __bool__(self) -> bool:
        """A book is falsy when it is free."""
        return self.price != 0

    def __str__(self) -> str:
        return f"{self.title} {self.price}원 {self.pages} 페이지"

    def __repr__(self) -> str:
        return f"Book({self.title!r}, {self.price!r}, {self.pages!r})"