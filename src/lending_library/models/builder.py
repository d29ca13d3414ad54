"""Fluent builder for Book records."""

from typing import TYPE_CHECKING

from .book import Book

if TYPE_CHECKING:
    from .member import Member


class BookBuilder:
    """
    Accumulates Book fields through chained setters.

    Example:
        book = BookBuilder().set_title("Kotlin Programming").set_author("JetBrains").build()

    ``build()`` validates through the Book model, so a title must be set and
    ``available`` must agree with ``borrower``. Each call returns a new Book;
    later setter calls do not affect books already built.
    """

    def __init__(self) -> None:
        self._title = ""
        self._author = ""
        self._isbn = ""
        self._available = True
        self._borrower: "Member | None" = None

    def set_title(self, title: str) -> "BookBuilder":
        self._title = title
        return self

    def set_author(self, author: str) -> "BookBuilder":
        self._author = author
        return self

    def set_isbn(self, isbn: str) -> "BookBuilder":
        self._isbn = isbn
        return self

    def set_available(self, available: bool) -> "BookBuilder":
        self._available = available
        return self

    def set_borrower(self, borrower: "Member | None") -> "BookBuilder":
        self._borrower = borrower
        return self

    def build(self) -> Book:
        """
        Create a Book from the accumulated fields.

        Raises:
            pydantic.ValidationError: If the fields do not form a valid Book
        """
        return Book(
            title=self._title,
            author=self._author,
            isbn=self._isbn,
            available=self._available,
            borrower=self._borrower,
        )
