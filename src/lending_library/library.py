"""
Library catalog and roster for the Lending Library.

The Library owns the catalog (books) and the roster (members) and mediates
borrow and return requests by title. It is a plain in-memory object: every
operation runs synchronously and nothing is persisted.

Rejected requests raise ``LendingError`` subclasses and are logged, so callers
such as the MCP tools can report the failure kind back to the client.
"""

import logging
from abc import ABC, abstractmethod

from .errors import BookUnavailableError, MemberAtCapacityError, TitleNotFoundError
from .models.book import Book
from .models.member import Member

logger = logging.getLogger(__name__)


class LibraryComponent(ABC):
    """Summary counts every catalog-like component can report."""

    @abstractmethod
    def get_books_count(self) -> int:
        """Return the total number of books."""

    @abstractmethod
    def get_available_books_count(self) -> int:
        """Return the number of books currently on the shelf."""


class Library(LibraryComponent):
    """In-memory catalog of books and roster of members."""

    def __init__(self) -> None:
        self.books: list[Book] = []
        self.members: list[Member] = []

    # ---- Catalog ----

    def add_book(self, book: Book) -> None:
        self.books.append(book)
        logger.debug("Added '%s' (%s) to catalog", book.title, book.isbn)

    def remove_book(self, book: Book) -> None:
        if book in self.books:
            self.books.remove(book)
            logger.debug("Removed '%s' (%s) from catalog", book.title, book.isbn)
        else:
            logger.debug("Book '%s' is not in the catalog, nothing removed", book.title)

    def find_book_by_title(self, title: str) -> Book | None:
        """Return the first book whose title matches exactly."""
        return next((book for book in self.books if book.title == title), None)

    # ---- Roster ----

    def register_member(self, member: Member) -> None:
        self.members.append(member)
        logger.debug("Registered member %s (%s)", member.name, member.member_id)

    def unregister_member(self, member: Member) -> None:
        if member in self.members:
            self.members.remove(member)
            logger.debug("Unregistered member %s (%s)", member.name, member.member_id)
        else:
            logger.debug("Member %s is not registered, nothing removed", member.member_id)

    def find_member_by_id(self, member_id: str) -> Member | None:
        """Return the first registered member with this id."""
        return next((member for member in self.members if member.member_id == member_id), None)

    # ---- Circulation ----

    def borrow_book(self, member: Member, title: str) -> Book:
        """
        Lend the first book with ``title`` to ``member``.

        Returns:
            The borrowed book

        Raises:
            TitleNotFoundError: If no book has this title
            BookUnavailableError: If the first book with this title is on loan
            MemberAtCapacityError: If the member cannot borrow another book
        """
        book = self.find_book_by_title(title)
        if book is None:
            logger.info("Cannot borrow '%s': not in catalog", title)
            raise TitleNotFoundError(title)
        if not book.is_available:
            logger.info("Cannot borrow '%s': already on loan", title)
            raise BookUnavailableError(title)
        if not member.can_borrow:
            logger.info(
                "Cannot borrow '%s': %s is at capacity (%d)", title, member.name, member.max_books
            )
            raise MemberAtCapacityError(member.name, member.max_books)

        book.borrow(member)
        logger.info("%s borrowed '%s'", member.name, title)
        return book

    def return_book(self, member: Member, title: str) -> Book:
        """
        Return the first book with ``title``.

        The member is not checked against the book's borrower: any member may
        return any title, and the book becomes available either way.

        Raises:
            TitleNotFoundError: If no book has this title
        """
        book = self.find_book_by_title(title)
        if book is None:
            logger.info("Cannot return '%s': not in catalog", title)
            raise TitleNotFoundError(title)

        if book.borrower is not None and book.borrower is not member:
            logger.debug(
                "'%s' returned by %s but was held by %s",
                title,
                member.member_id,
                book.borrower.member_id,
            )
        book.return_book()
        logger.info("%s returned '%s'", member.name, title)
        return book

    # ---- Counts ----

    def get_books_count(self) -> int:
        return len(self.books)

    def get_available_books_count(self) -> int:
        return sum(1 for book in self.books if book.is_available)

    def get_books_count_by_title(self, title: str) -> int:
        return sum(1 for book in self.books if book.title == title)

    def get_books_count_by_author(self, author: str) -> int:
        return sum(1 for book in self.books if book.author == author)


# === Shared Library Instance ===
# The MCP server works against one in-memory library per process.


class _LibraryStore:
    """Internal storage for the shared library."""

    _instance: Library | None = None


def get_library() -> Library:
    """Get or create the shared library instance."""
    if _LibraryStore._instance is None:  # type: ignore[reportPrivateUsage]
        _LibraryStore._instance = Library()  # type: ignore[reportPrivateUsage]
    return _LibraryStore._instance  # type: ignore[reportPrivateUsage]


def reset_library() -> None:
    """Discard the shared library (useful for testing)."""
    _LibraryStore._instance = None  # type: ignore[reportPrivateUsage]
