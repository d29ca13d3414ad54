"""Test configuration and fixtures for the Lending Library.

1. Isolated state - configuration and the shared library are reset per test
2. Clean environment - no LENDING_LIBRARY_* variables leak into tests
3. Demo data - the two-book catalog and the demo member, ready to use
"""

import os
from collections.abc import Generator

import pytest

from lending_library.config import reset_config
from lending_library.library import Library, get_library, reset_library
from lending_library.models import BookBuilder, Librarian, Member
from lending_library.models.book import Book

# === Isolation Fixtures ===


@pytest.fixture(autouse=True)
def clean_env() -> Generator[None, None, None]:
    """Remove LENDING_LIBRARY_* variables and reset global state around each test."""
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("LENDING_LIBRARY_"):
            del os.environ[key]

    reset_config()
    reset_library()

    yield

    os.environ.clear()
    os.environ.update(original_env)
    reset_config()
    reset_library()


# === Domain Fixtures ===


@pytest.fixture
def librarian() -> Librarian:
    return Librarian(name="John Doe", employee_id="L123")


@pytest.fixture
def alice() -> Member:
    """The demo member with the default limit of three books."""
    return Member(name="Alice", member_id="M001", max_books=3)


@pytest.fixture
def kotlin_programming() -> Book:
    return (
        BookBuilder()
        .set_title("Kotlin Programming")
        .set_author("JetBrains")
        .set_isbn("123-456-789")
        .build()
    )


@pytest.fixture
def advanced_kotlin() -> Book:
    return Book(title="Advanced Kotlin", author="JetBrains", isbn="987-654-321")


@pytest.fixture
def library(
    librarian: Librarian, alice: Member, kotlin_programming: Book, advanced_kotlin: Book
) -> Library:
    """A fresh library holding both demo books with Alice registered."""
    library = Library()
    librarian.register_new_member(alice, library)
    librarian.add_book_to_library(kotlin_programming, library)
    librarian.add_book_to_library(advanced_kotlin, library)
    return library


@pytest.fixture
def shared_library(
    librarian: Librarian, alice: Member, kotlin_programming: Book, advanced_kotlin: Book
) -> Library:
    """The process-wide library used by MCP tools and resources, stocked with demo data."""
    library = get_library()
    librarian.register_new_member(alice, library)
    librarian.add_book_to_library(kotlin_programming, library)
    librarian.add_book_to_library(advanced_kotlin, library)
    return library


class RecordingObserver:
    """Observer that remembers every book it was told about."""

    def __init__(self) -> None:
        self.seen: list[Book] = []

    def update(self, book: Book) -> None:
        self.seen.append(book)


@pytest.fixture
def recorder() -> RecordingObserver:
    return RecordingObserver()
