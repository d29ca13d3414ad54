"""
Lending Library Package.

An in-memory library-lending model (books, members, a librarian and a
catalog) with borrow/return rules and availability notifications, exposed
as an MCP server.

Key Components:
- models: Pydantic models for books, members and librarians, plus BookBuilder
- library: the catalog and roster that mediates borrowing and returning
- errors: typed lending errors with machine-readable kinds
- config: configuration management with pydantic-settings
- resources / tools: the MCP surface over the shared library
"""

__version__ = "0.1.0"

from .errors import (
    BookUnavailableError,
    LendingError,
    LendingErrorKind,
    MemberAtCapacityError,
    MemberNotFoundError,
    TitleNotFoundError,
)
from .library import Library, LibraryComponent
from .models import AvailabilityObserver, Book, BookBuilder, Librarian, Member

__all__ = [
    "AvailabilityObserver",
    "Book",
    "BookBuilder",
    "BookUnavailableError",
    "LendingError",
    "LendingErrorKind",
    "Librarian",
    "Library",
    "LibraryComponent",
    "Member",
    "MemberAtCapacityError",
    "MemberNotFoundError",
    "TitleNotFoundError",
    "__version__",
]
