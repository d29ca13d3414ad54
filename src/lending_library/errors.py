"""
Lending errors for the Lending Library.

Every rejected borrow or return raises a subclass of ``LendingError`` instead
of silently declining the request. Each error carries a ``kind`` so callers
(including the MCP tool layer) can branch on the failure without parsing text.
"""

from enum import Enum


class LendingErrorKind(str, Enum):
    """Machine-readable category of a rejected lending operation."""

    BOOK_UNAVAILABLE = "book_unavailable"
    MEMBER_AT_CAPACITY = "member_at_capacity"
    TITLE_NOT_FOUND = "title_not_found"
    MEMBER_NOT_FOUND = "member_not_found"


class LendingError(Exception):
    """Base exception for lending operations."""

    kind: LendingErrorKind


class BookUnavailableError(LendingError):
    """Raised when borrowing a book that is already lent out."""

    kind = LendingErrorKind.BOOK_UNAVAILABLE

    def __init__(self, title: str):
        super().__init__(f"Book '{title}' is not available")
        self.title = title


class MemberAtCapacityError(LendingError):
    """Raised when a member already holds their maximum number of books."""

    kind = LendingErrorKind.MEMBER_AT_CAPACITY

    def __init__(self, name: str, max_books: int):
        super().__init__(f"{name} can't borrow more books (limit {max_books})")
        self.name = name
        self.max_books = max_books


class TitleNotFoundError(LendingError):
    """Raised when no book in the catalog has the requested title."""

    kind = LendingErrorKind.TITLE_NOT_FOUND

    def __init__(self, title: str):
        super().__init__(f"Book '{title}' not found")
        self.title = title


class MemberNotFoundError(LendingError):
    """Raised when a member id is not on the roster."""

    kind = LendingErrorKind.MEMBER_NOT_FOUND

    def __init__(self, member_id: str):
        super().__init__(f"Member {member_id} not found")
        self.member_id = member_id
