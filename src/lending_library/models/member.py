"""
Member model for the Lending Library.

A member is a library patron who borrows books up to a personal limit. Members
are also availability observers: subscribed to a book, they receive a notice
each time that book is returned.

Member resources can be accessed via:
- library://members/list
"""

import logging

from pydantic import BaseModel, ConfigDict, Field, computed_field

from ..config import get_config
from ..errors import MemberAtCapacityError
from .book import Book

logger = logging.getLogger(__name__)


def _default_max_books() -> int:
    return get_config().default_max_books


class Member(BaseModel):
    """
    Represents a library member who can borrow books.

    ``borrowed_books`` holds references to the Book copies on loan; it is left
    out of serialized output, which reports ``borrowed_titles`` instead.
    """

    name: str = Field(
        ...,
        description="Full name of the member",
        min_length=1,
        max_length=200,
        examples=["Alice", "Bob Smith"],
    )

    member_id: str = Field(
        ...,
        description="Library card identifier",
        min_length=1,
        max_length=50,
        examples=["M001", "M002"],
    )

    max_books: int = Field(
        default_factory=_default_max_books,
        description="Maximum number of books the member can hold at once",
        ge=0,
        examples=[3, 5, 0],
    )

    borrowed_books: list[Book] = Field(
        default_factory=list,
        description="Copies currently on loan to the member",
        exclude=True,
        repr=False,
    )

    notices: list[str] = Field(
        default_factory=list,
        description="Availability notices received, oldest first",
    )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Member):
            return NotImplemented
        return self is other

    def __hash__(self) -> int:
        return id(self)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def borrowed_titles(self) -> list[str]:
        """Titles of the books currently on loan."""
        return [book.title for book in self.borrowed_books]

    @property
    def can_borrow(self) -> bool:
        """Check if the member can take another book."""
        return len(self.borrowed_books) < self.max_books

    @property
    def available_slots(self) -> int:
        """How many more books the member can borrow."""
        return max(0, self.max_books - len(self.borrowed_books))

    def borrow_book(self, book: Book) -> None:
        """
        Record a book as on loan to this member.

        Raises:
            MemberAtCapacityError: If the member already holds max_books books
        """
        if not self.can_borrow:
            logger.info(
                "Loan of '%s' refused - %s (%s) is at the limit of %d books",
                book.title,
                self.name,
                self.member_id,
                self.max_books,
            )
            raise MemberAtCapacityError(self.name, self.max_books)
        self.borrowed_books.append(book)

    def return_book(self, book: Book) -> None:
        """Remove a book from the member's loans; ignore books not held."""
        if book in self.borrowed_books:
            self.borrowed_books.remove(book)

    def update(self, book: Book) -> None:
        """Availability callback invoked by books the member observes."""
        if book.is_available:
            notice = f"The book '{book.title}' is now available."
            self.notices.append(notice)
            logger.info("Notice for %s (%s): %s", self.name, self.member_id, notice)

    model_config = ConfigDict(
        str_strip_whitespace=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "name": "Alice",
                "member_id": "M001",
                "max_books": 3,
                "notices": [],
            }
        },
    )
