"""
Book model for the Lending Library.

A Book is a single lendable copy in the catalog. It knows whether it is
currently on loan, which member holds it, and which observers want to hear
about it becoming available again. Over MCP, books are exposed as resources:
- library://books/list
- library://books/{title}

Borrowing is a two-sided update (the book and the member). Both preconditions
are checked before either side changes, so a rejected borrow leaves the book
and the member exactly as they were.
"""

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, computed_field, model_validator

from ..errors import BookUnavailableError, MemberAtCapacityError
from .observer import AvailabilityObserver

if TYPE_CHECKING:
    from .member import Member

logger = logging.getLogger(__name__)


class Book(BaseModel):
    """
    Represents one copy of a book in the catalog.

    Two Book records with the same ISBN are distinct copies, so equality is
    identity: removing a book from the catalog or from a member's loans never
    touches another copy.
    """

    title: str = Field(
        ...,
        description="The title of the book",
        min_length=1,
        max_length=500,
        frozen=True,
        examples=["Kotlin Programming", "Advanced Kotlin"],
    )

    author: str = Field(
        ...,
        description="Author of the book",
        frozen=True,
        examples=["JetBrains"],
    )

    isbn: str = Field(
        ...,
        description="ISBN as printed on the copy; not normalized",
        frozen=True,
        examples=["123-456-789", "9780134685479"],
    )

    available: bool = Field(
        default=True,
        description="Whether the copy is currently on the shelf",
    )

    borrower: "Member | None" = Field(
        default=None,
        description="Member currently holding the copy",
        exclude=True,
        repr=False,
    )

    _observers: list[AvailabilityObserver] = PrivateAttr(default_factory=list)

    @model_validator(mode="after")
    def validate_loan_state(self) -> "Book":
        """A copy is unavailable exactly when somebody holds it."""
        if self.available and self.borrower is not None:
            raise ValueError("An available book cannot have a borrower")
        if not self.available and self.borrower is None:
            raise ValueError("An unavailable book must have a borrower")
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self is other

    def __hash__(self) -> int:
        return id(self)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def borrower_id(self) -> str | None:
        """Member id of the current borrower, if any."""
        return self.borrower.member_id if self.borrower is not None else None

    @property
    def is_available(self) -> bool:
        """Check if the copy can be borrowed."""
        return self.available

    @property
    def observers(self) -> tuple[AvailabilityObserver, ...]:
        """Registered observers in notification order."""
        return tuple(self._observers)

    def borrow(self, member: "Member") -> None:
        """
        Lend this copy to a member.

        Raises:
            BookUnavailableError: If the copy is already on loan
            MemberAtCapacityError: If the member cannot take another book
        """
        if not self.available:
            logger.info("Borrow refused - '%s' is already on loan", self.title)
            raise BookUnavailableError(self.title)
        if not member.can_borrow:
            logger.info(
                "Borrow refused - %s (%s) holds %d of %d books",
                member.name,
                member.member_id,
                len(member.borrowed_books),
                member.max_books,
            )
            raise MemberAtCapacityError(member.name, member.max_books)

        self.available = False
        self.borrower = member
        member.borrow_book(self)

    def return_book(self) -> None:
        """Put the copy back on the shelf and notify observers.

        The book becomes available even if it was never lent out.
        """
        self.available = True
        if self.borrower is not None:
            self.borrower.return_book(self)
        self.borrower = None
        self.notify_observers()

    def add_observer(self, observer: AvailabilityObserver) -> None:
        """Register an observer. Registering twice means two notifications."""
        self._observers.append(observer)

    def remove_observer(self, observer: AvailabilityObserver) -> None:
        """Drop the first registration of an observer, if present."""
        for index, registered in enumerate(self._observers):
            if registered is observer:
                del self._observers[index]
                return

    def notify_observers(self) -> None:
        # Exceptions from an observer propagate; later observers are skipped.
        for observer in list(self._observers):
            observer.update(self)

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "title": "Kotlin Programming",
                "author": "JetBrains",
                "isbn": "123-456-789",
                "available": True,
            }
        },
    )
