"""
Librarian model for the Lending Library.

A librarian is staff, not a patron: it changes the catalog and the roster of
whichever library it is handed, and keeps no reference to a library itself.
"""

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from .book import Book
from .member import Member

if TYPE_CHECKING:
    from ..library import Library

logger = logging.getLogger(__name__)


class Librarian(BaseModel):
    """Library staff member acting on a library passed to each call."""

    name: str = Field(
        ...,
        description="Full name of the librarian",
        min_length=1,
        max_length=200,
        examples=["John Doe"],
    )

    employee_id: str = Field(
        ...,
        description="Staff identifier",
        min_length=1,
        max_length=50,
        examples=["L123"],
    )

    def add_book_to_library(self, book: Book, library: "Library") -> None:
        logger.debug("Librarian %s adding '%s'", self.employee_id, book.title)
        library.add_book(book)

    def remove_book_from_library(self, book: Book, library: "Library") -> None:
        logger.debug("Librarian %s removing '%s'", self.employee_id, book.title)
        library.remove_book(book)

    def register_new_member(self, member: Member, library: "Library") -> None:
        logger.debug("Librarian %s registering %s", self.employee_id, member.member_id)
        library.register_member(member)

    def unregister_member_from_library(self, member: Member, library: "Library") -> None:
        logger.debug("Librarian %s unregistering %s", self.employee_id, member.member_id)
        library.unregister_member(member)

    model_config = ConfigDict(
        str_strip_whitespace=True,
        extra="forbid",
        frozen=True,
    )
