"""
Catalog and roster tools for the Lending Library MCP server.

Changes to the catalog and roster are made by the service-desk librarian,
the same way staff would make them at the counter:
- add_book / remove_book
- register_member / unregister_member
- subscribe_to_book: register a member as an availability observer
"""

import logging
from typing import Annotated, Any

from fastmcp.exceptions import ToolError
from pydantic import Field, ValidationError

from ..errors import LendingError, MemberNotFoundError, TitleNotFoundError
from ..library import get_library
from ..models import BookBuilder, Librarian, Member
from .circulation import MemberId, Title
from .results import lending_tool_error, tool_result

logger = logging.getLogger(__name__)

SERVICE_LIBRARIAN = Librarian(name="MCP Service Desk", employee_id="mcp_tool")


async def add_book_handler(
    title: Annotated[str, Field(min_length=1, max_length=500, examples=["Kotlin Programming"])],
    author: Annotated[str, Field(examples=["JetBrains"])] = "",
    isbn: Annotated[str, Field(examples=["123-456-789"])] = "",
) -> dict[str, Any]:
    """Add a new available copy to the catalog."""
    try:
        book = BookBuilder().set_title(title).set_author(author).set_isbn(isbn).build()
    except ValidationError as e:
        logger.warning("Invalid add_book parameters: %s", e)
        raise ToolError(f"Invalid book parameters: {e}") from e

    library = get_library()
    SERVICE_LIBRARIAN.add_book_to_library(book, library)

    copies = library.get_books_count_by_title(book.title)
    return tool_result(
        f"Added '{book.title}' by {book.author or 'unknown author'}. "
        f"The catalog now holds {copies} copy(ies) of this title.",
        {"book": book.model_dump(), "copies_with_title": copies},
    )


async def remove_book_handler(title: Title) -> dict[str, Any]:
    """Remove the first copy with a title from the catalog."""
    library = get_library()
    book = library.find_book_by_title(title)
    if book is None:
        error = TitleNotFoundError(title)
        logger.info("Remove failed - %s", error)
        raise lending_tool_error(error)

    SERVICE_LIBRARIAN.remove_book_from_library(book, library)
    return tool_result(
        f"Removed one copy of '{book.title}'.",
        {"book": book.model_dump(), "remaining_books": library.get_books_count()},
    )


async def register_member_handler(
    name: Annotated[str, Field(min_length=1, max_length=200, examples=["Bob"])],
    member_id: Annotated[str, Field(min_length=1, max_length=50, examples=["M002"])],
    max_books: Annotated[
        int | None,
        Field(
            description="Borrowing limit; the configured default is used when omitted",
            ge=0,
            examples=[3],
        ),
    ] = None,
) -> dict[str, Any]:
    """Add a member to the roster."""
    fields: dict[str, Any] = {"name": name, "member_id": member_id}
    if max_books is not None:
        fields["max_books"] = max_books
    try:
        member = Member(**fields)
    except ValidationError as e:
        logger.warning("Invalid register_member parameters: %s", e)
        raise ToolError(f"Invalid member parameters: {e}") from e

    SERVICE_LIBRARIAN.register_new_member(member, get_library())
    return tool_result(
        f"Registered {member.name} ({member.member_id}) with a limit of {member.max_books} books.",
        {"member": member.model_dump()},
    )


async def unregister_member_handler(member_id: MemberId) -> dict[str, Any]:
    """Remove a member from the roster. Books they hold stay on loan."""
    library = get_library()
    member = library.find_member_by_id(member_id)
    if member is None:
        error = MemberNotFoundError(member_id)
        logger.info("Unregister failed - %s", error)
        raise lending_tool_error(error)

    SERVICE_LIBRARIAN.unregister_member_from_library(member, library)
    return tool_result(
        f"Unregistered {member.name} ({member.member_id}).",
        {"member": member.model_dump()},
    )


async def subscribe_to_book_handler(member_id: MemberId, title: Title) -> dict[str, Any]:
    """Register a member as an observer of the first copy with a title."""
    library = get_library()
    try:
        member = library.find_member_by_id(member_id)
        if member is None:
            raise MemberNotFoundError(member_id)
        book = library.find_book_by_title(title)
        if book is None:
            raise TitleNotFoundError(title)
    except LendingError as e:
        logger.info("Subscribe failed - %s: %s", e.kind.value, e)
        raise lending_tool_error(e) from e

    book.add_observer(member)
    return tool_result(
        f"{member.name} will be notified when '{book.title}' is returned.",
        {"title": book.title, "observers": len(book.observers)},
    )


add_book = {
    "name": "add_book",
    "description": "Add an available copy of a book to the catalog. Duplicate titles are allowed.",
    "handler": add_book_handler,
}

remove_book = {
    "name": "remove_book",
    "description": "Remove the first catalog copy with the exact title.",
    "handler": remove_book_handler,
}

register_member = {
    "name": "register_member",
    "description": "Register a new member with an optional borrowing limit.",
    "handler": register_member_handler,
}

unregister_member = {
    "name": "unregister_member",
    "description": "Remove a member from the roster by id.",
    "handler": unregister_member_handler,
}

subscribe_to_book = {
    "name": "subscribe_to_book",
    "description": (
        "Subscribe a member to a book. Each subscription produces one availability notice "
        "every time the book is returned; subscribing twice means two notices."
    ),
    "handler": subscribe_to_book_handler,
}
