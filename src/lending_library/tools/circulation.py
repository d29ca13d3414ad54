"""
Circulation tools for the Lending Library MCP server.

1. borrow_book: lend the first copy with a title to a registered member
2. return_book: put a copy back on the shelf and notify its observers

Both tools act on the shared in-memory library. Parameters are declared on
the handler signatures, so FastMCP publishes and validates them. Rule
violations (unknown title or member, copy on loan, member at capacity) raise
``ToolError`` carrying the error kind.
"""

import logging
from typing import Annotated, Any

from fastmcp.exceptions import ToolError
from pydantic import Field

from ..errors import LendingError, MemberNotFoundError
from ..library import get_library
from ..models.member import Member
from .results import lending_tool_error, tool_result

logger = logging.getLogger(__name__)

MemberId = Annotated[
    str,
    Field(description="Library card identifier of the member", min_length=1, examples=["M001"]),
]

Title = Annotated[
    str,
    Field(
        description="Exact title of the book; the first matching copy is used",
        min_length=1,
        examples=["Kotlin Programming"],
    ),
]


def _resolve_member(member_id: str) -> Member:
    member = get_library().find_member_by_id(member_id)
    if member is None:
        raise MemberNotFoundError(member_id)
    return member


async def borrow_book_handler(member_id: MemberId, title: Title) -> dict[str, Any]:
    """
    Handler for the borrow_book tool.

    Returns:
        The loan details

    Raises:
        ToolError: If the loan is refused or fails unexpectedly
    """
    try:
        member = _resolve_member(member_id)
        book = get_library().borrow_book(member, title)

    except LendingError as e:
        logger.info("Borrow failed - %s: %s", e.kind.value, e)
        raise lending_tool_error(e) from e

    except Exception as e:
        logger.exception("Unexpected error in borrow_book tool")
        raise ToolError(f"An unexpected error occurred: {e!s}") from e

    return tool_result(
        f"{member.name} borrowed '{book.title}'. "
        f"{member.available_slots} of {member.max_books} borrowing slots left.",
        {
            "loan": {
                "member_id": member.member_id,
                "title": book.title,
                "isbn": book.isbn,
                "borrowed_titles": member.borrowed_titles,
            },
        },
    )


async def return_book_handler(member_id: MemberId, title: Title) -> dict[str, Any]:
    """
    Handler for the return_book tool.

    The returning member does not have to be the borrower; the copy goes back
    on the shelf regardless and every observer of it is notified.
    """
    library = get_library()
    held = None
    try:
        member = _resolve_member(member_id)
        held = library.find_book_by_title(title)
        previous_borrower_id = held.borrower_id if held is not None else None
        book = library.return_book(member, title)

    except LendingError as e:
        logger.info("Return failed - %s: %s", e.kind.value, e)
        raise lending_tool_error(e) from e

    except Exception as e:
        # Notification runs after the copy is back on the shelf
        if held is not None and held.is_available and held.borrower is None:
            logger.exception("Return of '%s' recorded but notifying observers failed", title)
            raise ToolError(
                f"'{title}' was returned and is available, "
                f"but notifying its observers failed: {e!s}"
            ) from e
        logger.exception("Unexpected error in return_book tool")
        raise ToolError(f"An unexpected error occurred: {e!s}") from e

    return tool_result(
        f"'{book.title}' is back on the shelf. {len(book.observers)} observer(s) notified.",
        {
            "return": {
                "member_id": member.member_id,
                "title": book.title,
                "isbn": book.isbn,
                "previous_borrower_id": previous_borrower_id,
                "notified_observers": len(book.observers),
            }
        },
    )


borrow_book = {
    "name": "borrow_book",
    "description": (
        "Lend a book to a registered member. Uses the first catalog copy with the exact "
        "title. Fails if the title is unknown, the copy is already on loan, or the member "
        "already holds their maximum number of books."
    ),
    "handler": borrow_book_handler,
}

return_book = {
    "name": "return_book",
    "description": (
        "Return a book by title. The copy becomes available even if a different member "
        "borrowed it, and every member subscribed to it receives an availability notice."
    ),
    "handler": return_book_handler,
}
