"""Book Resources - Catalog Access

Exposes the in-memory catalog via read-only resources.
Clients use these to browse books and check availability.

Resources:
- library://books/list - Every copy in the catalog
- library://books/{title} - The first copy with a given title
"""

import logging
from typing import Any
from urllib.parse import unquote

from fastmcp.exceptions import ResourceError
from pydantic import BaseModel, Field

from ..library import get_library
from ..models.book import Book

logger = logging.getLogger(__name__)


class BookListResponse(BaseModel):
    """Response schema with books and catalog counts."""

    books: list[Book] = Field(..., description="Every copy in the catalog, in insertion order")
    total: int = Field(..., description="Total number of copies")
    available: int = Field(..., description="Copies currently on the shelf")


async def list_books_handler() -> dict[str, Any]:
    """Returns the whole catalog.

    Client requests library://books/list to browse the shelves.
    """
    try:
        logger.debug("MCP Resource Request - books/list")
        library = get_library()

        response = BookListResponse(
            books=list(library.books),
            total=library.get_books_count(),
            available=library.get_available_books_count(),
        )
        return response.model_dump()

    except Exception as e:
        logger.exception("Error in books/list resource")
        raise ResourceError(f"Failed to retrieve book list: {e!s}") from e


async def get_book_handler(title: str) -> dict[str, Any]:
    """Returns details for the first copy with ``title``.

    Titles arrive percent-encoded in the URI and are decoded before lookup.
    """
    try:
        decoded = unquote(title)
        logger.debug("MCP Resource Request - books/%s", decoded)

        book = get_library().find_book_by_title(decoded)
        if book is None:
            raise ResourceError(f"Book not found: {decoded}")

        return book.model_dump()

    except ResourceError:
        raise
    except Exception as e:
        logger.exception("Error in books/{title} resource")
        raise ResourceError(f"Failed to retrieve book details: {e!s}") from e


book_resources: list[dict[str, Any]] = [
    {
        "uri": "library://books/list",
        "name": "Book Catalog",
        "description": "Browse every copy in the catalog with its availability and borrower.",
        "mime_type": "application/json",
        "handler": list_books_handler,
    },
    {
        "uri_template": "library://books/{title}",
        "name": "Book Details",
        "description": "Get details of the first copy with an exact title (percent-encoded)",
        "mime_type": "application/json",
        "handler": get_book_handler,
    },
]
