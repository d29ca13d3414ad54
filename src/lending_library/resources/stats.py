"""Statistics Resources - Catalog Counts

Resources:
- library://stats/catalog - Total, available and on-loan copies
- library://stats/authors/{author} - Copies by one author
"""

import logging
from datetime import datetime
from typing import Any
from urllib.parse import unquote

from fastmcp.exceptions import ResourceError
from pydantic import BaseModel, Field

from ..library import get_library

logger = logging.getLogger(__name__)


class CatalogStatsResponse(BaseModel):
    """Current catalog statistics."""

    timestamp: str = Field(..., description="When stats were calculated (ISO format)")
    total_books: int = Field(..., description="Total copies in the catalog")
    available_books: int = Field(..., description="Copies currently on the shelf")
    borrowed_books: int = Field(..., description="Copies currently on loan")
    registered_members: int = Field(..., description="Members on the roster")
    circulation_rate: float = Field(..., description="Percentage of the catalog on loan")


class AuthorStatsResponse(BaseModel):
    """Copies held for a single author."""

    author: str = Field(..., description="Author name, matched exactly")
    total_books: int = Field(..., description="Copies by this author")


async def get_catalog_stats_handler() -> dict[str, Any]:
    """Returns catalog-wide counts."""
    try:
        logger.debug("MCP Resource Request - stats/catalog")
        library = get_library()

        total = library.get_books_count()
        available = library.get_available_books_count()
        borrowed = total - available

        response = CatalogStatsResponse(
            timestamp=datetime.now().isoformat(),
            total_books=total,
            available_books=available,
            borrowed_books=borrowed,
            registered_members=len(library.members),
            circulation_rate=round(borrowed / total * 100, 2) if total else 0.0,
        )
        return response.model_dump()

    except Exception as e:
        logger.exception("Error in stats/catalog resource")
        raise ResourceError(f"Failed to calculate catalog stats: {e!s}") from e


async def get_author_stats_handler(author: str) -> dict[str, Any]:
    """Returns how many copies the catalog holds for an author."""
    decoded = unquote(author)
    logger.debug("MCP Resource Request - stats/authors/%s", decoded)

    count = get_library().get_books_count_by_author(decoded)
    return AuthorStatsResponse(author=decoded, total_books=count).model_dump()


stats_resources: list[dict[str, Any]] = [
    {
        "uri": "library://stats/catalog",
        "name": "Catalog Statistics",
        "description": "Total, available and borrowed copies plus roster size.",
        "mime_type": "application/json",
        "handler": get_catalog_stats_handler,
    },
    {
        "uri_template": "library://stats/authors/{author}",
        "name": "Author Statistics",
        "description": "Number of copies by an author (exact, percent-encoded name)",
        "mime_type": "application/json",
        "handler": get_author_stats_handler,
    },
]
