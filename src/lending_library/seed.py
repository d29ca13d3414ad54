"""
Demo catalog for the Lending Library.

Builds the small starter library used by the demo run and, when
``seed_demo_data`` is enabled, by the MCP server: one librarian, one member,
and two JetBrains titles the member is subscribed to.
"""

import logging

from .library import Library
from .models import BookBuilder, Librarian, Member

logger = logging.getLogger(__name__)

DEMO_BOOKS: list[dict[str, str]] = [
    {"title": "Kotlin Programming", "author": "JetBrains", "isbn": "123-456-789"},
    {"title": "Advanced Kotlin", "author": "JetBrains", "isbn": "987-654-321"},
]


def seed_library(library: Library) -> tuple[Librarian, Member]:
    """Populate ``library`` with the demo librarian's work.

    Returns:
        The librarian who stocked the shelves and the registered demo member
    """
    librarian = Librarian(name="John Doe", employee_id="L123")
    member = Member(name="Alice", member_id="M001")

    librarian.register_new_member(member, library)

    for entry in DEMO_BOOKS:
        book = (
            BookBuilder()
            .set_title(entry["title"])
            .set_author(entry["author"])
            .set_isbn(entry["isbn"])
            .build()
        )
        librarian.add_book_to_library(book, library)
        book.add_observer(member)

    logger.info(
        "Seeded library with %d books and %d members",
        library.get_books_count(),
        len(library.members),
    )
    return librarian, member
