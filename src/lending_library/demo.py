"""Lending Library demo run.

Stocks a library, lends a book to the demo member and returns it, logging
each step and the availability notice the member receives.

Run with ``lending-library-demo`` or ``python -m lending_library.demo``.
"""

import logging
import sys

from .config import get_config
from .errors import LendingError
from .library import Library
from .seed import seed_library

logger = logging.getLogger(__name__)


def run_demo(library: Library | None = None) -> Library:
    """Play the borrow/return scenario and return the library it used."""
    library = library if library is not None else Library()
    _, member = seed_library(library)

    title = "Kotlin Programming"
    logger.info(
        "Available before borrowing: %d of %d",
        library.get_available_books_count(),
        library.get_books_count(),
    )

    library.borrow_book(member, title)
    logger.info(
        "%s holds %s; available now: %d",
        member.name,
        member.borrowed_titles,
        library.get_available_books_count(),
    )

    library.return_book(member, title)
    logger.info("Available after return: %d", library.get_available_books_count())

    for notice in member.notices:
        logger.info("%s was told: %s", member.name, notice)

    return library


def main() -> None:
    """Entry point for the demo run."""
    config = get_config()
    logging.basicConfig(
        level=config.effective_log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    try:
        run_demo()
    except LendingError:
        logger.exception("Demo scenario was rejected")
        sys.exit(1)


if __name__ == "__main__":
    main()
