"""
Availability observer capability.

Books notify every registered observer when they are returned. Any object
with an ``update(book)`` method qualifies; members implement it to receive
"now available" notices.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .book import Book


@runtime_checkable
class AvailabilityObserver(Protocol):
    """Receives a callback when a book's availability changes."""

    def update(self, book: "Book") -> None: ...
