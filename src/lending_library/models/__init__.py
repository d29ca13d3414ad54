"""
Lending Library Models.

Pydantic models for the entities of the lending model:
- Book: one lendable copy, observable for availability
- Member: a patron with a borrowing limit; also an availability observer
- Librarian: staff facade that forwards catalog and roster changes
- BookBuilder: fluent construction of Book records
"""

from .book import Book
from .builder import BookBuilder
from .librarian import Librarian
from .member import Member
from .observer import AvailabilityObserver

# Book refers to Member for its borrower; resolve it now that both exist
Book.model_rebuild(_types_namespace={"Member": Member})
Member.model_rebuild()

__all__ = [
    "AvailabilityObserver",
    "Book",
    "BookBuilder",
    "Librarian",
    "Member",
]
