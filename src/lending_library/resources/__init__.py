"""Lending Library MCP Resources Package

Resources are the read-only side of the server: they report the catalog, the
roster and catalog counts without changing anything. Changes go through the
tools package.
"""

from .books import book_resources
from .members import member_resources
from .stats import stats_resources

# Combine all resources
all_resources = book_resources + member_resources + stats_resources

__all__ = [
    "all_resources",
    "book_resources",
    "member_resources",
    "stats_resources",
]
