"""
MCP Tools for the Lending Library.

Tools are the state-changing side of the server: lending and returning books,
and maintaining the catalog and roster. Each tool is a dictionary with name,
description and an async handler whose typed signature FastMCP turns into the
input schema.
"""

from .catalog import add_book, register_member, remove_book, subscribe_to_book, unregister_member
from .circulation import borrow_book, return_book

# Export all tools for server registration
all_tools = [
    borrow_book,
    return_book,
    add_book,
    remove_book,
    register_member,
    unregister_member,
    subscribe_to_book,
]

__all__ = [
    "add_book",
    "all_tools",
    "borrow_book",
    "register_member",
    "remove_book",
    "return_book",
    "subscribe_to_book",
    "unregister_member",
]
