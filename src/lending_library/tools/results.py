"""Result shapes shared by the lending tools.

Successful tools return a JSON object with a human-readable ``message`` next
to the structured data. Failures raise ``ToolError`` so the MCP response is
flagged ``isError``; lending rule violations put the error kind first in the
message (``"title_not_found: Book 'Dune' not found"``) so clients can branch
on it without parsing the rest.
"""

from typing import Any

from fastmcp.exceptions import ToolError

from ..errors import LendingError


def tool_result(message: str, data: dict[str, Any]) -> dict[str, Any]:
    return {"message": message, **data}


def lending_tool_error(error: LendingError) -> ToolError:
    return ToolError(f"{error.kind.value}: {error}")
