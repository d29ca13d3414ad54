"""Member Resources - Roster Access

Resources:
- library://members/list - Registered members with their loans and notices
- library://members/{member_id} - A single member
"""

import logging
from typing import Any

from fastmcp.exceptions import ResourceError
from pydantic import BaseModel, Field

from ..library import get_library
from ..models.member import Member

logger = logging.getLogger(__name__)


class MemberListResponse(BaseModel):
    """Response schema for the roster."""

    members: list[Member] = Field(..., description="Registered members in registration order")
    total: int = Field(..., description="Number of registered members")


async def list_members_handler() -> dict[str, Any]:
    """Returns the roster."""
    try:
        logger.debug("MCP Resource Request - members/list")
        members = list(get_library().members)
        return MemberListResponse(members=members, total=len(members)).model_dump()

    except Exception as e:
        logger.exception("Error in members/list resource")
        raise ResourceError(f"Failed to retrieve member list: {e!s}") from e


async def get_member_handler(member_id: str) -> dict[str, Any]:
    """Returns one registered member by id."""
    logger.debug("MCP Resource Request - members/%s", member_id)

    member = get_library().find_member_by_id(member_id)
    if member is None:
        raise ResourceError(f"Member not found: {member_id}")
    return member.model_dump()


member_resources: list[dict[str, Any]] = [
    {
        "uri": "library://members/list",
        "name": "Member Roster",
        "description": "List registered members with borrowed titles and availability notices.",
        "mime_type": "application/json",
        "handler": list_members_handler,
    },
    {
        "uri_template": "library://members/{member_id}",
        "name": "Member Details",
        "description": "Get a registered member by id",
        "mime_type": "application/json",
        "handler": get_member_handler,
    },
]
