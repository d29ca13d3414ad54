"""Lending Library MCP Server

Exposes the in-memory lending model over the Model Context Protocol:
- Resources (read-only): catalog, roster and catalog counts
- Tools (state-changing): borrow, return, catalog and roster maintenance

The library lives in process memory for the lifetime of the server. When
``seed_demo_data`` is enabled it starts with the demo catalog.
"""

import logging
import signal
import sys
from typing import Any

from fastmcp import FastMCP

from .config import get_config
from .library import get_library
from .resources import all_resources
from .seed import seed_library
from .tools import all_tools

logger = logging.getLogger(__name__)


def create_server() -> FastMCP:
    """Build the FastMCP server and register every resource and tool."""
    config = get_config()

    mcp = FastMCP(
        name=config.server_name,
        version=config.server_version,
        instructions=(
            "Lending Library - an in-memory library of books and members. Use resources "
            "to browse the catalog and roster, and tools to borrow and return books, "
            "maintain the catalog, and subscribe members to availability notices."
        ),
    )

    # FastMCP turns URIs with {placeholders} into templates bound to handler arguments
    for resource in all_resources:
        uri = resource.get("uri_template", resource.get("uri"))
        logger.debug("Registering resource: %s with URI: %s", resource["name"], uri)
        mcp.resource(
            uri=uri,
            name=resource["name"],
            description=resource["description"],
            mime_type=resource["mime_type"],
        )(resource["handler"])

    logger.info("Registered %d resources", len(all_resources))

    for tool in all_tools:
        logger.debug("Registering tool: %s", tool["name"])
        mcp.tool(
            name=tool["name"],
            description=tool["description"],
        )(tool["handler"])

    logger.info("Registered %d tools", len(all_tools))
    return mcp


def run_stdio_server(mcp: FastMCP) -> None:
    """Run the server on stdio; logs go to stderr to keep stdout clean."""
    config = get_config()
    logger.info("Starting %s v%s on stdio transport", config.server_name, config.server_version)

    if config.debug:
        logger.debug("Debug mode enabled - verbose protocol logging active")
    else:
        logging.getLogger("fastmcp").setLevel(logging.WARNING)

    def signal_handler(signum: int, _frame: Any) -> None:
        logger.info("Received signal %s, initiating shutdown...", signum)
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        logger.info("MCP Server ready and waiting for connections...")
        mcp.run(transport="stdio")
    except Exception:
        logger.exception("Fatal error in MCP server")
        sys.exit(1)


def main() -> None:
    """Entry point for ``lending-library-mcp``."""
    config = get_config()
    logging.basicConfig(
        level=config.effective_log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    try:
        logger.info("=" * 60)
        logger.info("Lending Library MCP Server")
        logger.info("Version: %s", config.server_version)
        logger.info("Transport: %s", config.transport)
        logger.info("Debug Mode: %s", config.debug)
        logger.info("=" * 60)

        if config.seed_demo_data:
            seed_library(get_library())

        run_stdio_server(create_server())

    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception:
        logger.exception("Failed to start MCP server")
        sys.exit(1)


if __name__ == "__main__":
    main()
