"""Server bootstrap for the JSON cache MCP service.

Creates the FastMCP instance, builds one shared Facade (and its cache
store) from configuration, registers the tools and starts the MCP server
(stdio transport).
"""

from mcp.server.fastmcp import FastMCP

from config import CACHE_TTL, LOG_LEVEL, SERVER_NAME
from core.facade import Facade
from core.logging import configure_logging

from tools.inspect_json import register as register_inspect_json
from tools.listing import register as register_listing
from tools.members import register as register_members
from tools.parse_json import register as register_parse_json

mcp = FastMCP(SERVER_NAME)


def register_tools() -> None:
    # One store for all tools so keys returned by one tool hit in another
    facade = Facade.from_ttl(CACHE_TTL)

    register_parse_json(mcp, facade=facade)
    register_inspect_json(mcp, facade=facade)
    register_members(mcp, facade=facade)
    register_listing(mcp, facade=facade)


register_tools()


def main() -> None:
    configure_logging(LOG_LEVEL)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
