"""MCP tools that report the size and contents of a JSON container.

Registers 'length', 'keys' and 'values'.
"""

from __future__ import annotations

from typing import Optional, Union

from mcp.server.fastmcp import FastMCP

from config import CACHE_TTL
from core.facade import Facade


def register(mcp: FastMCP, *, facade: Optional[Facade] = None) -> None:
    ops = facade or Facade.from_ttl(CACHE_TTL)

    @mcp.tool(name="length")
    def length(json: str = "{}") -> Union[int, str]:
        """Element count of an array, character count of a string or key
        count of an object. Returns "" for other values or invalid JSON.
        """
        return ops.length(json)

    @mcp.tool(name="keys")
    def keys(json: str = "{}") -> str:
        """Keys of an object (or indexes of a string) as a JSON array."""
        return ops.keys(json)

    @mcp.tool(name="values")
    def values(json: str = "{}") -> str:
        """Values of an object (or characters of a string) as a JSON array."""
        return ops.values(json)
