"""MCP tools for reading and changing members of arrays, strings and objects.

Registers 'get_member', 'set_member', 'remove_member' and 'exists'.
Array and string members are addressed by integer index, object members
by key. Mutating tools return the canonical text of the new value.
"""

from __future__ import annotations

from typing import Optional

from mcp.server.fastmcp import FastMCP

from config import CACHE_TTL
from core.facade import Facade


def register(mcp: FastMCP, *, facade: Optional[Facade] = None) -> None:
    ops = facade or Facade.from_ttl(CACHE_TTL)

    @mcp.tool(name="get_member")
    def get_member(json: str = "{}", member: str = "a") -> str:
        """Return member `member` of `json`.

        Missing keys and out-of-range indexes give "null". Scalars are
        returned unchanged. Returns "" if `json` is not valid JSON.
        """
        return ops.get_member(json, member)

    @mcp.tool(name="set_member")
    def set_member(json: str = "{}", member: str = "a", value: str = "{}") -> str:
        """Set member `member` of `json` to the JSON value `value`.

        Arrays grow as needed (gaps become null); negative or non-numeric
        array indexes leave the array unchanged. Scalars are returned
        unchanged. Returns "" if `json` or `value` is not valid JSON.
        """
        return ops.set_member(json, member, value)

    @mcp.tool(name="remove_member")
    def remove_member(json: str = "{}", member: str = "a") -> str:
        """Remove member `member` of `json`.

        Removing the first or last array element shortens the array; any
        other index is replaced with null so remaining indexes stay put.
        """
        return ops.remove_member(json, member)

    @mcp.tool(name="exists")
    def exists(json: str = "{}", member: str = "a") -> bool:
        """Whether `json` has member `member`."""
        return ops.exists(json, member)
