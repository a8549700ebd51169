"""MCP tools that describe a JSON value without changing it.

Registers 'as_string', 'as_boolean' and 'get_type'.
"""

from __future__ import annotations

from typing import Optional

from mcp.server.fastmcp import FastMCP

from config import CACHE_TTL
from core.facade import Facade


def register(mcp: FastMCP, *, facade: Optional[Facade] = None) -> None:
    ops = facade or Facade.from_ttl(CACHE_TTL)

    @mcp.tool(name="as_string")
    def as_string(json: str = '""') -> str:
        """Render a JSON value as display text.

        Strings come back unquoted; null, numbers and booleans as their
        literal text; arrays and objects as canonical JSON.
        Returns "" if the input is not valid JSON.
        """
        return ops.as_display_string(json)

    @mcp.tool(name="as_boolean")
    def as_boolean(json: str = "true") -> bool:
        """Truthiness of a JSON value.

        Numbers and booleans are true when nonzero; strings and arrays when
        non-empty; objects when they have at least one key; null is false.
        Invalid JSON is false.
        """
        return ops.as_boolean(json)

    @mcp.tool(name="get_type")
    def get_type(json: str = "{}") -> str:
        """Return one of: null, number, boolean, string, array, object ("" if invalid)."""
        return ops.classify(json)
