"""MCP tools that bring text into the JSON cache.

Registers 'parse_json', which canonicalizes JSON text, and 'from_string',
which wraps arbitrary text as a JSON string value.
"""

from __future__ import annotations

from typing import Optional

from mcp.server.fastmcp import FastMCP

from config import CACHE_TTL
from core.facade import Facade


def register(mcp: FastMCP, *, facade: Optional[Facade] = None) -> None:
    ops = facade or Facade.from_ttl(CACHE_TTL)

    @mcp.tool(name="parse_json")
    def parse_json(json: str = "{}") -> str:
        """Parse JSON text and return its canonical form.

        The returned text is the cache key for the value and can be passed
        to every other tool. Returns "" if the input is not valid JSON.
        """
        return ops.parse_json(json)

    @mcp.tool(name="from_string")
    def from_string(text: str = "Hello World") -> str:
        """Encode plain text as a JSON string value (quoted and escaped)."""
        return ops.from_string(text)
