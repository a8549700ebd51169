"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants (cache ttl, log level, server name).
"""

from __future__ import annotations

import os


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


SERVER_NAME = "json-cache-mcp"

# Number of cache accesses an untouched entry survives.
# Non-positive values are rejected by CacheStore at startup.
CACHE_TTL = _env_int("CACHE_TTL", 16)

# Logs go to stderr; stdout carries the stdio transport
LOG_LEVEL = _env_str("LOG_LEVEL", "WARNING").upper()
