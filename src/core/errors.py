from __future__ import annotations


class JSONCacheError(Exception):
    """Base error for the JSON cache server."""


class TTLConfigError(JSONCacheError):
    """Raised when the cache store is configured with an invalid ttl."""
