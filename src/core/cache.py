"""Content-addressed in-memory cache with access-count aging.

Entries are keyed by the canonical serialization of their value. Every
get()/cache() call ages all entries by one step and evicts those at end of
life; a successful lookup restores the touched entry to the full ttl.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from core.codec import Value, serialize
from core.errors import TTLConfigError

logger = logging.getLogger(__name__)


class _NoValue:
    def __repr__(self) -> str:
        return "NO_VALUE"


# Distinct from None, which is the JSON null value.
NO_VALUE = _NoValue()

Hit = Tuple[str, Value]


@dataclass(slots=True)
class CacheEntry:
    # Stores value + remaining number of accesses before eviction
    value: Value
    remaining: int


class CacheStore:
    def __init__(self, *, ttl: int) -> None:
        if isinstance(ttl, bool) or not isinstance(ttl, int) or ttl <= 0:
            raise TTLConfigError(f"ttl must be a positive integer, got {ttl!r}")
        self._ttl = ttl
        self._store: Dict[str, CacheEntry] = {}

    @property
    def ttl(self) -> int:
        return self._ttl

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def _sweep(self) -> None:
        # One global aging pass; entries that would reach 0 are dropped
        expired = []
        for key, entry in self._store.items():
            if entry.remaining <= 1:
                expired.append(key)
            else:
                entry.remaining -= 1

        for key in expired:
            del self._store[key]

        if expired:
            logger.debug("Evicted %d cache entries", len(expired))

    def _lookup(self, key: str) -> Optional[Hit]:
        entry = self._store.get(key)
        if entry is None:
            return None
        entry.remaining = self._ttl
        return key, entry.value

    def get(self, key: str) -> Optional[Hit]:
        self._sweep()
        return self._lookup(key)

    def cache(self, value: Value) -> Optional[Hit]:
        if value is NO_VALUE:
            return None

        key = serialize(value)
        self._sweep()

        # Single sweep per call: look up without aging again
        hit = self._lookup(key)
        if hit is not None:
            return hit

        self._store[key] = CacheEntry(value=value, remaining=self._ttl)
        logger.debug("Cached new entry (%d chars)", len(key))
        return key, value

    def remove(self, key: str) -> bool:
        existed = self._store.pop(key, None) is not None
        if existed:
            logger.debug("Invalidated cache entry (%d chars)", len(key))
        return existed
