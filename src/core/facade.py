"""Accessor/mutator operations over JSON text.

Every operation takes JSON text, resolves it to a value through the
content-addressed CacheStore and, when the result is itself a JSON value,
registers it again so the returned text is a live cache key.

Operations never raise: malformed JSON yields "" for text results and
False for boolean results.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Union

from core.cache import NO_VALUE, CacheStore, Hit
from core.codec import ParseFailure, Value, classify, format_number, parse

logger = logging.getLogger(__name__)

NO_RESULT = ""

# parseInt-style prefix: optional sign then ASCII digits, rest ignored
_INDEX_RE = re.compile(r"\s*([+-]?[0-9]+)")

# Largest valid array index (2**32 - 2); larger members are plain keys
MAX_ARRAY_INDEX = 2**32 - 2

# set_member may append at most this many elements (gap plus the new one)
MAX_ARRAY_GROWTH = 65536


def parse_index(member: str) -> Optional[int]:
    m = _INDEX_RE.match(member or "")
    if not m:
        return None
    return int(m.group(1))


def _valid_index(idx: Optional[int], size: int) -> bool:
    return idx is not None and 0 <= idx < size


class Facade:
    def __init__(self, store: CacheStore) -> None:
        self._store = store

    @classmethod
    def from_ttl(cls, ttl: int) -> "Facade":
        return cls(CacheStore(ttl=ttl))

    @property
    def store(self) -> CacheStore:
        return self._store

    # ------------ resolution ------------
    def resolve(self, text: str) -> Optional[Hit]:
        """Resolve JSON text to a (canonical key, value) pair.

        A cached key hits directly. Otherwise the text is parsed and the
        value registered, so the returned key may differ from `text` when
        the input was not canonical. Returns None for malformed JSON.
        """
        hit = self._store.get(text)
        if hit is not None:
            return hit

        parsed = parse(text)
        if isinstance(parsed, ParseFailure):
            logger.debug("Could not parse JSON input: %s", parsed.reason)
            return None
        return self._cache(parsed)

    def _cache(self, value: Value) -> Optional[Hit]:
        try:
            return self._store.cache(value)
        except RecursionError:
            # nesting beyond the encoder's recursion limit
            logger.warning("JSON value nested too deeply to serialize")
            return None

    def _register(self, value: Value) -> str:
        if value is NO_VALUE:
            # absent member: fall back to the canonical null
            value = None
        hit = self._cache(value)
        if hit is None:
            return NO_RESULT
        return hit[0]

    # ------------ parse ------------
    def parse_json(self, json: str) -> str:
        hit = self.resolve(json)
        if hit is None:
            return NO_RESULT
        return hit[0]

    def from_string(self, text: str) -> str:
        return self._register(str(text))

    # ------------ type ------------
    def as_display_string(self, json: str) -> str:
        hit = self.resolve(json)
        if hit is None:
            return NO_RESULT
        key, v = hit

        kind = classify(v)
        if kind == "null":
            return "null"
        if kind == "boolean":
            return "true" if v else "false"
        if kind == "number":
            return format_number(v)
        if kind == "string":
            return v
        return key

    def as_boolean(self, json: str) -> bool:
        hit = self.resolve(json)
        if hit is None:
            return False
        v = hit[1]

        kind = classify(v)
        if kind == "null":
            return False
        if kind in ("boolean", "number"):
            return v != 0
        return len(v) != 0

    def classify(self, json: str) -> str:
        hit = self.resolve(json)
        if hit is None:
            return NO_RESULT
        return classify(hit[1])

    # ------------ members ------------
    def get_member(self, json: str, member: str) -> str:
        hit = self.resolve(json)
        if hit is None:
            return NO_RESULT
        key, v = hit

        kind = classify(v)
        if kind in ("array", "string"):
            idx = parse_index(member)
            found = v[idx] if _valid_index(idx, len(v)) else NO_VALUE
        elif kind == "object":
            found = v.get(member, NO_VALUE)
        else:
            return key

        return self._register(found)

    def set_member(self, json: str, member: str, value: str) -> str:
        hit = self.resolve(json)
        if hit is None:
            return NO_RESULT
        key, v = hit

        kind = classify(v)
        if kind not in ("array", "object"):
            return key

        idx = parse_index(member)
        if kind == "array" and (
            idx is None
            or idx < 0
            or idx > MAX_ARRAY_INDEX
            or idx - len(v) >= MAX_ARRAY_GROWTH
        ):
            return key

        new_value = parse(value)
        if isinstance(new_value, ParseFailure):
            logger.debug("Could not parse member value: %s", new_value.reason)
            return NO_RESULT

        # content address is about to change
        self._store.remove(key)

        if kind == "array":
            updated: Union[List[Value], dict] = list(v)
            if idx >= len(updated):
                updated.extend([None] * (idx - len(updated) + 1))
            updated[idx] = new_value
        else:
            updated = dict(v)
            updated[member] = new_value

        return self._register(updated)

    def remove_member(self, json: str, member: str) -> str:
        hit = self.resolve(json)
        if hit is None:
            return NO_RESULT
        key, v = hit

        kind = classify(v)
        if kind == "object":
            self._store.remove(key)
            updated: Union[List[Value], dict] = dict(v)
            updated.pop(member, None)
            return self._register(updated)

        if kind != "array":
            return key

        self._store.remove(key)
        updated = list(v)
        idx = parse_index(member)
        if _valid_index(idx, len(updated)):
            # ends shift, the middle keeps positions stable
            if idx == 0:
                del updated[0]
            elif idx == len(updated) - 1:
                del updated[-1]
            else:
                updated[idx] = None

        return self._register(updated)

    def exists(self, json: str, member: str) -> bool:
        hit = self.resolve(json)
        if hit is None:
            return False
        v = hit[1]

        kind = classify(v)
        if kind in ("array", "string"):
            return _valid_index(parse_index(member), len(v))
        if kind == "object":
            return member in v
        return False

    # ------------ collections ------------
    def length(self, json: str) -> Union[int, str]:
        hit = self.resolve(json)
        if hit is None:
            return NO_RESULT
        v = hit[1]

        if classify(v) in ("array", "string", "object"):
            return len(v)
        return NO_RESULT

    def keys(self, json: str) -> str:
        hit = self.resolve(json)
        if hit is None:
            return NO_RESULT
        v = hit[1]

        kind = classify(v)
        if kind == "object":
            return self._register(list(v.keys()))
        if kind == "string":
            return self._register([str(i) for i in range(len(v))])
        return self._register([])

    def values(self, json: str) -> str:
        hit = self.resolve(json)
        if hit is None:
            return NO_RESULT
        v = hit[1]

        kind = classify(v)
        if kind == "object":
            return self._register(list(v.values()))
        if kind == "string":
            return self._register(list(v))
        return self._register([])
