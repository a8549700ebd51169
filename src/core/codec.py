"""Text <-> value translation for JSON data.

parse() turns JSON text into plain Python values (None, int, float, bool,
str, list, dict) and serialize() renders them back in the canonical compact
form used as cache keys. Parse errors are returned as ParseFailure, not
raised.

Numbers are doubles. parse() stores integral values below 1e21 as int and
overflowing values as None, so the C encoder behind serialize() emits the
canonical text without a Python-level walk of the value.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Literal, Union

JSONType = Literal["null", "number", "boolean", "string", "array", "object"]

# None | int | float | bool | str | list | dict
Value = Any

# Integral doubles at or above this magnitude use exponent notation.
_EXPONENT_THRESHOLD = 1e21


@dataclass(frozen=True, slots=True)
class ParseFailure:
    reason: str


def _reject_constant(name: str) -> Value:
    # NaN / Infinity / -Infinity are not JSON
    raise ValueError(f"Invalid JSON literal: {name}")


def _number(raw: str) -> Union[int, float, None]:
    x = float(raw)
    if not math.isfinite(x):
        # 1e400 and friends have no JSON literal
        return None
    if x.is_integer() and abs(x) < _EXPONENT_THRESHOLD:
        return int(x)
    return x


_decoder = json.JSONDecoder(
    parse_float=_number,
    parse_int=_number,
    parse_constant=_reject_constant,
)


def parse(text: str) -> Union[Value, ParseFailure]:
    if not isinstance(text, str):
        return ParseFailure(f"Expected text, got {type(text).__name__}")
    try:
        return _decoder.decode(text)
    except ValueError as e:
        # json.JSONDecodeError is a ValueError subclass
        return ParseFailure(str(e))
    except RecursionError:
        return ParseFailure("JSON nesting too deep")


def format_number(x: float) -> str:
    """Render a double the way JavaScript's Number#toString does.

    Fixed notation for magnitudes in [1e-6, 1e21), exponent notation
    (``1e-7``, ``1.5e+21``) outside it, using the shortest digits that
    round-trip. Non-finite values have no JSON literal and print as null.
    """
    x = float(x)
    if not math.isfinite(x):
        return "null"
    if x == 0:
        return "0"

    sign = "-" if x < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(x))).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    exponent += len(digit_tuple) - len(digits)

    k = len(digits)
    # value == 0.<digits> * 10**n
    n = k + exponent

    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * (-n) + digits

    e = n - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"


def serialize(value: Value) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def classify(value: Value) -> JSONType:
    # bool before number: bool is an int subclass
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    raise TypeError(f"Not a JSON value: {type(value).__name__}")
