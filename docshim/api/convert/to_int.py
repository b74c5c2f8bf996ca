"""Coerce arbitrary values to integers without raising."""

import math
import re
from typing import Any

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def to_int(value: Any) -> int:
    """Convert a value to a 64-bit integer, returning 0 when it cannot.

    Strings are parsed as base-10 integers (optional sign, no surrounding
    whitespace). Floats are truncated toward zero. Any result outside the
    int64 range yields 0. Booleans, non-finite floats and any other type
    yield 0.

    Examples:
        >>> to_int("42")
        42
        >>> to_int("abc")
        0
        >>> to_int(3.9)
        3
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        result = value
    elif isinstance(value, str):
        if not _INT_PATTERN.fullmatch(value):
            return 0
        result = int(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            return 0
        result = int(value)
    else:
        return 0
    if result < _INT64_MIN or result > _INT64_MAX:
        return 0
    return result
