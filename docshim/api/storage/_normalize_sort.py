"""Normalize a free-form sort specification into driver sort pairs."""

from collections.abc import Mapping
from typing import Any

from pymongo import ASCENDING

from ..convert import to_int
from .errors import InvalidArgumentError


def _normalize_sort(value: Any) -> list[tuple[str, Any]]:
    """Turn a sort option into an ordered list of ``(field, direction)`` pairs.

    Accepts a mapping (``{"name": 1, "age": -1}``), a sequence of pairs, or a
    bare field name meaning ascending. ``None`` means no sort. Directions
    given as strings or floats are coerced with ``to_int``; other direction
    values (e.g. ``{"$meta": "textScore"}``) are passed to the driver
    untouched.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [(value, ASCENDING)]
    if isinstance(value, Mapping):
        pairs = list(value.items())
    else:
        try:
            pairs = [tuple(pair) for pair in value]
        except TypeError as e:
            raise InvalidArgumentError(f"sort must be a mapping or a list of pairs (found: {value!r})") from e

    result: list[tuple[str, Any]] = []
    for pair in pairs:
        if len(pair) != 2:
            raise InvalidArgumentError(f"sort entries must be (field, direction) pairs (found: {pair!r})")
        field, direction = pair
        if isinstance(direction, (str, float)):
            direction = to_int(direction)
        result.append((str(field), direction))
    return result
