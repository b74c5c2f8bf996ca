"""Permissive value coercion helpers."""

from .to_int import to_int
from .to_string import to_string

__all__ = ["to_int", "to_string"]
