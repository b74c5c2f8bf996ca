"""Render values as text, with exact decimal output for numbers."""

from decimal import Decimal
from typing import Any


def to_string(value: Any) -> str:
    """Convert a value to its textual form.

    Floats go through their shortest round-tripping representation and are
    printed as plain decimals, so ``1.50`` renders as ``"1.5"`` and ``1e21``
    as ``"1000000000000000000000"``. ``Decimal`` values are printed the same
    way. Everything else uses ``str()``.
    """
    if isinstance(value, float):
        return _format_decimal(Decimal(repr(value)))
    if isinstance(value, Decimal):
        return _format_decimal(value)
    return str(value)


def _format_decimal(value: Decimal) -> str:
    if not value.is_finite():
        return str(value)
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text
