"""Number formatting and parsing rules shared by the till."""

from __future__ import annotations

import math
import re

_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_RE = re.compile(r"[+-]?\d+")
_SPECIAL_FLOATS = frozenset({"inf", "+inf", "-inf", "nan"})

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def format_number(value: float | int) -> str:
    """Render a number compactly: integers as-is, floats with six significant digits."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return "%g" % value


def parse_number(text: str) -> float:
    """Parse a decimal number, ignoring surrounding whitespace.

    Raises ValueError when the text is not a plain decimal number or overflows.
    """
    stripped = text.strip()
    if stripped in _SPECIAL_FLOATS:
        return float(stripped)
    if not _FLOAT_RE.fullmatch(stripped):
        raise ValueError(f"not a number: {text!r}")
    value = float(stripped)
    if math.isinf(value):
        raise ValueError(f"number out of range: {text!r}")
    return value


def parse_int(text: str) -> int:
    """Parse a base-10 32-bit integer, ignoring surrounding whitespace.

    Raises ValueError when the text is not an integer or does not fit.
    """
    stripped = text.strip()
    if not _INT_RE.fullmatch(stripped):
        raise ValueError(f"not an integer: {text!r}")
    value = int(stripped)
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value