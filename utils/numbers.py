"""
Numeric coercion helpers for loosely-typed cart and catalog payloads.
"""

import math
from typing import Any


def to_number(value: Any, fallback: float | None = None) -> float | None:
    """
    Coerce a payload value to a finite float.

    Accepts ints, floats, Decimals and numeric strings (surrounding whitespace
    is ignored). Missing values, booleans, empty or non-numeric strings, NaN and
    infinities all yield the fallback.

    Examples:
        >>> to_number("12500.5", 0)
        12500.5
        >>> to_number("abc", 0)
        0
        >>> to_number(float("inf")) is None
        True
    """
    if value is None or isinstance(value, bool):
        return fallback

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return fallback

    try:
        number = float(value)
    except (TypeError, ValueError):
        return fallback

    return number if math.isfinite(number) else fallback


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2).

    Python's round() uses banker's rounding (2.5 -> 2), which is not how
    shoppers expect prices and percentages to round.
    """
    return math.floor(value + 0.5)
