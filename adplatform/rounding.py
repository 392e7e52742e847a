"""Rounding of floats to a number of decimal digits."""

from __future__ import annotations

import math


def _round_half_away(value: float) -> float:
    if not math.isfinite(value):
        return value
    truncated = float(math.trunc(value))
    if abs(value - truncated) >= 0.5:
        truncated += math.copysign(1.0, value)
    return truncated


def round_to_digits(value: float, digits: int) -> float:
    """Round ``value`` to ``digits`` decimals, halves away from zero."""
    factor = 10.0**digits
    return _round_half_away(value * factor) / factor