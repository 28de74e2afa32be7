"""
Numeric helpers shared by every scoring stage.

All rounding is half-up (2.5 -> 3, 0.125 -> 0.13), matching the way the
scores are displayed to investigators. Python's built-in round() is
banker's rounding and would drift by one on ties.
"""

from __future__ import annotations

import math


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def ratio(count: float, total: float) -> float:
    """count / total, or 0.0 when total is zero."""
    if not total:
        return 0.0
    return count / total


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round half-up to `ndigits` decimals. Values too large to scale pass through."""
    factor = 10 ** ndigits
    scaled = value * factor + 0.5
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled) / factor


def round_score(value: float) -> int:
    """Round a 0-100 score to the nearest integer (half-up)."""
    return int(round_half_up(value))
