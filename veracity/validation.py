"""
Boundary validation.

The scoring stages trust their inputs. These checks run once, at the
public entry points, so a caller contract violation fails fast with a
message that names the argument instead of surfacing as a confusing
arithmetic error further down.
"""

from __future__ import annotations

import math


def require_text(text: object, name: str = "text") -> str:
    """Return text unchanged, or raise TypeError if it is not a str."""
    if not isinstance(text, str):
        raise TypeError(
            f"{name} must be a str, got {type(text).__name__}"
        )
    return text


def require_duration(duration: object, name: str = "duration_seconds") -> float:
    """
    Validate an elapsed recording duration in seconds.

    Raises:
        TypeError: not an int/float (bool is rejected too).
        ValueError: negative, NaN, or infinite.
    """
    if isinstance(duration, bool) or not isinstance(duration, (int, float)):
        raise TypeError(
            f"{name} must be a number of seconds, got {type(duration).__name__}"
        )
    if math.isnan(duration) or math.isinf(duration):
        raise ValueError(f"{name} must be finite, got {duration!r}")
    if duration < 0:
        raise ValueError(f"{name} must be non-negative, got {duration!r}")
    return float(duration)
