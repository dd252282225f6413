"""
Score helpers: percentage conversion, clamping, most-frequent selection.
"""

import math
from typing import Iterable, Optional


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def to_percent(value: float) -> int:
    """Scale a 0-1 value to an integer 0-100, rounding halves up."""
    if not math.isfinite(value):
        return 0
    return round_half_up(clamp(value) * 100)


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def most_common(values: Iterable[str], default: str = "") -> str:
    """
    Most frequent non-empty value.

    Ties go to the value seen first, so the result depends only on input order.
    """
    counts = {}
    for v in values:
        if v:
            counts[v] = counts.get(v, 0) + 1
    best: Optional[str] = None
    for v, n in counts.items():
        if best is None or n > counts[best]:
            best = v
    return best if best is not None else default
