"""
Clamping of control values to an interval.
"""

from typing import TypeVar

# Any ordered numeric type: int, float, numpy scalar
T = TypeVar('T')


def clamp(val: T, under: T, upper: T) -> T:
    """
    Bound a value to [under, upper].

    Values already inside the interval are returned unchanged.

    Args:
        val: Value to bound
        under: Lower bound
        upper: Upper bound

    Returns:
        under if val < under, upper if val > upper, otherwise val
    """
    if under > val:
        return under
    if upper < val:
        return upper
    return val


def clamp_abs(val: T, limit: T) -> T:
    """Bound a value to [-|limit|, |limit|]."""
    limit = abs(limit)
    return clamp(val, -limit, limit)
