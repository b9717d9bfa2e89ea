"""Module for miscellaneous multi-use functions"""

__all__ = ['sign', 'truncate']

import math


def sign(value: float) -> float:
    """-1.0 if the sign bit of value is set (including -0.0), else 1.0"""
    return math.copysign(1.0, value)


def truncate(value: float) -> int:
    """
    Drops the fractional part of a value, rounding toward zero.

    Args:
        value:
            The float to truncate

    Returns:
        int
    """
    return int(math.trunc(value))
