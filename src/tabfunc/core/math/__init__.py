"""
Core math modules для tabfunc

Epsilon-константы и численные примитивы для сравнения x-координат.
"""

from tabfunc.core.math.numerical_safeguards import (
    EPSILON,
    MIN_POINTS_COUNT,
    is_close_abs,
    is_outside_domain,
    is_valid_float,
    lerp,
)

__all__ = [
    # Constants
    "EPSILON",
    "MIN_POINTS_COUNT",
    # Checks
    "is_valid_float",
    "is_outside_domain",
    # Epsilon comparisons
    "is_close_abs",
    # Interpolation
    "lerp",
]
