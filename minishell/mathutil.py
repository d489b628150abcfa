"""Small numeric helpers."""

from __future__ import annotations

import math


def power(n: float, exponent: int) -> float:
    """Return ``n`` raised to the non-negative integer ``exponent``."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    return n ** exponent if exponent else 1


def int_sqrt(x: float) -> float:
    """Return the square root of ``x`` when it is a perfect square, else 0."""
    if math.isinf(x):
        raise ValueError("cannot take the square root of an infinite value")
    if not x > 0:
        return 0
    root = math.isqrt(math.floor(x))
    return root if root * root == x else 0