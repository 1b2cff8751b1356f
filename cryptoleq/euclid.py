"""Modular inversion and greatest common divisors."""

from __future__ import annotations

import math


def gcd(x: int, y: int) -> int:
    """Return the greatest common divisor of two non-negative integers.

    ``gcd(x, 0)`` is ``x`` and ``gcd(0, y)`` is ``y``.
    """
    return math.gcd(x, y)


def invert(x: int, mod: int) -> int | None:
    """Return the inverse of ``x`` modulo ``mod``, or ``None`` if none exists.

    The result lies in ``[0, mod)``. A modulus below one is rejected with
    :class:`ValueError`.
    """
    if mod < 1:
        raise ValueError(f"modulus must be positive, got {mod}")
    if math.gcd(x % mod, mod) != 1:
        return None
    return pow(x, -1, mod)