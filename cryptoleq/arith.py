"""Fixed-width unsigned big-number helpers.

All arithmetic in the package works on unsigned integers of
``UNUMBER_BITS`` bits. Python integers carry the values, and
:func:`wrap` brings a result back into range the way a fixed-width
register would.
"""

from __future__ import annotations

UNUMBER_BITS = 4096
UNUMBER_MODULUS = 1 << UNUMBER_BITS
UNUMBER_MAX = UNUMBER_MODULUS - 1

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_DECIMAL = frozenset("0123456789")


def wrap(x: int) -> int:
    """Reduce ``x`` into the unsigned range ``[0, 2**UNUMBER_BITS)``.

    Negative values wrap around, so ``wrap(-1)`` is the largest value.
    """
    return x & UNUMBER_MAX


def parse_decimal(s: str) -> int:
    """Read a decimal number from ``s``.

    Characters other than decimal digits are skipped, an empty string
    gives zero, and the result wraps at the fixed width.
    """
    value = 0
    for ch in s:
        if ch in _DECIMAL:
            value = value * 10 + (ord(ch) - ord("0"))
    return wrap(value)


def to_str(x: int, base: int = 10) -> str:
    """Render the unsigned value of ``x`` in ``base`` (2 to 36)."""
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"unsupported base {base}")
    value = wrap(x)
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, base)
        digits.append(_DIGITS[rem])
    return "".join(reversed(digits))