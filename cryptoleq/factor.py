"""Probable-prime test and Pollard rho factorisation."""

from __future__ import annotations

from .arith import wrap
from .euclid import gcd

MAX_PRIME_CHECK = 70
_RHO_STEPS = 1_000_000

_LOW_PRIMES = (
    3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71,
    73, 79, 83, 89, 97, 101, 103, 107, 109, 113, 127, 131, 137, 139, 149, 151,
    157, 163, 167, 173, 179, 181, 191, 193, 197, 199, 211, 223, 227, 229, 233,
    239, 241, 251, 257, 263, 269, 271, 277, 281, 283, 293, 307, 311, 313, 317,
    331, 337, 347, 349, 353, 359, 367, 373, 379, 383, 389, 397, 401, 409, 419,
    421, 431, 433, 439, 443, 449, 457, 461, 463, 467, 479, 487, 491, 499, 503,
    509,
)


def is_prime(n: int) -> bool:
    """Tell whether ``n`` is (probably) prime.

    Numbers above the small-prime table are first checked for small odd
    factors; then a Fermat test is made with every base from 2 up to
    ``min(70, n - 1)``. One counts as prime, zero does not.
    """
    n = wrap(n)
    if n == 0:
        return False
    p = n - 1
    limit = min(MAX_PRIME_CHECK, p)
    if n > _LOW_PRIMES[-1] and any(n % q == 0 for q in _LOW_PRIMES):
        return False
    return all(pow(base, p, n) == 1 for base in range(2, limit))


def _step(x: int, m: int) -> int:
    return (x * x % m + 1) % m


def _rho(n: int) -> int:
    """Find a non-trivial divisor of the odd composite ``n``."""
    seed = 1
    while True:
        seed += 1
        x = y = seed
        d = 1
        for _ in range(_RHO_STEPS):
            if d != 1:
                break
            x = _step(x, n)
            y = _step(_step(y, n), n)
            d = gcd(abs(x - y), n)
            if d == 1:
                d = gcd(x, n)
        if d not in (1, n):
            return d


def factorize(n: int) -> list[int]:
    """Return the prime factors of ``n`` in ascending order, with repeats."""
    n = wrap(n)
    if n == 0:
        raise ValueError("cannot factorize zero")
    factors: list[int] = []
    while not is_prime(n) and n % 2 == 0:
        factors.append(2)
        n //= 2
    if is_prime(n):
        factors.append(n)
    else:
        d = _rho(n)
        factors.extend(factorize(d))
        factors.extend(factorize(n // d))
    return sorted(factors)


def factor_one(n: int) -> int:
    """Return one divisor of ``n``: ``n`` itself when prime, 2 when even."""
    n = wrap(n)
    if is_prime(n):
        return n
    if n == 0:
        raise ValueError("cannot factorize zero")
    if n % 2 == 0:
        return 2
    return _rho(n)