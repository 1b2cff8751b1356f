import pytest

from cryptoleq.euclid import gcd, invert

MODULI = [7, 77, 509 * 503, 2**61 - 1, 2**127 - 1]


@pytest.mark.parametrize("mod", MODULI)
def test_invert_gives_inverse(mod):
    for x in (2, 3, 10, 499, 12345):
        if gcd(x, mod) != 1:
            continue
        r = invert(x, mod)
        assert 0 <= r < mod
        assert (x * r) % mod == 1


def test_invert_not_coprime_returns_none():
    assert invert(3 * 5, 3 * 7) is None
    assert invert(0, 77) is None


def test_invert_reduces_large_argument():
    mod = 509
    x = 3 + 4 * mod
    assert invert(x, mod) == invert(3, mod)


def test_invert_zero_modulus_raises():
    with pytest.raises(ValueError):
        invert(5, 0)


def test_gcd_with_zero():
    assert gcd(42, 0) == 42
    assert gcd(0, 42) == 42


def test_gcd_symmetric_and_divides():
    for x, y in [(84, 126), (509 * 3, 509 * 7), (2**61 - 1, 2**31 - 1)]:
        g = gcd(x, y)
        assert g == gcd(y, x)
        assert x % g == 0
        assert y % g == 0


def test_gcd_common_prime_factor():
    p, q, r = 503, 499, 509
    assert gcd(p * r, q * r) == r
    assert gcd(p, q) == 1