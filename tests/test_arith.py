import pytest

from cryptoleq.arith import (
    UNUMBER_BITS,
    UNUMBER_MAX,
    UNUMBER_MODULUS,
    parse_decimal,
    to_str,
    wrap,
)


def test_wrap_keeps_values_in_range():
    assert wrap(0) == 0
    assert wrap(12345) == 12345
    assert wrap(UNUMBER_MAX) == UNUMBER_MAX


def test_wrap_negative_one_is_all_ones():
    assert wrap(-1) == UNUMBER_MAX
    assert wrap(-1).bit_length() == UNUMBER_BITS


def test_wrap_overflow_wraps_to_zero():
    assert wrap(UNUMBER_MAX + 1) == 0
    assert wrap(UNUMBER_MODULUS + 7) == 7


@pytest.mark.parametrize("a,b", [(3, 10), (0, 1), (999, 1000)])
def test_wrap_subtraction_then_addition_round_trips(a, b):
    diff = wrap(a - b)
    assert diff > a
    assert wrap(diff + b) == a


def test_parse_decimal_plain():
    assert parse_decimal("1234567890") == 1234567890


def test_parse_decimal_skips_non_digits():
    assert parse_decimal("1,234") == 1234
    assert parse_decimal("-42") == 42
    assert parse_decimal(" 7x8 ") == 78


def test_parse_decimal_empty_is_zero():
    assert parse_decimal("") == 0
    assert parse_decimal("abc") == 0


def test_parse_decimal_wraps_at_width():
    big = str(UNUMBER_MODULUS + 5)
    assert parse_decimal(big) == 5


def test_to_str_zero():
    assert to_str(0) == "0"
    assert to_str(0, 2) == "0"


def test_to_str_hex_and_binary():
    assert to_str(255, 16) == "ff"
    assert to_str(5, 2) == "101"


@pytest.mark.parametrize("value", [1, 9, 10, 123456789, 2**200 + 17, UNUMBER_MAX])
def test_decimal_round_trip(value):
    assert parse_decimal(to_str(value)) == value


@pytest.mark.parametrize("base", [2, 8, 10, 16, 36])
def test_round_trip_through_int(base):
    value = 987654321987654321
    assert int(to_str(value, base), base) == value


def test_to_str_of_negative_shows_wrapped_value():
    assert to_str(-1) == str(UNUMBER_MAX)


@pytest.mark.parametrize("base", [0, 1, 37])
def test_to_str_rejects_bad_base(base):
    with pytest.raises(ValueError):
        to_str(10, base)