import struct

import pytest

from cobfield.numconv import (
    LONG_MAX,
    LONG_MIN,
    ULONG_MAX,
    pic9,
    picx,
    to_double,
    to_float,
    to_long,
    to_ulong,
)


def test_to_long_plain_and_signed():
    assert to_long("123") == 123
    assert to_long("-42  ") == -42
    assert to_long("+7") == 7


def test_to_long_leading_whitespace():
    assert to_long("  15") == 15


def test_to_long_rejects_trailing_garbage():
    with pytest.raises(ValueError):
        to_long("12x")


def test_to_long_rejects_empty():
    with pytest.raises(ValueError):
        to_long("")


def test_to_long_all_blanks_is_zero():
    assert to_long("   ") == 0


def test_to_long_range():
    assert to_long(str(LONG_MAX)) == LONG_MAX
    assert to_long(str(LONG_MIN)) == LONG_MIN
    with pytest.raises(ValueError):
        to_long(str(LONG_MAX + 1))


def test_to_ulong_range_and_wrap():
    assert to_ulong(str(ULONG_MAX)) == ULONG_MAX
    assert to_ulong("-1") == ULONG_MAX
    with pytest.raises(ValueError):
        to_ulong(str(ULONG_MAX + 1))


def test_to_double_values():
    assert to_double("2.5") == 2.5
    assert to_double(" -0.25 ") == -0.25
    assert to_double("1e3") == float("1e3")


def test_to_double_rejects_overflow_and_underflow():
    with pytest.raises(ValueError):
        to_double("1e400")
    with pytest.raises(ValueError):
        to_double("1e-400")


def test_to_double_rejects_garbage():
    with pytest.raises(ValueError):
        to_double("1.5 x")
    with pytest.raises(ValueError):
        to_double("1e")


def test_to_float_is_single_precision():
    value = to_float("0.1")
    assert struct.unpack("f", struct.pack("f", value))[0] == value
    assert abs(value - 0.1) < 1e-7


def test_to_float_overflow_is_infinite():
    assert to_float("1e300") == float("inf")


def test_pic9():
    assert pic9("0123XYZ", 4) == "0123"
    with pytest.raises(ValueError):
        pic9("12a4", 4)
    with pytest.raises(ValueError):
        pic9("12", 4)


def test_picx():
    assert picx("HELLO WORLD", 5) == "HELLO"
    with pytest.raises(ValueError):
        picx("AB", 5)