import math

import pytest

from cobfield.scinote import EcvtResult, ecvt, scinotation


def test_ecvt_pinned_example():
    result = ecvt(1234.5, 7)
    assert result == EcvtResult("+123450", 4)


def test_ecvt_negative_sign_and_digit_count():
    result = ecvt(-0.5, 6)
    assert result.sign == "-"
    assert len(result.digits) == 5
    assert result.digits.startswith("5")


def test_ecvt_negative_zero_keeps_sign():
    result = ecvt(-0.0, 4)
    assert result.sign == "-"
    assert set(result.digits) == {"0"}


@pytest.mark.parametrize("value", [1.0, 0.00123, -987654.321, 3.14159, 6.02e23])
def test_ecvt_round_trip(value):
    result = ecvt(value, 8)
    reconstructed = float(result.sign + "0." + result.digits) * 10 ** result.exponent
    assert math.isclose(reconstructed, value, rel_tol=1e-6)


def test_ecvt_rejects_bad_width_and_non_finite():
    with pytest.raises(ValueError):
        ecvt(1.0, 0)
    with pytest.raises(ValueError):
        ecvt(math.nan, 5)


def test_scinotation_pinned_example():
    result = scinotation(1234.5, 12)
    assert result.text == "+1.23450E+03"


@pytest.mark.parametrize("value", [1234.5, -0.00123, 5e-7, 987654.0, 1e300, 42.0])
@pytest.mark.parametrize("width", [9, 12, 16])
def test_scinotation_invariants(value, width):
    result = scinotation(value, width)
    assert len(result.text) == width
    assert result.text[result.e_offset - 1] == "E"
    assert result.text[0] in "+-"
    significant = width - 6
    assert math.isclose(float(result.text), value, rel_tol=10 ** (1 - significant))
    assert int(result.text[result.e_offset:]) == result.exponent


@pytest.mark.parametrize("value", [12345.6, 0.00123, -987654.0, 5e-7, 42.0])
def test_scinotation_engineering(value):
    result = scinotation(value, 12, engineering=True)
    assert result.exponent % 3 == 0
    assert len(result.text) == 12
    assert math.isclose(float(result.text), value, rel_tol=1e-5)
    mantissa = result.text[: result.e_offset - 1]
    assert 1 <= abs(float(mantissa)) < 1000


def test_scinotation_long_negative_exponent():
    result = scinotation(1.5e-150, 12)
    assert result.exponent == -150
    assert result.text.endswith("E-150")
    assert len(result.text) == 12
    assert result.text[result.e_offset - 1] == "E"
    assert math.isclose(float(result.text), 1.5e-150, rel_tol=1e-4)


def test_scinotation_three_digit_positive_exponent_has_no_plus():
    result = scinotation(2e150, 12)
    assert result.text.endswith("E150")
    assert result.exponent == 150


def test_scinotation_rounding_carry():
    result = scinotation(9.99999999, 10)
    assert math.isclose(float(result.text), 10.0, rel_tol=1e-9)
    assert result.exponent == 1


def test_scinotation_rejects_small_width():
    with pytest.raises(ValueError):
        scinotation(1.0, 7)


def test_scinotation_rejects_non_finite():
    with pytest.raises(ValueError):
        scinotation(math.inf, 12)