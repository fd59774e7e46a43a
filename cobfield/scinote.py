"""Scientific and engineering notation for fixed-width numeric fields."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class EcvtResult:
    """A sign character followed by significant digits, and the decimal point position.

    ``exponent`` is the position of the decimal point relative to the
    first digit, so the value is ``0.<digits> * 10**exponent``.
    """

    text: str
    exponent: int

    @property
    def sign(self) -> str:
        return self.text[:1]

    @property
    def digits(self) -> str:
        return self.text[1:]


@dataclass(frozen=True)
class SciNotation:
    """A formatted value, its exponent and the 1-based offset of its 'E' (0 if none)."""

    text: str
    exponent: int
    e_offset: int


def _ecvt_digits(value: float, ndigits: int) -> tuple[str, int, bool]:
    """Return (digits, decimal point position, negative) for *value*."""
    if not math.isfinite(value):
        raise ValueError(f"cannot format non-finite value {value!r}")
    negative = math.copysign(1.0, value) < 0
    if value == 0.0:
        return "0" * ndigits, 1, negative
    formatted = f"{abs(value):.{max(ndigits, 1) - 1}e}"
    mantissa, exponent = formatted.split("e")
    return mantissa.replace(".", "")[:ndigits], int(exponent) + 1, negative


def ecvt(value: float, width: int) -> EcvtResult:
    """Round *value* to ``width - 1`` significant digits, preceded by a sign."""
    if width < 1:
        raise ValueError("width must be at least 1")
    digits, decpt, negative = _ecvt_digits(value, width - 1)
    return EcvtResult(("-" if negative else "+") + digits, decpt)


def scinotation(value: float, width: int, engineering: bool = False) -> SciNotation:
    """Format *value* as ``±d.dddE±nn`` filling exactly *width* characters.

    With *engineering* the exponent is made a multiple of three and up to
    three digits precede the decimal point. Exponents beyond ±999 fill
    the field with asterisks.
    """
    if width < 8:
        raise ValueError("width must be at least 8")
    digits = width - 5
    significant, decpt, negative = _ecvt_digits(value, digits - 1)
    sign = "-" if negative else "+"

    expon = decpt - 1
    shift = 0
    if engineering:
        shift = expon % 3
        expon -= shift

    whole = significant.ljust(shift + 1, "0")
    mantissa = (sign + whole[: shift + 1] + "." + whole[shift + 1:])[: digits + 1]

    if not -999 <= expon <= 999:
        return SciNotation("*" * width, expon, 0)
    if expon >= -99:
        if 0 <= expon < 100:
            exp_text = f"E+{expon:02d}"
        else:
            exp_text = f"E{expon:03d}"
        return SciNotation(mantissa + exp_text, expon, digits + 2)
    exp_text = f"E{expon:04d}"
    return SciNotation(mantissa[:digits] + exp_text, expon, digits + 1)