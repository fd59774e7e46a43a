"""Strict numeric conversion of text fields and fixed-width PIC extraction."""

from __future__ import annotations

import math
import re
import struct
import sys

LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1
ULONG_MAX = 2**64 - 1

_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_REAL = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _token(pattern: re.Pattern[str], text: str) -> str | None:
    """Return the numeric token of *text*; only trailing blanks may follow it."""
    if not text:
        raise ValueError("empty numeric field")
    match = pattern.match(text)
    if match is None:
        token, rest = None, text
    else:
        token, rest = match.group(1), text[match.end():]
    if rest.lstrip(" "):
        raise ValueError(f"not a number: {text!r}")
    return token


def to_long(text: str) -> int:
    """Convert *text* to a signed 64-bit integer.

    A field of nothing but blanks converts to 0.
    """
    token = _token(_INTEGER, text)
    if token is None:
        return 0
    value = int(token)
    if not LONG_MIN <= value <= LONG_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def to_ulong(text: str) -> int:
    """Convert *text* to an unsigned 64-bit integer.

    A leading minus sign wraps the value modulo 2**64.
    """
    token = _token(_INTEGER, text)
    if token is None:
        return 0
    value = int(token)
    if abs(value) > ULONG_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value % (ULONG_MAX + 1)


def to_double(text: str) -> float:
    """Convert *text* to a float, rejecting overflow and underflow."""
    token = _token(_REAL, text)
    if token is None:
        return 0.0
    value = float(token)
    if token.lstrip("+-")[:1].isalpha():
        return value
    if math.isinf(value):
        raise ValueError(f"value out of range: {text!r}")
    mantissa = re.split("[eE]", token)[0]
    if value == 0.0 and any(ch in "123456789" for ch in mantissa):
        raise ValueError(f"value out of range: {text!r}")
    if 0.0 < abs(value) < sys.float_info.min:
        raise ValueError(f"value out of range: {text!r}")
    return value


def to_float(text: str) -> float:
    """Convert *text* to a value rounded to single precision."""
    value = to_double(text)
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _field(text: str, width: int) -> str:
    if width < 0:
        raise ValueError("negative field width")
    field = text[:width]
    if len(field) < width:
        raise ValueError(f"field of {width} characters runs past the end of the text")
    return field


def pic9(text: str, width: int) -> str:
    """Return the leading PIC 9(width) field of *text*; it must be all digits."""
    field = _field(text, width)
    if not (field.isascii() and (field.isdigit() or not field)):
        raise ValueError(f"not a PIC 9({width}) value: {field!r}")
    return field


def picx(text: str, width: int) -> str:
    """Return the leading PIC X(width) field of *text*."""
    return _field(text, width)