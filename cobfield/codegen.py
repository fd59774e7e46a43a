"""Hex encoding of text that holds non-printable characters."""

from __future__ import annotations

_HEX_DIGITS = "0123456789abcdefABCDEF"


def _as_bytes(data: bytes | bytearray | str) -> bytes:
    if isinstance(data, str):
        return data.encode("latin-1")
    return bytes(data)


def has_special_chars(text: bytes | str) -> bool:
    """Return True when *text* holds a control or non-ASCII byte."""
    return any(b < 0x20 or b > 0x7F for b in _as_bytes(text))


def special_chars_hex(text: bytes | str, width: int) -> str | None:
    """Return *text* as upper-case hex, blank padded to *width*.

    Returns None when *text* needs no encoding or *width* cannot hold it.
    """
    data = _as_bytes(text)
    if not has_special_chars(data) or width < 2 * len(data):
        return None
    return data.hex().upper().ljust(width)


def _hex_digit(byte: int) -> int:
    ch = chr(byte)
    if ch not in _HEX_DIGITS:
        raise ValueError(f"invalid hex digit {ch!r}")
    return int(ch, 16)


def hex_to_ascii(hex_text: bytes | str, width: int) -> bytes:
    """Decode pairs of hex digits into at most *width* bytes.

    A lone final digit decodes on its own.
    """
    digits = _as_bytes(hex_text)
    out = bytearray()
    pos = 0
    while pos < len(digits) and len(out) < width:
        value = 0
        for byte in digits[pos:pos + 2]:
            value = value * 16 + _hex_digit(byte)
        pos += 2
        out.append(value)
    return bytes(out)