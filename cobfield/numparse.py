"""Split numeric text into digits, an exponent and trailing unit text."""

from __future__ import annotations

from dataclasses import dataclass

from cobfield.numconv import to_long


@dataclass(frozen=True)
class ParsedNumber:
    """The digits of a number (sign and decimal point kept), its exponent and units."""

    number: str
    exponent: int
    units: str


def parse_number(
    text: str,
    min_exponent: int | None = None,
    max_exponent: int | None = None,
) -> ParsedNumber:
    """Parse text such as ``"-1,234.5E-3 kohms"``.

    Leading blanks are skipped, a plus sign is dropped, commas in the
    integer part are ignored, and the first blank-delimited word after
    the number becomes the units. Raises ValueError when no number is
    present or the exponent is malformed or outside the given limits.
    """
    text = text.split("\0", 1)[0]
    end = len(text)
    pos = 0
    number: list[str] = []
    digits = 0
    exponent_text = ""
    units: list[str] = []

    while pos < end and text[pos] == " ":
        pos += 1

    def finish() -> ParsedNumber:
        if digits < 1:
            raise ValueError(f"no number in {text!r}")
        exponent = 0
        if exponent_text:
            try:
                exponent = to_long(exponent_text)
            except ValueError:
                raise ValueError(f"malformed exponent in {text!r}") from None
            if (min_exponent is not None and exponent < min_exponent) or (
                max_exponent is not None and exponent > max_exponent
            ):
                raise ValueError(f"exponent out of range in {text!r}")
        return ParsedNumber("".join(number), exponent, "".join(units))

    if pos >= end:
        return finish()

    if text[pos] in "+-":
        if text[pos] == "-":
            number.append("-")
        pos += 1

    while pos < end:
        ch = text[pos]
        if ch.isascii() and ch.isdigit():
            number.append(ch)
        elif ch != ",":
            break
        pos += 1
        digits += 1
    if pos >= end:
        return finish()

    if text[pos] == ".":
        pos += 1
    if pos >= end:
        return finish()

    issued_point = False
    while pos < end and text[pos].isascii() and text[pos].isdigit():
        if not issued_point:
            number.append(".")
            issued_point = True
        number.append(text[pos])
        pos += 1
        digits += 1
    if pos >= end or not digits:
        return finish()

    if text[pos] in "eE":
        pos += 1
        if pos >= end:
            return finish()
        sign = "+"
        if text[pos] in "+-":
            sign = text[pos]
            pos += 1
        start = pos
        while pos < end and text[pos].isascii() and text[pos].isdigit():
            pos += 1
        exponent_text = sign + text[start:pos]

    while pos < end and text[pos] == " ":
        pos += 1

    while pos < end and text[pos] != " ":
        units.append(text[pos])
        pos += 1

    return finish()