"""Delimited (CSV-style) field extraction, counting and emission.

Fields are read and written as blank-padded, fixed-width values. A
registry associates column headings with receiving widths, so a whole
record can be unpacked into, or packed from, its registered columns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

_TRUE_FLAGS = "YyTt"


def _ascii_upper(text: str) -> str:
    return "".join(chr(ord(ch) - 32) if "a" <= ch <= "z" else ch for ch in text)


@dataclass(frozen=True)
class CsvOptions:
    """How a record is delimited and how quotes inside fields are escaped."""

    delimiter: str = ","
    multi_delimiter: bool = False
    double_quote: bool = False
    backslash: bool = False

    @classmethod
    def from_code(cls, code: str) -> "CsvOptions":
        """Build options from a three-character code.

        The first character is the delimiter, the second is Y when runs of
        delimiters count as one, and the third selects the escape
        convention: a double quote for doubled quotes, a backslash for
        backslash escapes. Missing characters count as blanks.
        """
        if not code:
            raise ValueError("empty options code")
        code = code[:3].ljust(3)
        return cls(
            delimiter=code[0],
            multi_delimiter=code[1] in _TRUE_FLAGS,
            double_quote=code[2] == '"',
            backslash=code[2] == "\\",
        )


OptionsLike = Union[CsvOptions, str, None]


def _options(options: OptionsLike) -> CsvOptions:
    if options is None:
        return CsvOptions()
    if isinstance(options, CsvOptions):
        return options
    return CsvOptions.from_code(options)


class CsvTruncated(Exception):
    """A result did not fit its width; ``value`` holds the truncated result."""

    def __init__(self, value: str) -> None:
        super().__init__(f"result truncated to {len(value)} characters")
        self.value = value


def _skip_delimiters(text: str, pos: int, opts: CsvOptions) -> int:
    if not opts.multi_delimiter:
        return pos
    while pos < len(text) and text[pos] == opts.delimiter:
        pos += 1
    return pos


def _end_field(text: str, start: int, opts: CsvOptions) -> int:
    """Return the offset where the field starting at *start* ends."""
    end = len(text)
    pos = start
    quoted = pos < end and text[pos] == '"'
    if quoted:
        pos += 1
    done = False
    while pos < end and not done:
        ch = text[pos]
        if opts.double_quote and ch == '"' and pos + 1 < end and text[pos + 1] == '"':
            pos += 2
        elif opts.backslash and ch == "\\" and pos + 1 < end:
            pos += 2
        elif quoted and ch == '"':
            done = True
            pos += 1
            while pos < end and text[pos] != opts.delimiter:
                pos += 2
        elif not quoted and ch == opts.delimiter:
            done = True
        else:
            pos += 1
    return _skip_delimiters(text, min(pos, end), opts)


def _decode(text: str, start: int, stop: int, opts: CsvOptions) -> str:
    """Return the unescaped content of the field between *start* and *stop*."""
    pos = start
    quoted = start < len(text) and text[start] == '"'
    if quoted:
        pos += 1
    out: list[str] = []
    while pos < stop:
        ch = text[pos]
        if opts.double_quote and ch == '"' and pos + 1 < stop and text[pos + 1] == '"':
            value = '"'
            pos += 2
        elif opts.backslash and ch == "\\" and pos + 1 < stop:
            value = text[pos + 1]
            pos += 2
        elif quoted and ch == '"':
            break
        elif not quoted and ch == opts.delimiter:
            break
        else:
            value = ch
            pos += 1
        out.append(value)
    return "".join(out)


def _extract(text: str, field_no: int, width: int, opts: CsvOptions) -> tuple[str, bool]:
    end = len(text)
    fstart = fend = 0
    count = 0
    while count < field_no and fend < end:
        fstart = fend
        fend = _end_field(text, fstart, opts)
        if count + 1 < field_no and fend < end and text[fend] == opts.delimiter:
            fend += 1
        count += 1
    if count < field_no or fstart >= end:
        return " " * width, False
    data = _decode(text, fstart, fend, opts)
    return data[:width].ljust(width), len(data) > width


def extract_field(text: str, field_no: int, width: int, options: OptionsLike = None) -> str:
    """Return field *field_no* (1-based) of *text*, blank padded to *width*.

    A missing field comes back as blanks. Raises CsvTruncated when the
    field is wider than *width*.
    """
    if field_no < 1 or width < 1:
        raise ValueError("field number and width must be positive")
    value, truncated = _extract(text, field_no, width, _options(options))
    if truncated:
        raise CsvTruncated(value)
    return value


def count_fields(text: str, options: OptionsLike = None) -> int:
    """Return the number of fields in *text*."""
    opts = _options(options)
    count = 0
    pos = 0
    while pos < len(text):
        pos = _end_field(text, pos, opts)
        if pos < len(text) and text[pos] == opts.delimiter:
            pos += 1
        count += 1
    return count


def _needs_quoting(text: str, opts: CsvOptions) -> int:
    flags = 0
    for ch in text:
        if ch == " " or ch == opts.delimiter:
            flags |= 1
        if ch == '"' or (opts.backslash and ch == "\\"):
            flags |= 2
    return flags


def _emit_field(text: str, opts: CsvOptions) -> str:
    body = text.rstrip(" ")
    flags = _needs_quoting(body, opts)
    if not flags:
        return body
    if flags & 2:
        body = body.replace("\\", "\\\\").replace('"', '""')
    return f'"{body}"'


@dataclass
class _Column:
    column_no: int
    width: int | None = None
    value: str = ""


class ColumnRegistry:
    """Column headings mapped to column numbers and blank-padded values.

    Heading names are matched without regard to trailing blanks or the
    case of ASCII letters; columns registered by number are named by
    their number.
    """

    def __init__(self) -> None:
        self._columns: dict[str, _Column] = {}

    @staticmethod
    def _key(heading: str | int) -> str:
        if isinstance(heading, int):
            return f"{heading:06d}"
        return _ascii_upper(heading.rstrip(" "))

    def clear(self) -> None:
        """Forget every column."""
        self._columns.clear()

    def load_headings(self, text: str, options: OptionsLike = None) -> None:
        """Replace all columns with the headings of the record *text*."""
        opts = _options(options)
        self.clear()
        end = len(text)
        pos = 0
        column_no = 0
        while pos < end:
            start = pos
            pos = _end_field(text, start, opts)
            column_no += 1
            name = _ascii_upper(_decode(text, start, end, opts))
            self._columns[name] = _Column(column_no)
            if pos < end and text[pos] == opts.delimiter:
                pos += 1

    def register_column_no(self, column_no: int, width: int) -> None:
        """Register a receiving value of *width* for column *column_no*."""
        if column_no < 1 or width < 1:
            raise ValueError("column number and width must be positive")
        self._columns[self._key(column_no)] = _Column(column_no, width, " " * width)

    def register_column(self, heading: str, width: int) -> None:
        """Give the known column *heading* a receiving value of *width*."""
        if not heading or width < 1:
            raise ValueError("heading must be given and width must be positive")
        column = self._columns.get(self._key(heading))
        if column is None:
            raise KeyError(heading)
        column.width = width
        column.value = " " * width

    def register_column_heading(self, heading: str, width: int) -> None:
        """Add (or replace) column *heading* as the next column, of *width*."""
        if not heading or width < 1:
            raise ValueError("heading must be given and width must be positive")
        key = self._key(heading)
        if not key:
            raise ValueError("blank heading")
        self._columns[key] = _Column(len(self._columns) + 1, width, " " * width)

    def _registered(self, heading: str | int) -> _Column:
        column = self._columns.get(self._key(heading))
        if column is None:
            raise KeyError(heading)
        if not column.width:
            raise ValueError(f"column {heading!r} has no receiving width")
        return column

    def set_value(self, heading: str | int, value: str) -> None:
        """Store *value* in a registered column, blank padded or cut to its width."""
        column = self._registered(heading)
        column.value = value[: column.width].ljust(column.width)

    def value(self, heading: str | int) -> str:
        """Return the blank-padded value of a registered column."""
        return self._registered(heading).value

    def extract_record(self, text: str, options: OptionsLike = None) -> None:
        """Unpack the record *text* into every registered column.

        Every column is filled; CsvTruncated is raised afterwards if any
        field was wider than its column.
        """
        opts = _options(options)
        text = text.rstrip(" ")
        truncated = False
        for column in self._columns.values():
            if column.width:
                column.value, cut = _extract(text, column.column_no, column.width, opts)
                truncated = truncated or cut
        if truncated:
            raise CsvTruncated(text)

    def _emit(self, width: int, options: OptionsLike, headings: bool) -> str:
        if width < 1:
            raise ValueError("width must be positive")
        opts = _options(options)
        if not self._columns:
            return " " * width
        ordered = sorted(self._columns.items(), key=lambda item: item[1].column_no)
        parts: list[str] = []
        column_no = ordered[0][1].column_no
        for index, (key, column) in enumerate(ordered):
            if index:
                parts.append(opts.delimiter)
                if not opts.multi_delimiter:
                    column_no += 1
                    while column_no < column.column_no:
                        parts.append(opts.delimiter)
                        column_no += 1
                else:
                    column_no = column.column_no
            if headings:
                parts.append(_emit_field(key, opts))
            elif column.width:
                parts.append(_emit_field(column.value, opts))
        record = "".join(parts)
        if len(record) > width:
            raise CsvTruncated(record[:width])
        return record.ljust(width)

    def emit_record(self, width: int, options: OptionsLike = None) -> str:
        """Return the column values as one record, blank padded to *width*."""
        return self._emit(width, options, headings=False)

    def emit_headings(self, width: int, options: OptionsLike = None) -> str:
        """Return the column headings as one record, blank padded to *width*."""
        return self._emit(width, options, headings=True)