"""Text and path helpers for blank-padded, fixed-width fields."""

from __future__ import annotations

import os

_SEPARATORS = "/\\"


def switchchar(pathname: str, default: str) -> str:
    """Return the first path separator used in *pathname*, else *default*."""
    for ch in pathname:
        if ch in _SEPARATORS:
            return ch
    return default


def trim_trailing(text: str, blank: str = " ") -> str:
    """Return *text* without trailing *blank* characters."""
    return text.rstrip(blank)


def delimited_length(text: str, delim: str = " ") -> int:
    """Return the length of *text* up to *delim*, or 0 when *delim* is absent."""
    index = text.find(delim)
    return 0 if index < 0 else index


def eat_tail(text: str, start: int, eat: str) -> tuple[str, int]:
    """Blank out a run of *eat* characters ending at offset *start*.

    Returns the edited text and the offset of the last character kept
    (0 when the whole head was eaten).
    """
    head = text[: start + 1]
    kept = head.rstrip(eat)
    edited = kept + " " * (len(head) - len(kept)) + text[start + 1:]
    return edited, (len(kept) - 1 if kept else 0)


def append_truncated(buffer: str, width: int, start: int, text: str) -> tuple[str, int]:
    """Write *text* into *buffer* at *start*, never past *width*.

    Returns the new buffer and the offset just past the written text.
    """
    chunk = text[: max(width - start, 0)]
    edited = buffer[:start] + chunk + buffer[start + len(chunk):]
    return edited, start + len(chunk)


def dirname_length(pathname: str) -> int:
    """Return the length of the directory part of *pathname*, separator included.

    A bare root directory counts as no directory, so 0 is returned for it
    and for names without any separator.
    """
    if not pathname:
        return 0
    default = "\\" if os.name == "nt" else "/"
    sep = switchchar(pathname, default)
    length = pathname.rfind(sep) + 1
    if length == 1 and pathname[0] == sep:
        length = 0
    if (
        os.name == "nt"
        and length == 3
        and pathname[0] != sep
        and pathname[0].isalpha()
        and pathname[1] == ":"
        and pathname[2] == sep
    ):
        length = 0
    return length


def mkdir_p(pathname: str, mode: int = 0o777) -> None:
    """Create *pathname*, creating missing parent directories first.

    Raises FileExistsError when *pathname* already exists, and OSError
    for any other failure.
    """
    try:
        os.mkdir(pathname, mode)
        return
    except FileNotFoundError:
        length = dirname_length(pathname)
        if length <= 1:
            raise
    try:
        mkdir_p(pathname[: length - 1], mode)
    except FileExistsError:
        pass
    os.mkdir(pathname, mode)


def is_blank(text: str) -> bool:
    """Return True when *text* holds nothing but blanks."""
    return text.strip(" ") == ""


def charset_violation(text: str, charset: str) -> int:
    """Return the 1-based position of the first character not in *charset*.

    *charset* ends at its first blank after the first character, so a
    leading blank permits blanks. Trailing blanks of *text* are ignored.
    Returns 0 when every character is permitted.
    """
    end = charset.find(" ", 1)
    allowed = set(charset if end < 0 else charset[:end])
    for position, ch in enumerate(text.rstrip(" "), start=1):
        if ch not in allowed:
            return position
    return 0


def center(text: str, width: int) -> str:
    """Center *text* in a blank field of *width*, truncating if too long."""
    body = text[:width]
    offset = (width - len(body)) // 2
    return (" " * offset + body).ljust(width)


def double_blank_length(text: str) -> int:
    """Return the length of *text* up to the first pair of blanks."""
    index = text.find("  ")
    return len(text) if index < 0 else index