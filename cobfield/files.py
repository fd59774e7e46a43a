"""File and directory operations on blank-padded pathname fields."""

from __future__ import annotations

import os
import stat

from cobfield.environment import Environment
from cobfield.misc import mkdir_p, switchchar

_KINDS = {"D": stat.S_ISDIR, "F": stat.S_ISREG}


def check_path(path: str, kind: str) -> bool:
    """Return True when *path* is a directory (kind ``D``) or a regular file (``F``).

    Raises FileNotFoundError when *path* does not exist and ValueError
    for an unknown *kind*.
    """
    test = _KINDS.get(kind)
    if test is None:
        raise ValueError(f"unknown path kind {kind!r}")
    mode = os.stat(path.rstrip(" ")).st_mode
    return bool(test(mode))


def make_path(directory: str, filename: str, width: int) -> str:
    """Join *directory* and *filename*, blank padded or cut to *width*.

    The separator is the one *directory* already uses, if any.
    """
    base = directory.rstrip(" ")
    name = filename.rstrip(" ")
    default = "\\" if os.name == "nt" else "/"
    path = base + switchchar(base, default) + name
    return path[:width].ljust(width)


def make_directories(pathname: str) -> None:
    """Create the directory *pathname* and any missing parents (mode 0700)."""
    mkdir_p(pathname.rstrip(" "), 0o700)


def remove_file(path: str) -> None:
    """Remove the file *path*; FileNotFoundError when it is not there."""
    os.unlink(path.rstrip(" "))


def set_variable(env: Environment, name: str, value: str) -> None:
    """Set the variable *name* to *value*, both without trailing blanks."""
    env.set(name.rstrip(" "), value.rstrip(" "))