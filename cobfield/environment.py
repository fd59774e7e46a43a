"""Environment variables with library defaults and ``${VAR}`` substitution."""

from __future__ import annotations

import os
from collections.abc import MutableMapping

TOPDIR_VARIABLE = "COBCURSES_TOPDIR"
DATADIR_VARIABLE = "COBCURSES_DATADIR"
SHAREDIR_VARIABLE = "COBCURSES_SHAREDIR"
USER_SHELL_VARIABLE = "COBCURSES_SHELL"

DEFAULT_TOPDIR = "${HOME}/cobcurses"
DEFAULT_DATADIR = "${COBCURSES_TOPDIR}/data"
DEFAULT_SHAREDIR = "${COBCURSES_TOPDIR}/share"
DEFAULT_USER_SHELL = "cmd.exe" if os.name == "nt" else "/bin/sh"

_DEFAULTS = {
    TOPDIR_VARIABLE: DEFAULT_TOPDIR,
    DATADIR_VARIABLE: DEFAULT_DATADIR,
    SHAREDIR_VARIABLE: DEFAULT_SHAREDIR,
}


class PathnameTruncated(ValueError):
    """An expanded pathname did not fit its width; ``value`` holds the cut result."""

    def __init__(self, value: str) -> None:
        super().__init__(f"pathname truncated to {len(value)} characters")
        self.value = value


class Environment:
    """A view of environment variables that supplies library defaults.

    The top, data and share directory variables fall back to defaults
    and are remembered once looked up. The first lookup also defines the
    user shell variable when it is missing and, when *create_dirs* is
    set and the top directory is the default, creates the top and data
    directories.
    """

    def __init__(
        self,
        environ: MutableMapping[str, str] | None = None,
        create_dirs: bool = True,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._create_dirs = create_dirs
        self._cache: dict[str, str] = {}
        self._needs_init = True

    def get(self, name: str) -> str | None:
        """Return the value of *name*, or its library default, or None."""
        if name in _DEFAULTS:
            if name not in self._cache:
                value = self._environ.get(name)
                self._cache[name] = _DEFAULTS[name] if value is None else value
            value = self._cache[name]
        else:
            value = self._environ.get(name)
        if self._needs_init:
            self._needs_init = False
            self._initialize()
        return value

    def set(self, name: str, value: str) -> None:
        """Create or change the variable *name*."""
        self._environ[name] = value
        if name in _DEFAULTS:
            self._cache[name] = self._environ[name]

    def _initialize(self) -> None:
        topdir = self.get(TOPDIR_VARIABLE)
        self.get(DATADIR_VARIABLE)
        self.get(SHAREDIR_VARIABLE)
        if self._environ.get(USER_SHELL_VARIABLE) is None:
            self.set(USER_SHELL_VARIABLE, DEFAULT_USER_SHELL)
        if self._create_dirs and topdir == DEFAULT_TOPDIR:
            # Only the default locations are created; moved ones are left alone.
            self._make_directory(self.get(TOPDIR_VARIABLE))
            self._make_directory(self.get(DATADIR_VARIABLE))

    def _make_directory(self, dirname: str | None) -> None:
        if not dirname:
            return
        path = self.substitute(dirname)
        try:
            os.mkdir(path, 0o755)
        except OSError:
            pass

    def _find(self, text: str) -> tuple[int, int, str] | None:
        """Locate the first ``${NAME}`` whose variable is defined."""
        pos = 0
        while True:
            start = text.find("${", pos)
            if start < 0:
                return None
            end = text.find("}", start + 2)
            if end < 0:
                return None
            name = text[start + 2:end]
            if name:
                value = self.get(name)
                if value is not None:
                    return start, end, value
            pos = end + 1

    def substitute(self, text: str) -> str:
        """Replace ``${NAME}`` references until none with a defined variable remain.

        Trailing blanks of *text* are dropped; undefined references are kept.
        """
        result = text.rstrip(" ")
        while (found := self._find(result)) is not None:
            start, end, value = found
            result = result[:start] + value + result[end + 1:]
        return result

    def expand_pathname(self, text: str, width: int) -> str:
        """Substitute variables in *text* and return it blank padded to *width*.

        Raises PathnameTruncated when the result is wider than *width*.
        """
        result = self.substitute(text)
        if len(result) > width:
            raise PathnameTruncated(result[:width])
        if os.name == "nt" and width == 9 and result == "/dev/null":
            result = "NUL"
        return result.ljust(width)