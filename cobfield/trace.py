"""A level-filtered trace file configured from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import TextIO

from cobfield.numconv import to_ulong


class Tracer:
    """Writes trace messages to the file named by ``COBCURSES_TRACE``.

    Messages are written when their level is at least the level given by
    ``COBCURSES_TRACE_LEVEL`` (5 when unset or invalid). The first open
    truncates the file; later opens append to it.
    """

    TRACE_VARIABLE = "COBCURSES_TRACE"
    LEVEL_VARIABLE = "COBCURSES_TRACE_LEVEL"
    FALLBACK_PATH = "cobcurses_trace.txt"
    DEFAULT_LEVEL = 5

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ
        self.path: str | None = None
        self.level = 0
        self.file: TextIO | None = None

    @property
    def is_open(self) -> bool:
        return self.file is not None

    @staticmethod
    def _try_open(path: str, mode: str) -> TextIO | None:
        try:
            return open(path, mode, encoding="utf-8")
        except OSError:
            return None

    def _read_level(self) -> int:
        raw = self._environ.get(self.LEVEL_VARIABLE)
        if raw is None:
            return self.DEFAULT_LEVEL
        try:
            return to_ulong(raw.rstrip(" ")) & 0xFFFFFFFF
        except ValueError:
            return self.DEFAULT_LEVEL

    def open(self) -> TextIO | None:
        """Open the trace file if possible and return it, or None."""
        if self.file is not None:
            return self.file
        if self.path is None:
            path = self._environ.get(self.TRACE_VARIABLE)
            if path is not None:
                self.path = path
                self.file = self._try_open(path, "w")
                if self.file is None:
                    self.path = self.FALLBACK_PATH
                    self.file = self._try_open(self.path, "w")
            self.level = self._read_level()
        else:
            self.file = self._try_open(self.path, "a")
        if self.file is not None:
            self.file.write("Opened CobCurses Trace File.\n")
            self.file.write(f"{self.LEVEL_VARIABLE}={self.level}\n\n")
            self.file.flush()
        return self.file

    def close(self) -> None:
        """Close the trace file, if open."""
        if self.file is None:
            return
        self.file.write("\n")
        self.file.close()
        self.file = None

    def write(self, level: int, message: str) -> bool:
        """Write *message* if the file is open and *level* is high enough."""
        if self.file is None or level < self.level:
            return False
        self.file.write(message)
        self.file.flush()
        return True

    def __enter__(self) -> "Tracer":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()