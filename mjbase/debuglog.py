"""Buffered debug log split over numbered files, and a switchable stderr printer."""

from __future__ import annotations

import os
import sys
from typing import Optional, TextIO

from mjbase.ini import Ini
from mjbase.tools import create_folder, get_current_path

DEBUG_LOG_BUF_SIZE = 2**16
MAX_DEBUG_LOG_SIZE = 2**28


class DebugLogger:
    """Collects text in a buffer and writes it to ``<name>/<name>_<n>.log`` files.

    When a file would reach ``max_log_size`` the next numbered file is started.
    """

    def __init__(
        self,
        ini: Optional[Ini] = None,
        base_dir: Optional[str | os.PathLike] = None,
        buffer_size: int = DEBUG_LOG_BUF_SIZE,
        max_log_size: int = MAX_DEBUG_LOG_SIZE,
    ) -> None:
        self._ini = ini
        self._base_dir = base_dir
        self.buffer_size = buffer_size
        self.max_log_size = max_log_size
        self.active = True
        self.log_name = ""
        self.file_index = 1
        self.log_size = 0
        self._buffer: list[str] = []
        self._buffered = 0
        self._out: Optional[TextIO] = None

    def _base(self) -> str:
        return get_current_path() if self._base_dir is None else os.fspath(self._base_dir)

    def _path(self, log_name: str) -> str:
        return os.path.join(self._base(), log_name, f"{log_name}_{self.file_index}.log")

    def start(self, log_name: str) -> None:
        """Read whether logging is on and, if so, open the first log file.

        Raises OSError if the file cannot be created.
        """
        ini = self._ini if self._ini is not None else Ini.instance()
        self.active = ini.get_int("Debug.LoggingDebugMsg") > 0
        if not self.active:
            return
        create_folder(os.path.join(self._base(), log_name))
        self._out = open(self._path(log_name), "w", encoding="utf-8")
        self.log_name = log_name

    def stop(self) -> None:
        if not self.active:
            return
        if self._out is not None:
            self._out.close()
            self._out = None

    def write(self, text: str) -> int:
        """Buffer text, flushing first if the buffer would fill; return the length buffered."""
        if not self.active:
            return 0
        if self._buffered + len(text) >= self.buffer_size:
            self.flush()
        self._buffer.append(text)
        self._buffered += len(text)
        return len(text)

    def write_line(self, text: str) -> int:
        """Buffer a line and flush it at once."""
        size = self.write(text + "\n")
        self.flush()
        return size

    def flush(self) -> None:
        """Write the buffer out, moving to the next file if the current one is full."""
        if self._out is not None and self.log_size + self._buffered >= self.max_log_size:
            self._out.close()
            self.file_index += 1
            self._out = open(self._path(self.log_name), "w", encoding="utf-8")
            self.log_size = 0
        if self._out is not None:
            self._out.write("".join(self._buffer))
            self._out.flush()
        self.log_size += self._buffered
        self._buffer = []
        self._buffered = 0


def print_debug(text: str, ini: Optional[Ini] = None) -> None:
    """Write text to stderr when Debug.PrintDebugMsg is on."""
    source = ini if ini is not None else Ini.instance()
    if source.get_int("Debug.PrintDebugMsg") > 0:
        sys.stderr.write(text)