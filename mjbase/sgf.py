"""Writing game records in the SGF-like mahjong log format."""

from __future__ import annotations

import enum
import os
from typing import Optional, TextIO

from mjbase.ini import Ini
from mjbase.tools import create_folder, get_current_path, get_time, is_dir_exists

_WINDS = {1: "E", 2: "S", 3: "W", 4: "N"}


class SgfLogType(enum.Enum):
    """Which kind of record is being written."""

    TREE = "tree"
    GAME = "game"


def wind_string(wind: int) -> str:
    """Map a seat 1..4 to its wind letter; anything else gives ''."""
    return _WINDS.get(wind, "")


class SgfWriter:
    """Appends SGF records to a file; does nothing when SGF logging is off in the config."""

    def __init__(
        self,
        file_name: Optional[str] = None,
        log_type: SgfLogType = SgfLogType.GAME,
        ini: Optional[Ini] = None,
        base_dir: Optional[str | os.PathLike] = None,
    ) -> None:
        source = ini if ini is not None else Ini.instance()
        base = get_current_path() if base_dir is None else os.fspath(base_dir)
        log_game = source.get_int("Sgf.LogGameSgf") > 0
        log_tree = source.get_int("Sgf.LogTreeSgf") > 0
        self.available = log_game or log_tree
        self._out: Optional[TextIO] = None
        if file_name is None:
            self.file_name = os.path.join(base, "MJ_log", get_time() + ".sgf")
            return
        directory = base
        if log_type is SgfLogType.GAME and log_game:
            directory = os.path.join(base, source.get_string("Log.LogPath"))
        elif log_type is SgfLogType.TREE and log_tree:
            directory = os.path.join(base, source.get_string("Sgf.LogTreeSgfPath"))
        if not is_dir_exists(directory):
            create_folder(directory)
        self.file_name = os.path.join(directory, file_name + ".sgf")

    def _write(self, text: str) -> None:
        if self._out is not None:
            self._out.write(text)
            self._out.flush()

    def create(self) -> None:
        """Open (and truncate) the record file; raises OSError if it cannot be opened."""
        if not self.available:
            return
        self._out = open(self.file_name, "w", encoding="utf-8")

    def add_tag(self, tag: str, value: Optional[str] = None) -> None:
        """Write ``tag[value]``, or the bare tag text when no value is given."""
        if value is None:
            self._write(tag)
        elif self.available:
            self._write(f"{tag}[{value}]")

    def add_append_value(self, value: str) -> None:
        if self.available:
            self._write(f"[{value}]")

    def add_root(self) -> None:
        if self.available:
            self._write("(;GM[84]")

    def add_move(self, wind: int, move: str) -> None:
        """Write a move by the player at seat ``wind``."""
        if self.available:
            self._write(f";{wind_string(wind)}[{move}]")

    def add_branch(self) -> None:
        if self.available:
            self._write(";(")

    def end_branch(self) -> None:
        if self.available:
            self._write(")")

    def finish(self) -> None:
        """Close the record and the file."""
        if not self.available:
            return
        self._write(")")
        if self._out is not None:
            self._out.close()
            self._out = None