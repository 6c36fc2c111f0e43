"""Small helpers shared across the package: parsing, files, strings and chance."""

from __future__ import annotations

import os
import random
import re
import time
from pathlib import Path
from typing import Iterable, Sequence

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_WINDS = {"E": 1, "S": 2, "W": 3, "N": 4}
_TILE_VALUE_COUNT = 34
_ROWS = (("M", 0, 9), ("P", 9, 18), ("S", 18, 27), ("Z", 27, 34))


def to_int(value: object) -> int:
    """Read the leading integer of a value's text form, as stream extraction does."""
    if isinstance(value, bool):
        return int(value)
    match = _LEADING_INT.match(str(value))
    if match is None:
        raise ValueError(f"no integer at the start of {value!r}")
    return int(match.group(1))


def to_bool(value: int) -> bool:
    """Return True for any non-zero value."""
    return value != 0


def hit_rate(rate: float) -> bool:
    """Return True with probability ``rate``."""
    return random.random() < rate


def weighted_coin(false_weight: int, true_weight: int) -> bool:
    """Return True with probability true_weight / (false_weight + true_weight)."""
    return hit_rate(true_weight / (false_weight + true_weight))


def wind_to_int(wind: str) -> int:
    """Map a wind letter (E, S, W, N) to a seat number 1..4, or 0 if unknown."""
    return _WINDS.get(wind, 0)


def is_file_exist(path: str | os.PathLike) -> bool:
    """Return True if ``path`` is an existing regular file."""
    return Path(path).is_file()


def is_dir_exists(path: str | os.PathLike) -> bool:
    """Return True if ``path`` is an existing directory."""
    return Path(path).is_dir()


def clear_file(path: str | os.PathLike) -> None:
    """Truncate (or create) a file; raises OSError if it cannot be opened."""
    with open(path, "w"):
        pass


def create_folder(path: str | os.PathLike) -> bool:
    """Create a directory; return False if it already existed."""
    try:
        os.mkdir(path)
    except FileExistsError:
        return False
    return True


def format_tile_values(values: Sequence[float]) -> str:
    """Lay out 34 per-tile values as a table by suit; other lengths give ''."""
    if len(values) != _TILE_VALUE_COUNT:
        return ""
    as_float = any(isinstance(v, float) for v in values)
    if as_float:
        header = "    " + "".join(f"  {rank}   " for rank in range(1, 10)).rstrip()
        header = "      1     2     3     4     5     6     7     8     9"
        cell = "  {:.2f}".format
    else:
        header = "   1  2  3  4  5  6  7  8  9"
        cell = " {}".format
    lines = [header]
    for label, start, stop in _ROWS:
        lines.append(label + "".join(cell(v) for v in values[start:stop]))
    return "\n".join(lines) + "\n"


def get_time() -> str:
    """Return the current Unix time in seconds, as text."""
    return str(int(time.time()))


def get_current_path() -> str:
    """Return the working directory with a trailing slash."""
    return os.getcwd() + "/"


def combine_with(items: Iterable[str], separator: str = " ") -> str:
    """Join strings with a separator."""
    return separator.join(items)


def split_with(line: str, separator: str) -> list[str]:
    """Split on a separator, dropping empty pieces."""
    return [piece for piece in line.split(separator) if piece]


def split(text: str, delimiter: str) -> list[str]:
    """Split on a delimiter keeping empty pieces, except a trailing empty one."""
    pieces = text.split(delimiter)
    if pieces and pieces[-1] == "":
        pieces.pop()
    return pieces


def get_files_list(directory: str | os.PathLike, name_filter: str, recursive: bool) -> list[str]:
    """List paths under ``directory`` whose text contains ``name_filter``.

    A missing path or one that is not a directory gives an empty list.
    """
    root = Path(directory)
    if not root.is_dir():
        return []
    entries = root.rglob("*") if recursive else root.iterdir()
    return sorted(str(p) for p in entries if name_filter in str(p))