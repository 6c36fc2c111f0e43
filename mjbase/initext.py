"""INI text nodes: blank lines, comments and key/value pairs, plus string helpers."""

from __future__ import annotations

import enum
import re
from abc import ABC, abstractmethod
from itertools import zip_longest
from typing import Optional, Union

WHITESPACE = " \t\n\r\f\v"

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"[ \t\n\r\f\v]*([+-]?\d+)")
_LEADING_FLOAT = re.compile(
    r"[ \t\n\r\f\v]*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


class NodeType(enum.IntEnum):
    """Kinds of node found in an INI document."""

    UNDEFINE = 0xFFFFFFFF
    FILEROOT = 0x00000000
    NILLINE = 0x00000100
    COMMENT = 0x00000200
    SECTION = 0x00000300
    KEYVALUE = 0x00000400


def trim(text: str, chars: str = WHITESPACE) -> str:
    """Strip the given characters from both ends of ``text``."""
    return text.strip(chars)


def _fold(char: str) -> int:
    code = ord(char)
    if ord("A") <= code <= ord("Z"):
        code += ord("a") - ord("A")
    return code


def icompare(left: str, right: str) -> int:
    """Compare two strings ignoring ASCII case: negative, zero or positive."""
    for a, b in zip_longest(left, right, fillvalue="\0"):
        la, lb = _fold(a), _fold(b)
        if la != lb or la == 0:
            return la - lb
    return 0


def check_key_name(name: str) -> bool:
    """Return True if an already trimmed key name is usable."""
    if not name:
        return False
    if any(c in name for c in ";#=\r\n"):
        return False
    if name[0] == "[" and "]" in name:
        return False
    return True


def _is_single_line(text: str) -> bool:
    return "\r" not in text and "\n" not in text


def _parse_int(text: str, bounded: bool = True) -> Optional[int]:
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    number = int(match.group(1))
    if bounded and not _INT_MIN <= number <= _INT_MAX:
        return None
    return number


def _parse_float(text: str) -> Optional[float]:
    match = _LEADING_FLOAT.match(text)
    if match is None:
        return None
    return float(match.group(1))


class Node(ABC):
    """Base of every INI node; dirtiness is tracked by the owning root."""

    def __init__(self, node_type: NodeType, owner: Optional["Node"] = None) -> None:
        self.node_type = node_type
        self.owner = owner

    def is_dirty(self) -> bool:
        """Whether the document holding this node has unsaved changes."""
        if self.owner is not None:
            return self.owner.is_dirty()
        return False

    def set_dirty(self, dirty: bool) -> None:
        """Mark the document holding this node as changed or clean."""
        if self.owner is not None:
            self.owner.set_dirty(dirty)

    def _rename_child(self, node: "Node", name: str) -> bool:
        return False

    @abstractmethod
    def render(self) -> str:
        """Return the node's text as written to a file."""

    def __str__(self) -> str:
        return self.render()


class NilLine(Node):
    """A blank line."""

    def __init__(self, owner: Optional[Node] = None) -> None:
        super().__init__(NodeType.NILLINE, owner)

    @classmethod
    def try_create(cls, line: str, owner: Optional[Node]) -> Optional["NilLine"]:
        """Build a blank-line node from a trimmed line, or None if it is not blank."""
        if line:
            return None
        return cls(owner)

    def render(self) -> str:
        return "\n"


class Comment(Node):
    """A line starting with ';' or '#'."""

    def __init__(self, owner: Optional[Node] = None, text: str = "") -> None:
        super().__init__(NodeType.COMMENT, owner)
        self.text = text

    @classmethod
    def try_create(cls, line: str, owner: Optional[Node]) -> Optional["Comment"]:
        """Build a comment node from a trimmed line, or None if it is not a comment."""
        if not line or line[0] not in ";#":
            return None
        return cls(owner, line)

    def render(self) -> str:
        return self.text + "\n"


Default = Union[str, bool, int, float]


class KeyValue(Node):
    """A ``key=value`` line with typed readers."""

    def __init__(self, owner: Optional[Node] = None, key: str = "", value: str = "") -> None:
        super().__init__(NodeType.KEYVALUE, owner)
        self._key = key
        self._value = value

    @classmethod
    def try_create(cls, line: str, owner: Optional[Node]) -> Optional["KeyValue"]:
        """Build a key/value node from a trimmed line, or None if it is not one."""
        if not line:
            return None
        eq = line.find("=")
        if eq <= 0:
            return None
        key = trim(line[:eq])
        if not check_key_name(key):
            return None
        return cls(owner, key, trim(line[eq + 1:]))

    @property
    def key(self) -> str:
        return self._key

    @property
    def value(self) -> str:
        return self._value

    @property
    def empty(self) -> bool:
        return not self._value

    def set_key(self, key: str) -> bool:
        """Rename the key; the owner decides when there is one."""
        name = trim(key)
        if not check_key_name(name):
            return False
        if self.owner is None:
            self._key = name
            return True
        return self.owner._rename_child(self, name)

    def set_value(self, value: str) -> None:
        """Store the first line of ``value``, trimmed."""
        first = re.split(r"[\r\n]", value, maxsplit=1)[0]
        self._store(trim(first))

    def _store(self, value: str) -> None:
        if value != self._value:
            self._value = value
            self.set_dirty(True)

    def as_int(self, default: Optional[int] = None) -> int:
        """Read the value as an integer; fall back to ``default`` (or 0)."""
        if default is not None and self.empty:
            return default
        number = _parse_int(self._value)
        if number is None:
            return 0 if default is None else default
        return number

    def as_float(self, default: Optional[float] = None) -> float:
        """Read the value as a float; fall back to ``default`` (or 0.0)."""
        if default is not None and self.empty:
            return default
        number = _parse_float(self._value)
        if number is None:
            return 0.0 if default is None else default
        return number

    def as_bool(self, default: Optional[bool] = None) -> bool:
        """Read 'true'/'false' (any case) or a number; fall back to ``default``."""
        if icompare(self._value, "true") == 0:
            return True
        if icompare(self._value, "false") == 0:
            return False
        if default is None:
            number = _parse_int(self._value, bounded=False)
            return number is not None and number != 0
        return self.as_int(1 if default else 0) != 0

    def try_value(self, default: Default) -> Default:
        """Read the value as the type of ``default``, writing the default in if unusable."""
        if isinstance(default, str):
            if self.empty:
                self.set_value(default)
            return self._value
        if isinstance(default, bool):
            return self._try_bool(default)
        if isinstance(default, int):
            number = None if self.empty else _parse_int(self._value)
            if number is None:
                self._store(str(default))
                return default
            return number
        if isinstance(default, float):
            parsed = None if self.empty else _parse_float(self._value)
            if parsed is None:
                self._store(format(default, ".16g"))
                return default
            return parsed
        raise TypeError(f"unsupported default type: {type(default).__name__}")

    def _try_bool(self, default: bool) -> bool:
        if self.empty:
            self._store("true" if default else "false")
            return default
        if icompare(self._value, "true") == 0:
            return True
        if icompare(self._value, "false") == 0:
            return False
        number = _parse_int(self._value, bounded=False)
        if number is None:
            self._store("true" if default else "false")
            return default
        self._store("true" if number != 0 else "false")
        return number != 0

    def render(self) -> str:
        return f"{self._key}={self._value}\n"