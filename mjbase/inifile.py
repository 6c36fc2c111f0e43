"""INI documents: an ordered set of sections, loaded from and saved to files."""

from __future__ import annotations

import os
import string
from typing import Iterator, Optional

from mjbase.inisection import SECTION_TRIM, Section, make_node
from mjbase.initext import NilLine, Node, NodeType, icompare, trim

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _fold(name: str) -> str:
    return name.translate(_ASCII_LOWER)


def _is_single_line(text: str) -> bool:
    return "\r" not in text and "\n" not in text


class IniFile(Node):
    """An INI document bound to a file path.

    Changes mark the document dirty; a dirty document is written back to its
    path on release(), which also runs when leaving a ``with`` block.
    """

    def __init__(self, path: Optional[str | os.PathLike] = None) -> None:
        super().__init__(NodeType.FILEROOT, None)
        self._dirty = False
        self.filepath = ""
        self._head = b""
        self._sections: list[Section] = []
        self._by_name: dict[str, Section] = {}
        if path is not None:
            self.load(path)

    def __enter__(self) -> "IniFile":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __iter__(self) -> Iterator[Section]:
        return iter(self._sections)

    def is_dirty(self) -> bool:
        return self._dirty

    def set_dirty(self, dirty: bool) -> None:
        self._dirty = dirty

    def _find(self, name: str) -> Optional[Section]:
        return self._by_name.get(_fold(name))

    def __getitem__(self, name: str) -> Section:
        """Return the named section, adding an empty one (without marking dirty) if absent."""
        section_name = trim(name, SECTION_TRIM)
        if not _is_single_line(section_name):
            raise ValueError(f"invalid section name: {name!r}")
        found = self._find(section_name)
        if found is not None:
            return found
        section = Section.try_create(f"[{section_name}]", self)
        self._sections.append(section)
        self._by_name[_fold(section_name)] = section
        return section

    def load(self, path: str | os.PathLike) -> bool:
        """Release the current content and read ``path``; False if it cannot be opened.

        The document is bound to ``path`` whether or not loading succeeds.
        """
        self.release()
        self.filepath = os.fspath(path)
        if not self.filepath:
            return False
        try:
            with open(self.filepath, "rb") as handle:
                raw = handle.read()
        except OSError:
            return False
        start = 0
        while start < len(raw) and raw[start] >= 0x80:
            start += 1
        self._head = raw[:start]
        self.read(raw[start:].decode(_ENCODING, _ERRORS))
        self.set_dirty(False)
        return True

    def read(self, text: str) -> "IniFile":
        """Parse INI text and merge it into the document."""
        if not self._sections:
            current = Section(self, "")
            self._sections.append(current)
            self._by_name[""] = current
        else:
            current = self._sections[-1]
            if not current.has_end_nilline():
                current.push_node(NilLine(self))

        pieces = text.split("\n")
        for position, piece in enumerate(pieces):
            line = trim(piece)
            if position == len(pieces) - 1 and not line:
                break
            node = make_node(line, self)
            if node is None:
                continue
            if isinstance(node, Section):
                current = self._push_section(node, current)
                if current is node:
                    self.set_dirty(True)
                continue
            if current.push_node(node):
                self.set_dirty(True)
        return self

    def _push_section(self, new: Section, current: Section) -> Section:
        found = self._find(new.name)
        if found is None:
            self._sections.append(new)
            self._by_name[_fold(new.name)] = new
            current.pop_tail_comments(new.nodes, True)
            return new
        if found is not current:
            if not found.has_end_nilline():
                found.push_node(NilLine(self))
            current.pop_tail_comments(found.nodes, False)
            if not found.has_end_nilline():
                found.push_node(NilLine(self))
            return found
        return current

    def render(self) -> str:
        parts = []
        last = self._sections[-1] if self._sections else None
        for section in self._sections:
            if section.empty:
                continue
            parts.append(section.render())
            if not section.has_end_nilline() and section is not last:
                parts.append("\n")
        return "".join(parts)

    def dump(self, path: str | os.PathLike) -> bool:
        """Write the document to ``path``; False if the file cannot be opened."""
        target = os.fspath(path)
        if not target:
            return False
        try:
            with open(target, "wb") as handle:
                handle.write(self._head)
                handle.write(self.render().encode(_ENCODING, _ERRORS))
        except OSError:
            return False
        return True

    def release(self) -> None:
        """Save unsaved changes to the bound path, then empty the document."""
        if self.is_dirty():
            self.dump(self.filepath)
            self.set_dirty(False)
        self.filepath = ""
        self._head = b""
        self._sections = []
        self._by_name = {}

    def sect_count(self) -> int:
        return len(self._sections)

    def sect_included(self, name: str) -> bool:
        return self._find(trim(name, SECTION_TRIM)) is not None

    def sect_rename(self, name: str, new_name: str) -> bool:
        """Rename a section; False if absent, invalid or clashing with another."""
        section = self._find(trim(name, SECTION_TRIM))
        if section is None:
            return False
        target = trim(new_name, SECTION_TRIM)
        if not _is_single_line(target):
            return False
        return self._rename_section(section, target)

    def sect_remove(self, name: str) -> bool:
        """Remove a section; False if there is none by that name."""
        section = self._by_name.pop(_fold(trim(name, SECTION_TRIM)), None)
        if section is None:
            return False
        self._sections = [s for s in self._sections if s is not section]
        self.set_dirty(True)
        return True

    def _rename_child(self, node: Node, name: str) -> bool:
        if not isinstance(node, Section):
            return False
        return self._rename_section(node, name)

    def _rename_section(self, section: Section, name: str) -> bool:
        if icompare(section.name, name) == 0:
            return True
        if self._find(name) is not None:
            return False
        del self._by_name[_fold(section.name)]
        section.name = name
        self._by_name[_fold(name)] = section
        self.set_dirty(True)
        return True