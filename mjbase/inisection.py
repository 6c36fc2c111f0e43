"""INI sections: an ordered list of nodes with case-insensitive key lookup."""

from __future__ import annotations

import string
from typing import Iterator, Optional

from mjbase.initext import (
    WHITESPACE,
    Comment,
    KeyValue,
    NilLine,
    Node,
    NodeType,
    check_key_name,
    icompare,
    trim,
)

SECTION_TRIM = "[]" + WHITESPACE

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _fold_key(name: str) -> str:
    return name.translate(_ASCII_LOWER)


def _is_single_line(text: str) -> bool:
    return "\r" not in text and "\n" not in text


class Section(Node):
    """A ``[name]`` section holding blank lines, comments and key/value nodes.

    The section itself sits in its own node list as a placeholder for the
    header line, so comments that precede the header keep their place.
    """

    def __init__(self, owner: Optional[Node] = None, name: str = "") -> None:
        super().__init__(NodeType.SECTION, owner)
        self.name = name
        self.nodes: list[Node] = []
        self._keys: dict[str, KeyValue] = {}

    @classmethod
    def try_create(cls, line: str, owner: Optional[Node]) -> Optional["Section"]:
        """Build a section from a trimmed ``[name]`` line, or None if it is not one."""
        if not line or line[0] != "[":
            return None
        close = line.find("]", 1)
        if close < 0:
            return None
        section = cls(owner, trim(line[1:close]))
        section.nodes.append(section)
        return section

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    @property
    def empty(self) -> bool:
        return not self.nodes

    def __getitem__(self, key: str) -> KeyValue:
        """Return the key/value node for ``key``, adding an empty one if absent.

        Adding a node this way does not mark the document dirty.
        """
        name = trim(key)
        if not check_key_name(name):
            raise ValueError(f"invalid key name: {key!r}")
        found = self._keys.get(_fold_key(name))
        if found is not None:
            return found
        node = KeyValue(self, name, "")
        self.nodes.append(node)
        self._keys[_fold_key(name)] = node
        return node

    def set_name(self, name: str) -> bool:
        """Rename the section; the owner decides when there is one."""
        new_name = trim(name, SECTION_TRIM)
        if not _is_single_line(new_name):
            return False
        if self.owner is None:
            self.name = new_name
            return True
        return self.owner._rename_child(self, new_name)

    def has_end_nilline(self) -> bool:
        """Whether the last node is a blank line."""
        return bool(self.nodes) and self.nodes[-1].node_type == NodeType.NILLINE

    def key_included(self, key: str) -> bool:
        return _fold_key(trim(key)) in self._keys

    def key_rename(self, key: str, name: str) -> bool:
        """Rename an existing key; False if absent, invalid or clashing."""
        node = self._keys.get(_fold_key(trim(key)))
        if node is None:
            return False
        new_name = trim(name)
        if not check_key_name(new_name):
            return False
        return self._rename_key(node, new_name)

    def key_remove(self, key: str) -> bool:
        """Remove a key/value node; False if there is no such key."""
        node = self._keys.pop(_fold_key(trim(key)), None)
        if node is None:
            return False
        self.nodes = [n for n in self.nodes if n is not node]
        self.set_dirty(True)
        return True

    def key_values(self) -> Iterator[KeyValue]:
        """Yield the key/value nodes in document order."""
        for node in self.nodes:
            if isinstance(node, KeyValue):
                yield node

    def push_node(self, node: Optional[Node]) -> bool:
        """Append a blank line, comment or key/value node.

        A key/value whose key is already present is refused.
        """
        if node is None:
            return False
        if node.node_type in (NodeType.NILLINE, NodeType.COMMENT):
            node.owner = self
            self.nodes.append(node)
            return True
        if isinstance(node, KeyValue):
            folded = _fold_key(node.key)
            if folded in self._keys:
                return False
            node.owner = self
            self.nodes.append(node)
            self._keys[folded] = node
            return True
        return False

    def pop_tail_comments(self, target: list[Node], front: bool) -> int:
        """Move trailing comments (bounded by a blank line) into ``target``.

        Only a single leading blank line at the very end may be taken along.
        If a key/value or the header is reached first, nothing moves.
        Returns the number of nodes moved.
        """
        popped: list[Node] = []
        limit = len(self.nodes)
        step = 0
        while step < limit and self.nodes:
            step += 1
            node = self.nodes[-1]
            if node.node_type == NodeType.NILLINE:
                if step > 1:
                    break
                popped.insert(0, self.nodes.pop())
                continue
            if node.node_type in (NodeType.KEYVALUE, NodeType.SECTION):
                self.nodes.extend(popped)
                popped = []
                break
            if node.node_type == NodeType.COMMENT:
                popped.insert(0, self.nodes.pop())
            else:
                raise ValueError(f"unexpected node type in section: {node.node_type!r}")
        if popped:
            if front:
                target[:0] = popped
            else:
                target.extend(popped)
        return len(popped)

    def _rename_child(self, node: Node, name: str) -> bool:
        if not isinstance(node, KeyValue):
            return False
        return self._rename_key(node, name)

    def _rename_key(self, node: KeyValue, name: str) -> bool:
        if icompare(node.key, name) == 0:
            return True
        if _fold_key(name) in self._keys:
            return False
        del self._keys[_fold_key(node.key)]
        node._key = name
        self._keys[_fold_key(name)] = node
        self.set_dirty(True)
        return True

    def render(self) -> str:
        parts = []
        for node in self.nodes:
            if node is self:
                if self.name:
                    parts.append(f"[{self.name}]\n")
            else:
                parts.append(node.render())
        return "".join(parts)


def make_node(line: str, owner: Optional[Node]) -> Optional[Node]:
    """Build the node a trimmed INI line stands for, or None if it is none."""
    for kind in (NilLine, Comment, Section, KeyValue):
        node = kind.try_create(line, owner)
        if node is not None:
            return node
    return None