"""Fixed-size open-addressing hash table with linear probing."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class OpenAddressHashTable(Generic[T]):
    """Table of 2**bit_size slots; keys are integers, probing walks forward."""

    def __init__(self, bit_size: int = 21) -> None:
        self.size = 1 << bit_size
        self.mask = self.size - 1
        self.count = 0
        self._slots: list[Optional[tuple[int, T]]] = [None] * self.size

    def __len__(self) -> int:
        return self.count

    def _probe(self, key: int):
        index = key & self.mask
        last = (index - 1) & self.mask
        while index != last:
            yield index
            index = (index + 1) & self.mask

    def is_full(self) -> bool:
        return self.count >= self.size

    def lookup(self, key: int) -> Optional[int]:
        """Return the slot index holding ``key``, or None if it is absent."""
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot[0] == key:
                return index
        return None

    def get_data(self, index: int) -> Optional[T]:
        """Return the data in a slot; raises IndexError outside the table."""
        if not 0 <= index < self.size:
            raise IndexError(f"slot {index} outside table of {self.size}")
        slot = self._slots[index]
        return None if slot is None else slot[1]

    def store(self, key: int, data: T) -> bool:
        """Put data in the first free slot along the probe; False if none was free."""
        for index in self._probe(key):
            if self._slots[index] is None:
                self._slots[index] = (key, data)
                self.count += 1
                return True
        return False

    def clear(self) -> None:
        """Free every slot."""
        self.count = 0
        self._slots = [None] * self.size