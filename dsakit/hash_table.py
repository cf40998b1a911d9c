"""A fixed-size hash table using linear probing with deletion markers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class DataItem:
    """A key with its stored value."""

    key: int
    data: Any


_DELETED = DataItem(key=-1, data=-1)


class HashTable:
    """Open-addressing hash table keyed by integers."""

    def __init__(self, size: int = 10) -> None:
        if size <= 0:
            raise ValueError("hash table size must be positive")
        self.size = size
        self._slots: list[DataItem | None] = [None] * size

    def hash_code(self, key: int) -> int:
        """Map a key to its home slot."""
        return key % self.size

    def _probe(self, key: int):
        start = self.hash_code(key)
        for step in range(self.size):
            yield (start + step) % self.size

    def insert(self, key: int, data: Any) -> DataItem:
        """Store a new item in the first free or deleted slot from its home slot."""
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None or slot is _DELETED:
                item = DataItem(key, data)
                self._slots[index] = item
                return item
        raise OverflowError("hash table is full")

    def _find(self, key: int) -> int | None:
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot is not _DELETED and slot.key == key:
                return index
        return None

    def search(self, key: int) -> DataItem | None:
        """Return the item stored under key, or None if absent."""
        index = self._find(key)
        return None if index is None else self._slots[index]

    def delete(self, key: int) -> DataItem | None:
        """Remove and return the item stored under key, or None if absent."""
        index = self._find(key)
        if index is None:
            return None
        item = self._slots[index]
        self._slots[index] = _DELETED
        return item

    def slots(self) -> list[DataItem | None]:
        """Return the live item in each slot, None for empty or deleted slots."""
        return [None if slot is _DELETED else slot for slot in self._slots]

    def render(self) -> str:
        """Return the table as text, one line per slot."""
        lines = ["Hash Table: "]
        for index, item in enumerate(self.slots()):
            if item is None:
                lines.append(f"{index} --> ~")
            else:
                lines.append(f"{index} --> ({item.key}, {item.data})")
        return "\n".join(lines) + "\n\n"