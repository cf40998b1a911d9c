"""A doubly linked list with append and in-place reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A list node linked in both directions."""

    data: Any
    prev: Node | None = None
    next: Node | None = None


class DoublyLinkedList:
    """Doubly linked list with head and tail references."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self.head: Node | None = None
        self.tail: Node | None = None
        self._size = 0
        for item in items or ():
            self.append(item)

    def append(self, data: Any) -> Node:
        """Add a value at the end and return its node."""
        node = Node(data, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1
        return node

    def reverse(self) -> None:
        """Reverse the list in place by swapping each node's links."""
        current = self.head
        while current is not None:
            current.prev, current.next = current.next, current.prev
            current = current.prev
        self.head, self.tail = self.tail, self.head

    def _walk(self, start: Node | None, forward: bool) -> Iterator[Any]:
        current = start
        while current is not None:
            yield current.data
            current = current.next if forward else current.prev

    def __iter__(self) -> Iterator[Any]:
        return self._walk(self.head, forward=True)

    def __len__(self) -> int:
        return self._size

    def backward(self) -> Iterator[Any]:
        """Yield values from tail to head."""
        return self._walk(self.tail, forward=False)