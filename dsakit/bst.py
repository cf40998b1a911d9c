"""An unbalanced binary search tree with the three depth-first traversals."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _TreeNode:
    data: Any
    left: _TreeNode | None = None
    right: _TreeNode | None = None


class BST:
    """Binary search tree; equal values go to the right subtree."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._root: _TreeNode | None = None
        for item in items or ():
            self.insert(item)

    def is_empty(self) -> bool:
        """Return True when the tree holds no values."""
        return self._root is None

    def insert(self, item: Any) -> None:
        """Insert a value at its leaf position."""
        node = _TreeNode(item)
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if item < current.data:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def inorder(self) -> Iterator[Any]:
        """Yield values left subtree, node, right subtree."""
        stack: list[_TreeNode] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current.data
            current = current.right

    def preorder(self) -> Iterator[Any]:
        """Yield values node, left subtree, right subtree."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.data
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def postorder(self) -> Iterator[Any]:
        """Yield values left subtree, right subtree, node."""
        stack = [self._root] if self._root is not None else []
        reversed_order: list[Any] = []
        while stack:
            node = stack.pop()
            reversed_order.append(node.data)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(reversed_order)

    def __iter__(self) -> Iterator[Any]:
        return self.inorder()