"""An ordered map kept in an unbalanced binary search tree.

Keys are ordered by a user-supplied ``lower_than(key1, key2)`` predicate.
The map keeps a cursor (``current``) that is moved by searches,
insertions and the ``first``/``next`` traversal.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

LowerThan = Callable[[Any, Any], bool]


@dataclass
class Pair:
    """A key together with the value stored under it."""

    key: Any
    value: Any


@dataclass(eq=False)
class TreeNode:
    """A node of the search tree; nodes compare by identity."""

    pair: Pair
    left: Optional[TreeNode] = field(default=None, repr=False)
    right: Optional[TreeNode] = field(default=None, repr=False)
    parent: Optional[TreeNode] = field(default=None, repr=False)


def minimum(node: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return the leftmost node of the subtree rooted at ``node``."""
    if node is None:
        return None
    while node.left is not None:
        node = node.left
    return node


class TreeMap:
    """Binary search tree map ordered by a ``lower_than`` predicate."""

    def __init__(self, lower_than: LowerThan) -> None:
        self.root: Optional[TreeNode] = None
        self.current: Optional[TreeNode] = None
        self.lower_than = lower_than

    def is_equal(self, key1: Any, key2: Any) -> bool:
        """Two keys are equal when neither is lower than the other."""
        return not self.lower_than(key1, key2) and not self.lower_than(key2, key1)

    def insert(self, key: Any, value: Any) -> None:
        """Insert ``key`` with ``value``; an existing key is left untouched."""
        node = self.root
        parent: Optional[TreeNode] = None
        while node is not None:
            parent = node
            if self.lower_than(key, node.pair.key):
                node = node.left
            elif self.lower_than(node.pair.key, key):
                node = node.right
            else:
                return
        new_node = TreeNode(Pair(key, value), parent=parent)
        if parent is None:
            self.root = new_node
        elif self.lower_than(key, parent.pair.key):
            parent.left = new_node
        else:
            parent.right = new_node
        self.current = new_node

    def _replace_in_parent(self, node: TreeNode, child: Optional[TreeNode]) -> None:
        parent = node.parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        if child is not None:
            child.parent = parent

    def remove_node(self, node: Optional[TreeNode]) -> None:
        """Unlink ``node`` from the tree."""
        if node is None:
            return
        if node.left is not None and node.right is not None:
            successor = minimum(node.right)
            node.pair = successor.pair
            self.remove_node(successor)
            return
        child = node.left if node.left is not None else node.right
        self._replace_in_parent(node, child)

    def erase(self, key: Any) -> None:
        """Remove the entry for ``key`` if it is present."""
        if self.root is None:
            return
        if self.search(key) is None:
            return
        self.remove_node(self.current)

    def search(self, key: Any) -> Optional[Pair]:
        """Return the pair for ``key`` and move the cursor to it, or None."""
        node = self.root
        while node is not None:
            if self.lower_than(key, node.pair.key):
                node = node.left
            elif self.lower_than(node.pair.key, key):
                node = node.right
            else:
                self.current = node
                return node.pair
        return None

    def upper_bound(self, key: Any) -> Optional[Pair]:
        """Return the pair with the smallest key not lower than ``key``, or None."""
        node = self.root
        candidate: Optional[TreeNode] = None
        while node is not None:
            if self.is_equal(key, node.pair.key):
                self.current = node
                return node.pair
            if self.lower_than(key, node.pair.key):
                candidate = node
                node = node.left
            else:
                node = node.right
        if candidate is not None:
            self.current = candidate
            return candidate.pair
        return None

    def first(self) -> Optional[Pair]:
        """Move the cursor to the smallest key and return its pair."""
        if self.root is None:
            return None
        node = minimum(self.root)
        self.current = node
        return node.pair

    @staticmethod
    def _successor(node: TreeNode) -> Optional[TreeNode]:
        if node.right is not None:
            return minimum(node.right)
        parent = node.parent
        while parent is not None and parent.right is node:
            node = parent
            parent = parent.parent
        return parent

    def next(self) -> Optional[Pair]:
        """Advance the cursor to the following key and return its pair."""
        if self.current is None:
            return None
        self.current = self._successor(self.current)
        return self.current.pair if self.current is not None else None

    def __iter__(self) -> Iterator[Pair]:
        """Yield the pairs in key order without moving the cursor."""
        node = minimum(self.root)
        while node is not None:
            yield node.pair
            node = self._successor(node)