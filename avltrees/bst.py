"""An unbalanced binary search tree with parent links and in-order iteration."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional


class Node:
    """A node of a search tree holding one key/value pair."""

    __slots__ = ("key", "value", "parent", "left", "right")

    def __init__(self, key: Any, value: Any, parent: Optional["Node"] = None) -> None:
        self.key = key
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    @property
    def item(self) -> tuple[Any, Any]:
        """The (key, value) pair stored in this node."""
        return (self.key, self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r}, {self.value!r})"


class BinarySearchTree:
    """A binary search tree mapping keys to values, kept in key order but not balanced."""

    node_class = Node

    def __init__(self) -> None:
        self._root: Optional[Node] = None

    @property
    def root(self) -> Optional[Node]:
        """The root node, or None for an empty tree."""
        return self._root

    # ------------------------------------------------------------------ queries

    def is_empty(self) -> bool:
        """Return True if the tree holds no items."""
        return self._root is None

    def find(self, key: Any) -> Optional[Node]:
        """Return the node holding ``key``, or None if it is absent."""
        current = self._root
        while current is not None:
            if key == current.key:
                return current
            current = current.left if key < current.key else current.right
        return None

    def __getitem__(self, key: Any) -> Any:
        node = self.find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def __len__(self) -> int:
        return sum(1 for _ in self._iter_nodes())

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the keys in ascending order."""
        return (node.key for node in self._iter_nodes())

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Iterate over (key, value) pairs in ascending key order."""
        return (node.item for node in self._iter_nodes())

    def smallest_node(self) -> Optional[Node]:
        """Return the node with the smallest key, or None if the tree is empty."""
        current = self._root
        if current is None:
            return None
        while current.left is not None:
            current = current.left
        return current

    @staticmethod
    def predecessor(node: Optional[Node]) -> Optional[Node]:
        """Return the in-order predecessor of ``node``, or None if there is none."""
        if node is None:
            return None
        if node.left is not None:
            current = node.left
            while current.right is not None:
                current = current.right
            return current
        current, parent = node, node.parent
        while parent is not None and current is parent.left:
            current, parent = parent, parent.parent
        return parent

    @staticmethod
    def _successor(node: Node) -> Optional[Node]:
        if node.right is not None:
            current = node.right
            while current.left is not None:
                current = current.left
            return current
        current, parent = node, node.parent
        while parent is not None and current is parent.right:
            current, parent = parent, parent.parent
        return parent

    def _iter_nodes(self) -> Iterator[Node]:
        node = self.smallest_node()
        while node is not None:
            yield node
            node = self._successor(node)

    def is_balanced(self) -> bool:
        """Return True if every node's subtrees differ in height by at most one."""
        return self._balanced_height(self._root) is not None

    def _balanced_height(self, node: Optional[Node]) -> Optional[int]:
        if node is None:
            return 0
        left = self._balanced_height(node.left)
        if left is None:
            return None
        right = self._balanced_height(node.right)
        if right is None:
            return None
        if abs(left - right) > 1:
            return None
        return max(left, right) + 1

    # ---------------------------------------------------------------- mutation

    def insert(self, key: Any, value: Any) -> None:
        """Insert ``key`` with ``value``, overwriting the value if the key exists."""
        existing = self.find(key)
        if existing is not None:
            existing.value = value
            return
        self._insert_node(self.node_class(key, value))

    def _insert_node(self, node: Node) -> None:
        """Attach ``node`` as a leaf at its ordered position."""
        if self._root is None:
            self._root = node
            node.parent = None
            return
        current: Optional[Node] = self._root
        parent = self._root
        while current is not None:
            parent = current
            current = current.right if node.key > current.key else current.left
        if node.key > parent.key:
            parent.right = node
        else:
            parent.left = node
        node.parent = parent

    def remove(self, key: Any) -> None:
        """Remove ``key`` if present; a node with two children is first swapped with its predecessor."""
        node = self.find(key)
        if node is None:
            return
        if node.left is not None and node.right is not None:
            self._node_swap(node, self.predecessor(node))
        self._unlink(node)

    def _unlink(self, node: Node) -> None:
        """Detach a node that has at most one child, splicing the child into its place."""
        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.parent = node.left = node.right = None

    def clear(self) -> None:
        """Remove every item from the tree."""
        self._root = None

    def _node_swap(self, n1: Optional[Node], n2: Optional[Node]) -> None:
        """Exchange the positions of two nodes in the tree, keeping their contents."""
        if n1 is None or n2 is None or n1 is n2:
            return
        n1p, n1r, n1l = n1.parent, n1.right, n1.left
        n2p, n2r, n2l = n2.parent, n2.right, n2.left
        n1_is_left = n1p is not None and n1p.left is n1
        n2_is_left = n2p is not None and n2p.left is n2

        n1.parent, n2.parent = n2.parent, n1.parent
        n1.left, n2.left = n2.left, n1.left
        n1.right, n2.right = n2.right, n1.right

        if n1r is n2:
            n2.right = n1
            n1.parent = n2
        elif n2r is n1:
            n1.right = n2
            n2.parent = n1
        elif n1l is n2:
            n2.left = n1
            n1.parent = n2
        elif n2l is n1:
            n1.left = n2
            n2.parent = n1

        if n1p is not None and n1p is not n2:
            if n1_is_left:
                n1p.left = n2
            else:
                n1p.right = n2
        if n1r is not None and n1r is not n2:
            n1r.parent = n2
        if n1l is not None and n1l is not n2:
            n1l.parent = n2

        if n2p is not None and n2p is not n1:
            if n2_is_left:
                n2p.left = n1
            else:
                n2p.right = n1
        if n2r is not None and n2r is not n1:
            n2r.parent = n1
        if n2l is not None and n2l is not n1:
            n2l.parent = n1

        if self._root is n1:
            self._root = n2
        elif self._root is n2:
            self._root = n1