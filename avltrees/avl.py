"""A self-balancing AVL tree built on the plain binary search tree."""

from __future__ import annotations

from typing import Any, Optional

from avltrees.bst import BinarySearchTree, Node


class AVLNode(Node):
    """A search tree node that also records its balance factor.

    The balance is the height of the right subtree minus the height of the
    left subtree, so it stays within -1..1 in a valid AVL tree.
    """

    __slots__ = ("balance",)

    def __init__(self, key: Any, value: Any, parent: Optional[Node] = None) -> None:
        super().__init__(key, value, parent)
        self.balance = 0


class AVLTree(BinarySearchTree):
    """A binary search tree that keeps itself height-balanced on insert and remove."""

    node_class = AVLNode

    def insert(self, key: Any, value: Any) -> None:
        """Insert ``key`` with ``value``, overwriting the value if the key exists."""
        existing = self.find(key)
        if existing is not None:
            existing.value = value
            return
        node = AVLNode(key, value)
        self._insert_node(node)
        parent = node.parent
        if parent is None:
            return
        parent.balance += -1 if node is parent.left else 1
        if parent.balance != 0:
            self._insert_fix(parent, node)

    def _insert_fix(self, parent: AVLNode, node: AVLNode) -> None:
        """Walk up from a subtree that grew by one level, rotating where needed."""
        while True:
            grand = parent.parent
            if grand is None:
                return
            if parent is grand.left:
                grand.balance -= 1
                if grand.balance == 0:
                    return
                if grand.balance == -1:
                    node, parent = parent, grand
                    continue
                if node is parent.left:
                    self._rotate_right(grand)
                    parent.balance = grand.balance = 0
                else:
                    self._rotate_left(parent)
                    self._rotate_right(grand)
                    if node.balance == -1:
                        parent.balance, grand.balance = 0, 1
                    elif node.balance == 1:
                        parent.balance, grand.balance = -1, 0
                    else:
                        parent.balance = grand.balance = 0
                    node.balance = 0
                return
            grand.balance += 1
            if grand.balance == 0:
                return
            if grand.balance == 1:
                node, parent = parent, grand
                continue
            if node is parent.right:
                self._rotate_left(grand)
                parent.balance = grand.balance = 0
            else:
                self._rotate_right(parent)
                self._rotate_left(grand)
                if node.balance == 1:
                    parent.balance, grand.balance = 0, -1
                elif node.balance == -1:
                    parent.balance, grand.balance = 1, 0
                else:
                    parent.balance = grand.balance = 0
                node.balance = 0
            return

    def remove(self, key: Any) -> None:
        """Remove ``key`` if present; a node with two children is first swapped with its predecessor."""
        node = self.find(key)
        if node is None:
            return
        if node.left is not None and node.right is not None:
            self._node_swap(node, self.predecessor(node))
        parent = node.parent
        diff = 0
        if parent is not None:
            diff = 1 if node is parent.left else -1
        self._unlink(node)
        if parent is not None:
            self._remove_fix(parent, diff)

    def _remove_fix(self, node: Optional[AVLNode], diff: int) -> None:
        """Walk up from a subtree that shrank by one level, rotating where needed."""
        while node is not None:
            parent = node.parent
            next_diff = 0
            if parent is not None:
                next_diff = 1 if node is parent.left else -1
            node.balance += diff
            if node.balance == -2:
                child = node.left
                if child.balance == -1:
                    self._rotate_right(node)
                    node.balance = child.balance = 0
                elif child.balance == 0:
                    self._rotate_right(node)
                    node.balance, child.balance = -1, 1
                    return
                else:
                    pivot = child.right
                    self._rotate_left(child)
                    self._rotate_right(node)
                    if pivot.balance == 1:
                        node.balance, child.balance = 0, -1
                    elif pivot.balance == -1:
                        node.balance, child.balance = 1, 0
                    else:
                        node.balance = child.balance = 0
                    pivot.balance = 0
            elif node.balance == 2:
                child = node.right
                if child.balance == 1:
                    self._rotate_left(node)
                    node.balance = child.balance = 0
                elif child.balance == 0:
                    self._rotate_left(node)
                    node.balance, child.balance = 1, -1
                    return
                else:
                    pivot = child.left
                    self._rotate_right(child)
                    self._rotate_left(node)
                    if pivot.balance == -1:
                        node.balance, child.balance = 0, 1
                    elif pivot.balance == 1:
                        node.balance, child.balance = -1, 0
                    else:
                        node.balance = child.balance = 0
                    pivot.balance = 0
            elif node.balance != 0:
                return
            node, diff = parent, next_diff

    def _replace_child(self, parent: Optional[Node], old: Node, new: Node) -> None:
        new.parent = parent
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, node: AVLNode) -> AVLNode:
        pivot = node.right
        parent = node.parent
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        pivot.left = node
        node.parent = pivot
        self._replace_child(parent, node, pivot)
        return pivot

    def _rotate_right(self, node: AVLNode) -> AVLNode:
        pivot = node.left
        parent = node.parent
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        pivot.right = node
        node.parent = pivot
        self._replace_child(parent, node, pivot)
        return pivot

    def _node_swap(self, n1: Optional[Node], n2: Optional[Node]) -> None:
        """Exchange the positions of two nodes, carrying the balance factors with the positions."""
        if n1 is None or n2 is None or n1 is n2:
            return
        super()._node_swap(n1, n2)
        n1.balance, n2.balance = n2.balance, n1.balance