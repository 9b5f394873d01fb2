"""Check whether every leaf of a binary tree lies at the same depth."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A plain binary tree node with an integer key."""

    key: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def equal_paths(root: Optional[TreeNode]) -> bool:
    """Return True if all paths from the root to a leaf have the same length."""
    leaf_depth: Optional[int] = None

    def visit(node: Optional[TreeNode], depth: int) -> bool:
        nonlocal leaf_depth
        if node is None:
            return True
        if node.left is None and node.right is None:
            if leaf_depth is None:
                leaf_depth = depth
            return leaf_depth == depth
        return visit(node.left, depth + 1) and visit(node.right, depth + 1)

    return visit(root, 0)


def _sample_trees() -> list[tuple[str, TreeNode]]:
    return [
        ("Test1", TreeNode(1)),
        ("Test2", TreeNode(1, TreeNode(2))),
        ("Test3", TreeNode(1, TreeNode(2), TreeNode(3))),
        ("Test4", TreeNode(1, None, TreeNode(3))),
        ("Test5", TreeNode(1, TreeNode(2, None, TreeNode(4)), TreeNode(3))),
    ]


def main(argv: Optional[list[str]] = None) -> int:
    """Print the equal-paths result for a set of sample trees."""
    for label, root in _sample_trees():
        print(f"{label}: {int(equal_paths(root))}")
    return 0