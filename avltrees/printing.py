"""ASCII rendering of a binary search tree, with numbered placeholders for keys."""

from __future__ import annotations

import io
import sys
from typing import Any, Optional, TextIO

from avltrees.bst import BinarySearchTree, Node

MAX_HEIGHT = 6
"""Deepest level of a tree that is drawn."""

NOT_FOUND = -1
"""Depth reported for a node further than MAX_HEIGHT levels from the root."""

INCONSISTENT = -2
"""Depth reported when the parent chain never reaches the root."""

BOX_WIDTH = 4
PADDING = 2
ELEMENT_WIDTH = BOX_WIDTH + PADDING

_USE_TREE_ROOT = object()


def _u16(value: int) -> int:
    return value & 0xFFFF


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def node_depth(root: Optional[Node], node: Optional[Node]) -> int:
    """Return the distance of ``node`` from ``root``, counting the root as 1.

    Returns NOT_FOUND when the distance exceeds MAX_HEIGHT and INCONSISTENT
    when the chain of parents ends before reaching ``root``.
    """
    dist = 1
    while node is not root:
        if node is None:
            return INCONSISTENT
        dist += 1
        node = node.parent
        if dist > MAX_HEIGHT:
            return NOT_FOUND
    return dist


def subtree_height(root: Optional[Node], recursion_depth: int = 1) -> int:
    """Return the height of the subtree at ``root``, never looking past MAX_HEIGHT levels."""
    if root is None or recursion_depth > MAX_HEIGHT:
        return 0
    return max(
        subtree_height(root.left, recursion_depth + 1),
        subtree_height(root.right, recursion_depth + 1),
    ) + 1


def _placeholders(tree: BinarySearchTree, root: Node) -> dict[Any, int]:
    placeholders: dict[Any, int] = {}
    next_value = 1
    for key in tree:
        node = tree.find(key)
        if node_depth(root, node) != NOT_FOUND:
            placeholders[key] = next_value
            next_value = (next_value + 1) & 0xFF
    return placeholders


def _branch_line(prev_row: list[Optional[Node]], margin: int, padding: int) -> str:
    gap = " " * (padding // 2 + 3)
    dashes = "\u2500" * (padding // 2 - 1)
    parts = [" " * (margin + 2)]
    for node in prev_row:
        if node is None or node.left is None:
            parts.append(gap)
        else:
            parts.append("\u250c" + dashes + "\u2518  ")
        if node is None or node.right is None:
            parts.append(gap)
        else:
            parts.append("\u2514" + dashes + "\u2510  ")
        parts.append(" " * (padding + 2))
    return "".join(parts)


def format_tree(tree: BinarySearchTree, root: Any = _USE_TREE_ROOT) -> str:
    """Render the subtree at ``root`` (the tree's root by default) as text.

    Nodes are drawn as numbered boxes; the numbers are explained below the
    drawing as ``[NN] -> (key, value)`` lines in key order.
    """
    if root is _USE_TREE_ROOT:
        root = tree.root
    if root is None:
        return "<empty tree>\n"

    out = io.StringIO()
    height = subtree_height(root)
    clipped = height > MAX_HEIGHT
    if clipped:
        height = MAX_HEIGHT

    final_row_elements = 2 ** (height - 1)
    final_row_width = _u16(ELEMENT_WIDTH * final_row_elements - PADDING)
    placeholders = _placeholders(tree, root)

    margin = _u16(final_row_width // 2 - BOX_WIDTH // 2)
    padding = _u16(final_row_width - 2)
    row: list[Optional[Node]] = [root]

    for level in range(height):
        boxes = []
        for node in row:
            if node is None:
                boxes.append("    ")
            else:
                number = placeholders.setdefault(node.key, 0)
                boxes.append(f"[{number:02d}]")
        out.write(" " * margin + (" " * padding).join(boxes) + "\n")

        padding = _u16(_trunc_div(padding - BOX_WIDTH, 2))
        margin = _u16(margin - (padding // 2 + 2))

        prev_row = row
        row = []
        for node in prev_row:
            if node is None:
                row.extend((None, None))
            else:
                row.extend((node.left, node.right))

        if level < height - 1:
            out.write(_branch_line(prev_row, margin, padding) + "\n")

    out.write("\n")
    if clipped:
        out.write("(deeper levels omitted due to space limitations)\n")

    out.write("Tree Placeholders:------------------\n")
    for key in sorted(placeholders):
        found = tree.find(key)
        shown = "<error: lookup failed>" if found is None else str(found.value)
        out.write(f"[{placeholders[key]:02d}] -> ({key}, {shown})\n")
    return out.getvalue()


def print_tree(tree: BinarySearchTree, root: Any = _USE_TREE_ROOT, file: Optional[TextIO] = None) -> None:
    """Write the rendering of ``format_tree`` to ``file`` (standard output by default)."""
    (file if file is not None else sys.stdout).write(format_tree(tree, root))