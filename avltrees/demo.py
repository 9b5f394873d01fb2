"""A short demonstration of the AVL tree: insert, list, look up and remove."""

from __future__ import annotations

from typing import Optional

from avltrees.avl import AVLTree
from avltrees.printing import print_tree


def main(argv: Optional[list[str]] = None) -> int:
    """Build a small AVL tree, print it, remove one key and print it again."""
    tree = AVLTree()
    tree.insert("b", 2)
    tree.insert("c", 9)
    tree.insert("d", 4)

    print_tree(tree, tree.root)

    print("\nAVLTree contents:")
    for key, value in tree.items():
        print(f"{key} {value}")
    if "b" in tree:
        print("Found b")
    print("Erasing b")
    tree.remove("b")
    print_tree(tree, tree.root)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())