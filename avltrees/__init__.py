"""Binary search trees, AVL trees, an ASCII tree printer and an equal-leaf-depth check."""

__version__ = "0.1.0"
__all__ = ["avl", "bst", "demo", "equal_paths", "printing"]