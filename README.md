# avltrees

Ordered key/value maps built on binary search trees, in two kinds:

- `avltrees.bst.BinarySearchTree` is a plain binary search tree that does not rebalance.
- `avltrees.avl.AVLTree` is a self-balancing AVL tree with the same interface.

The package also has a printer that draws a tree as ASCII art, and a check that
tells whether every leaf of a binary tree lies at the same depth.

## Installation

```
pip install .
```

To also install what the tests need:

```
pip install ".[test]"
```

## Using the trees

```python
from avltrees.avl import AVLTree

tree = AVLTree()
tree.insert("b", 2)
tree.insert("c", 9)
tree.insert("d", 4)

print(tree["c"])          # 9
print("b" in tree)        # True
print(len(tree))          # 3
print(list(tree))         # ['b', 'c', 'd']
print(list(tree.items())) # [('b', 2), ('c', 9), ('d', 4)]
print(tree.is_balanced()) # True

tree.insert("c", 10)      # an existing key has its value replaced
tree.remove("b")          # removing a missing key does nothing
```

What both tree classes offer:

- `insert(key, value)` adds a key, or replaces the value of a key already present.
- `remove(key)` removes a key if present. A node with two children is first
  swapped with its in-order predecessor and then removed.
- `tree[key]` returns the value, and raises `KeyError` when the key is absent.
- `key in tree` and `len(tree)`.
- `find(key)` returns the `Node` holding the key, or `None`. A node has `key`,
  `value`, `parent`, `left` and `right` attributes and an `item` property
  giving the `(key, value)` pair.
- Iterating over a tree gives its keys in ascending order; `items()` gives
  `(key, value)` pairs in the same order.
- `root` is the root node, or `None` for an empty tree.
- `is_empty()`, `clear()` and `smallest_node()`.
- `BinarySearchTree.predecessor(node)` returns the in-order predecessor of a
  node, or `None`.
- `is_balanced()` reports whether the heights of the two subtrees of every node
  differ by at most one.

`BinarySearchTree` does no rebalancing, so its shape depends on the order of
insertion. `AVLTree` stores a balance factor on each `AVLNode` (right height
minus left height) and rotates on insert and remove to keep it within -1..1.

The trees live in memory only; the package does not save or load them.

## Printing a tree

```python
from avltrees.printing import print_tree, format_tree

print_tree(tree)                  # to standard output
text = format_tree(tree)          # the same drawing as a string
print_tree(tree, tree.root.left)  # only the subtree at a given node
```

`print_tree` also takes a `file` argument to write somewhere other than
standard output.

Nodes are drawn as numbered boxes such as `[01]`, joined by lines, with a list
after the drawing that maps each number to its key and value, in key order.
At most six levels are drawn; when the tree is deeper, the extra levels are
left out with a note. An empty tree is printed as `<empty tree>`.

The helpers `node_depth(root, node)` and `subtree_height(root)` in the same
module report a node's distance from a root (the root counting as 1) and the
height of a subtree, both looking no further than six levels.

## Equal leaf depths

```python
from avltrees.equal_paths import TreeNode, equal_paths

equal_paths(TreeNode(1, TreeNode(2), TreeNode(3)))                      # True
equal_paths(TreeNode(1, TreeNode(2, None, TreeNode(4)), TreeNode(3)))  # False
```

An empty tree (`None`) and a single node both count as having equal paths.

## Commands

```
avltrees-demo
```

Builds a small AVL tree, prints it with its contents, removes a key and prints
it again.

```
avltrees-equal-paths
```

Runs the equal-leaf-depth check on a few sample trees and prints each result as
`1` or `0`.

## Running the tests

```
pytest
```