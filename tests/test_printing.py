import io

from hypothesis import given, strategies as st

from avltrees.bst import BinarySearchTree, Node
from avltrees.printing import (
    INCONSISTENT,
    MAX_HEIGHT,
    NOT_FOUND,
    format_tree,
    node_depth,
    print_tree,
    subtree_height,
)


def _tree(*keys):
    tree = BinarySearchTree()
    for index, key in enumerate(keys):
        tree.insert(key, index)
    return tree


def test_empty_tree():
    assert format_tree(BinarySearchTree()) == "<empty tree>\n"


def test_single_node_rendering():
    tree = _tree("a")
    assert format_tree(tree) == (
        "[01]\n\nTree Placeholders:------------------\n[01] -> (a, 0)\n"
    )


def test_three_node_rendering():
    tree = BinarySearchTree()
    tree.insert("b", 2)
    tree.insert("a", 1)
    tree.insert("c", 3)
    lines = format_tree(tree).split("\n")
    assert lines[0] == "   [02]"
    assert lines[1] == "  \u250c\u2518  \u2514\u2510      "
    assert lines[2] == "[01]  [03]"
    assert lines[4] == "Tree Placeholders:------------------"
    assert lines[5:8] == ["[01] -> (a, 1)", "[02] -> (b, 2)", "[03] -> (c, 3)"]


def test_node_depth_of_root_is_one():
    tree = _tree(5, 3, 8)
    assert node_depth(tree.root, tree.root) == 1
    assert node_depth(tree.root, tree.find(3)) == 2


def test_node_depth_inconsistent_chain():
    tree = _tree(5, 3, 8)
    stray = Node(99, 0)
    assert node_depth(tree.root, stray) == INCONSISTENT


def test_node_depth_too_deep():
    tree = _tree(*range(10))
    deepest = tree.find(9)
    assert node_depth(tree.root, deepest) == NOT_FOUND
    assert node_depth(tree.root, tree.find(MAX_HEIGHT - 1)) == MAX_HEIGHT


def test_subtree_height_is_capped():
    tree = _tree(*range(10))
    assert subtree_height(tree.root) == MAX_HEIGHT
    assert subtree_height(None) == 0


def test_subtree_height_balanced():
    tree = _tree(4, 2, 6, 1, 3, 5, 7)
    assert subtree_height(tree.root) == 3
    assert subtree_height(tree.find(2)) == 2


def test_print_tree_matches_format(capsys):
    tree = _tree(4, 2, 6)
    buffer = io.StringIO()
    print_tree(tree, file=buffer)
    assert buffer.getvalue() == format_tree(tree)
    print_tree(tree)
    assert capsys.readouterr().out == format_tree(tree)


@given(st.lists(st.integers(min_value=0, max_value=50), unique=True, min_size=1, max_size=20))
def test_placeholders_in_key_order(keys):
    tree = _tree(*keys)
    text = format_tree(tree)
    listed = [line for line in text.splitlines() if " -> " in line]
    numbers = [int(line[1:3]) for line in listed]
    assert numbers == list(range(1, len(listed) + 1))
    shown_keys = [int(line.split("(")[1].split(",")[0]) for line in listed]
    assert shown_keys == sorted(shown_keys)
    if subtree_height(tree.root) < MAX_HEIGHT:
        assert len(listed) == len(keys)