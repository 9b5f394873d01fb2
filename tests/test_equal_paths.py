import pytest

from avltrees.equal_paths import TreeNode, equal_paths, main


@pytest.mark.parametrize(
    "root, expected",
    [
        (TreeNode(1), True),
        (TreeNode(1, TreeNode(2)), True),
        (TreeNode(1, TreeNode(2), TreeNode(3)), True),
        (TreeNode(1, None, TreeNode(3)), True),
        (TreeNode(1, TreeNode(2, None, TreeNode(4)), TreeNode(3)), False),
    ],
)
def test_sample_trees(root, expected):
    assert equal_paths(root) is expected


def test_empty_tree_has_equal_paths():
    assert equal_paths(None) is True


def test_full_tree_of_depth_two():
    root = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3, None, TreeNode(6)))
    assert equal_paths(root) is True


def test_uneven_deep_leaf():
    root = TreeNode(1, TreeNode(2, TreeNode(4)), TreeNode(3, TreeNode(5, TreeNode(6))))
    assert equal_paths(root) is False


def test_main_prints_results(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Test1: 1", "Test2: 1", "Test3: 1", "Test4: 1", "Test5: 0"]