import pytest

from algobox.trees import TreeNode, identical_trees, vertical_order


def _sample_tree(leaf=5):
    return TreeNode(
        1,
        TreeNode(2, TreeNode(4), TreeNode(leaf)),
        TreeNode(3),
    )


def _collect(node):
    if node is None:
        return []
    return [node.value] + _collect(node.left) + _collect(node.right)


def test_identical_trees_source_example():
    assert identical_trees(_sample_tree(), _sample_tree()) is True


def test_identical_trees_different_value():
    assert identical_trees(_sample_tree(), _sample_tree(leaf=6)) is False


def test_identical_trees_different_shape():
    first = TreeNode(1, TreeNode(2))
    second = TreeNode(1, None, TreeNode(2))
    assert identical_trees(first, second) is False


def test_identical_trees_empty():
    assert identical_trees(None, None) is True
    assert identical_trees(TreeNode(1), None) is False
    assert identical_trees(None, TreeNode(1)) is False


def _vertical_sample():
    return TreeNode(
        10,
        TreeNode(7, TreeNode(3), TreeNode(11)),
        TreeNode(4, TreeNode(14), TreeNode(6)),
    )


def test_vertical_order_source_example():
    assert vertical_order(_vertical_sample()) == [[3], [7], [10, 11, 14], [4], [6]]


def test_vertical_order_keeps_every_value():
    root = _vertical_sample()
    columns = vertical_order(root)
    flattened = [value for column in columns for value in column]
    assert sorted(flattened) == sorted(_collect(root))


def test_vertical_order_empty_tree():
    assert vertical_order(None) == []


@pytest.mark.parametrize("depth", [1, 3, 5])
def test_vertical_order_left_chain_one_per_column(depth):
    root = None
    for value in range(depth):
        root = TreeNode(value, root)
    assert vertical_order(root) == [[value] for value in range(depth)]