import pytest

from algokit.trees import (
    TreeNode,
    build_tree,
    flatten,
    invert_tree,
    is_symmetric,
    is_valid_bst,
    lowest_common_ancestor,
    min_depth,
    tree_values,
)


def _find(root, value):
    if root is None:
        return None
    if root.val == value:
        return root
    return _find(root.left, value) or _find(root.right, value)


def _preorder(root):
    if root is None:
        return []
    return [root.val] + _preorder(root.left) + _preorder(root.right)


def _height(root):
    if root is None:
        return 0
    return 1 + max(_height(root.left), _height(root.right))


@pytest.mark.parametrize(
    "values",
    [[], [1], [1, 2, 2, 3, 4, 4, 3], [1, 2, 2, None, 3, None, 3], [5, 1, 4, None, None, 3, 6]],
)
def test_build_and_read_round_trip(values):
    assert tree_values(build_tree(values)) == values


def test_build_tree_empty_is_none():
    assert build_tree([]) is None
    assert build_tree([None]) is None


def test_is_symmetric_true():
    assert is_symmetric(build_tree([1, 2, 2, 3, 4, 4, 3])) is True


def test_is_symmetric_false():
    assert is_symmetric(build_tree([1, 2, 2, None, 3, None, 3])) is False


def test_is_symmetric_empty():
    assert is_symmetric(None) is True


def test_min_depth_empty_and_leaf():
    assert min_depth(None) == 0
    assert min_depth(TreeNode(7)) == 1


def test_min_depth_chain_equals_height():
    chain = build_tree([1, None, 2, None, 3, None, 4])
    assert min_depth(chain) == _height(chain)


def test_min_depth_not_above_height():
    root = build_tree([3, 9, 20, None, None, 15, 7])
    assert min_depth(root) < _height(root)
    assert min_depth(root) == min_depth(root.left) + 1


@pytest.mark.parametrize("values", [[1, 2, 5, 3, 4, None, 6], [1], [1, 2, None, 3], []])
def test_flatten_gives_preorder_chain(values):
    root = build_tree(values)
    expected = _preorder(root)
    flatten(root)
    chain = []
    node = root
    while node is not None:
        assert node.left is None
        chain.append(node.val)
        node = node.right
    assert chain == expected


def test_invert_tree_worked_example():
    root = invert_tree(build_tree([4, 2, 7, 1, 3, 6, 9]))
    assert tree_values(root) == [4, 7, 2, 9, 6, 3, 1]


@pytest.mark.parametrize("values", [[4, 2, 7, 1, 3, 6, 9], [1, 2, None, 3], [5, 1, 4, None, None, 3, 6]])
def test_invert_twice_restores(values):
    assert tree_values(invert_tree(invert_tree(build_tree(values)))) == values


def test_invert_reverses_preorder_mirror():
    root = build_tree([1, 2, 3, 4, 5])
    original_inorder_reversed = list(reversed(_inorder(root)))
    assert _inorder(invert_tree(root)) == original_inorder_reversed


def _inorder(root):
    if root is None:
        return []
    return _inorder(root.left) + [root.val] + _inorder(root.right)


@pytest.mark.parametrize("p, q, expected", [(5, 1, 3), (5, 4, 5), (6, 4, 5), (7, 8, 3)])
def test_lowest_common_ancestor(p, q, expected):
    root = build_tree([3, 5, 1, 6, 2, 0, 8, None, None, 7, 4])
    result = lowest_common_ancestor(root, _find(root, p), _find(root, q))
    assert result is _find(root, expected)


@pytest.mark.parametrize(
    "values, expected",
    [
        ([2, 1, 3], True),
        ([5, 1, 4, None, None, 3, 6], False),
        ([2, 2], False),
        ([], True),
        ([10, 5, 15, None, None, 6, 20], False),
    ],
)
def test_is_valid_bst(values, expected):
    assert is_valid_bst(build_tree(values)) is expected


def test_is_valid_bst_large_values():
    root = TreeNode(0, TreeNode(-(2**70)), TreeNode(2**70))
    assert is_valid_bst(root) is True