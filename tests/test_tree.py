import copy

from hypothesis import given
from hypothesis import strategies as st

from algodrills.tree import (
    TreeNode,
    inorder_traversal,
    is_same_tree,
    is_symmetric,
    max_depth,
    sorted_array_to_bst,
)

trees = st.recursive(
    st.none(),
    lambda children: st.builds(TreeNode, st.integers(0, 9), children, children),
    max_leaves=12,
)


def _mirror(node):
    if node is None:
        return None
    return TreeNode(node.val, _mirror(node.right), _mirror(node.left))


def _count(node):
    if node is None:
        return 0
    return 1 + _count(node.left) + _count(node.right)


def test_inorder_source_example():
    root = TreeNode(1)
    root.right = TreeNode(2)
    root.right.left = TreeNode(3)
    assert inorder_traversal(root) == [1, 3, 2]


def test_inorder_empty():
    assert inorder_traversal(None) == []


@given(trees)
def test_inorder_visits_every_node(root):
    assert len(inorder_traversal(root)) == _count(root)


@given(trees)
def test_same_tree_with_copy(root):
    assert is_same_tree(root, copy.deepcopy(root)) is True


def test_same_tree_source_example():
    first = TreeNode(1, None, TreeNode(2, TreeNode(3)))
    second = TreeNode(1, None, TreeNode(2, TreeNode(3)))
    assert is_same_tree(first, second) is True


def test_different_values_are_not_same():
    assert is_same_tree(TreeNode(1), TreeNode(2)) is False


def test_different_shapes_are_not_same():
    left_child = TreeNode(5, TreeNode(7))
    right_child = TreeNode(5, None, TreeNode(7))
    assert is_same_tree(left_child, right_child) is False


def test_empty_trees_are_same():
    assert is_same_tree(None, None) is True
    assert is_same_tree(None, TreeNode(4)) is False


def test_symmetric_source_example():
    root = TreeNode(
        1,
        TreeNode(2, TreeNode(3), TreeNode(4)),
        TreeNode(2, TreeNode(4), TreeNode(3)),
    )
    assert is_symmetric(root) is True


def test_asymmetric_tree():
    root = TreeNode(1, TreeNode(2, None, TreeNode(3)), TreeNode(2, None, TreeNode(3)))
    assert is_symmetric(root) is False


def test_one_sided_tree_is_not_symmetric():
    assert is_symmetric(TreeNode(1, TreeNode(2))) is False
    assert is_symmetric(TreeNode(1, None, TreeNode(2))) is False


def test_trivial_trees_are_symmetric():
    assert is_symmetric(None) is True
    assert is_symmetric(TreeNode(7)) is True


@given(trees)
def test_tree_with_its_mirror_is_symmetric(subtree):
    assert is_symmetric(TreeNode(0, subtree, _mirror(subtree))) is True


def test_max_depth_empty():
    assert max_depth(None) == 0


@given(trees)
def test_max_depth_equals_mirror_depth(root):
    depth = max_depth(root)
    assert depth == max_depth(_mirror(root))
    assert depth <= _count(root)


@given(trees)
def test_max_depth_grows_by_one_under_new_root(root):
    assert max_depth(TreeNode(0, root)) == max_depth(root) + 1


def test_sorted_array_to_bst_empty():
    assert sorted_array_to_bst([]) is None


def test_sorted_array_to_bst_source_example():
    root = sorted_array_to_bst([1, 3])
    assert root.val == 1
    assert root.left is None
    assert root.right.val == 3


@given(st.lists(st.integers(-1000, 1000), unique=True, max_size=60).map(sorted))
def test_sorted_array_to_bst_round_trip_and_balance(nums):
    root = sorted_array_to_bst(nums)
    assert inorder_traversal(root) == nums
    assert max_depth(root) == len(nums).bit_length()