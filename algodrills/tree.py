"""Binary tree exercises: traversal, comparison, symmetry, depth, balanced construction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

_LEFT_MARK = -1
_RIGHT_MARK = 1


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def _inorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.val
    yield from _inorder(node.right)


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the values of the tree in left-node-right order."""
    return list(_inorder(root))


def _marked_inorder(node: Optional[TreeNode]) -> Iterator[int]:
    # An in-order walk that records a marker before descending into each child.
    if node is None:
        return
    if node.left is not None:
        yield _LEFT_MARK
        yield from _marked_inorder(node.left)
    yield node.val
    if node.right is not None:
        yield _RIGHT_MARK
        yield from _marked_inorder(node.right)


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Return True if both trees give the same shape-marked in-order walk.

    A left descent is recorded as -1 and a right descent as 1, so trees whose
    values coincide with these markers may compare equal.
    """
    return list(_marked_inorder(p)) == list(_marked_inorder(q))


def _mirrors(left: Optional[TreeNode], right: Optional[TreeNode]) -> bool:
    if left is None or right is None:
        return left is right
    return (
        left.val == right.val
        and _mirrors(left.left, right.right)
        and _mirrors(left.right, right.left)
    )


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Return True if the tree is a mirror image of itself around its root."""
    return root is None or _mirrors(root.left, root.right)


def max_depth(node: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if node is None:
        return 0
    return max(max_depth(node.left), max_depth(node.right)) + 1


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from sorted ``nums``; None for an empty sequence.

    Each subtree is rooted at the lower middle element of its range.
    """

    def build(begin: int, end: int) -> TreeNode:
        mid = begin + (end - begin) // 2
        return TreeNode(
            nums[mid],
            build(begin, mid - 1) if mid > begin else None,
            build(mid + 1, end) if mid < end else None,
        )

    if not nums:
        return None
    return build(0, len(nums) - 1)