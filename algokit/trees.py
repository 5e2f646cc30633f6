"""Binary trees and the classic algorithms that operate on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(values: Sequence[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values where None marks a missing child."""
    if not values or values[0] is None:
        return None
    items = iter(values)
    root = TreeNode(next(items))
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                queue.append(child)
    return root


def tree_values(root: Optional[TreeNode]) -> list[Optional[int]]:
    """Return the level-order values of a tree, None for missing children."""
    result: list[Optional[int]] = []
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            result.append(None)
            continue
        result.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while result and result[-1] is None:
        result.pop()
    return result


def _is_mirror(a: Optional[TreeNode], b: Optional[TreeNode]) -> bool:
    if a is None or b is None:
        return a is b
    return a.val == b.val and _is_mirror(a.left, b.right) and _is_mirror(a.right, b.left)


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Tell whether the tree is a mirror image of itself."""
    return _is_mirror(root, root)


def min_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the shortest root-to-leaf path."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    if root.left is None:
        return min_depth(root.right) + 1
    if root.right is None:
        return min_depth(root.left) + 1
    return min(min_depth(root.left), min_depth(root.right)) + 1


def flatten(root: Optional[TreeNode]) -> None:
    """Flatten the tree in place into a right-leaning chain in preorder."""
    node = root
    while node is not None:
        if node.left is not None:
            rightmost = node.left
            while rightmost.right is not None:
                rightmost = rightmost.right
            rightmost.right = node.right
            node.right, node.left = node.left, None
        node = node.right


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Swap every node's children in place and return the root."""
    if root is not None:
        root.left, root.right = invert_tree(root.right), invert_tree(root.left)
    return root


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the deepest node that has both ``p`` and ``q`` as descendants."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def _within(node: Optional[TreeNode], low: Optional[int], high: Optional[int]) -> bool:
    if node is None:
        return True
    if low is not None and node.val <= low:
        return False
    if high is not None and node.val >= high:
        return False
    return _within(node.left, low, node.val) and _within(node.right, node.val, high)


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Tell whether the tree is a binary search tree with strictly ordered keys."""
    return _within(root, None, None)