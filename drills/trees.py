"""Binary trees and the classic traversals and comparisons on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None

    @classmethod
    def from_level_order(cls, values: Iterable[Optional[int]]) -> Optional[TreeNode]:
        """Build a tree from level-order values, with None for a missing child."""
        items = iter(values)
        first = next(items, None)
        if first is None:
            return None
        root = cls(first)
        pending = deque([root])
        while pending:
            node = pending.popleft()
            for side in ("left", "right"):
                try:
                    value = next(items)
                except StopIteration:
                    return root
                if value is not None:
                    child = cls(value)
                    setattr(node, side, child)
                    pending.append(child)
        return root


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    if root is None:
        return None
    root.left, root.right = invert_tree(root.right), invert_tree(root.left)
    return root


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [child for node in level for child in (node.left, node.right) if child]


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the node values level by level, left to right."""
    return [[node.val for node in level] for level in _levels(root)]


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """Return the rightmost value of each level, top to bottom."""
    return [level[-1].val for level in _levels(root)]


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def is_subtree(root: Optional[TreeNode], sub_root: Optional[TreeNode]) -> bool:
    """Tell whether some node of ``root`` heads a tree equal to ``sub_root``."""
    if root is None:
        return False
    return (
        is_same_tree(root, sub_root)
        or is_subtree(root.left, sub_root)
        or is_subtree(root.right, sub_root)
    )