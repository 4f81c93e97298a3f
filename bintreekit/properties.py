"""Whole-tree measurements: height, balance, diameter, path sums and symmetry."""

from __future__ import annotations

from typing import Optional

from .node import Node


def height(root: Optional[Node]) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def _balanced_height(node: Optional[Node]) -> Optional[int]:
    """Height of the subtree, or None as soon as any subtree is unbalanced."""
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None:
        return None
    if abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced(root: Optional[Node]) -> bool:
    """True when every node's subtrees differ in height by at most one."""
    return _balanced_height(root) is not None


def diameter(root: Optional[Node]) -> int:
    """Number of edges on the longest path between any two nodes."""
    best = 0

    def depth(node: Optional[Node]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = depth(node.left)
        right = depth(node.right)
        best = max(best, left + right)
        return max(left, right) + 1

    depth(root)
    return best


def max_path_sum(root: Optional[Node]) -> int:
    """Largest sum of values along any path between two nodes.

    Raises ValueError for an empty tree, which has no path at all.
    """
    if root is None:
        raise ValueError("an empty tree has no path")
    best = root.data

    def gain(node: Optional[Node]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        best = max(best, node.data + left + right)
        return node.data + max(left, right)

    gain(root)
    return best


def _mirrors(first: Optional[Node], second: Optional[Node]) -> bool:
    if first is None or second is None:
        return first is second
    return (
        first.data == second.data
        and _mirrors(first.left, second.right)
        and _mirrors(first.right, second.left)
    )


def is_symmetric(root: Optional[Node]) -> bool:
    """True when the tree is a mirror image of itself around the root."""
    if root is None:
        return True
    return _mirrors(root.left, root.right)