"""Depth-first and breadth-first traversals of a binary tree."""

from __future__ import annotations

from collections import deque
from enum import Enum, auto
from typing import Iterator, NamedTuple, Optional

from .node import Node


class Traversals(NamedTuple):
    """The three depth-first orders of a tree, computed in one pass."""

    preorder: list[int]
    inorder: list[int]
    postorder: list[int]


def _walk_pre(node: Optional[Node]) -> Iterator[int]:
    if node is None:
        return
    yield node.data
    yield from _walk_pre(node.left)
    yield from _walk_pre(node.right)


def _walk_in(node: Optional[Node]) -> Iterator[int]:
    if node is None:
        return
    yield from _walk_in(node.left)
    yield node.data
    yield from _walk_in(node.right)


def _walk_post(node: Optional[Node]) -> Iterator[int]:
    if node is None:
        return
    yield from _walk_post(node.left)
    yield from _walk_post(node.right)
    yield node.data


def preorder(root: Optional[Node]) -> list[int]:
    """Node values in root, left, right order (recursive)."""
    return list(_walk_pre(root))


def inorder(root: Optional[Node]) -> list[int]:
    """Node values in left, root, right order (recursive)."""
    return list(_walk_in(root))


def postorder(root: Optional[Node]) -> list[int]:
    """Node values in left, right, root order (recursive)."""
    return list(_walk_post(root))


def level_order(root: Optional[Node]) -> list[list[int]]:
    """Node values grouped by depth, each level read left to right."""
    if root is None:
        return []
    levels: list[list[int]] = []
    queue: deque[Node] = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.data)
            queue.extend(child for child in (node.left, node.right) if child is not None)
        levels.append(level)
    return levels


def iterative_preorder(root: Optional[Node]) -> list[int]:
    """Preorder values computed with an explicit stack."""
    if root is None:
        return []
    result: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def iterative_inorder(root: Optional[Node]) -> list[int]:
    """Inorder values computed with an explicit stack."""
    result: list[int] = []
    stack: list[Node] = []
    current = root
    while current is not None or stack:
        if current is not None:
            stack.append(current)
            current = current.left
        else:
            current = stack.pop()
            result.append(current.data)
            current = current.right
    return result


def iterative_postorder(root: Optional[Node]) -> list[int]:
    """Postorder values computed with two stacks."""
    if root is None:
        return []
    pending = [root]
    visited: list[Node] = []
    while pending:
        node = pending.pop()
        visited.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return [node.data for node in reversed(visited)]


class _Stage(Enum):
    PRE = auto()
    IN = auto()
    POST = auto()


def all_traversals(root: Optional[Node]) -> Traversals:
    """Preorder, inorder and postorder from a single stack walk."""
    result = Traversals([], [], [])
    if root is None:
        return result
    stack: list[tuple[Node, _Stage]] = [(root, _Stage.PRE)]
    while stack:
        node, stage = stack.pop()
        if stage is _Stage.PRE:
            result.preorder.append(node.data)
            stack.append((node, _Stage.IN))
            if node.left is not None:
                stack.append((node.left, _Stage.PRE))
        elif stage is _Stage.IN:
            result.inorder.append(node.data)
            stack.append((node, _Stage.POST))
            if node.right is not None:
                stack.append((node.right, _Stage.PRE))
        else:
            result.postorder.append(node.data)
    return result