"""Views of a binary tree: zigzag, boundary, vertical order and side views."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import Iterator, Optional

from .node import Node


def zigzag(root: Optional[Node]) -> list[list[int]]:
    """Levels top to bottom, alternating left-to-right and right-to-left."""
    if root is None:
        return []
    levels: list[list[int]] = []
    queue: deque[Node] = deque([root])
    reverse = False
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.data)
            queue.extend(child for child in (node.left, node.right) if child is not None)
        levels.append(level[::-1] if reverse else level)
        reverse = not reverse
    return levels


def _left_edge(root: Node) -> Iterator[int]:
    current = root.left
    while current is not None:
        if not current.is_leaf():
            yield current.data
        current = current.left if current.left is not None else current.right


def _right_edge(root: Node) -> Iterator[int]:
    current = root.right
    while current is not None:
        if not current.is_leaf():
            yield current.data
        current = current.right if current.right is not None else current.left


def _leaves(node: Optional[Node]) -> Iterator[int]:
    if node is None:
        return
    if node.is_leaf():
        yield node.data
        return
    yield from _leaves(node.left)
    yield from _leaves(node.right)


def boundary(root: Optional[Node]) -> list[int]:
    """Anticlockwise boundary: root, left edge, leaves, right edge bottom-up."""
    if root is None:
        return []
    result = [] if root.is_leaf() else [root.data]
    result.extend(_left_edge(root))
    result.extend(_leaves(root))
    result.extend(reversed(list(_right_edge(root))))
    return result


def _columns(root: Node) -> Iterator[tuple[Node, int, int]]:
    """Breadth-first (node, row, column) triples."""
    queue: deque[tuple[Node, int, int]] = deque([(root, 0, 0)])
    while queue:
        node, row, column = queue.popleft()
        yield node, row, column
        if node.left is not None:
            queue.append((node.left, row + 1, column - 1))
        if node.right is not None:
            queue.append((node.right, row + 1, column + 1))


def vertical_order(root: Optional[Node]) -> list[list[int]]:
    """Columns left to right; within a column by row, ties sorted by value."""
    if root is None:
        return []
    grid: defaultdict[int, defaultdict[int, list[int]]] = defaultdict(lambda: defaultdict(list))
    for node, row, column in _columns(root):
        grid[column][row].append(node.data)
    return [
        [value for row in sorted(grid[column]) for value in sorted(grid[column][row])]
        for column in sorted(grid)
    ]


def top_view(root: Optional[Node]) -> list[int]:
    """First node met in each column, columns left to right."""
    if root is None:
        return []
    seen: dict[int, int] = {}
    for node, _, column in _columns(root):
        seen.setdefault(column, node.data)
    return [seen[column] for column in sorted(seen)]


def bottom_view(root: Optional[Node]) -> list[int]:
    """Last node met in each column, columns left to right."""
    if root is None:
        return []
    seen: dict[int, int] = {}
    for node, _, column in _columns(root):
        seen[column] = node.data
    return [seen[column] for column in sorted(seen)]


def _side_view(root: Optional[Node], right_first: bool) -> list[int]:
    result: list[int] = []

    def visit(node: Optional[Node], depth: int) -> None:
        if node is None:
            return
        if depth == len(result):
            result.append(node.data)
        first, second = (node.right, node.left) if right_first else (node.left, node.right)
        visit(first, depth + 1)
        visit(second, depth + 1)

    visit(root, 0)
    return result


def right_view(root: Optional[Node]) -> list[int]:
    """The node seen at each depth when looking from the right."""
    return _side_view(root, right_first=True)


def left_view(root: Optional[Node]) -> list[int]:
    """The node seen at each depth when looking from the left."""
    return _side_view(root, right_first=False)