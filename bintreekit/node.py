"""Binary tree node."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value and two optional children."""

    data: int
    left: Optional[Node] = None
    right: Optional[Node] = None

    def is_leaf(self) -> bool:
        """Return True when the node has no children."""
        return self.left is None and self.right is None