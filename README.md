# bintreekit

Small, dependency-free helpers for working with binary trees of integers: the
classic traversals, the common "views" of a tree, and structural properties
such as height, balance, diameter and symmetry.

## Installation

```
pip install bintreekit
```

## Building a tree

Trees are built from `bintreekit.node.Node`, a dataclass with `data`, `left`
and `right` fields. `Node.is_leaf()` tells whether a node has no children.
An empty tree is represented by `None`.

```python
from bintreekit.node import Node

#         1
#        / \
#       2   3
#      / \   \
#     4   5   6
root = Node(1, Node(2, Node(4), Node(5)), Node(3, None, Node(6)))
```

## Traversals

```python
from bintreekit.traversals import (
    preorder, inorder, postorder, level_order, all_traversals,
)

preorder(root)      # [1, 2, 4, 5, 3, 6]
inorder(root)       # [4, 2, 5, 1, 3, 6]
postorder(root)     # [4, 5, 2, 6, 3, 1]
level_order(root)   # [[1], [2, 3], [4, 5, 6]]
```

`iterative_preorder`, `iterative_inorder` and `iterative_postorder` produce
the same orders with an explicit stack instead of recursion.
`all_traversals` collects pre-, in- and post-order in a single stack walk and
returns a `Traversals` named tuple with the fields `preorder`, `inorder` and
`postorder`.

## Views

```python
from bintreekit.views import (
    zigzag, boundary, vertical_order, top_view, bottom_view,
    left_view, right_view,
)

zigzag(root)          # [[1], [3, 2], [4, 5, 6]]
vertical_order(root)  # [[4], [2], [1, 5], [3], [6]]
top_view(root)        # [4, 2, 1, 3, 6]
bottom_view(root)     # [4, 2, 5, 3, 6]
left_view(root)       # [1, 2, 4]
right_view(root)      # [1, 3, 6]
boundary(root)        # [1, 2, 4, 5, 6, 3]
```

`vertical_order` lists columns left to right; within a column, nodes are
ordered by depth, and nodes sharing a depth and column are sorted by value.
`top_view` and `bottom_view` take the first and the last node met in each
column during a breadth-first walk. `boundary` walks anticlockwise: the root,
the left edge, the leaves, then the right edge bottom-up.

## Properties

```python
from bintreekit.properties import (
    height, is_balanced, diameter, max_path_sum, is_symmetric,
)

height(root)        # 3  (counted in nodes; 0 for an empty tree)
is_balanced(root)   # True
diameter(root)      # 4  (longest path between two nodes, counted in edges)
max_path_sum(root)  # 17 (largest sum along any path between two nodes)
is_symmetric(root)  # False
```

Every function accepts `None` as an empty tree, except `max_path_sum`, which
raises `ValueError` because an empty tree has no path.

## What it does not do

bintreekit has no command-line tool, and it does not build trees from lists,
strings or files: trees are put together from `Node` objects by hand. It
covers plain binary trees only, with no insertion, deletion or search of the
kind a binary search tree would offer.

## Running the tests

```
pip install -e ".[test]"
pytest
```