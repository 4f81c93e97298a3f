import pytest

from bintreekit.node import Node
from bintreekit.traversals import (
    Traversals,
    all_traversals,
    inorder,
    iterative_inorder,
    iterative_postorder,
    iterative_preorder,
    level_order,
    postorder,
    preorder,
)


def sample_tree():
    #         1
    #        / \
    #       2   3
    #      / \   \
    #     4   5   6
    root = Node(1)
    root.left = Node(2)
    root.right = Node(3)
    root.left.left = Node(4)
    root.left.right = Node(5)
    root.right.right = Node(6)
    return root


def build_bst(values):
    root = None
    for value in values:
        if root is None:
            root = Node(value)
            continue
        node = root
        while True:
            if value < node.data:
                if node.left is None:
                    node.left = Node(value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(value)
                    break
                node = node.right
    return root


VALUE_SETS = [
    [5],
    [5, 3, 8, 1, 4, 7, 9],
    [1, 2, 3, 4, 5],
    [5, 4, 3, 2, 1],
    [10, 6, 15, 3, 8, 12, 20, 1, 4, 7, 9],
]


def test_sample_preorder():
    assert preorder(sample_tree()) == [1, 2, 4, 5, 3, 6]


def test_sample_inorder():
    assert inorder(sample_tree()) == [4, 2, 5, 1, 3, 6]


def test_sample_postorder():
    assert postorder(sample_tree()) == [4, 5, 2, 6, 3, 1]


@pytest.mark.parametrize(
    "func",
    [preorder, inorder, postorder, level_order,
     iterative_preorder, iterative_inorder, iterative_postorder],
)
def test_empty_tree_gives_empty_list(func):
    assert func(None) == []


def test_all_traversals_empty():
    assert all_traversals(None) == Traversals([], [], [])


@pytest.mark.parametrize("values", VALUE_SETS)
def test_inorder_of_bst_is_sorted(values):
    root = build_bst(values)
    assert inorder(root) == sorted(values)
    assert iterative_inorder(root) == sorted(values)


@pytest.mark.parametrize("values", VALUE_SETS)
def test_preorder_starts_and_postorder_ends_with_root(values):
    root = build_bst(values)
    assert preorder(root)[0] == values[0]
    assert postorder(root)[-1] == values[0]


@pytest.mark.parametrize("values", VALUE_SETS)
def test_preorder_of_bst_rebuilds_same_preorder(values):
    root = build_bst(values)
    assert preorder(build_bst(preorder(root))) == preorder(root)


def test_iterative_versions_match_recursive_on_sample():
    root = sample_tree()
    assert iterative_preorder(root) == preorder(root)
    assert iterative_inorder(root) == inorder(root)
    assert iterative_postorder(root) == postorder(root)


@pytest.mark.parametrize("values", VALUE_SETS)
def test_iterative_versions_match_recursive(values):
    root = build_bst(values)
    assert iterative_preorder(root) == preorder(root)
    assert iterative_inorder(root) == inorder(root)
    assert iterative_postorder(root) == postorder(root)


@pytest.mark.parametrize("values", VALUE_SETS)
def test_all_traversals_matches_individual(values):
    root = build_bst(values)
    result = all_traversals(root)
    assert result.preorder == preorder(root)
    assert result.inorder == inorder(root)
    assert result.postorder == postorder(root)


def test_all_traversals_on_sample():
    root = sample_tree()
    assert all_traversals(root) == Traversals(preorder(root), inorder(root), postorder(root))


def test_level_order_first_level_is_root():
    root = sample_tree()
    assert level_order(root)[0] == [root.data]


def test_level_order_levels_match_children():
    root = sample_tree()
    levels = level_order(root)
    assert levels[1] == [root.left.data, root.right.data]
    assert levels[2] == [root.left.left.data, root.left.right.data, root.right.right.data]
    assert len(levels) == 3


@pytest.mark.parametrize("values", VALUE_SETS)
def test_level_order_covers_every_node(values):
    root = build_bst(values)
    flat = [value for level in level_order(root) for value in level]
    assert sorted(flat) == sorted(values)


def test_level_order_of_chain_has_one_node_per_level():
    values = [1, 2, 3, 4, 5]
    root = build_bst(values)
    assert level_order(root) == [[v] for v in values]


def test_single_node_traversals():
    root = Node(42)
    assert preorder(root) == [42]
    assert inorder(root) == [42]
    assert postorder(root) == [42]
    assert level_order(root) == [[42]]
    assert all_traversals(root) == Traversals([42], [42], [42])