import pytest

from dsalgo.nodes import TreeNode, create_tree, inorder
from dsalgo.trees import (
    common_ancestor,
    common_ancestor_by_cover,
    common_ancestor_by_depth,
    contains_subtree,
    count_paths_with_sum,
    create_minimal_bst,
    is_balanced,
    is_bst,
    nodes_by_value,
)

SAMPLE = [1, 2, 3, 4, 5, 6, 7, None, 8, 9, 10, 11, None, 12, 13]


@pytest.fixture
def sample():
    root = create_tree(SAMPLE)
    return root, nodes_by_value(root)


def test_minimal_bst_inorder_matches_input():
    values = list(range(1, 16))
    root = create_minimal_bst(values)
    assert inorder(root) == values


def test_minimal_bst_is_bst_and_balanced():
    root = create_minimal_bst(list(range(1, 16)))
    assert is_bst(root)
    assert is_balanced(root)


def test_minimal_bst_empty():
    assert create_minimal_bst([]) is None


def test_minimal_bst_sets_parents():
    root = create_minimal_bst([1, 2, 3])
    assert root.left.parent is root
    assert root.right.parent is root
    assert root.parent is None


def test_nodes_by_value_maps_every_value(sample):
    root, nodes = sample
    assert sorted(nodes) == sorted(inorder(root))
    assert all(node.val == value for value, node in nodes.items())


def test_is_bst_rejects_unordered():
    assert not is_bst(create_tree([5, 6, 7]))


def test_is_bst_equal_values_only_on_left():
    assert is_bst(create_tree([5, 5, None]))
    assert not is_bst(create_tree([5, None, 5]))


def test_is_bst_empty():
    assert is_bst(None)


def test_is_balanced_chain_is_not():
    assert not is_balanced(create_tree([1, 2, None, 3]))


def test_is_balanced_empty():
    assert is_balanced(None)


def test_contains_subtree(sample):
    root, _ = sample
    assert contains_subtree(root, create_tree([4, None, 8]))


def test_contains_subtree_shape_matters(sample):
    root, _ = sample
    assert not contains_subtree(root, create_tree([4, 8]))


def test_contains_empty_subtree(sample):
    root, _ = sample
    assert contains_subtree(root, None)
    assert not contains_subtree(None, TreeNode(1))


def test_common_ancestor_when_one_covers_other(sample):
    root, nodes = sample
    assert common_ancestor(root, nodes[8], nodes[4]) is nodes[4]


def test_common_ancestor_of_cousins(sample):
    root, nodes = sample
    assert common_ancestor(root, nodes[8], nodes[9]) is nodes[2]
    assert common_ancestor(root, nodes[8], nodes[13]) is root


@pytest.mark.parametrize("pair", [(8, 9), (8, 4), (11, 13), (9, 10), (12, 1)])
def test_ancestor_strategies_agree(sample, pair):
    root, nodes = sample
    a, b = nodes[pair[0]], nodes[pair[1]]
    expected = common_ancestor(root, a, b)
    assert common_ancestor_by_depth(a, b) is expected
    assert common_ancestor_by_cover(a, b) is expected


def test_ancestor_of_separate_trees():
    a = TreeNode(1)
    b = TreeNode(2)
    assert common_ancestor_by_depth(a, b) is None
    with pytest.raises(ValueError):
        common_ancestor_by_cover(a, b)


def test_count_paths_single_node():
    assert count_paths_with_sum(create_tree([5]), 5) == 1


def test_count_paths_with_negative_values():
    assert count_paths_with_sum(create_tree([1, -1]), 0) == 1


def test_count_paths_empty_tree():
    assert count_paths_with_sum(None, 0) == 0


def test_count_paths_zero_tree():
    assert count_paths_with_sum(create_tree([0, 0, 0]), 0) == 5