import pytest

from dsalgo.nodes import (
    ListNode,
    TreeNode,
    create_list,
    create_tree,
    inorder,
    level_order,
    list_values,
    reverse_list,
)

CTCI_TREE = [1, 2, 3, 4, 5, 6, 7, None, 8, 9, 10, 11, None, 12, 13]


@pytest.mark.parametrize("values", [[], [1], [2, 4, 3], list(range(1, 13))])
def test_list_round_trip(values):
    assert list_values(create_list(values)) == values


def test_create_list_empty_is_none():
    assert create_list([]) is None


def test_create_list_links_nodes():
    head = create_list([5, 6, 7])
    assert isinstance(head, ListNode)
    assert head.val == 5
    assert head.next.next.val == 7
    assert head.next.next.next is None


@pytest.mark.parametrize("values", [[], [1], [1, 2], [2, 4, 3, 9]])
def test_reverse_list(values):
    assert list_values(reverse_list(create_list(values))) == values[::-1]


def test_reverse_twice_restores_order():
    values = [3, 5, 8, 5, 10, 2, 1]
    assert list_values(reverse_list(reverse_list(create_list(values)))) == values


def test_create_tree_empty():
    assert create_tree([]) is None
    assert inorder(None) == []
    assert level_order(None) == []


def test_level_order_matches_input_without_nulls():
    root = create_tree(CTCI_TREE, None)
    assert level_order(root) == [v for v in CTCI_TREE if v is not None]


def test_inorder_of_bst_shaped_input_is_sorted():
    values = [4, 2, 6, 1, 3, 5, 7]
    root = create_tree(values)
    assert inorder(root) == sorted(values)


def test_custom_null_marker():
    root = create_tree([1, -1, 3], -1)
    assert root.left is None
    assert root.right.val == 3
    assert level_order(root) == [1, 3]


def test_parent_links_are_set():
    root = create_tree(CTCI_TREE)
    assert root.parent is None
    assert root.left.parent is root
    assert root.right.right.parent is root.right
    eight = root.left.left.right
    assert eight.val == 8
    assert eight.parent.parent is root.left


def test_odd_length_input_leaves_right_missing():
    root = create_tree([1, 2])
    assert root.left.val == 2
    assert root.right is None


def test_too_many_values_raises():
    with pytest.raises(ValueError):
        create_tree([1, None, None, 5])


def test_attach_sets_parent():
    parent = TreeNode(10)
    child = TreeNode(20)
    parent.attach_right(child)
    assert parent.right is child
    assert child.parent is parent