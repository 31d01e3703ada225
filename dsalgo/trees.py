"""Binary-tree algorithms: minimal BSTs, validation, subtrees, ancestors, path sums."""

from __future__ import annotations

from collections import Counter, deque
from typing import Any, Optional, Sequence

from dsalgo.nodes import TreeNode


def create_minimal_bst(values: Sequence[Any]) -> Optional[TreeNode]:
    """Build a binary search tree of minimal height from sorted ``values``.

    Returns None for an empty sequence.  Parent links are set.
    """
    items = list(values)

    def build(low: int, high: int) -> Optional[TreeNode]:
        if low > high:
            return None
        mid = (low + high) // 2
        node = TreeNode(items[mid])
        node.attach_left(build(low, mid - 1))
        node.attach_right(build(mid + 1, high))
        return node

    return build(0, len(items) - 1)


def nodes_by_value(root: Optional[TreeNode]) -> dict:
    """Map each value in the tree to its node.

    Where a value occurs more than once, the node met first in level order wins.
    """
    found: dict = {}
    if root is None:
        return found
    pending: deque[TreeNode] = deque([root])
    while pending:
        node = pending.popleft()
        found.setdefault(node.val, node)
        pending.extend(child for child in (node.left, node.right) if child is not None)
    return found


def is_bst(root: Optional[TreeNode]) -> bool:
    """Whether the tree is a binary search tree.

    Values equal to a node may sit in its left subtree but not its right.
    """

    def check(node: Optional[TreeNode], low: Any, high: Any) -> bool:
        if node is None:
            return True
        if (low is not None and node.val <= low) or (high is not None and node.val > high):
            return False
        return check(node.left, low, node.val) and check(node.right, node.val, high)

    return check(root, None, None)


class _Unbalanced(Exception):
    pass


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Whether no node's subtree heights differ by more than one."""

    def height(node: Optional[TreeNode]) -> int:
        if node is None:
            return -1
        left = height(node.left)
        right = height(node.right)
        if abs(left - right) > 1:
            raise _Unbalanced
        return max(left, right) + 1

    try:
        height(root)
    except _Unbalanced:
        return False
    return True


def _same_shape(a: Optional[TreeNode], b: Optional[TreeNode]) -> bool:
    if a is None and b is None:
        return True
    if a is None or b is None or a.val != b.val:
        return False
    return _same_shape(a.left, b.left) and _same_shape(a.right, b.right)


def contains_subtree(tree: Optional[TreeNode], subtree: Optional[TreeNode]) -> bool:
    """Whether ``subtree`` appears in ``tree`` with the same values and shape.

    An empty subtree is contained in every tree.
    """
    if subtree is None:
        return True

    def search(node: Optional[TreeNode]) -> bool:
        if node is None:
            return False
        if node.val == subtree.val and _same_shape(node, subtree):
            return True
        return search(node.left) or search(node.right)

    return search(tree)


def _covers(root: Optional[TreeNode], target: Optional[TreeNode]) -> bool:
    """Whether ``target`` is ``root`` or lies beneath it."""
    if root is None:
        return False
    stack = [root]
    while stack:
        node = stack.pop()
        if node is target:
            return True
        stack.extend(child for child in (node.left, node.right) if child is not None)
    return False


def _depth(node: Optional[TreeNode]) -> int:
    depth = 0
    while node is not None:
        node = node.parent
        depth += 1
    return depth


def _sibling(node: Optional[TreeNode]) -> Optional[TreeNode]:
    if node is None or node.parent is None:
        return None
    parent = node.parent
    return parent.right if parent.left is node else parent.left


def common_ancestor_by_depth(a: TreeNode, b: TreeNode) -> Optional[TreeNode]:
    """First common ancestor found by levelling depths and walking parent links.

    Returns None when the nodes are in different trees.
    """
    diff = _depth(a) - _depth(b)
    shallow, deep = (b, a) if diff > 0 else (a, b)
    for _ in range(abs(diff)):
        if deep is None:
            break
        deep = deep.parent

    while shallow is not deep and shallow is not None and deep is not None:
        shallow = shallow.parent
        deep = deep.parent
    if shallow is None or deep is None:
        return None
    return deep


def common_ancestor_by_cover(a: TreeNode, b: TreeNode) -> TreeNode:
    """First common ancestor found by climbing from ``a`` and searching siblings.

    Raises ValueError when the nodes share no ancestor.
    """
    if _covers(a, b):
        return a
    if _covers(b, a):
        return b

    sibling = _sibling(a)
    parent = a.parent
    while not _covers(sibling, b):
        if parent is None:
            raise ValueError("nodes have no common ancestor")
        sibling = _sibling(parent)
        parent = parent.parent
    if parent is None:
        raise ValueError("nodes have no common ancestor")
    return parent


def common_ancestor(
    root: Optional[TreeNode], a: TreeNode, b: TreeNode
) -> Optional[TreeNode]:
    """First common ancestor of ``a`` and ``b`` searched from ``root`` without parent links."""
    node = root
    while node is not None and node is not a and node is not b:
        a_on_left = _covers(node.left, a)
        b_on_left = _covers(node.left, b)
        if a_on_left != b_on_left:
            return node
        node = node.left if a_on_left else node.right
    return node


def count_paths_with_sum(root: Optional[TreeNode], target: int) -> int:
    """Count downward paths, starting and ending anywhere, whose values sum to ``target``."""
    prefix_counts: Counter = Counter()

    def walk(node: Optional[TreeNode], running: int) -> int:
        if node is None:
            return 0
        running += node.val
        total = prefix_counts[running - target]
        if running == target:
            total += 1

        prefix_counts[running] += 1
        total += walk(node.left, running)
        total += walk(node.right, running)
        prefix_counts[running] -= 1
        if prefix_counts[running] == 0:
            del prefix_counts[running]
        return total

    return walk(root, 0)