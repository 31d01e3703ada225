"""Linked-list and binary-tree nodes with helpers to build and walk them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any = 0
    next: Optional["ListNode"] = field(default=None, repr=False)


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree that also knows its parent."""

    val: Any = 0
    left: Optional["TreeNode"] = field(default=None, repr=False)
    right: Optional["TreeNode"] = field(default=None, repr=False)
    parent: Optional["TreeNode"] = field(default=None, repr=False)

    def attach_left(self, child: Optional["TreeNode"]) -> None:
        """Make ``child`` the left child of this node."""
        self.left = child
        if child is not None:
            child.parent = self

    def attach_right(self, child: Optional["TreeNode"]) -> None:
        """Make ``child`` the right child of this node."""
        self.right = child
        if child is not None:
            child.parent = self


def create_list(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; None when empty."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def list_values(head: Optional[ListNode]) -> list:
    """Return the values of a linked list from head to tail."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a linked list in place and return its new head."""
    previous: Optional[ListNode] = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def create_tree(values: Iterable[Any], null: Any = None) -> Optional[TreeNode]:
    """Build a binary tree from values given in level order.

    Entries equal to ``null`` mark missing children.  Returns None for an
    empty sequence and raises ValueError when values are left over with no
    node to hang them on.
    """
    items = list(values)
    if not items:
        return None

    root = TreeNode(items[0])
    pending: deque[TreeNode] = deque([root])
    index = 1
    while index < len(items):
        if not pending:
            raise ValueError("more values than the tree has room for")
        node = pending.popleft()
        if items[index] != null:
            node.attach_left(TreeNode(items[index]))
            pending.append(node.left)
        index += 1
        if index < len(items) and items[index] != null:
            node.attach_right(TreeNode(items[index]))
            pending.append(node.right)
        index += 1
    return root


def inorder(root: Optional[TreeNode]) -> list:
    """Return the values of a tree in in-order sequence."""
    values = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.val)
        node = node.right
    return values


def level_order(root: Optional[TreeNode]) -> list:
    """Return the values of a tree level by level, left to right."""
    if root is None:
        return []
    values = []
    pending: deque[TreeNode] = deque([root])
    while pending:
        node = pending.popleft()
        values.append(node.val)
        pending.extend(child for child in (node.left, node.right) if child is not None)
    return values