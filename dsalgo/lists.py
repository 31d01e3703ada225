"""Singly-linked-list algorithms: k-th from last, partitioning, digit addition."""

from __future__ import annotations

from typing import Optional

from dsalgo.nodes import ListNode, reverse_list


def kth_to_last(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Return the k-th node from the end, counting the last node as 1.

    Returns None when ``k`` is zero or longer than the list; raises
    ValueError for a negative ``k``.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    lead = head
    for _ in range(k):
        if lead is None:
            return None
        lead = lead.next

    trail = head
    while lead is not None:
        lead = lead.next
        trail = trail.next
    return trail


def partition(head: Optional[ListNode], value) -> Optional[ListNode]:
    """Relink the list so nodes less than ``value`` come before the rest.

    Both parts keep their original order.  Returns the new head.
    """
    less_dummy = ListNode()
    rest_dummy = ListNode()
    less_tail, rest_tail = less_dummy, rest_dummy

    node = head
    while node is not None:
        following = node.next
        node.next = None
        if node.val < value:
            less_tail.next = node
            less_tail = node
        else:
            rest_tail.next = node
            rest_tail = node
        node = following

    less_tail.next = rest_dummy.next
    return less_dummy.next


def add_two_numbers(
    first: Optional[ListNode], second: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers held as digit lists, most significant digit first.

    Returns a new digit list, also most significant first.  When one list
    is empty the other is returned as it is.
    """
    if first is None:
        return second
    if second is None:
        return first

    def digits(node: Optional[ListNode]) -> list:
        found = []
        while node is not None:
            found.append(node.val)
            node = node.next
        return found

    left = digits(first)
    right = digits(second)

    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    carry = 0
    while left or right or carry:
        total = carry
        if left:
            total += left.pop()
        if right:
            total += right.pop()
        carry, digit = divmod(total, 10)
        node = ListNode(digit)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node

    return reverse_list(head)