"""Singly linked lists and binary-tree flattening."""

from dataclasses import dataclass
from itertools import zip_longest
from typing import Any, Optional

_DIGIT_BASE = 10


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    data: Any
    next: "Optional[ListNode]" = None

    def __iter__(self):
        """Yield the values from this node to the end of the list."""
        node = self
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self):
        return f"ListNode({self.data!r})"


@dataclass(eq=False, repr=False)
class TreeNode:
    """A node of a binary tree."""

    data: Any
    left: "Optional[TreeNode]" = None
    right: "Optional[TreeNode]" = None

    def __repr__(self):
        return f"TreeNode({self.data!r})"


def from_iterable(values):
    """Build a linked list from ``values`` and return its head, or None if empty."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_list(head):
    """Return the values of the list starting at ``head`` as a Python list."""
    return [] if head is None else list(head)


def _skip_leading_zeros(node):
    while node is not None and node.data == 0:
        node = node.next
    return node


def add_numbers(num1, num2):
    """Add two numbers stored most significant digit first; return the sum's list.

    Leading zeros are ignored. When one operand is zero the other one's list
    (without its leading zeros) is returned as it is.
    """
    first = _skip_leading_zeros(num1)
    second = _skip_leading_zeros(num2)
    if first is None and second is None:
        return ListNode(0)
    if first is None:
        return second
    if second is None:
        return first

    digits = []
    carry = 0
    for a, b in zip_longest(reversed(list(first)), reversed(list(second)), fillvalue=0):
        carry += a + b
        digits.append(carry % _DIGIT_BASE)
        carry //= _DIGIT_BASE
    while carry:
        digits.append(carry % _DIGIT_BASE)
        carry //= _DIGIT_BASE
    return from_iterable(reversed(digits))


def delete_all(head, x):
    """Unlink every node holding ``x`` and return the new head."""
    sentinel = ListNode(None)
    tail = sentinel
    node = head
    while node is not None:
        following = node.next
        if node.data != x:
            tail.next = node
            tail = node
        node = following
    tail.next = None
    return sentinel.next


def delete_node(node):
    """Remove ``node`` from its list without access to the head.

    The last node of a list cannot be removed this way.
    """
    if node.next is None:
        raise ValueError("cannot delete the last node without its predecessor")
    node.data = node.next.data
    node.next = node.next.next


def has_loop(head):
    """Return True if following ``next`` from ``head`` never reaches the end."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def flatten_tree(root):
    """Relink a binary tree in place into a right-leaning chain in preorder.

    Returns ``root``.
    """
    order = []
    stack = [] if root is None else [root]
    while stack:
        node = stack.pop()
        order.append(node)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    for node, following in zip(order, order[1:]):
        node.left = None
        node.right = following
    return root


def intersection_values(head1, head2):
    """Return a new list of the values of ``head1`` also found in ``head2``.

    Values keep the order of ``head1`` and appear once each.
    """
    wanted = set(to_list(head2))
    picked = []
    for value in to_list(head1):
        if value in wanted:
            wanted.discard(value)
            picked.append(value)
    return from_iterable(picked)


def intersection_node(head_a, head_b):
    """Return the first node shared by two lists, or None if they never meet."""
    a, b = head_a, head_b
    while a is not b:
        a = head_b if a is None else a.next
        b = head_a if b is None else b.next
    return a


def kth_from_end(head, k):
    """Return the value ``k`` positions from the end (1 is the last node)."""
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    lead = head
    if lead is None:
        raise IndexError("list is empty")
    for _ in range(k - 1):
        if lead.next is None:
            raise IndexError(f"list is shorter than {k}")
        lead = lead.next
    trail = head
    while lead.next is not None:
        lead = lead.next
        trail = trail.next
    return trail.data


def _merge_two(first, second):
    sentinel = ListNode(None)
    tail = sentinel
    while first is not None and second is not None:
        if first.data <= second.data:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return sentinel.next


def merge_k_sorted(lists):
    """Merge sorted linked lists into one sorted list by relinking their nodes."""
    stack = list(lists)
    if not stack:
        return None
    while len(stack) > 1:
        first = stack.pop()
        second = stack.pop()
        stack.append(_merge_two(first, second))
    return stack[0]


def is_palindrome(head):
    """Return True if the list reads the same in both directions."""
    values = to_list(head)
    return values == values[::-1]


def remove_loop(head):
    """Break a cycle in the list, keeping every node; return True if one was found."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return False

    fast = head
    while slow is not fast:
        slow = slow.next
        fast = fast.next
    while slow.next is not fast:
        slow = slow.next
    slow.next = None
    return True


def reverse(head):
    """Reverse the list in place and return its new head."""
    previous = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous


def sort_012(head):
    """Relink a list of 0s, 1s and 2s so the 0s come first, then 1s, then the rest."""
    heads = [ListNode(None) for _ in range(3)]
    tails = list(heads)
    node = head
    while node is not None:
        bucket = node.data if node.data in (0, 1) else 2
        tails[bucket].next = node
        tails[bucket] = node
        node = node.next
    tails[2].next = None
    tails[1].next = heads[2].next
    tails[0].next = heads[1].next
    return heads[0].next