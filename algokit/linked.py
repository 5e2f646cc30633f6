"""Singly linked lists and the classic algorithms that operate on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: Optional["ListNode"] = None


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order and return its head."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of an acyclic list, head first."""
    return [node.val for node in _nodes(head)]


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as reversed digit lists; return the sum as a new list.

    Once either input runs out and no carry is left, the rest of the other
    input is linked onto the result as it is.
    """
    dummy = ListNode()
    tail = dummy
    carry = 0
    while (l1 is not None and l2 is not None) or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the n-th node from the end.

    A non-positive ``n`` leaves the list untouched; an ``n`` at or beyond the
    list's length removes the head.
    """
    if n <= 0 or head is None:
        return head
    fast: Optional[ListNode] = head
    for _ in range(n):
        if fast is None:
            break
        fast = fast.next
    if fast is None:
        return head.next
    slow = head
    while fast.next is not None:
        slow = slow.next
        fast = fast.next
    slow.next = slow.next.next
    return head


def _insert_sorted(dummy: ListNode, node: ListNode) -> None:
    pre = dummy
    cur = dummy.next
    while cur is not None and node.val > cur.val:
        pre, cur = cur, cur.next
    pre.next = node
    node.next = cur


def merge_k_lists(lists: list[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge sorted lists into one sorted list, reusing their nodes."""
    if not lists:
        return None
    dummy = ListNode(next=lists[0])
    for head in lists[1:]:
        node = head
        while node is not None:
            following = node.next
            _insert_sorted(dummy, node)
            node = following
    return dummy.next


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list to the right by ``k`` places."""
    if head is None:
        return None
    tail = head
    length = 1
    while tail.next is not None:
        tail = tail.next
        length += 1
    tail.next = head
    new_tail = head
    for _ in range(length - k % length - 1):
        new_tail = new_tail.next
    new_head = new_tail.next
    new_tail.next = None
    return new_head


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether the list loops back on itself."""
    fast = slow = head
    while fast is not None and slow is not None:
        fast = fast.next
        if fast is None:
            return False
        fast = fast.next
        slow = slow.next
        if fast is slow:
            return True
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where the cycle begins, or None if there is no cycle."""
    if head is None or head.next is None:
        return None
    fast = slow = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
        if fast is slow:
            slow = head
            while slow is not fast:
                slow = slow.next
                fast = fast.next
            return slow
    return None


def insertion_sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the list in place by insertion sort and return the new head."""
    if head is None or head.next is None:
        return head
    dummy = ListNode(next=head)
    last_sorted = head
    cur = head.next
    while cur is not None:
        if cur.val >= last_sorted.val:
            last_sorted, cur = cur, cur.next
            continue
        pre = dummy
        while pre.next.val <= cur.val:
            pre = pre.next
        last_sorted.next = cur.next
        cur.next = pre.next
        pre.next = cur
        cur = last_sorted.next
    return dummy.next


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None."""
    if head_a is None or head_b is None:
        return None
    a, b = head_a, head_b
    switched_a = switched_b = False
    while a is not None or b is not None:
        if a is b:
            return a
        a = a.next if a is not None else None
        b = b.next if b is not None else None
        if a is None and not switched_a:
            a, switched_a = head_b, True
        if b is None and not switched_b:
            b, switched_b = head_a, True
    return None


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Unlink every node whose value equals ``val``."""
    dummy = ListNode(next=head)
    node = dummy
    while node.next is not None:
        if node.next.val == val:
            node.next = node.next.next
        else:
            node = node.next
    return dummy.next


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Tell whether the list reads the same in both directions."""
    values = list_values(head)
    return values == values[::-1]