"""Singly linked lists and the classic operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import zip_longest
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Build a list holding ``values`` in order; return its head or None."""
        dummy = cls()
        tail = dummy
        for value in values:
            tail.next = cls(value)
            tail = tail.next
        return dummy.next

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def _values(head: Optional[ListNode]) -> Iterator[int]:
    return iter(head) if head is not None else iter(())


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as reversed digit lists; return the sum as a new list."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    for a, b in zip_longest(_values(l1), _values(l2), fillvalue=0):
        total = a + b + carry
        carry = 0
        if total > 9:
            total -= 10
            carry = 1
        tail.next = ListNode(total)
        tail = tail.next
    if carry:
        tail.next = ListNode(1)
    return dummy.next


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever revisits a node."""
    fast = slow = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next  # type: ignore[union-attr]
        if fast is slow:
            return True
    return False


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list, reusing their nodes.

    On equal values the node from ``list2`` comes first.
    """
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next = list1
            list1 = list1.next
        else:
            tail.next = list2
            list2 = list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node from the end and return the new head.

    Raises ValueError when ``n`` is not between 1 and the list's length.
    """
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    dummy = ListNode(0, head)
    fast: Optional[ListNode] = dummy
    for _ in range(n):
        fast = fast.next if fast is not None else None
        if fast is None:
            raise ValueError(f"list is shorter than {n} nodes")
    slow = dummy
    while fast.next is not None:  # type: ignore[union-attr]
        fast = fast.next  # type: ignore[union-attr]
        slow = slow.next  # type: ignore[assignment]
    removed = slow.next
    slow.next = removed.next  # type: ignore[union-attr]
    return dummy.next