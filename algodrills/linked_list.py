"""Singly linked lists of integers: construction, merging sorted lists, removing repeats."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; return its head, or None if empty."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list and return its head.

    The nodes themselves are relinked; on equal values the node of ``list2`` comes first.
    """
    sentinel = ListNode()
    tail = sentinel
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return sentinel.next


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Unlink nodes repeating the value of their predecessor, in place; return the head."""
    node = head
    while node is not None:
        while node.next is not None and node.next.val == node.val:
            node.next = node.next.next
        node = node.next
    return head