"""Singly linked list nodes and list algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Node:
    """A singly linked list node; nodes compare and hash by identity."""

    data: int
    next: Optional["Node"] = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        for node in _nodes(self):
            yield node.data


def _nodes(head: Node | None) -> Iterator[Node]:
    while head is not None:
        yield head
        head = head.next


def from_iterable(values: Iterable[int]) -> Node | None:
    """Build a linked list from ``values`` and return its head."""
    dummy = Node(-1)
    tail = dummy
    for value in values:
        tail.next = Node(value)
        tail = tail.next
    return dummy.next


def to_list(head: Node | None) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return list(head) if head is not None else []


def intersect_point(head1: Node | None, head2: Node | None) -> Node | None:
    """Return the first node of the second list that also lies in the first."""
    first = set(_nodes(head1))
    return next((node for node in _nodes(head2) if node in first), None)


def merge_two(head1: Node | None, head2: Node | None) -> Node | None:
    """Merge two sorted lists by relinking their nodes; ties take the first list."""
    dummy = Node(-1)
    tail = dummy
    while head1 is not None and head2 is not None:
        if head1.data <= head2.data:
            tail.next, head1 = head1, head1.next
        else:
            tail.next, head2 = head2, head2.next
        tail = tail.next
    tail.next = head1 if head1 is not None else head2
    return dummy.next


def remove_nth_from_end(head: Node | None, n: int) -> Node | None:
    """Unlink the ``n``-th node from the end and return the new head.

    A list shorter than ``n`` is returned unchanged.
    """
    if n < 1:
        raise ValueError(f"position from the end must be positive, got {n}")

    fast = head
    for _ in range(n):
        if fast is None:
            return head
        fast = fast.next

    if fast is None:
        return head.next if head is not None else None

    slow = head
    while fast.next is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return head