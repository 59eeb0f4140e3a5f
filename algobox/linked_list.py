"""Singly linked lists: nodes, helpers, group reversal and merging."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    value: Any
    next: ListNode | None = None

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


def from_iterable(values: Iterable[Any]) -> ListNode | None:
    """Build a linked list from ``values`` and return its head."""
    dummy = ListNode(None)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def to_list(head: ListNode | None) -> list[Any]:
    """Return the values of the list starting at ``head``."""
    return [node.value for node in _nodes(head)]


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse the list in place in groups of ``k`` nodes; return the new head.

    A trailing group shorter than ``k`` keeps its order.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    if head is None or k == 1:
        return head
    dummy = ListNode(None, head)
    count = sum(1 for _ in _nodes(head))
    prev = dummy
    while count >= k:
        current = prev.next
        following = current.next
        for _ in range(1, k):
            current.next = following.next
            following.next = prev.next
            prev.next = following
            following = current.next
        prev = current
        count -= k
    return dummy.next


def merge_sorted(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """Merge two sorted lists by relinking their nodes; ties take ``second`` first."""
    dummy = ListNode(None)
    tail = dummy
    while first is not None and second is not None:
        if first.value < second.value:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def merge_sorted_recursive(
    first: ListNode | None, second: ListNode | None
) -> ListNode | None:
    """Merge two sorted lists recursively; ties take ``second`` first."""
    if first is None:
        return second
    if second is None:
        return first
    if first.value < second.value:
        first.next = merge_sorted_recursive(first.next, second)
        return first
    second.next = merge_sorted_recursive(first, second.next)
    return second


class SinglyLinkedList:
    """A singly linked list with insertion at either end."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = None
        self._tail: ListNode | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        node = ListNode(value)
        if self._tail is None:
            self.head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Add ``value`` at the front."""
        self.head = ListNode(value, self.head)
        if self._tail is None:
            self._tail = self.head
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in _nodes(self.head))

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " -> ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"