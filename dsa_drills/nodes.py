"""Singly linked list and binary tree nodes, with list helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; None when empty."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of a linked list from ``head`` onwards."""
    return [] if head is None else list(head)