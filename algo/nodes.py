"""Node types for singly linked lists and binary trees."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ListNode:
    """A node in a singly linked list."""

    value: int
    next: ListNode | None = field(default=None, repr=False)

    def add_next(self, value: int) -> None:
        """Append a new node holding value at the end of the list."""
        node = self
        while node.next is not None:
            node = node.next
        node.next = ListNode(value)


@dataclass
class TreeNode:
    """A node in a binary tree."""

    value: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def linked_list_to_list(node: ListNode | None) -> list[int]:
    """Collect the values of a linked list, starting at node, into a list."""
    out: list[int] = []
    while node is not None:
        out.append(node.value)
        node = node.next
    return out