"""Singly linked list nodes and the operations that splice them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class SListNode:
    """One node of a singly linked list."""

    data: Any = None
    next: Optional["SListNode"] = None

    def __iter__(self) -> Iterator["SListNode"]:
        node: Optional[SListNode] = self
        while node is not None:
            yield node
            node = node.next


def append_list(head: Optional[SListNode], node: SListNode) -> SListNode:
    """Insert node directly after head and return the list's head.

    With no head, node becomes a one-element list.
    """
    if node is None:
        raise ValueError("node to append is required")
    if head is not None:
        node.next = head.next
        head.next = node
        return head
    node.next = None
    return node


def prepend_list(head: Optional[SListNode], node: SListNode) -> SListNode:
    """Put node in front of head and return it as the new head."""
    if node is None:
        raise ValueError("node to prepend is required")
    node.next = head
    return node


def alloc_and_append(head: Optional[SListNode], data: Any) -> SListNode:
    """Make a node for data and append it after head."""
    return append_list(head, SListNode(data))


def alloc_and_prepend(head: Optional[SListNode], data: Any) -> SListNode:
    """Make a node for data and put it in front of head."""
    return prepend_list(head, SListNode(data))


def remove(head: Optional[SListNode]) -> Optional[SListNode]:
    """Drop the head node and return the rest of the list."""
    if head is None:
        return None
    rest = head.next
    head.next = None
    return rest


def iter_data(head: Optional[SListNode]) -> Iterator[Any]:
    """Yield the data of every node from head onwards."""
    if head is None:
        return
    for node in head:
        yield node.data