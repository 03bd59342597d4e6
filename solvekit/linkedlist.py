"""Singly linked lists and the algorithms that operate on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import zip_longest
from typing import Optional, Protocol


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list of integers."""

    val: int = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


@dataclass(eq=False)
class RandomNode:
    """A list node that also carries a pointer to an arbitrary node."""

    val: int = 0
    next: Optional[RandomNode] = None
    random: Optional[RandomNode] = None


class _Linked(Protocol):
    next: Optional["_Linked"]


def _nodes(head: Optional[_Linked]) -> Iterator[_Linked]:
    node = head
    while node is not None:
        yield node
        node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; None when empty."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return list(head) if head is not None else []


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as little-endian digit lists."""
    digits: list[int] = []
    carry = 0
    for a, b in zip_longest(list_values(l1), list_values(l2), fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        digits.append(digit)
    while carry:
        carry, digit = divmod(carry, 10)
        digits.append(digit)
    return build_list(digits)


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list, reusing their nodes."""
    anchor = ListNode()
    tail = anchor
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return anchor.next


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop repeated values from a sorted list in place."""
    node = head
    while node is not None and node.next is not None:
        if node.val == node.next.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Deep-copy a list whose nodes also point at random nodes."""
    originals = list(_nodes(head))
    clones = {node: RandomNode(node.val) for node in originals}
    for node in originals:
        clone = clones[node]
        clone.next = clones.get(node.next)
        clone.random = clones.get(node.random)
    return clones.get(head)


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever revisits a node."""
    seen: set[ListNode] = set()
    for node in _nodes(head):
        if node in seen:
            return True
        seen.add(node)
    return False


def _split(head: ListNode) -> Optional[ListNode]:
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    right = slow.next
    slow.next = None
    return right


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort a list with merge sort, relinking its nodes."""
    if head is None or head.next is None:
        return head
    right = _split(head)
    return merge_two_lists(sort_list(head), sort_list(right))


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Unlink every node holding ``val`` and return the new head."""
    anchor = ListNode(next=head)
    node = anchor
    while node.next is not None:
        if node.next.val == val:
            node.next = node.next.next
        else:
            node = node.next
    return anchor.next


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Tell whether the list reads the same forwards and backwards."""
    values = list_values(head)
    return values == values[::-1]


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list given only the node itself."""
    if node.next is None:
        raise ValueError("cannot delete the last node of a list in place")
    node.val, node.next = node.next.val, node.next.next