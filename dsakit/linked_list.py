"""Singly linked list nodes and the classic pointer-rewiring operations.

Every operation takes the head node, or ``None`` for an empty list. Operations
that may change the head return the new head.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    value: int
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.value
            node = node.next


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_iterable(values: Iterable[int]) -> Optional[ListNode]:
    """Build a list holding ``values`` in order and return its head."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_list(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list in order."""
    return [node.value for node in _nodes(head)]


def push_front(head: Optional[ListNode], value: int) -> ListNode:
    """Add ``value`` at the front of the list and return the new head."""
    return ListNode(value, head)


def _find_with_previous(
    head: Optional[ListNode], value: int
) -> tuple[Optional[ListNode], Optional[ListNode]]:
    previous: Optional[ListNode] = None
    for node in _nodes(head):
        if node.value == value:
            return previous, node
        previous = node
    return None, None


def swap_nodes(head: Optional[ListNode], x: int, y: int) -> Optional[ListNode]:
    """Swap the first nodes holding ``x`` and ``y`` by relinking them.

    The list is left as it is if ``x == y`` or either value is absent.
    """
    if x == y:
        return head
    prev_x, curr_x = _find_with_previous(head, x)
    prev_y, curr_y = _find_with_previous(head, y)
    if curr_x is None or curr_y is None:
        return head
    if prev_x is not None:
        prev_x.next = curr_y
    else:
        head = curr_y
    if prev_y is not None:
        prev_y.next = curr_x
    else:
        head = curr_x
    curr_x.next, curr_y.next = curr_y.next, curr_x.next
    return head


def rotate_left(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list counter-clockwise by ``k`` nodes and return the new head.

    The list is unchanged when ``k`` is zero or not smaller than its length.
    """
    if k < 0:
        raise ValueError("rotation count must be non-negative")
    if k == 0 or head is None:
        return head
    kth: Optional[ListNode] = head
    count = 1
    while count < k and kth is not None:
        kth = kth.next
        count += 1
    if kth is None or kth.next is None:
        return head
    tail = kth
    while tail.next is not None:
        tail = tail.next
    tail.next = head
    new_head = kth.next
    kth.next = None
    return new_head


def _remove_loop(loop_node: ListNode, head: ListNode) -> None:
    loop_length = 1
    probe = loop_node
    while probe.next is not loop_node:
        assert probe.next is not None
        probe = probe.next
        loop_length += 1

    behind: ListNode = head
    ahead: ListNode = head
    for _ in range(loop_length):
        assert ahead.next is not None
        ahead = ahead.next

    while ahead is not behind:
        assert ahead.next is not None and behind.next is not None
        behind = behind.next
        ahead = ahead.next

    while ahead.next is not behind:
        assert ahead.next is not None
        ahead = ahead.next
    ahead.next = None


def detect_and_remove_loop(head: Optional[ListNode]) -> bool:
    """Break a cycle in the list if there is one; return whether one was found."""
    slow = fast = head
    while slow is not None and fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            assert slow is not None and head is not None
            _remove_loop(slow, head)
            return True
    return False


def middle(head: Optional[ListNode]) -> int:
    """Return the middle value; for an even length, the second of the two middles."""
    if head is None:
        raise ValueError("middle of empty list")
    slow = fast = head
    while fast is not None and fast.next is not None:
        assert slow.next is not None
        slow = slow.next
        fast = fast.next.next
    return slow.value


def reverse_between(
    head: Optional[ListNode], start: int, end: int
) -> Optional[ListNode]:
    """Reverse the nodes at 1-based positions ``start`` through ``end``."""
    if start < 1 or end < start:
        raise ValueError(f"invalid range {start}..{end}")
    anchor = ListNode(0, head)
    before = anchor
    for _ in range(start - 1):
        if before.next is None:
            raise ValueError(f"range {start}..{end} exceeds list length")
        before = before.next
    first = before.next
    if first is None:
        raise ValueError(f"range {start}..{end} exceeds list length")
    previous: Optional[ListNode] = None
    current: Optional[ListNode] = first
    for _ in range(end - start + 1):
        if current is None:
            raise ValueError(f"range {start}..{end} exceeds list length")
        current.next, previous, current = previous, current, current.next
    first.next = current
    before.next = previous
    return anchor.next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Remove the ``n``-th node from the end and return the head.

    If ``n`` is not smaller than the length, the first node is removed.
    """
    if n < 1:
        raise ValueError("position from end must be at least 1")
    if head is None:
        raise ValueError("cannot remove from an empty list")
    size = sum(1 for _ in _nodes(head))
    if n >= size:
        return head.next
    before = head
    for _ in range(size - n - 1):
        assert before.next is not None
        before = before.next
    assert before.next is not None
    before.next = before.next.next
    return head