"""Applications of the singly linked list: cycle check, LRU cache, palindromes."""

from __future__ import annotations

from typing import Any, TypeVar

from dsalgo.single_list import Node, SingleList

T = TypeVar("T")

_DEFAULT_LRU_SIZE = 10


def has_cycle(first_node: Node[Any] | None) -> bool:
    """Tell whether following ``next`` links from ``first_node`` loops forever.

    Uses a slow pointer moving one step and a fast pointer moving two; they
    meet only when the chain is circular.
    """
    if first_node is None or first_node.next is None:
        return False
    slow: Node[Any] | None = first_node
    fast: Node[Any] | None = first_node
    while fast is not None and fast.next is not None:
        assert slow is not None
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def lru_access(
    single_list: SingleList[T], data: T, max_node_count: int = _DEFAULT_LRU_SIZE
) -> None:
    """Record an access to ``data`` in an LRU cache kept as ``single_list``.

    The most recently used value is first.  A value already cached moves to
    the front; a new value is inserted at the front, and once the cache holds
    ``max_node_count`` values the least recently used (last) node is reused
    for it.
    """
    found = single_list.find(data)
    if found:
        single_list.move_head(found[0])
    elif len(single_list) >= max_node_count:
        if single_list.move_head(single_list.tail()):
            first = single_list.first()
            assert first is not None
            first.data = data
    else:
        single_list.insert_head(data)


def is_palindrome_recursive(single_list: SingleList[Any]) -> bool:
    """Tell whether the list reads the same both ways, consuming it.

    The first and last values are compared and removed until fewer than two
    remain or a mismatch is found; the list is left in that state.
    """
    while len(single_list) > 1:
        first = single_list.first()
        last = single_list.tail()
        assert first is not None and last is not None
        if first.data != last.data:
            return False
        single_list.delete_head()
        single_list.delete_tail()
    return True


def is_palindrome(single_list: SingleList[Any]) -> bool:
    """Tell whether the list reads the same both ways, leaving it unchanged.

    The middle is located with a fast and a slow pointer; the values before
    it are compared with the values after it taken in reverse order.
    """
    first = single_list.first()
    if first is None:
        return True

    front: list[Any] = []
    slow: Node[Any] = first
    fast: Node[Any] | None = first
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        if fast is not None:
            front.append(slow.data)
            assert slow.next is not None
            slow = slow.next

    if fast is None:
        # Even length: the slow node ends the first half.
        front.append(slow.data)
    back_start = slow.next

    back: list[Any] = []
    node = back_start
    while node is not None:
        back.append(node.data)
        node = node.next
    back.reverse()
    return front == back