"""A singly linked list with a sentinel head node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[T]):
    """One link of a :class:`SingleList`; nodes compare by identity."""

    data: T
    next: Node[T] | None = field(default=None, repr=False)


class SingleList(Generic[T]):
    """Singly linked list that keeps a pointer to its last node."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: Node[Any] = Node(None)
        self._tail: Node[T] | None = None
        self._count = 0
        for value in values:
            self.insert_tail(value)

    def _nodes(self) -> Iterator[Node[T]]:
        node = self._head.next
        while node is not None:
            yield node
            node = node.next

    def _predecessor(self, node: Node[T] | None) -> Node[Any] | None:
        """Return the node just before ``node``, or None if it is not listed."""
        if node is None:
            return None
        prev: Node[Any] = self._head
        while prev.next is not None:
            if prev.next is node:
                return prev
            prev = prev.next
        return None

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        """Iterate over the stored values from first to last."""
        return (node.data for node in self._nodes())

    def __repr__(self) -> str:
        return f"SingleList({list(self)!r})"

    def first(self) -> Node[T] | None:
        """Return the first node, or None when the list is empty."""
        return self._head.next

    def tail(self) -> Node[T] | None:
        """Return the last node, or None when the list is empty."""
        return self._tail

    def insert_head(self, data: T) -> Node[T]:
        """Insert ``data`` before the first node and return its node."""
        node = Node(data, self._head.next)
        self._head.next = node
        if self._tail is None:
            self._tail = node
        self._count += 1
        return node

    def insert_tail(self, data: T) -> Node[T]:
        """Append ``data`` after the last node and return its node."""
        node: Node[T] = Node(data)
        if self._tail is None:
            self._head.next = node
        else:
            self._tail.next = node
        self._tail = node
        self._count += 1
        return node

    def insert(self, data: T, index: int = 1) -> tuple[bool, Node[T]]:
        """Insert ``data`` before the 1-based position ``index``.

        If ``index`` is past the number of nodes the value goes to the head and
        the flag in the returned pair is False.
        """
        if index <= 0:
            raise ValueError("index must be at least 1")
        if index > self._count:
            return False, self.insert_head(data)
        prev: Node[Any] = self._head
        for _ in range(index - 1):
            assert prev.next is not None
            prev = prev.next
        node = Node(data, prev.next)
        prev.next = node
        self._count += 1
        return True, node

    def _unlink(self, prev: Node[Any], node: Node[T]) -> None:
        prev.next = node.next
        node.next = None
        self._count -= 1
        if self._count == 0:
            self._tail = None
        elif node is self._tail:
            self._tail = prev

    def delete(self, data: T, first_only: bool = False) -> bool:
        """Remove nodes holding ``data``; return whether any was removed."""
        removed = False
        prev: Node[Any] = self._head
        while prev.next is not None:
            node = prev.next
            if node.data == data:
                self._unlink(prev, node)
                removed = True
                if first_only:
                    break
            else:
                prev = node
        return removed

    def delete_node(self, node: Node[T] | None) -> bool:
        """Remove ``node`` from the list; return False if it is not in it."""
        prev = self._predecessor(node)
        if prev is None or node is None:
            return False
        self._unlink(prev, node)
        return True

    def delete_head(self) -> bool:
        """Remove the first node; return False if the list is empty."""
        return self.delete_node(self._head.next)

    def delete_tail(self) -> bool:
        """Remove the last node; return False if the list is empty."""
        return self.delete_node(self._tail)

    def find(self, data: T) -> list[Node[T]]:
        """Return every node holding ``data``, in list order."""
        return [node for node in self._nodes() if node.data == data]

    def contains_node(self, node: Node[T] | None) -> bool:
        """Tell whether ``node`` is one of this list's nodes."""
        return self._predecessor(node) is not None

    def exchange(self, node1: Node[T], node2: Node[T]) -> bool:
        """Swap the positions of two nodes; False if either is not listed."""
        prev1 = self._predecessor(node1)
        prev2 = self._predecessor(node2)
        if prev1 is None or prev2 is None:
            return False
        if node1 is node2:
            return True
        # Make node1 the earlier of the two.
        position = {id(node): i for i, node in enumerate(self._nodes())}
        if position[id(node2)] < position[id(node1)]:
            node1, node2 = node2, node1
            prev1, prev2 = prev2, prev1
        if self._tail is node2:
            self._tail = node1
        if prev2 is node1:
            prev1.next = node2
            node1.next = node2.next
            node2.next = node1
        else:
            prev1.next = node2
            prev2.next = node1
            node1.next, node2.next = node2.next, node1.next
        return True

    def move_head(self, node: Node[T] | None) -> bool:
        """Move ``node`` to the front; False if it is not listed."""
        prev = self._predecessor(node)
        if prev is None or node is None:
            return False
        if node is not self._head.next:
            if self._tail is node:
                self._tail = prev
            prev.next = node.next
            node.next = self._head.next
            self._head.next = node
        return True

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        if self._count <= 1:
            return
        first = self._head.next
        prev: Node[T] | None = None
        current = first
        while current is not None:
            current.next, prev, current = prev, current, current.next
        self._head.next = prev
        self._tail = first

    def middle_node(self) -> Node[T] | None:
        """Return the middle node; the earlier of the two for even lengths."""
        fast = slow = self._head.next
        while fast is not None and fast.next is not None:
            fast = fast.next.next
            if fast is not None:
                assert slow is not None
                slow = slow.next
        return slow