"""A binary search tree of unique keys."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Generic, TypeVar

K = TypeVar("K")


class HeightMethod(Enum):
    """How :meth:`BinarySearchTree.height` walks the tree."""

    RECURSIVE = auto()
    ITERATIVE = auto()


@dataclass(eq=False)
class TreeNode(Generic[K]):
    """One node of a :class:`BinarySearchTree`; nodes compare by identity."""

    data: K
    left: TreeNode[K] | None = field(default=None, repr=False)
    right: TreeNode[K] | None = field(default=None, repr=False)


class BinarySearchTree(Generic[K]):
    """Binary search tree that ignores keys it already holds."""

    def __init__(self, keys: Iterable[K] = ()) -> None:
        self._root: TreeNode[K] | None = None
        for key in keys:
            self.insert(key)

    def __bool__(self) -> bool:
        return self._root is not None

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.inorder()!r})"

    def find(self, key: K) -> TreeNode[K] | None:
        """Return the node holding ``key``, or None if it is absent."""
        node = self._root
        while node is not None:
            if key > node.data:  # type: ignore[operator]
                node = node.right
            elif key < node.data:  # type: ignore[operator]
                node = node.left
            else:
                return node
        return None

    def insert(self, key: K) -> None:
        """Add ``key``; a key already present is left alone."""
        if self._root is None:
            self._root = TreeNode(key)
            return
        node = self._root
        while True:
            if key > node.data:  # type: ignore[operator]
                if node.right is None:
                    node.right = TreeNode(key)
                    return
                node = node.right
            elif key < node.data:  # type: ignore[operator]
                if node.left is None:
                    node.left = TreeNode(key)
                    return
                node = node.left
            else:
                return

    def delete(self, key: K) -> bool:
        """Remove ``key``; return whether it was present.

        A node with two children takes the smallest key of its right subtree,
        and that key's node is removed instead.
        """
        parent: TreeNode[K] | None = None
        node = self._root
        while node is not None and node.data != key:
            parent = node
            node = node.right if key > node.data else node.left  # type: ignore[operator]
        if node is None:
            return False

        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.data = successor.data
            parent, node = successor_parent, successor

        child = node.right if node.right is not None else node.left
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.left = node.right = None
        return True

    def preorder(self) -> list[K]:
        """Keys in root, left, right order."""
        keys: list[K] = []
        pending = [self._root] if self._root is not None else []
        while pending:
            node = pending.pop()
            keys.append(node.data)
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)
        return keys

    def inorder(self) -> list[K]:
        """Keys in left, root, right order, which is ascending."""
        keys: list[K] = []
        pending: list[TreeNode[K]] = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            keys.append(node.data)
            node = node.right
        return keys

    def postorder(self) -> list[K]:
        """Keys in left, right, root order."""
        keys: list[K] = []
        pending = [self._root] if self._root is not None else []
        while pending:
            node = pending.pop()
            keys.append(node.data)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        keys.reverse()
        return keys

    def level_order(self) -> list[K]:
        """Keys level by level from the root, left to right."""
        keys: list[K] = []
        pending = deque([self._root] if self._root is not None else [])
        while pending:
            node = pending.popleft()
            keys.append(node.data)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        return keys

    def height(self, method: HeightMethod = HeightMethod.ITERATIVE) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""
        if self._root is None:
            return -1
        if method is HeightMethod.RECURSIVE:
            return self._node_height(self._root)
        height = -1
        level = [self._root]
        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return height

    def _node_height(self, node: TreeNode[K] | None) -> int:
        if node is None:
            return -1
        return max(self._node_height(node.left), self._node_height(node.right)) + 1