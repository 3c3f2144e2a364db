"""A skip list whose nodes get a fixed number of index levels on insertion."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_DEFAULT_MAX_LEVEL = 16


@dataclass(eq=False)
class SkipNode(Generic[T]):
    """A node; ``forwards[i]`` is the next node on level ``i``."""

    data: T
    forwards: list[SkipNode[T] | None] = field(repr=False)
    level: int = 0


class SkipList(Generic[T]):
    """Sorted multiset kept as a skip list.

    Each inserted value gets a level chosen once by :meth:`random_level`;
    levels are never rebalanced afterwards.
    """

    def __init__(
        self,
        values: Iterable[T] = (),
        max_level: int = _DEFAULT_MAX_LEVEL,
        seed: int | None = None,
    ) -> None:
        if max_level < 1:
            raise ValueError("max_level must be at least 1")
        self._max_level = max_level
        self._rng = random.Random(seed)
        self._head: SkipNode[Any] = SkipNode(None, [None] * max_level)
        self._level = 1
        for value in values:
            self.insert(value)

    @property
    def max_level(self) -> int:
        """The highest level any node may reach."""
        return self._max_level

    def random_level(self) -> int:
        """One plus the number of heads in ``max_level - 1`` coin flips."""
        return 1 + sum(self._rng.getrandbits(1) for _ in range(self._max_level - 1))

    def _predecessor(self, value: T, levels: int) -> tuple[SkipNode[Any], list[SkipNode[Any]]]:
        node = self._head
        before: list[SkipNode[Any]] = [self._head] * levels
        for i in reversed(range(levels)):
            while (nxt := node.forwards[i]) is not None and nxt.data < value:
                node = nxt
            before[i] = node
        return node, before

    def find(self, value: T) -> SkipNode[T] | None:
        """Return a node holding ``value``, or None if there is none."""
        node, _ = self._predecessor(value, self._level)
        candidate = node.forwards[0]
        if candidate is not None and candidate.data == value:
            return candidate
        return None

    def insert(self, value: T) -> None:
        """Add ``value``, before any equal values already present."""
        level = self.random_level()
        new_node: SkipNode[T] = SkipNode(value, [None] * self._max_level, level)
        _, before = self._predecessor(value, level)
        for i, node in enumerate(before):
            new_node.forwards[i] = node.forwards[i]
            node.forwards[i] = new_node
        self._level = max(self._level, level)

    def delete(self, value: T) -> bool:
        """Remove one occurrence of ``value``; return whether one was found."""
        node, before = self._predecessor(value, self._level)
        target = node.forwards[0]
        if target is None or target.data != value:
            return False
        for i, prev in enumerate(before):
            if prev.forwards[i] is target:
                prev.forwards[i] = target.forwards[i]
        return True

    def __iter__(self) -> Iterator[T]:
        """Iterate over the values in ascending order."""
        node = self._head.forwards[0]
        while node is not None:
            yield node.data
            node = node.forwards[0]

    def __contains__(self, value: Any) -> bool:
        return self.find(value) is not None

    def __repr__(self) -> str:
        return f"SkipList({list(self)!r})"