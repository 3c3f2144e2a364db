"""Small recursion examples: cinema rows, stair climbing, final recommender."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import TypeVar

K = TypeVar("K", bound=Hashable)

_MAX_DEPTH = 50


class DepthLimitError(RecursionError):
    """Raised when a computation goes deeper than its allowed depth."""


class CycleError(ValueError):
    """Raised when a recommender table refers back to itself."""


def which_row(row: int, max_depth: int = _MAX_DEPTH) -> int:
    """Work out the row number by counting back one row at a time.

    f(1) = 1 and f(n) = f(n - 1) + 1; raises DepthLimitError once more than
    ``max_depth + 1`` steps back are needed.
    """
    if row < 1:
        raise ValueError("row must be at least 1")

    def count(current: int, depth: int) -> int:
        if current == 1:
            return 1
        if depth > max_depth:
            raise DepthLimitError("maximum recursion depth reached")
        return 1 + count(current - 1, depth + 1)

    return count(row, 0)


def climb_stairs(stairs: int) -> int:
    """Number of ways to climb ``stairs`` steps taking one or two at a time."""
    if stairs < 1:
        raise ValueError("stairs must be at least 1")
    if stairs <= 2:
        return stairs
    before, previous = 1, 2
    for _ in range(3, stairs + 1):
        before, previous = previous, before + previous
    return previous


def final_recommender(
    table: Mapping[K, K], inquiry: K, max_depth: int = _MAX_DEPTH
) -> K:
    """Follow ``table`` from ``inquiry`` to the id that has no recommender.

    Raises CycleError if the chain loops and DepthLimitError if it is longer
    than ``max_depth`` links.
    """
    seen: set[K] = set()
    current = inquiry
    depth = 0
    while True:
        if depth > max_depth:
            raise DepthLimitError("maximum recursion depth reached")
        depth += 1
        if current not in table:
            return current
        if current in seen:
            raise CycleError("this recommender table is circled")
        seen.add(current)
        current = table[current]