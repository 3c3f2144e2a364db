"""A growable array stack and two of its applications."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from dsalgo.strings import split, strings_to_float

T = TypeVar("T")

_DEFAULT_CAPACITY = 10
_DEFAULT_PRIORITIES = {"+": 0, "-": 0, "*": 1, "/": 1}


class ExpressionError(ValueError):
    """Raised when an arithmetic expression is malformed."""


class Stack(Generic[T]):
    """LIFO stack whose capacity grows as items are pushed."""

    def __init__(self, capacity: int = _DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._items: list[T] = []
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        """Number of slots currently reserved."""
        return self._capacity

    def push(self, item: T) -> None:
        """Put ``item`` on top, growing capacity once the stack is full."""
        self._items.append(item)
        if len(self._items) >= self._capacity:
            if self._capacity < 5:
                self._capacity = 6
            self._capacity *= 2

    def pop(self) -> T:
        """Remove and return the top item; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"


def _divide(left: float, right: float) -> float:
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


def _apply(operator: str, left: float, right: float) -> float:
    match operator[0]:
        case "+":
            return left + right
        case "-":
            return left - right
        case "*":
            return left * right
        case "/":
            return _divide(left, right)
    raise ExpressionError(f"unsupported operator {operator!r}")


def _reduce_top(operands: Stack[float], operator: str) -> None:
    try:
        right = operands.pop()
        left = operands.pop()
    except IndexError:
        raise ExpressionError("input expression format is error") from None
    operands.push(_apply(operator, left, right))


def evaluate_expression(
    expression: str,
    symbols: Iterable[str] = "+-*/",
    priorities: Mapping[str, int] | None = None,
) -> float:
    """Evaluate an infix expression of numbers and binary operators.

    ``priorities`` maps each operator to its precedence; a higher number binds
    tighter.  Operators of equal precedence associate to the left.
    """
    table = dict(_DEFAULT_PRIORITIES if priorities is None else priorities)
    operands: Stack[float] = Stack()
    operators: Stack[str] = Stack()

    for token in split(expression, symbols, True):
        if token in table:
            while len(operators):
                top = operators.pop()
                if table[token] > table[top]:
                    operators.push(top)
                    break
                _reduce_top(operands, top)
            operators.push(token)
        else:
            try:
                operands.push(strings_to_float([token])[0])
            except ValueError as exc:
                raise ExpressionError(f"bad operand {token!r}") from exc

    while len(operators):
        _reduce_top(operands, operators.pop())

    try:
        return operands.pop()
    except IndexError:
        raise ExpressionError("compute is error") from None


@dataclass(frozen=True)
class Element:
    """An item for adjacent elimination; two elements cancel when unequal."""

    data: Any = 0


def eliminate_adjacent(items: Iterable[Any]) -> int:
    """Repeatedly cancel adjacent unequal items; return how many remain."""
    stack: Stack[Any] = Stack()
    for item in items:
        if not len(stack):
            stack.push(item)
            continue
        top = stack.pop()
        if top != item:
            continue
        stack.push(top)
        stack.push(item)
    return len(stack)


def eliminate_binary(text: str) -> int:
    """Cancel adjacent '0'/'1' pairs in ``text``; return the remaining length."""
    bad = set(text) - {"0", "1"}
    if bad:
        raise ValueError(f"only '0' and '1' are allowed, got {sorted(bad)!r}")
    return eliminate_adjacent(text)