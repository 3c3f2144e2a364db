"""Splitting strings on sets of symbols and converting numeric strings."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_FLOAT_MAX = 3.4028234663852886e38


def split(text: str, symbols: Iterable[str], keep_symbols: bool = False) -> list[str]:
    """Split ``text`` at every character found in ``symbols``.

    Runs of separators never produce empty pieces.  With ``keep_symbols`` each
    separator is kept as a piece of its own, in order.
    """
    separators = frozenset(symbols)
    pieces: list[str] = []
    current: list[str] = []
    for ch in text:
        if ch in separators:
            if current:
                pieces.append("".join(current))
                current = []
            if keep_symbols:
                pieces.append(ch)
        else:
            current.append(ch)
    if current:
        pieces.append("".join(current))
    return pieces


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer at the start of {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _parse_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number at the start of {text!r}")
    value = float(match.group(1))
    if math.isfinite(value) and abs(value) > _FLOAT_MAX:
        raise ValueError(f"number out of range: {text!r}")
    return value


def strings_to_int(strings: Iterable[str]) -> list[int]:
    """Convert each string's leading integer; raise ValueError if one has none."""
    return [_parse_int(s) for s in strings]


def strings_to_float(strings: Iterable[str]) -> list[float]:
    """Convert each string's leading number; raise ValueError if one has none."""
    return [_parse_float(s) for s in strings]