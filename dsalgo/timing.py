"""A small stopwatch reporting elapsed milliseconds."""

from __future__ import annotations

import time


class TicToc:
    """Measures time since the last call to :meth:`tic` (or construction)."""

    def __init__(self) -> None:
        self._start = 0.0
        self.tic()

    def tic(self) -> None:
        """Restart the stopwatch."""
        self._start = time.perf_counter()

    def toc(self) -> float:
        """Return the milliseconds elapsed since the stopwatch was started."""
        return (time.perf_counter() - self._start) * 1000