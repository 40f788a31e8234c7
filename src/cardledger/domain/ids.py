"""
Row id generation.

Ids are millisecond timestamps bumped past the last id handed out, so
they stay strictly increasing even when calls arrive faster than the
clock ticks.
"""

from __future__ import annotations

import time
from typing import Callable


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class IdGenerator:
    """
    Strictly increasing id source shared by a register.

    Usage:
        ids = IdGenerator()
        row_id = ids.next_id()
        base = ids.reserve(20)  # ids base .. base + 19 are yours
    """

    def __init__(self, clock: Callable[[], int] = _now_ms, start_after: int = 0) -> None:
        self._clock = clock
        self._last = start_after

    @property
    def last(self) -> int:
        """Last id handed out (0 if none)."""
        return self._last

    def next_id(self) -> int:
        """Return a single fresh id."""
        return self.reserve(1)

    def reserve(self, count: int) -> int:
        """
        Reserve a contiguous block of ids.

        Args:
            count: Number of ids needed (must be >= 1)

        Returns:
            First id of the block; the block is ``base .. base + count - 1``
        """
        if count < 1:
            raise ValueError(f"count must be >= 1, got {count}")
        base = max(self._clock(), self._last + 1)
        self._last = base + count - 1
        return base

    def observe(self, row_id: int) -> None:
        """Make sure later ids are issued above ``row_id``."""
        if row_id > self._last:
            self._last = row_id
