"""Resilience – rolling failure window."""
from __future__ import annotations

from collections import deque
from datetime import timedelta


class FailureWindow:
    """Ordered failure instants, evaluated lazily against "now".

    Instants are monotonic-clock seconds (``Clock.monotonic()``), so a wall
    clock step never ages failures out early or keeps them alive too long.
    An entry is live while ``instant > now - width``. Expired entries are
    dropped from the left whenever a new failure is appended; reads never
    compact. Size is bounded by time only, so ``count`` reports every
    failure inside the window, including ones past the trip threshold.
    """

    def __init__(self, width: timedelta) -> None:
        self._width = width.total_seconds()
        self._entries: deque[float] = deque()

    def append(self, instant: float) -> None:
        self._compact(instant)
        self._entries.append(instant)

    def count(self, now: float) -> int:
        cutoff = now - self._width
        return sum(1 for instant in self._entries if instant > cutoff)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def _compact(self, now: float) -> None:
        cutoff = now - self._width
        while self._entries and self._entries[0] <= cutoff:
            self._entries.popleft()


__all__ = ["FailureWindow"]
