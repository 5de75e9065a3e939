"""Kernel time – Clock protocol + implementations.

Breakers, registries and health checks read time only through a
:class:`Clock`, so tests can pin and advance it with :class:`FrozenClock`.

A clock answers two questions. :meth:`Clock.now` is the wall-clock instant
used for anything reported (stats, log fields, ``Retry-After`` targets).
:meth:`Clock.monotonic` is a seconds counter that never jumps with NTP or
operator changes; elapsed-time decisions use it.
"""
from __future__ import annotations

import threading
import time
from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: wall-clock UTC instants plus a monotonic seconds counter."""

    def now(self) -> datetime: ...
    def monotonic(self) -> float: ...


class SystemClock:
    """Production clock: ``datetime.now(UTC)`` and ``time.monotonic()``."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def monotonic(self) -> float:
        return time.monotonic()


class FrozenClock:
    """Test clock pinned to a fixed point in time until advanced.

    :meth:`advance` moves both readings. :meth:`set` moves only the wall
    clock, the way a host clock step would.
    """

    def __init__(self, fixed: datetime | None = None) -> None:
        self._fixed = fixed or datetime(2024, 1, 1, tzinfo=UTC)
        self._elapsed = timedelta(0)
        self._lock = threading.Lock()

    def now(self) -> datetime:
        with self._lock:
            return self._fixed

    def monotonic(self) -> float:
        with self._lock:
            return self._elapsed.total_seconds()

    def advance(self, **kwargs: float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs.

        ``clock.advance(milliseconds=1100)`` is the common form in tests.
        """
        delta = timedelta(**kwargs)
        if delta < timedelta(0):
            raise ValueError("FrozenClock cannot run backwards; use set()")
        with self._lock:
            self._fixed += delta
            self._elapsed += delta

    def set(self, fixed: datetime) -> None:
        with self._lock:
            self._fixed = fixed


def utc_now() -> datetime:
    """Shorthand for ``datetime.now(UTC)``."""
    return datetime.now(UTC)


__all__ = ["Clock", "FrozenClock", "SystemClock", "utc_now"]
