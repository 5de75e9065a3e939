"""Unit tests for kernel time utilities."""

from __future__ import annotations

import threading
from datetime import UTC, datetime, timedelta

import pytest

from shiplink.kernel.time import Clock, FrozenClock, SystemClock, utc_now


class TestSystemClock:
    def test_now_returns_utc_aware_datetime(self) -> None:
        result = SystemClock().now()
        assert isinstance(result, datetime)
        assert result.utcoffset() == timedelta(0)

    def test_satisfies_protocol(self) -> None:
        clock: Clock = SystemClock()
        assert clock.now() <= utc_now()

    def test_monotonic_never_decreases(self) -> None:
        clock = SystemClock()
        first = clock.monotonic()
        assert clock.monotonic() >= first


class TestFrozenClock:
    def test_default_instant(self) -> None:
        assert FrozenClock().now() == datetime(2024, 1, 1, tzinfo=UTC)

    def test_stays_frozen(self) -> None:
        clock = FrozenClock()
        assert clock.now() == clock.now()

    def test_advance(self) -> None:
        clock = FrozenClock()
        start = clock.now()
        clock.advance(milliseconds=1100)
        assert clock.now() - start == timedelta(milliseconds=1100)
        assert clock.monotonic() == pytest.approx(1.1)

    def test_set(self) -> None:
        clock = FrozenClock()
        target = datetime(2030, 6, 1, tzinfo=UTC)
        clock.set(target)
        assert clock.now() == target
        assert clock.monotonic() == 0.0

    def test_advance_rejects_negative(self) -> None:
        with pytest.raises(ValueError):
            FrozenClock().advance(seconds=-1)

    def test_advance_from_threads(self) -> None:
        clock = FrozenClock()
        start = clock.now()
        threads = [threading.Thread(target=clock.advance, kwargs={"seconds": 1}) for _ in range(20)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert clock.now() - start == timedelta(seconds=20)
        assert clock.monotonic() == 20.0
