"""Benchmark: CircuitBreaker.execute overhead.

Compares:
- Bare ``await fn()`` (baseline, no breaker)
- ``CircuitBreaker.execute(fn)`` on a CLOSED breaker (happy path)
- ``CircuitBreaker.execute(fn)`` on an OPEN breaker (fast-fail path)

Goal: the fast-fail path must stay cheaper than the happy path; a
rejected call never awaits the operation.
"""

from __future__ import annotations

import pytest

from shiplink.kernel.time import FrozenClock
from shiplink.resilience.circuit_breaker import (
    CircuitBreaker,
    CircuitBreakerConfig,
    CircuitBreakerRegistry,
    CircuitBreakerState,
    CircuitOpenError,
)


async def _noop() -> str:
    return "ok"


def _breaker() -> CircuitBreaker:
    config = CircuitBreakerConfig(
        name="bench", failure_threshold=5, reset_timeout_ms=60_000, monitoring_window_ms=300_000
    )
    return CircuitBreaker(config, clock=FrozenClock())


def test_bare_await_baseline(benchmark, event_loop):
    """Raw ``await _noop()``, the event-loop call floor."""

    def run():
        return event_loop.run_until_complete(_noop())

    assert benchmark(run) == "ok"


def test_closed_breaker_execute(benchmark, event_loop):
    """Admission, outcome recording and stats bookkeeping on success."""
    breaker = _breaker()

    def run():
        return event_loop.run_until_complete(breaker.execute(_noop))

    assert benchmark(run) == "ok"


def test_open_breaker_rejection(benchmark, event_loop):
    """Short-circuited call: raises CircuitOpenError without awaiting ``_noop``."""
    breaker = _breaker()
    breaker.force_state(CircuitBreakerState.OPEN)

    async def rejected() -> bool:
        try:
            await breaker.execute(_noop)
        except CircuitOpenError:
            return True
        return False

    def run():
        return event_loop.run_until_complete(rejected())

    assert benchmark(run) is True
    assert breaker.get_stats().total_requests == 0


@pytest.mark.parametrize("breakers", [10, 1000])
def test_registry_lookup(benchmark, breakers):
    """``get_breaker`` on an existing name with N breakers registered."""
    registry = CircuitBreakerRegistry(clock=FrozenClock())
    for i in range(breakers):
        registry.get_breaker(f"wms:{i}")

    result = benchmark(registry.get_breaker, "wms:0")
    assert result is registry.get_breaker("wms:0")
