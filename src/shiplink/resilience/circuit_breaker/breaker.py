"""Resilience – CircuitBreaker implementation."""
from __future__ import annotations

import threading
from datetime import datetime
from typing import Any, Awaitable, Callable, TypeVar

from shiplink.kernel.time import Clock, SystemClock
from shiplink.observability.logging import get_logger
from shiplink.observability.metrics import Metrics, NoopMetrics
from shiplink.resilience.circuit_breaker.classifier import should_trip_circuit
from shiplink.resilience.circuit_breaker.config import CircuitBreakerConfig
from shiplink.resilience.circuit_breaker.errors import CircuitOpenError
from shiplink.resilience.circuit_breaker.state import CircuitBreakerState
from shiplink.resilience.circuit_breaker.stats import CircuitBreakerStats
from shiplink.resilience.circuit_breaker.window import FailureWindow

T = TypeVar("T")

_CLOSED = CircuitBreakerState.CLOSED
_OPEN = CircuitBreakerState.OPEN
_HALF_OPEN = CircuitBreakerState.HALF_OPEN


class _Probe:
    """Token held by the single caller allowed to probe a HALF_OPEN breaker."""

    __slots__ = ()


class CircuitBreaker:
    """Per-dependency circuit breaker with a rolling failure window.

    States:

    * CLOSED: calls pass through; failures are recorded in the window and
      the breaker trips once ``failure_threshold`` of them are live.
    * OPEN: calls fail fast with :class:`CircuitOpenError` until
      ``reset_timeout`` has elapsed.
    * HALF_OPEN: exactly one caller probes the dependency; its outcome
      closes or re-opens the breaker. Other callers fail fast meanwhile.

    Every state read and mutation happens under one lock that is never held
    across an ``await``, so a breaker can be shared between tasks, event
    loops and threads.

    Usage::

        breaker = registry.get_breaker("wms:shiphero")
        orders = await breaker.execute(lambda: client.get("/orders"))
    """

    def __init__(
        self,
        config: CircuitBreakerConfig,
        *,
        clock: Clock | None = None,
        metrics: Metrics | None = None,
    ) -> None:
        self._config = config
        self._clock: Clock = clock or SystemClock()
        metrics = metrics or NoopMetrics()
        self._state_changes = metrics.counter(
            "circuit_breaker.state_change", "Circuit breaker state transitions"
        )
        self._rejections = metrics.counter(
            "circuit_breaker.rejected", "Calls short-circuited by an open breaker"
        )
        self._lock = threading.Lock()
        self._log = get_logger(__name__, circuit_breaker=config.name)

        self._state = _CLOSED
        self._window = FailureWindow(config.monitoring_window)
        self._success_count = 0
        self._failure_total = 0
        self._total_requests = 0
        self._last_success_time: datetime | None = None
        self._last_failure_time: datetime | None = None
        self._next_retry_time: datetime | None = None
        self._opened_at: float | None = None
        self._probe: _Probe | None = None

        self._log.info(
            "circuit_breaker.initialized",
            failure_threshold=config.failure_threshold,
            reset_timeout_ms=config.reset_timeout_ms,
            monitoring_window_ms=config.monitoring_window_ms,
        )

    # ------------------------------------------------------------------
    # Public surface
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def config(self) -> CircuitBreakerConfig:
        return self._config

    @property
    def state(self) -> CircuitBreakerState:
        return self._state

    async def execute(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Run *operation* under breaker protection.

        Raises :class:`CircuitOpenError` without calling *operation* while
        the breaker is open. Otherwise returns the operation's result or
        re-raises its error unchanged after recording the outcome.
        """
        probe = self._admit()
        try:
            result = await operation()
        except Exception as exc:
            self._on_failure(exc, probe)
            raise
        except BaseException:
            # cancellation: no outcome to record, free the probe slot
            self._release(probe)
            raise
        self._on_success(probe)
        return result

    def get_stats(self) -> CircuitBreakerStats:
        with self._lock:
            return CircuitBreakerStats(
                state=self._state,
                failure_count=self._window.count(self._clock.monotonic()),
                success_count=self._success_count,
                total_requests=self._total_requests,
                last_success_time=self._last_success_time,
                last_failure_time=self._last_failure_time,
                next_retry_time=self._next_retry_time if self._state is _OPEN else None,
            )

    def force_state(self, state: CircuitBreakerState | str) -> None:
        """Administrative override that bypasses the window and timers.

        Forcing OPEN schedules the next probe ``reset_timeout`` from now;
        forcing CLOSED empties the failure window.
        """
        target = CircuitBreakerState(state)
        with self._lock:
            now = self._clock.now()
            self._log.warning(
                "circuit_breaker.forced", old_state=self._state.value, new_state=target.value
            )
            self._probe = None
            if target is _CLOSED:
                self._window.clear()
            self._transition(target, now, self._clock.monotonic())

    def reset(self) -> None:
        """Return to CLOSED with an empty window and zeroed counters."""
        with self._lock:
            now = self._clock.now()
            self._probe = None
            self._window.clear()
            self._success_count = 0
            self._failure_total = 0
            self._total_requests = 0
            self._last_success_time = None
            self._last_failure_time = None
            self._transition(_CLOSED, now, self._clock.monotonic())
            self._log.info("circuit_breaker.reset")

    @staticmethod
    def should_trip_circuit(error: Any) -> bool:
        """See :func:`shiplink.resilience.circuit_breaker.classifier.should_trip_circuit`."""
        return should_trip_circuit(error)

    def __repr__(self) -> str:
        return f"CircuitBreaker(name={self.name!r}, state={self._state.value!r})"

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------

    def _admit(self) -> _Probe | None:
        with self._lock:
            mono = self._clock.monotonic()
            if self._state is _OPEN:
                remaining = self._remaining_open(mono)
                if remaining > 0:
                    raise self._reject(remaining)
                self._transition(_HALF_OPEN, self._clock.now(), mono)
            if self._state is _HALF_OPEN:
                if self._probe is not None:
                    raise self._reject(None)
                self._probe = _Probe()
                return self._probe
            return None

    def _remaining_open(self, mono: float) -> float:
        if self._opened_at is None:
            return 0.0
        return self._config.reset_timeout.total_seconds() - (mono - self._opened_at)

    def _reject(self, retry_after: float | None) -> CircuitOpenError:
        self._rejections.add(1, {"name": self.name})
        retry_at = self._next_retry_time if retry_after is not None else None
        return CircuitOpenError(
            self.name, retry_at=retry_at, retry_after_seconds=retry_after
        )

    def _release(self, probe: _Probe | None) -> None:
        if probe is None:
            return
        with self._lock:
            if self._probe is probe:
                self._probe = None

    def _on_success(self, probe: _Probe | None) -> None:
        with self._lock:
            now = self._clock.now()
            mono = self._clock.monotonic()
            self._success_count += 1
            self._total_requests += 1
            self._last_success_time = now
            if probe is not None and self._probe is probe:
                self._probe = None
                if self._state is _HALF_OPEN:
                    self._window.clear()
                    self._transition(_CLOSED, now, mono)

    def _on_failure(self, exc: Exception, probe: _Probe | None) -> None:
        with self._lock:
            now = self._clock.now()
            mono = self._clock.monotonic()
            self._failure_total += 1
            self._total_requests += 1
            self._last_failure_time = now
            self._window.append(mono)
            live = self._window.count(mono)
            self._log.warning(
                "circuit_breaker.failure",
                error=str(exc) or type(exc).__name__,
                error_type=type(exc).__name__,
                failure_total=self._failure_total,
                recent_failure_count=live,
                state=self._state.value,
            )

            is_probe = probe is not None and self._probe is probe
            if is_probe:
                self._probe = None
                if self._state is _HALF_OPEN:
                    self._transition(_OPEN, now, mono)
            elif self._state is _CLOSED and live >= self._config.failure_threshold:
                self._transition(_OPEN, now, mono)

    def _transition(self, target: CircuitBreakerState, now: datetime, mono: float) -> None:
        previous = self._state
        self._state = target
        if target is _OPEN:
            # decided on the monotonic clock, reported on the wall clock
            self._opened_at = mono
            self._next_retry_time = now + self._config.reset_timeout
        else:
            self._opened_at = None
            self._next_retry_time = None
        if previous is target:
            return

        self._state_changes.add(1, {"name": self.name, "state": target.value})
        if target is _OPEN:
            self._log.error(
                "circuit_breaker.opened",
                failure_total=self._failure_total,
                recent_failure_count=self._window.count(mono),
                next_retry_time=self._next_retry_time.isoformat() if self._next_retry_time else None,
            )
        elif target is _HALF_OPEN:
            self._log.info("circuit_breaker.half_open")
        else:
            self._log.info("circuit_breaker.closed", previous_state=previous.value)


__all__ = ["CircuitBreaker"]
