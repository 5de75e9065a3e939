"""Resilience – CircuitBreakerStats snapshot."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any

from shiplink.resilience.circuit_breaker.state import CircuitBreakerState


@dataclasses.dataclass(frozen=True)
class CircuitBreakerStats:
    """Point-in-time view of a breaker, as returned by ``get_stats()``.

    ``failure_count`` counts failures still inside the monitoring window;
    ``success_count`` and ``total_requests`` are lifetime counters.
    ``next_retry_time`` is only set while the breaker is OPEN.
    """

    state: CircuitBreakerState
    failure_count: int
    success_count: int
    total_requests: int
    last_success_time: datetime | None = None
    last_failure_time: datetime | None = None
    next_retry_time: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        def _iso(value: datetime | None) -> str | None:
            return value.isoformat() if value is not None else None

        return {
            "state": self.state.value,
            "failure_count": self.failure_count,
            "success_count": self.success_count,
            "total_requests": self.total_requests,
            "last_success_time": _iso(self.last_success_time),
            "last_failure_time": _iso(self.last_failure_time),
            "next_retry_time": _iso(self.next_retry_time),
        }


__all__ = ["CircuitBreakerStats"]
