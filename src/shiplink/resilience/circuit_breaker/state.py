"""Resilience – CircuitBreakerState enum."""
from __future__ import annotations

from enum import Enum


class CircuitBreakerState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"
    HALF_OPEN = "half_open"


__all__ = ["CircuitBreakerState"]
