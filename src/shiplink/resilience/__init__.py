"""Resilience – circuit breakers protecting calls into upstream integrations."""

from shiplink.resilience.circuit_breaker import (
    CircuitBreaker,
    CircuitBreakerConfig,
    CircuitBreakerRegistry,
    CircuitBreakerState,
    CircuitBreakerStats,
    CircuitOpenError,
    should_trip_circuit,
)

__all__ = [
    "CircuitBreaker",
    "CircuitBreakerConfig",
    "CircuitBreakerRegistry",
    "CircuitBreakerState",
    "CircuitBreakerStats",
    "CircuitOpenError",
    "should_trip_circuit",
]
