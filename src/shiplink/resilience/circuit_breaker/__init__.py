"""Resilience – Circuit Breaker pattern."""
from shiplink.resilience.circuit_breaker.errors import CircuitOpenError
from shiplink.resilience.circuit_breaker.state import CircuitBreakerState
from shiplink.resilience.circuit_breaker.config import CircuitBreakerConfig
from shiplink.resilience.circuit_breaker.stats import CircuitBreakerStats
from shiplink.resilience.circuit_breaker.window import FailureWindow
from shiplink.resilience.circuit_breaker.classifier import NETWORK_ERROR_CODES, should_trip_circuit
from shiplink.resilience.circuit_breaker.breaker import CircuitBreaker
from shiplink.resilience.circuit_breaker.registry import CircuitBreakerRegistry

__all__ = [
    "NETWORK_ERROR_CODES",
    "CircuitBreaker",
    "CircuitBreakerConfig",
    "CircuitBreakerRegistry",
    "CircuitBreakerState",
    "CircuitBreakerStats",
    "CircuitOpenError",
    "FailureWindow",
    "should_trip_circuit",
]
