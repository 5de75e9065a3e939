"""Observability – readiness checks.

:class:`CircuitBreakerHealthCheck` reports the service degraded while any
registered breaker is open; mount it through ``FastAPIHealthRouter``.
"""
from shiplink.observability.health.builtin import CircuitBreakerHealthCheck, LambdaHealthCheck
from shiplink.observability.health.check import HealthCheck, HealthStatus
from shiplink.observability.health.registry import HealthRegistry, HealthReport

__all__ = [
    "CircuitBreakerHealthCheck",
    "HealthCheck",
    "HealthRegistry",
    "HealthReport",
    "HealthStatus",
    "LambdaHealthCheck",
]
