"""Observability – logging, metrics, health."""

from shiplink.observability.health import HealthCheck, HealthRegistry, HealthReport, HealthStatus
from shiplink.observability.logging import JsonLoggerFactory, Logger, SensitiveFieldsFilter, get_logger
from shiplink.observability.metrics import InMemoryMetrics, Metrics, NoopMetrics

__all__ = [
    "HealthCheck",
    "HealthRegistry",
    "HealthReport",
    "HealthStatus",
    "InMemoryMetrics",
    "JsonLoggerFactory",
    "Logger",
    "Metrics",
    "NoopMetrics",
    "SensitiveFieldsFilter",
    "get_logger",
]
