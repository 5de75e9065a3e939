"""Observability – metrics ports and the in-process implementations."""
from shiplink.observability.metrics.ports import Counter, Gauge, Histogram, Metrics
from shiplink.observability.metrics.noop import NoopMetrics
from shiplink.observability.metrics.memory import InMemoryMetrics

__all__ = ["Counter", "Gauge", "Histogram", "InMemoryMetrics", "Metrics", "NoopMetrics"]
