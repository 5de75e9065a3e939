"""Observability – NoopMetrics, the default when no backend is wired in."""
from __future__ import annotations

from shiplink.observability.metrics.ports import Counter, Gauge, Histogram, Metrics


class _NoopInstrument(Counter, Histogram, Gauge):
    """One stateless object answers for every instrument kind."""

    def add(self, value: float = 1.0, labels: dict[str, str] | None = None) -> None:
        return None

    def record(self, value: float, labels: dict[str, str] | None = None) -> None:
        return None

    def set(self, value: float, labels: dict[str, str] | None = None) -> None:
        return None


_NOOP = _NoopInstrument()


class NoopMetrics(Metrics):
    """Discards every measurement.

    Breakers and registries fall back to this so that metrics stay optional;
    all instruments are the same shared object.
    """

    def counter(self, name: str, description: str = "", unit: str = "") -> Counter:
        return _NOOP

    def histogram(self, name: str, description: str = "", unit: str = "ms") -> Histogram:
        return _NOOP

    def gauge(self, name: str, description: str = "", unit: str = "") -> Gauge:
        return _NOOP


__all__ = ["NoopMetrics"]
