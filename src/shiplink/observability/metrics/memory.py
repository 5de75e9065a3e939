"""Observability – InMemoryMetrics.

Label-aware, thread-safe in-process metrics. Useful for tests and for
single-process deployments that expose breaker counters through an
operational endpoint instead of a metrics backend.
"""
from __future__ import annotations

import threading
from collections import defaultdict

from shiplink.observability.metrics.ports import Counter, Gauge, Histogram, Metrics

LabelKey = tuple[tuple[str, str], ...]


def _key(labels: dict[str, str] | None) -> LabelKey:
    return tuple(sorted((labels or {}).items()))


class _InMemoryCounter(Counter):
    def __init__(self, name: str, lock: threading.Lock) -> None:
        self.name = name
        self._lock = lock
        self.values: dict[LabelKey, float] = defaultdict(float)
        self.events: list[dict[str, str]] = []

    def add(self, value: float = 1.0, labels: dict[str, str] | None = None) -> None:
        with self._lock:
            self.values[_key(labels)] += value
            self.events.append(dict(labels or {}))


class _InMemoryHistogram(Histogram):
    def __init__(self, name: str, lock: threading.Lock) -> None:
        self.name = name
        self._lock = lock
        self.samples: dict[LabelKey, list[float]] = defaultdict(list)

    def record(self, value: float, labels: dict[str, str] | None = None) -> None:
        with self._lock:
            self.samples[_key(labels)].append(value)


class _InMemoryGauge(Gauge):
    def __init__(self, name: str, lock: threading.Lock) -> None:
        self.name = name
        self._lock = lock
        self.values: dict[LabelKey, float] = {}

    def set(self, value: float, labels: dict[str, str] | None = None) -> None:
        with self._lock:
            self.values[_key(labels)] = value


class InMemoryMetrics(Metrics):
    """Keeps every instrument in memory, keyed by name and label set.

    Usage::

        metrics = InMemoryMetrics()
        registry = CircuitBreakerRegistry(metrics=metrics)
        ...
        metrics.counter_value("circuit_breaker.rejected", name="wms:shiphero")
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counters: dict[str, _InMemoryCounter] = {}
        self._histograms: dict[str, _InMemoryHistogram] = {}
        self._gauges: dict[str, _InMemoryGauge] = {}

    def counter(self, name: str, description: str = "", unit: str = "") -> _InMemoryCounter:
        with self._lock:
            if name not in self._counters:
                self._counters[name] = _InMemoryCounter(name, self._lock)
            return self._counters[name]

    def histogram(self, name: str, description: str = "", unit: str = "ms") -> _InMemoryHistogram:
        with self._lock:
            if name not in self._histograms:
                self._histograms[name] = _InMemoryHistogram(name, self._lock)
            return self._histograms[name]

    def gauge(self, name: str, description: str = "", unit: str = "") -> _InMemoryGauge:
        with self._lock:
            if name not in self._gauges:
                self._gauges[name] = _InMemoryGauge(name, self._lock)
            return self._gauges[name]

    def counter_value(self, metric: str, /, **labels: str) -> float:
        """Sum of *metric* over every label set that contains *labels*.

        *metric* is positional-only so ``name=`` can filter on the label
        breakers attach.
        """
        wanted = set(labels.items())
        with self._lock:
            counter = self._counters.get(metric)
            if counter is None:
                return 0.0
            return sum(v for key, v in counter.values.items() if wanted <= set(key))

    def counter_events(self, metric: str, /) -> list[dict[str, str]]:
        """Label sets of every ``add`` call on *metric*, in call order."""
        with self._lock:
            counter = self._counters.get(metric)
            if counter is None:
                return []
            return list(counter.events)


__all__ = ["InMemoryMetrics"]
