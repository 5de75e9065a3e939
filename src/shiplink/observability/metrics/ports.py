"""Observability – metric instrument ports.

Backends (Prometheus, OpenTelemetry, StatsD) implement :class:`Metrics`.
Breakers only ever talk to these ports and emit:

==================================  =======  ===============
name                                kind     labels
==================================  =======  ===============
``circuit_breaker.state_change``    counter  ``name, state``
``circuit_breaker.rejected``        counter  ``name``
==================================  =======  ===============
"""
from __future__ import annotations

import abc

Labels = dict[str, str]


class Counter(abc.ABC):
    @abc.abstractmethod
    def add(self, value: float = 1.0, labels: Labels | None = None) -> None:
        """Increase by *value*; counters never go down."""


class Histogram(abc.ABC):
    @abc.abstractmethod
    def record(self, value: float, labels: Labels | None = None) -> None:
        """Record one sample (latency in ms unless the unit says otherwise)."""


class Gauge(abc.ABC):
    @abc.abstractmethod
    def set(self, value: float, labels: Labels | None = None) -> None:
        """Replace the current value."""


class Metrics(abc.ABC):
    """Port: factory for named instruments.

    Asking twice for the same name must return an instrument that reports
    into the same series.
    """

    @abc.abstractmethod
    def counter(self, name: str, description: str = "", unit: str = "") -> Counter: ...

    @abc.abstractmethod
    def histogram(self, name: str, description: str = "", unit: str = "ms") -> Histogram: ...

    @abc.abstractmethod
    def gauge(self, name: str, description: str = "", unit: str = "") -> Gauge: ...


__all__ = ["Counter", "Gauge", "Histogram", "Labels", "Metrics"]
