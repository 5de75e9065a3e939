"""Resilience – CircuitBreakerRegistry.

One registry is built at application start-up and handed to whatever wires
up outbound clients (WMS providers, webhook dispatch, health endpoints).
Every caller asking for the same name gets the same breaker, so state and
statistics are shared process-wide.
"""
from __future__ import annotations

import dataclasses
import threading
from typing import Any

from shiplink.config.settings import CircuitBreakerSettings, EnvSettingsLoader, SettingsLoader
from shiplink.config.validation import ConfigError
from shiplink.kernel.time import Clock, SystemClock
from shiplink.observability.logging import get_logger
from shiplink.observability.metrics import Metrics, NoopMetrics
from shiplink.resilience.circuit_breaker.breaker import CircuitBreaker
from shiplink.resilience.circuit_breaker.config import CircuitBreakerConfig
from shiplink.resilience.circuit_breaker.state import CircuitBreakerState
from shiplink.resilience.circuit_breaker.stats import CircuitBreakerStats

logger = get_logger(__name__)

_OVERRIDABLE = frozenset(
    f.name for f in dataclasses.fields(CircuitBreakerConfig) if f.name != "name"
)


class CircuitBreakerRegistry:
    """Name-keyed directory of :class:`CircuitBreaker` instances.

    Usage::

        registry = CircuitBreakerRegistry.from_env()
        breaker = registry.get_breaker("wms:trackstar", failure_threshold=10)

        registry.get_all_stats()   # {"wms:trackstar": CircuitBreakerStats(...)}
        registry.reset_all()       # operator-triggered recovery

    Args:
        settings: Defaults for breakers created here. ``CircuitBreakerSettings()``
            when omitted (5 failures, 60 s reset timeout, 5 min window).
        clock: Clock shared by every breaker of this registry.
        metrics: Metrics backend shared by every breaker of this registry.
    """

    def __init__(
        self,
        settings: CircuitBreakerSettings | None = None,
        *,
        clock: Clock | None = None,
        metrics: Metrics | None = None,
    ) -> None:
        self._settings = settings or CircuitBreakerSettings()
        self._clock: Clock = clock or SystemClock()
        self._metrics: Metrics = metrics or NoopMetrics()
        self._breakers: dict[str, CircuitBreaker] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_env(
        cls,
        loader: SettingsLoader | None = None,
        **kwargs: Any,
    ) -> CircuitBreakerRegistry:
        """Build a registry whose defaults come from ``CIRCUIT_BREAKER_*`` variables."""
        settings = (loader or EnvSettingsLoader()).load(CircuitBreakerSettings)
        return cls(settings, **kwargs)

    @property
    def settings(self) -> CircuitBreakerSettings:
        return self._settings

    def get_breaker(self, name: str, **overrides: Any) -> CircuitBreaker:
        """Return the breaker registered under *name*, creating it on first use.

        *overrides* (``failure_threshold``, ``reset_timeout_ms``,
        ``monitoring_window_ms``) only apply when the breaker is created;
        later calls get the existing instance unchanged.
        """
        with self._lock:
            breaker = self._breakers.get(name)
            if breaker is not None:
                if overrides:
                    logger.debug("circuit_breaker.overrides_ignored", circuit_breaker=name)
                return breaker
            breaker = CircuitBreaker(
                self._build_config(name, overrides),
                clock=self._clock,
                metrics=self._metrics,
            )
            self._breakers[name] = breaker
            return breaker

    def get(self, name: str) -> CircuitBreaker | None:
        with self._lock:
            return self._breakers.get(name)

    def names(self) -> list[str]:
        with self._lock:
            return list(self._breakers)

    def get_all_stats(self) -> dict[str, CircuitBreakerStats]:
        return {name: breaker.get_stats() for name, breaker in self._snapshot()}

    def open_breakers(self) -> list[str]:
        return [
            name for name, breaker in self._snapshot()
            if breaker.state is CircuitBreakerState.OPEN
        ]

    def reset_all(self) -> None:
        breakers = self._snapshot()
        for _, breaker in breakers:
            breaker.reset()
        logger.info("circuit_breaker.registry_reset", count=len(breakers))

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._breakers

    def __len__(self) -> int:
        with self._lock:
            return len(self._breakers)

    def _snapshot(self) -> list[tuple[str, CircuitBreaker]]:
        with self._lock:
            return list(self._breakers.items())

    def _build_config(self, name: str, overrides: dict[str, Any]) -> CircuitBreakerConfig:
        unknown = set(overrides) - _OVERRIDABLE
        if unknown:
            raise ConfigError(
                f"Unknown circuit breaker option(s) for '{name}': {', '.join(sorted(unknown))}"
            )
        values = {**self._settings.as_overrides(), **overrides}
        return CircuitBreakerConfig(name=name, **values)


__all__ = ["CircuitBreakerRegistry"]
