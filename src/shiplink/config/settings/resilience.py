"""Config settings – defaults for registry-built circuit breakers."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar

from shiplink.config.settings.base import Settings
from shiplink.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class CircuitBreakerSettings(Settings):
    """Defaults applied by :class:`CircuitBreakerRegistry` to new breakers.

    Environment::

        CIRCUIT_BREAKER_FAILURE_THRESHOLD=5
        CIRCUIT_BREAKER_RESET_TIMEOUT_MS=60000
        CIRCUIT_BREAKER_MONITORING_WINDOW_MS=300000
    """

    _prefix: ClassVar[str] = "CIRCUIT_BREAKER"

    failure_threshold: int = 5
    reset_timeout_ms: float = 60_000.0
    monitoring_window_ms: float = 300_000.0

    def _validate(self) -> None:
        for name in ("failure_threshold", "reset_timeout_ms", "monitoring_window_ms"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                raise InvalidSettingValueError(name, value, "must be a positive number")
        if int(self.failure_threshold) != self.failure_threshold:
            raise InvalidSettingValueError(
                "failure_threshold", self.failure_threshold, "must be an integer"
            )

    def as_overrides(self) -> dict[str, Any]:
        """Return the settings as keyword arguments for ``CircuitBreakerConfig``."""
        return {
            "failure_threshold": int(self.failure_threshold),
            "reset_timeout_ms": float(self.reset_timeout_ms),
            "monitoring_window_ms": float(self.monitoring_window_ms),
        }


__all__ = ["CircuitBreakerSettings"]
