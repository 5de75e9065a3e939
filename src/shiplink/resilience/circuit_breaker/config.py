"""Resilience – CircuitBreakerConfig."""
from __future__ import annotations

import dataclasses
from datetime import timedelta

from shiplink.config.validation import InvalidSettingValueError


@dataclasses.dataclass(frozen=True)
class CircuitBreakerConfig:
    """Immutable configuration of a single breaker.

    Every field is required; defaults live in
    :class:`~shiplink.config.settings.CircuitBreakerSettings` and are applied
    by the registry.

    Attributes
    ----------
    name:
        Identifier of the protected dependency, e.g. ``"wms:shiphero"``.
    failure_threshold:
        Failures inside the monitoring window that trip the breaker.
    reset_timeout_ms:
        How long an OPEN breaker waits before letting a single probe through.
    monitoring_window_ms:
        Width of the rolling window failures are counted in.
    """

    name: str
    failure_threshold: int
    reset_timeout_ms: float
    monitoring_window_ms: float

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidSettingValueError("name", self.name, "must be a non-empty string")
        if (
            isinstance(self.failure_threshold, bool)
            or not isinstance(self.failure_threshold, int)
            or self.failure_threshold < 1
        ):
            raise InvalidSettingValueError(
                "failure_threshold", self.failure_threshold, "must be a positive integer"
            )
        for field in ("reset_timeout_ms", "monitoring_window_ms"):
            value = getattr(self, field)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                raise InvalidSettingValueError(field, value, "must be a positive duration")

    @property
    def reset_timeout(self) -> timedelta:
        return timedelta(milliseconds=self.reset_timeout_ms)

    @property
    def monitoring_window(self) -> timedelta:
        return timedelta(milliseconds=self.monitoring_window_ms)


__all__ = ["CircuitBreakerConfig"]
