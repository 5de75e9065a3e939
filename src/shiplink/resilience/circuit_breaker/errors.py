"""Resilience – circuit-breaker specific errors."""
from __future__ import annotations

from datetime import datetime
from typing import Any

from shiplink.kernel.errors import InfrastructureError


class CircuitOpenError(InfrastructureError):
    """Raised when a :class:`CircuitBreaker` short-circuits a call.

    This is the only error a breaker originates; errors raised by the
    protected operation are re-raised unchanged.

    Attributes
    ----------
    circuit_name:
        Name of the circuit breaker that rejected the call.
    retry_at:
        When the breaker will admit its next probe. ``None`` when the call
        was rejected because a probe is already in flight.
    retry_after_seconds:
        ``retry_at`` expressed relative to the moment of rejection.
    """

    default_code = "circuit_open"

    def __init__(
        self,
        circuit_name: str,
        message: str | None = None,
        *,
        retry_at: datetime | None = None,
        retry_after_seconds: float | None = None,
    ) -> None:
        super().__init__(message or f"Circuit breaker is OPEN: {circuit_name}")
        self.circuit_name = circuit_name
        self.retry_at = retry_at
        self.retry_after_seconds = retry_after_seconds

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["circuit_name"] = self.circuit_name
        base["retry_at"] = self.retry_at.isoformat() if self.retry_at is not None else None
        return base


__all__ = ["CircuitOpenError"]
