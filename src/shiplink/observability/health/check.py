"""Observability health – HealthStatus and the HealthCheck base class."""
from __future__ import annotations

import asyncio
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

__all__ = ["HealthCheck", "HealthStatus"]


@dataclass
class HealthStatus:
    """Result of one check; ``data`` carries check-specific details."""

    healthy: bool
    detail: str | None = None
    latency_ms: float = 0.0
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "healthy": self.healthy,
            "detail": self.detail,
            "latency_ms": round(self.latency_ms, 2),
        }
        if self.data:
            body["data"] = self.data
        return body


class HealthCheck(ABC):
    """A named probe of one dependency or subsystem.

    ``timeout`` bounds :meth:`timed_check`; a check that overruns it is
    reported unhealthy rather than stalling the readiness endpoint.
    """

    timeout: float = 5.0

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    async def check(self) -> HealthStatus: ...

    async def timed_check(self) -> HealthStatus:
        start = time.monotonic()
        try:
            status = await asyncio.wait_for(self.check(), timeout=self.timeout)
        except asyncio.TimeoutError:
            status = HealthStatus(healthy=False, detail=f"timed out after {self.timeout:g}s")
        status.latency_ms = (time.monotonic() - start) * 1000
        return status
