"""Observability health – HealthRegistry and HealthReport."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

from shiplink.observability.health.check import HealthCheck, HealthStatus
from shiplink.observability.logging import get_logger

__all__ = ["HealthRegistry", "HealthReport"]

logger = get_logger(__name__)


@dataclass
class HealthReport:
    results: dict[str, HealthStatus] = field(default_factory=dict)

    @property
    def overall(self) -> bool:
        return all(s.healthy for s in self.results.values())

    @property
    def status(self) -> str:
        return "ok" if self.overall else "degraded"

    def failing(self) -> list[str]:
        return [name for name, s in self.results.items() if not s.healthy]

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "healthy": self.overall,
            "checks": {name: s.to_dict() for name, s in self.results.items()},
        }


class HealthRegistry:
    """Named set of health checks, run concurrently by :meth:`run_all`.

    A check that raises is reported unhealthy with the exception text; it
    never takes the other checks down with it.
    """

    def __init__(self) -> None:
        self._checks: dict[str, HealthCheck] = {}

    def register(self, check: HealthCheck) -> None:
        self._checks[check.name] = check

    def unregister(self, name: str) -> None:
        self._checks.pop(name, None)

    def names(self) -> list[str]:
        return list(self._checks)

    async def run_all(self) -> HealthReport:
        checks = list(self._checks.values())
        statuses = await asyncio.gather(*(self._run(c) for c in checks))
        report = HealthReport(dict(zip((c.name for c in checks), statuses)))
        if not report.overall:
            logger.warning("health.degraded", failing=report.failing())
        return report

    @staticmethod
    async def _run(check: HealthCheck) -> HealthStatus:
        try:
            return await check.timed_check()
        except Exception as exc:  # noqa: BLE001 - reported on the status
            return HealthStatus(healthy=False, detail=f"exception: {exc}")
