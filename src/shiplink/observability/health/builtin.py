from __future__ import annotations

from typing import TYPE_CHECKING, Awaitable, Callable

from shiplink.observability.health.check import HealthCheck, HealthStatus

if TYPE_CHECKING:
    from shiplink.resilience.circuit_breaker import CircuitBreakerRegistry

__all__ = ["CircuitBreakerHealthCheck", "LambdaHealthCheck"]


class LambdaHealthCheck(HealthCheck):
    """Simple health check backed by a callable, useful in tests."""

    def __init__(self, name_: str, fn: Callable[[], Awaitable[HealthStatus]]) -> None:
        self._name = name_
        self._fn = fn

    @property
    def name(self) -> str:
        return self._name

    async def check(self) -> HealthStatus:
        return await self._fn()


class CircuitBreakerHealthCheck(HealthCheck):
    """Reports unhealthy while any registered breaker is OPEN.

    An open breaker means an upstream integration is being short-circuited,
    which the sync dashboard treats as an unhealthy integration. HALF_OPEN
    breakers are still probing and do not fail the check.
    """

    def __init__(self, registry: CircuitBreakerRegistry, name_: str = "circuit_breakers") -> None:
        self._registry = registry
        self._name = name_

    @property
    def name(self) -> str:
        return self._name

    async def check(self) -> HealthStatus:
        open_names = self._registry.open_breakers()
        data = {name: stats.to_dict() for name, stats in self._registry.get_all_stats().items()}
        if open_names:
            return HealthStatus(
                healthy=False,
                detail="open: " + ", ".join(sorted(open_names)),
                data=data,
            )
        return HealthStatus(healthy=True, data=data)
