"""HTTP adapter – CircuitBreakingHttpClient."""
from __future__ import annotations

from typing import Any

from shiplink.adapters.http.client import HttpxHttpClient
from shiplink.resilience.circuit_breaker import (
    CircuitBreaker,
    CircuitBreakerRegistry,
    CircuitBreakerStats,
    should_trip_circuit,
)


class _NonTransient:
    """Carries a non-transient error out of ``execute`` without counting it."""

    __slots__ = ("error",)

    def __init__(self, error: Exception) -> None:
        self.error = error


class CircuitBreakingHttpClient(HttpxHttpClient):
    """HTTP client whose requests all go through a named registry breaker.

    With ``trip_on_classified_only=True`` only failures that
    :func:`should_trip_circuit` considers transient (5xx, 429, connection
    and timeout errors) count against the breaker; a 404 or 422 from the
    WMS is still raised to the caller but recorded as a completed call.

    Usage::

        client = CircuitBreakingHttpClient(
            registry, "wms:shiphero", base_url="https://public-api.shiphero.com",
        )
        resp = await client.get("/orders")
    """

    def __init__(
        self,
        registry: CircuitBreakerRegistry,
        name: str,
        base_url: str = "",
        timeout: float = 10.0,
        *,
        trip_on_classified_only: bool = False,
        breaker_options: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(base_url, timeout, **kwargs)
        self._cb = registry.get_breaker(name, **(breaker_options or {}))
        self._classified_only = trip_on_classified_only

    @property
    def breaker(self) -> CircuitBreaker:
        return self._cb

    def get_circuit_breaker_stats(self) -> CircuitBreakerStats:
        return self._cb.get_stats()

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        if not self._classified_only:
            return await self._cb.execute(
                lambda: super(CircuitBreakingHttpClient, self)._request(method, url, **kwargs)
            )
        outcome = await self._cb.execute(lambda: self._classified_request(method, url, **kwargs))
        if isinstance(outcome, _NonTransient):
            raise outcome.error
        return outcome

    async def _classified_request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            return await super()._request(method, url, **kwargs)
        except Exception as exc:
            if should_trip_circuit(exc):
                raise
            return _NonTransient(exc)


__all__ = ["CircuitBreakingHttpClient"]
