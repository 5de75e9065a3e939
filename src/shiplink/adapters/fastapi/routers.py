"""FastAPI adapter – health and circuit-breaker operational routers."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from shiplink.observability.health import HealthRegistry
    from shiplink.resilience.circuit_breaker import CircuitBreakerRegistry


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'shiplink-commons[fastapi]' to use the FastAPI adapter"
        ) from exc


def FastAPIHealthRouter(
    health: HealthRegistry | None = None,
    path: str = "/health",
    tags: list[str] | None = None,
) -> Any:
    """Return a liveness + readiness health-check router.

    Liveness is at ``{path}/live``; readiness at ``{path}/ready`` runs every
    check registered on *health* and answers 503 when any of them fails
    (for instance a :class:`CircuitBreakerHealthCheck` with an open breaker).
    """
    _require_fastapi()
    from fastapi import APIRouter
    from fastapi.responses import JSONResponse

    router = APIRouter(tags=tags or ["ops"])

    @router.get(f"{path}/live")
    async def liveness() -> dict[str, str]:
        return {"status": "ok"}

    @router.get(f"{path}/ready")
    async def readiness() -> Any:
        if health is None:
            return JSONResponse(status_code=200, content={"status": "ok", "checks": {}})
        report = await health.run_all()
        return JSONResponse(status_code=200 if report.overall else 503, content=report.to_dict())

    return router


def FastAPICircuitBreakerRouter(
    registry: CircuitBreakerRegistry,
    path: str = "/circuit-breakers",
    tags: list[str] | None = None,
) -> Any:
    """Return an operator router over a :class:`CircuitBreakerRegistry`.

    * ``GET  {path}`` – stats of every breaker, keyed by name.
    * ``POST {path}/reset`` – close and zero every breaker.
    * ``POST {path}/{name}/state`` – body ``{"state": "open"}`` forces one
      breaker into ``open``, ``closed`` or ``half_open``.

    Unknown breaker names raise :class:`NotFoundError`; register
    :class:`FastAPIExceptionMapper` on the app to turn it into a 404.
    """
    _require_fastapi()
    from fastapi import APIRouter, Body, HTTPException

    from shiplink.kernel.errors import NotFoundError
    from shiplink.resilience.circuit_breaker import CircuitBreakerState

    router = APIRouter(tags=tags or ["ops"])

    @router.get(path)
    async def list_breakers() -> Any:
        return {name: stats.to_dict() for name, stats in registry.get_all_stats().items()}

    @router.post(f"{path}/reset")
    async def reset_breakers() -> Any:
        registry.reset_all()
        return {"status": "reset", "breakers": registry.names()}

    @router.post(f"{path}/{{name}}/state")
    async def force_breaker_state(name: str, payload: dict[str, Any] = Body(...)) -> Any:
        breaker = registry.get(name)
        if breaker is None:
            raise NotFoundError("circuit breaker", name)
        try:
            state = CircuitBreakerState(str(payload.get("state", "")).lower())
        except ValueError:
            allowed = ", ".join(s.value for s in CircuitBreakerState)
            raise HTTPException(status_code=422, detail=f"state must be one of: {allowed}") from None
        breaker.force_state(state)
        return {"name": name, **breaker.get_stats().to_dict()}

    return router


__all__ = ["FastAPICircuitBreakerRouter", "FastAPIHealthRouter"]
