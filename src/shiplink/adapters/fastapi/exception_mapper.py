"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

import math
from typing import Any, Callable


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'shiplink-commons[fastapi]' to use the FastAPI adapter"
        ) from exc


class FastAPIExceptionMapper:
    """Register shiplink error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"code": "circuit_open", "message": "...", "detail": {...}}

    Mappings
    --------
    ``CircuitOpenError``            → 503 (+ ``Retry-After`` when known)
    ``InfrastructureTimeoutError``  → 504
    ``InfrastructureError``         → 503
    ``NotFoundError``               → 404
    ``ConfigError``                 → 500
    """

    def __init__(self) -> None:
        _require_fastapi()
        from shiplink.config.validation import ConfigError
        from shiplink.kernel.errors import (
            InfrastructureError,
            InfrastructureTimeoutError,
            NotFoundError,
        )
        from shiplink.resilience.circuit_breaker import CircuitOpenError

        # more-specific subtypes first
        self._map: list[tuple[type[Exception], int]] = [
            (CircuitOpenError, 503),
            (InfrastructureTimeoutError, 504),
            (InfrastructureError, 503),
            (NotFoundError, 404),
            (ConfigError, 500),
        ]

    def register(self, app: Any) -> None:
        """Register all error handlers on a ``FastAPI`` or ``Starlette`` app."""
        from fastapi.responses import JSONResponse

        from shiplink.kernel.errors.base import BaseError
        from shiplink.resilience.circuit_breaker import CircuitOpenError

        def make_handler(code: int) -> Callable[[Any, Any], Any]:
            def handler(request: Any, exc: Any) -> Any:  # noqa: ARG001
                if isinstance(exc, BaseError):
                    body = exc.to_dict()
                else:
                    body = {"code": "error", "message": str(exc)}

                headers: dict[str, str] = {}
                if isinstance(exc, CircuitOpenError) and exc.retry_after_seconds is not None:
                    headers["Retry-After"] = str(max(1, math.ceil(exc.retry_after_seconds)))
                return JSONResponse(status_code=code, content=body, headers=headers or None)

            return handler

        for exc_type, status in self._map:
            app.add_exception_handler(exc_type, make_handler(status))


__all__ = ["FastAPIExceptionMapper"]
