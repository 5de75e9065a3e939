"""Infrastructure errors: failures of WMS providers, webhook receivers and
other upstreams reached over the network."""

from __future__ import annotations

from typing import Any

from shiplink.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """An upstream or I/O failure, as opposed to a mistake in our own input."""

    default_code = "infrastructure_error"


class ConnectionError(InfrastructureError):  # noqa: A001
    """No connection could be made to *resource* (a host or URL).

    Distinct from the builtin ``ConnectionError``; import it under an alias
    where both are in scope.
    """

    default_code = "connection_error"
    retryable = True

    def __init__(self, resource: str, message: str | None = None, **kwargs: Any) -> None:
        if message is None:
            message = f"Could not connect to '{resource}'"
        super().__init__(message, **kwargs)
        self.resource = resource

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "resource": self.resource}


class TimeoutError(InfrastructureError):  # noqa: A001
    """A call to an upstream ran past its deadline."""

    default_code = "infrastructure_timeout"
    retryable = True

    def __init__(
        self, message: str, *, timeout_seconds: float | None = None, **kwargs: Any
    ) -> None:
        super().__init__(message, **kwargs)
        self.timeout_seconds = timeout_seconds

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        if self.timeout_seconds is not None:
            payload["timeout_seconds"] = self.timeout_seconds
        return payload


class ExternalServiceError(InfrastructureError):
    """An upstream answered, but with an error status or a broken response.

    ``status_code`` is set when an HTTP status was received; the breaker
    classifier uses it to tell a 503 (trip) from a 404 (don't).
    """

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        if message is None:
            message = f"External service '{service}' error"
        super().__init__(message, **kwargs)
        self.service = service
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        payload = {**super().to_dict(), "service": self.service}
        if self.status_code is not None:
            payload["status_code"] = self.status_code
        return payload


__all__ = [
    "ConnectionError",
    "ExternalServiceError",
    "InfrastructureError",
    "TimeoutError",
]
