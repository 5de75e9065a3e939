"""Application-layer errors.

Raised by wiring and use-case code (bad configuration, an endpoint that
does not exist) as opposed to failures of an upstream dependency.
"""

from __future__ import annotations

from shiplink.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    default_code = "application_error"


class NotFoundError(ApplicationError):
    """A named resource (breaker, webhook endpoint) is not registered."""

    default_code = "not_found"

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"{kind} '{name}' not found", detail={"kind": kind, "name": name})
        self.kind = kind
        self.name = name


__all__ = ["ApplicationError", "NotFoundError"]
