"""Root error class for the shiplink error hierarchy."""

from __future__ import annotations

import json
from typing import Any, ClassVar


class BaseError(Exception):
    """Root of the error hierarchy.

    Every shiplink error renders to the same envelope (see :meth:`to_dict`),
    which the FastAPI mapper returns as the response body and the loggers
    attach as a structured field.

    Args:
        message: Human-readable description.
        code: Machine-readable slug. Falls back to the class ``default_code``.
        detail: Extra JSON-serialisable context.
        cause: The exception being wrapped. Also set as ``__cause__``.

    ``retryable`` is a class-level hint: ``True`` marks failures that may
    succeed if the same call is made again later (lost connections,
    timeouts). The breaker classifier treats them as transient.
    """

    default_code: ClassVar[str] = "base_error"
    retryable: ClassVar[bool] = False

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "retryable": self.retryable,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)


__all__ = ["BaseError"]
