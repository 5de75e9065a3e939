"""Observability – Logger protocol."""
from __future__ import annotations

from typing import Any, Protocol


class Logger(Protocol):
    """The slice of a structlog ``BoundLogger`` that shiplink code calls.

    Events are dotted lowercase names (``circuit_breaker.opened``) and all
    context travels as keyword fields, never interpolated into the event.
    """

    def bind(self, **new_values: Any) -> Logger: ...

    def debug(self, event: str, **kw: Any) -> Any: ...
    def info(self, event: str, **kw: Any) -> Any: ...
    def warning(self, event: str, **kw: Any) -> Any: ...
    def error(self, event: str, **kw: Any) -> Any: ...
    def exception(self, event: str, **kw: Any) -> Any: ...


__all__ = ["Logger"]
