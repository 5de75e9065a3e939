"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from shiplink.observability.logging.filters import SensitiveFieldsFilter


def _shared_processors(redact: bool, sensitive_fields: frozenset[str] | None) -> list[Any]:
    chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if redact:
        chain.insert(0, SensitiveFieldsFilter(sensitive_fields))
    return chain


class JsonLoggerFactory:
    """Route structlog through the stdlib root logger, one JSON object per line.

    Records from plain ``logging`` users (uvicorn, httpx) pass through the
    same formatter, so the whole process emits a single format. Set
    ``json_output=False`` for a coloured console renderer during local runs.
    """

    @staticmethod
    def configure(
        level: int = logging.INFO,
        sensitive_fields: frozenset[str] | None = None,
        redact: bool = True,
        json_output: bool = True,
    ) -> None:
        shared = _shared_processors(redact, sensitive_fields)
        structlog.configure(
            processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        final: list[Any]
        if json_output:
            final = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer(default=str)]
        else:
            final = [structlog.dev.ConsoleRenderer()]

        handler = logging.StreamHandler()
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                foreign_pre_chain=shared,
                processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *final],
            )
        )
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


__all__ = ["JsonLoggerFactory"]
