"""Observability – structured logging helpers (structlog)."""
from shiplink.observability.logging.protocol import Logger
from shiplink.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from shiplink.observability.logging.factory import JsonLoggerFactory
from shiplink.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "Logger",
    "SensitiveFieldsFilter",
    "get_logger",
]
