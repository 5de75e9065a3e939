"""Kernel – framework-agnostic errors and time primitives."""

from shiplink.kernel.errors import (
    ApplicationError,
    BaseError,
    ConnectionError,
    ExternalServiceError,
    InfrastructureError,
    InfrastructureTimeoutError,
    NotFoundError,
)
from shiplink.kernel.time import Clock, FrozenClock, SystemClock

__all__ = [
    "ApplicationError",
    "BaseError",
    "Clock",
    "ConnectionError",
    "ExternalServiceError",
    "FrozenClock",
    "InfrastructureError",
    "InfrastructureTimeoutError",
    "NotFoundError",
    "SystemClock",
]
