"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   ├── NotFoundError
    │   └── ConfigError      (shiplink.config.validation)
    └── InfrastructureError  (infrastructure.py)
        ├── ConnectionError
        ├── TimeoutError
        ├── ExternalServiceError
        └── CircuitOpenError (shiplink.resilience.circuit_breaker)
"""

from shiplink.kernel.errors.application import ApplicationError, NotFoundError
from shiplink.kernel.errors.base import BaseError
from shiplink.kernel.errors.infrastructure import (
    ConnectionError,
    ExternalServiceError,
    InfrastructureError,
)
from shiplink.kernel.errors.infrastructure import TimeoutError as InfrastructureTimeoutError

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConnectionError",
    "ExternalServiceError",
    "InfrastructureError",
    "InfrastructureTimeoutError",
    "NotFoundError",
]
