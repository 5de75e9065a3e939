"""Resilience – classify caught errors as transient upstream failures.

Used by callers that want to keep client-side mistakes (404, validation
errors, bad credentials) from counting against a dependency's breaker.
``CircuitBreaker.execute`` itself does not consult it.
"""
from __future__ import annotations

import errno
import socket
from collections.abc import Mapping
from typing import Any

from shiplink.kernel.errors import BaseError

NETWORK_ERROR_CODES: frozenset[str] = frozenset(
    {"ECONNREFUSED", "ETIMEDOUT", "ENOTFOUND", "ECONNRESET"}
)

_NETWORK_ERRNOS: frozenset[int] = frozenset(
    {errno.ECONNREFUSED, errno.ETIMEDOUT, errno.ECONNRESET}
)

_MAX_CAUSE_DEPTH = 5


def _lookup(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key)
    try:
        return getattr(obj, key, None)
    except Exception:  # noqa: BLE001 - properties on foreign error types may raise
        return None


def _as_status(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isdecimal():
        return int(value)
    return None


def is_transient_status(status: int) -> bool:
    """5xx and 429 are the upstream's problem; every other status is ours."""
    return 500 <= status <= 599 or status == 429


def _response_status(error: Any) -> tuple[bool, int | None]:
    response = _lookup(error, "response")
    if response is None:
        return False, None
    status = _as_status(_lookup(response, "status"))
    if status is None:
        status = _as_status(_lookup(response, "status_code"))
    return True, status


def should_trip_circuit(error: Any) -> bool:
    """Return ``True`` when *error* looks like a transient infrastructure failure.

    ============================================  ======
    shape                                         result
    ============================================  ======
    ``response.status`` in 500..599 or 429        True
    ``response.status`` any other value           False
    ``code`` in :data:`NETWORK_ERROR_CODES`       True
    ``BaseError`` with ``retryable = True``       True
    refused / reset / timed-out socket errors     True
    DNS resolution failure                        True
    anything else                                 False
    ============================================  ======

    Shapes are read from attributes or mapping keys, so both
    ``httpx.HTTPStatusError`` and ``{"response": {"status": 500}}`` work.
    Never raises.
    """
    return _classify(error, 0)


def _classify(error: Any, depth: int) -> bool:
    if error is None:
        return False

    has_response, status = _response_status(error)
    if has_response:
        return status is not None and is_transient_status(status)

    status = _as_status(_lookup(error, "status_code"))
    if status is not None:
        return is_transient_status(status)

    code = _lookup(error, "code")
    if isinstance(code, str) and code in NETWORK_ERROR_CODES:
        return True

    if isinstance(error, BaseError) and error.retryable:
        return True
    if isinstance(error, (socket.gaierror, ConnectionRefusedError, ConnectionResetError, TimeoutError)):
        return True
    if isinstance(error, OSError) and error.errno in _NETWORK_ERRNOS:
        return True

    if isinstance(error, BaseException) and depth < _MAX_CAUSE_DEPTH:
        return _classify(error.__cause__, depth + 1)
    return False


__all__ = ["NETWORK_ERROR_CODES", "is_transient_status", "should_trip_circuit"]
