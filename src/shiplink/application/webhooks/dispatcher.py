"""Application webhooks – WebhookDispatcher sends event payloads to endpoints."""
from __future__ import annotations

import json
import time
from typing import Any

from shiplink.application.webhooks.endpoint import WebhookEndpoint
from shiplink.application.webhooks.signature import WebhookSigner
from shiplink.application.webhooks.store import WebhookDeliveryRecord, WebhookEndpointStore
from shiplink.kernel.errors import (
    ConnectionError as UpstreamConnectionError,
    ExternalServiceError,
    InfrastructureTimeoutError,
)
from shiplink.observability.logging import get_logger
from shiplink.resilience.circuit_breaker import (
    CircuitBreakerRegistry,
    CircuitOpenError,
    should_trip_circuit,
)

__all__ = ["WebhookDispatcher"]

logger = get_logger(__name__)


def _require_httpx() -> Any:
    try:
        import httpx  # noqa: PLC0415
        return httpx
    except ImportError as exc:
        raise ImportError(
            "httpx is required for WebhookDispatcher. "
            "Install it with: pip install 'shiplink-commons[http]'"
        ) from exc


class WebhookDispatcher:
    """Deliver signed event payloads to every subscribed endpoint.

    Each endpoint has its own breaker (``webhook:<endpoint id>``) in the
    shared registry. A receiver answering 5xx/429 or failing at the
    transport level counts as a breaker failure; once its breaker is open,
    deliveries to it are skipped without an HTTP call and the record is
    marked ``circuit_open``. Other endpoints keep receiving events.
    """

    def __init__(
        self,
        store: WebhookEndpointStore,
        registry: CircuitBreakerRegistry,
        *,
        timeout: float = 10.0,
        max_attempts: int = 3,
        breaker_options: dict[str, Any] | None = None,
        client: Any = None,
    ) -> None:
        self._store = store
        self._registry = registry
        self._timeout = timeout
        self._max_attempts = max(1, max_attempts)
        self._breaker_options = breaker_options or {}
        self._client = client
        self.delivery_log: list[WebhookDeliveryRecord] = []

    async def dispatch(self, event_type: str, payload: dict[str, Any]) -> list[WebhookDeliveryRecord]:
        """Dispatch *payload* for *event_type* to all matching endpoints."""
        endpoints = await self._store.find_by_event(event_type)
        records: list[WebhookDeliveryRecord] = []
        for endpoint in endpoints:
            record = await self._deliver(endpoint, event_type, payload)
            self.delivery_log.append(record)
            records.append(record)
        return records

    async def redeliver(
        self, endpoint_id: str, event_type: str, payload: dict[str, Any]
    ) -> WebhookDeliveryRecord:
        """Send *payload* to one endpoint regardless of its subscriptions.

        Raises :class:`~shiplink.kernel.errors.NotFoundError` when the store
        has no such endpoint. The endpoint's breaker still applies.
        """
        endpoint = await self._store.get(endpoint_id)
        record = await self._deliver(endpoint, event_type, payload)
        self.delivery_log.append(record)
        return record

    async def _deliver(
        self,
        endpoint: WebhookEndpoint,
        event_type: str,
        payload: dict[str, Any],
    ) -> WebhookDeliveryRecord:
        breaker = self._registry.get_breaker(endpoint.breaker_name, **self._breaker_options)
        body = json.dumps({"event": event_type, "data": payload}, separators=(",", ":")).encode("utf-8")
        headers = WebhookSigner.headers(body, endpoint.secret, event_type)
        record = WebhookDeliveryRecord(endpoint_id=endpoint.id, event_type=event_type)

        for attempt in range(1, self._max_attempts + 1):
            t0 = time.monotonic()
            try:
                response = await breaker.execute(lambda: self._post(endpoint.url, body, headers))
            except CircuitOpenError as exc:
                record.circuit_open = True
                record.last_error = str(exc)
                logger.warning(
                    "webhook.skipped_circuit_open",
                    endpoint_id=endpoint.id,
                    event_type=event_type,
                    retry_at=exc.retry_at.isoformat() if exc.retry_at else None,
                )
                return record
            except Exception as exc:  # noqa: BLE001 - recorded on the delivery record
                record.attempts = attempt
                record.duration_ms = (time.monotonic() - t0) * 1000
                record.http_status = getattr(exc, "status_code", None)
                record.last_error = str(exc)
                logger.warning(
                    "webhook.delivery_failed",
                    endpoint_id=endpoint.id,
                    event_type=event_type,
                    attempt=attempt,
                    error=str(exc),
                )
                if not should_trip_circuit(exc):
                    return record
                continue

            record.attempts = attempt
            record.duration_ms = (time.monotonic() - t0) * 1000
            record.http_status = response.status_code
            record.last_error = None if record.delivered else f"HTTP {response.status_code}"
            logger.info("webhook.responded", **record.to_dict())
            return record

        return record

    async def _post(self, url: str, body: bytes, headers: dict[str, str]) -> Any:
        httpx = _require_httpx()
        try:
            if self._client is not None:
                response = await self._client.post(url, content=body, headers=headers)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.post(url, content=body, headers=headers)
        except httpx.TimeoutException as exc:
            raise InfrastructureTimeoutError(
                f"Webhook delivery timed out: {url}", timeout_seconds=self._timeout, cause=exc
            ) from exc
        except httpx.ConnectError as exc:
            raise UpstreamConnectionError(url, cause=exc) from exc
        except httpx.HTTPError as exc:
            raise ExternalServiceError(service=url, message=str(exc) or type(exc).__name__, cause=exc) from exc

        # 5xx / 429 mean the receiver is struggling: count it against the breaker
        if 500 <= response.status_code <= 599 or response.status_code == 429:
            raise ExternalServiceError(
                service=url,
                message=f"HTTP {response.status_code} from webhook receiver",
                status_code=response.status_code,
            )
        return response
