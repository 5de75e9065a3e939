"""Application webhooks – endpoint storage and delivery records."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Protocol, runtime_checkable

from shiplink.application.webhooks.endpoint import WebhookEndpoint
from shiplink.kernel.errors import NotFoundError

__all__ = [
    "InMemoryWebhookEndpointStore",
    "WebhookDeliveryRecord",
    "WebhookEndpointStore",
]


@dataclass
class WebhookDeliveryRecord:
    """What happened when one event was sent to one endpoint.

    ``attempts`` stays 0 when the endpoint's breaker was already open and
    no request went out.
    """

    endpoint_id: str
    event_type: str
    http_status: int | None = None
    duration_ms: float = 0.0
    attempts: int = 0
    last_error: str | None = None
    circuit_open: bool = False

    @property
    def delivered(self) -> bool:
        return self.http_status is not None and 200 <= self.http_status < 300

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["duration_ms"] = round(self.duration_ms, 3)
        data["delivered"] = self.delivered
        return data


@runtime_checkable
class WebhookEndpointStore(Protocol):
    """Where the dispatcher looks up subscribers."""

    async def find_by_event(self, event_type: str) -> list[WebhookEndpoint]: ...
    async def get(self, endpoint_id: str) -> WebhookEndpoint: ...
    async def save(self, endpoint: WebhookEndpoint) -> None: ...
    async def remove(self, endpoint_id: str) -> None: ...


class InMemoryWebhookEndpointStore:
    """Dict-backed store, keyed by endpoint id. Insertion order is kept."""

    def __init__(self, endpoints: list[WebhookEndpoint] | None = None) -> None:
        self._by_id: dict[str, WebhookEndpoint] = {ep.id: ep for ep in endpoints or []}

    async def find_by_event(self, event_type: str) -> list[WebhookEndpoint]:
        return [ep for ep in self._by_id.values() if ep.matches(event_type)]

    async def get(self, endpoint_id: str) -> WebhookEndpoint:
        try:
            return self._by_id[endpoint_id]
        except KeyError:
            raise NotFoundError("webhook endpoint", endpoint_id) from None

    async def save(self, endpoint: WebhookEndpoint) -> None:
        self._by_id[endpoint.id] = endpoint

    async def remove(self, endpoint_id: str) -> None:
        self._by_id.pop(endpoint_id, None)

    def all(self) -> list[WebhookEndpoint]:
        return list(self._by_id.values())
