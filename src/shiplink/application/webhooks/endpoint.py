"""Application webhooks – WebhookEndpoint value object."""
from __future__ import annotations

from dataclasses import dataclass, field


__all__ = ["WebhookEndpoint"]


@dataclass(frozen=True)
class WebhookEndpoint:
    """A subscriber URL receiving shipment / order events.

    ``events`` empty means "every event".
    """

    url: str
    secret: str
    events: frozenset[str] = field(default_factory=frozenset)
    enabled: bool = True
    id: str = ""

    def matches(self, event_type: str) -> bool:
        if not self.enabled:
            return False
        return not self.events or event_type in self.events

    @property
    def breaker_name(self) -> str:
        """Name of the circuit breaker guarding deliveries to this endpoint."""
        return f"webhook:{self.id or self.url}"
