"""Application – use-case building blocks that call out to upstream systems."""

from shiplink.application.webhooks import (
    InMemoryWebhookEndpointStore,
    WebhookDeliveryRecord,
    WebhookDispatcher,
    WebhookEndpoint,
    WebhookEndpointStore,
    WebhookSigner,
)

__all__ = [
    "InMemoryWebhookEndpointStore",
    "WebhookDeliveryRecord",
    "WebhookDispatcher",
    "WebhookEndpoint",
    "WebhookEndpointStore",
    "WebhookSigner",
]
