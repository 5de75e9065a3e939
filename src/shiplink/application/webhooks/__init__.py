"""Outbound webhooks.

Subscribers are :class:`WebhookEndpoint` rows in a
:class:`WebhookEndpointStore`. :class:`WebhookDispatcher` signs each payload
with :class:`WebhookSigner` and delivers it through a per-endpoint circuit
breaker, returning one :class:`WebhookDeliveryRecord` per endpoint.
"""
from shiplink.application.webhooks.dispatcher import WebhookDispatcher
from shiplink.application.webhooks.endpoint import WebhookEndpoint
from shiplink.application.webhooks.signature import WebhookSigner
from shiplink.application.webhooks.store import (
    InMemoryWebhookEndpointStore,
    WebhookDeliveryRecord,
    WebhookEndpointStore,
)

__all__ = [
    "InMemoryWebhookEndpointStore",
    "WebhookDeliveryRecord",
    "WebhookDispatcher",
    "WebhookEndpoint",
    "WebhookEndpointStore",
    "WebhookSigner",
]
