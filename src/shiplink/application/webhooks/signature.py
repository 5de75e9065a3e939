"""Application webhooks – HMAC-SHA256 payload signatures."""
from __future__ import annotations

import hashlib
import hmac
import re

__all__ = ["WebhookSigner"]

_SIGNATURE_RE = re.compile(r"^(?:sha256=)?([a-f0-9]{64})$", re.IGNORECASE)


class WebhookSigner:
    """Sign outgoing deliveries and verify incoming ones.

    Outgoing requests carry ``X-Webhook-Signature: sha256=<hexdigest>`` over
    the raw body. :meth:`verify` also accepts a bare hex digest, in either
    case, since WMS providers are not consistent about the prefix.
    """

    ALG = "sha256"
    SIGNATURE_HEADER = "X-Webhook-Signature"
    EVENT_HEADER = "X-Webhook-Event"

    @classmethod
    def sign(cls, payload: bytes, secret: str) -> str:
        mac = hmac.new(secret.encode(), payload, hashlib.sha256)
        return f"{cls.ALG}={mac.hexdigest()}"

    @classmethod
    def verify(cls, payload: bytes, secret: str, signature: str | None) -> bool:
        if not signature:
            return False
        match = _SIGNATURE_RE.match(signature.strip())
        if match is None:
            return False
        expected = hmac.new(secret.encode(), payload, hashlib.sha256).hexdigest()
        return hmac.compare_digest(expected, match.group(1).lower())

    @classmethod
    def headers(cls, payload: bytes, secret: str, event_type: str) -> dict[str, str]:
        """Request headers for one signed JSON delivery."""
        return {
            "Content-Type": "application/json",
            cls.SIGNATURE_HEADER: cls.sign(payload, secret),
            cls.EVENT_HEADER: event_type,
        }
