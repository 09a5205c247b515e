"""Signature verification for Shopify webhooks."""

import base64
import hashlib
import hmac
import logging

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Shopify-Hmac-Sha256"


def compute_signature(secret: str, payload: bytes) -> str:
    """Return the base64 HMAC-SHA256 of ``payload``, as sent in the signature header."""
    return base64.b64encode(
        hmac.new(
            secret.encode("utf-8"),
            payload,
            hashlib.sha256,
        ).digest()
    ).decode("utf-8")


class ShopifyWebhookVerifier:
    """
    Verifier for Shopify webhook deliveries.

    Shopify signs the raw request body with HMAC-SHA256 using the app's
    webhook secret and sends the base64 digest in the
    X-Shopify-Hmac-Sha256 header. The digest must be computed over the bytes
    exactly as received; a parsed and re-serialized body will not match.
    """

    def __init__(self, secret: str) -> None:
        """
        Initialize the verifier.

        Args:
            secret: Shared webhook secret configured in Shopify.
        """
        self.secret = secret

    def verify_signature(self, payload: bytes, signature: str | None) -> bool:
        """
        Verify a webhook signature.

        Args:
            payload: Raw request body bytes.
            signature: Value of the X-Shopify-Hmac-Sha256 header.

        Returns:
            True if the signature is valid, False otherwise.
        """
        if not self.secret:
            logger.warning("Shopify webhook secret not configured; rejecting webhook")
            return False
        if not signature:
            return False

        expected_signature = compute_signature(self.secret, payload)

        # Use constant-time comparison to prevent timing attacks
        return hmac.compare_digest(expected_signature.encode("utf-8"), signature.encode("utf-8"))
