"""Domain exceptions for the fulfillment bridge.

These map to consistent HTTP responses when handled by the global exception handler.
"""

from typing import Any


class BridgeError(Exception):
    """Base exception for bridge domain errors."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int = 500,
        detail: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail or message


class UpstreamError(BridgeError):
    """Raised when an outbound call fails (network error or non-2xx response)."""

    def __init__(
        self,
        service: str,
        message: str,
        *,
        upstream_status: int | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message, status_code=500)
        self.service = service
        self.upstream_status = upstream_status
        self.body = body


class WebhookVerificationError(BridgeError):
    """Raised when a webhook signature does not match the shared secret."""

    def __init__(self, message: str = "Invalid webhook signature") -> None:
        super().__init__(message, status_code=401)


class PayloadError(BridgeError):
    """Raised when an inbound payload cannot be parsed into the expected shape."""

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message, status_code=500, detail=detail or message)
