"""Base JSON API client shared by the Shopify and FinerWorks integrations."""

import logging
import time
from typing import Any

import httpx

from fulfillment_bridge.exceptions import UpstreamError
from fulfillment_bridge.observability.metrics import record_upstream_request

logger = logging.getLogger(__name__)


class JsonApiClient:
    """
    Retry-free JSON client: send JSON, return the parsed result or raise.

    Every failure, whether a transport error or a non-2xx status, is raised
    as ``UpstreamError`` so callers deal with a single failure type. The
    underlying ``httpx.AsyncClient`` is created lazily and may be shared by
    concurrent requests.
    """

    service_name = "upstream"

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str] | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Base URL all request paths are relative to.
            headers: Headers sent with every request.
            timeout: Request timeout in seconds.
            transport: Optional transport override (used by tests).
        """
        self.base_url = base_url.rstrip("/")
        self.headers = {"Content-Type": "application/json", **(headers or {})}
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self.headers,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """
        Make an API request and return the decoded JSON body.

        Args:
            method: HTTP method.
            path: Path relative to the base URL.
            json: Optional JSON-serializable request body.
            headers: Extra headers for this request only.

        Returns:
            Parsed JSON response, or None for an empty body.

        Raises:
            UpstreamError: On network failure or a non-2xx response.
        """
        start = time.perf_counter()
        try:
            response = await self.client.request(method, path, json=json, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            record_upstream_request(self.service_name, "http_error", time.perf_counter() - start)
            body = _decode_body(e.response)
            logger.error(
                f"{self.service_name} {method} {path} failed with HTTP {e.response.status_code}",
                extra={"upstream_body": body},
            )
            raise UpstreamError(
                self.service_name,
                f"{self.service_name} request failed with status code {e.response.status_code}",
                upstream_status=e.response.status_code,
                body=body,
            ) from e
        except httpx.RequestError as e:
            record_upstream_request(self.service_name, "network_error", time.perf_counter() - start)
            logger.error(f"{self.service_name} {method} {path} failed: {e!r}")
            raise UpstreamError(
                self.service_name,
                f"{self.service_name} request failed: {e}",
            ) from e

        record_upstream_request(self.service_name, "ok", time.perf_counter() - start)
        logger.debug(f"{self.service_name} {method} {path} -> {response.status_code}")
        return _decode_body(response)


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
