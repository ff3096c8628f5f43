"""Coralogix management API adapter.

Implements PlatformPort against the Coralogix management OpenAPI:

- POST /v1/outgoing-webhooks       create a webhook
- GET  /v1/outgoing-webhooks/{id}  webhook details (externalId)
- POST /v3/alert-defs              create an alert definition

Every call is a single request with no retries. Failures are translated
into the core error taxonomy.
"""

import asyncio
import logging
import urllib.parse
from typing import Any

import httpx

from hooklink.core.errors import APIError, NetworkError, ParseError
from hooklink.core.json_path import get_value
from hooklink.core.models import AlertRecord, WebhookDetails, WebhookRecord
from hooklink.core.ports import PlatformPort

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class CoralogixPlatformAdapter(PlatformPort):
    """Coralogix-backed platform adapter via REST API."""

    def __init__(
        self,
        api_url: str,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize Coralogix adapter.

        Args:
            api_url: Base URL of the management API
                (e.g., https://api.eu2.coralogix.com/mgmt/openapi)
            api_key: API key sent as a bearer token
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport, used by tests
        """
        self.api_url = api_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.client = httpx.AsyncClient(
            base_url=self.api_url,
            headers=self._get_headers(),
            timeout=timeout,
            transport=transport,
        )

    def _get_headers(self) -> dict[str, str]:
        """Build request headers."""
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            # Required for HTTP/2 requests. Without it the platform
            # answers 401 even for a valid key.
            "x-http2-scheme": "https",
        }

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.client.aclose()

    async def close(self) -> None:
        """Close the httpx client and clean up resources.

        Must be called when done using the adapter if not using it as a context manager.
        """
        await self.client.aclose()

    async def create_webhook(self, definition: bytes) -> WebhookRecord:
        """Create an outgoing webhook from a raw definition document."""
        data = await self._send(
            "webhook creation", "POST", "/v1/outgoing-webhooks", content=definition
        )

        webhook_id = get_value(data, "id")
        if not isinstance(webhook_id, str) or not webhook_id.strip():
            raise ParseError(
                "failed to parse webhook creation response: missing string field 'id'"
            )
        try:
            return WebhookRecord(id=webhook_id)
        except ValueError as e:
            raise ParseError(f"failed to parse webhook creation response: {e}") from e

    async def get_webhook(self, webhook_id: str) -> WebhookDetails:
        """Fetch a webhook and extract its external (integration) id."""
        data = await self._send(
            "webhook details retrieval",
            "GET",
            f"/v1/outgoing-webhooks/{urllib.parse.quote(webhook_id, safe='')}",
        )

        external_id = get_value(data, "webhook.externalId")
        if isinstance(external_id, bool) or not isinstance(external_id, int):
            raise ParseError(
                "failed to parse webhook details response: "
                "missing integer field 'webhook.externalId'"
            )
        try:
            return WebhookDetails(webhook_id=webhook_id, external_id=external_id)
        except ValueError as e:
            raise ParseError(f"failed to parse webhook details response: {e}") from e

    async def create_alert(self, definition: bytes) -> AlertRecord:
        """Create an alert definition from a raw (already linked) document.

        The alert exists once the platform accepts it, so an unreadable
        success body yields an empty id instead of an error.
        """
        data = await self._send(
            "alert creation",
            "POST",
            "/v3/alert-defs",
            content=definition,
            tolerant=True,
        )

        alert_id = get_value(data, "alertDef.id", default="")
        if not isinstance(alert_id, str):
            alert_id = ""
        return AlertRecord(id=alert_id)

    async def _send(
        self,
        operation: str,
        method: str,
        path: str,
        content: bytes | None = None,
        tolerant: bool = False,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        The whole exchange, body included, must finish within ``timeout``
        seconds. httpx reads the body to completion and releases the
        connection before returning, on success and error responses alike.

        Args:
            tolerant: Return None instead of raising when a success body
                is not valid JSON.

        Raises:
            NetworkError: If no response was received in time.
            APIError: If the response status is 400 or above.
            ParseError: If the body is not valid JSON and ``tolerant`` is false.
        """
        logger.debug(f"{method} {self.api_url}{path}")
        try:
            async with asyncio.timeout(self.timeout):
                response = await self.client.request(method, path, content=content)
        except (httpx.TimeoutException, TimeoutError) as e:
            logger.debug(f"{operation} request timed out after {self.timeout}s")
            raise NetworkError(
                f"{operation} request timed out after {self.timeout}s"
            ) from e
        except httpx.RequestError as e:
            logger.debug(f"Failed to send {operation} request: {e}")
            raise NetworkError(f"failed to send {operation} request: {e}") from e

        if response.status_code >= 400:
            logger.debug(
                f"{operation} failed with status {response.status_code}",
                extra={"status_code": response.status_code, "response": response.text},
            )
            raise APIError(operation, response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            if tolerant:
                logger.debug(f"Ignoring undecodable {operation} response: {e}")
                return None
            raise ParseError(f"failed to parse {operation} response: {e}") from e
