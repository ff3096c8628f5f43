"""Port interfaces for the hooklink provisioning workflow.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - PlatformPort: Create and look up webhooks, create alert definitions
   - DocumentSourcePort: Load JSON documents supplied by the operator
   - ProgressPort: Report stage completion to the operator

2. **Driving Ports** (adapters/external systems call into core)
   - ProvisioningPort: Entry point for a provisioning run
"""

from abc import ABC, abstractmethod

from .models import AlertRecord, ProvisionResult, WebhookDetails, WebhookRecord


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class PlatformPort(ABC):
    """Port for the observability platform's management API.

    Adapters are constructed with credentials and a base URL; the core
    never sees either. Each method issues exactly one request and never
    retries.

    Implementations must translate failures into the core error taxonomy:
    - NetworkError: no response (connection refused, DNS, timeout)
    - APIError: response status >= 400, carrying status and raw body
    - ParseError: success response missing the expected fields
    """

    @abstractmethod
    async def create_webhook(self, definition: bytes) -> WebhookRecord:
        """Create an outgoing webhook.

        Args:
            definition: Webhook definition document, sent verbatim.

        Returns:
            WebhookRecord holding the platform-assigned webhook id.

        Raises:
            NetworkError, APIError, ParseError
        """

    @abstractmethod
    async def get_webhook(self, webhook_id: str) -> WebhookDetails:
        """Fetch details of an existing webhook.

        Args:
            webhook_id: Identifier returned by create_webhook().

        Returns:
            WebhookDetails with the integration-scoped external id.

        Raises:
            NetworkError, APIError, ParseError
        """

    @abstractmethod
    async def create_alert(self, definition: bytes) -> AlertRecord:
        """Create an alert definition.

        Args:
            definition: Alert definition document, sent verbatim.

        Returns:
            AlertRecord; its id is empty if the platform omitted it.

        Raises:
            NetworkError, APIError, ParseError
        """


class DocumentSourcePort(ABC):
    """Port for loading the JSON documents a run is driven by."""

    @abstractmethod
    async def read(self, path: str) -> bytes:
        """Return the raw bytes of the document at ``path``.

        Raises:
            DocumentReadError: If the document cannot be read.
        """


class ProgressPort(ABC):
    """Port for human-readable progress output.

    Called once per successful stage. Implementations must not raise
    for formatting problems; output is informational only.
    """

    @abstractmethod
    async def webhook_created(self, webhook: WebhookRecord) -> None:
        """Report that a webhook was created."""

    @abstractmethod
    async def webhook_resolved(self, details: WebhookDetails) -> None:
        """Report the external id that will link the alert to the webhook."""

    @abstractmethod
    async def alert_created(self, alert: AlertRecord) -> None:
        """Report that an alert definition was created."""


# ============================================================================
# DRIVING PORTS (External systems call into core)
# ============================================================================


class ProvisioningPort(ABC):
    """Port for running the provisioning workflow."""

    @abstractmethod
    async def provision(
        self, webhook_file: str, alert_file: str | None = None
    ) -> ProvisionResult:
        """Create a webhook and, when ``alert_file`` is given, a linked alert.

        Args:
            webhook_file: Path to the webhook definition document.
            alert_file: Optional path to the alert definition document.

        Returns:
            ProvisionResult describing what was created.

        Raises:
            ProvisioningError: If any stage fails. Resources created by
                earlier stages are left in place.
        """
