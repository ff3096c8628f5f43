"""Webhook stages of the provisioning workflow.

WebhookCreator submits the operator's webhook definition and returns the
created record. WebhookResolver looks the webhook up again to obtain its
external (integration) id, which is what alert definitions reference.
"""

import logging

from .models import WebhookDetails, WebhookRecord
from .ports import DocumentSourcePort, PlatformPort, ProgressPort

logger = logging.getLogger(__name__)


class WebhookCreator:
    """Creates a webhook from a definition document on disk."""

    def __init__(
        self,
        platform: PlatformPort,
        documents: DocumentSourcePort,
        progress: ProgressPort,
    ):
        self.platform = platform
        self.documents = documents
        self.progress = progress

    async def create(self, webhook_file: str) -> WebhookRecord:
        """Read the definition, submit it unmodified, report the new id.

        Raises:
            DocumentReadError: If the file cannot be read.
            NetworkError, APIError, ParseError: From the platform.
        """
        definition = await self.documents.read(webhook_file)
        logger.debug(
            f"Submitting webhook definition from {webhook_file}",
            extra={"size_bytes": len(definition)},
        )

        webhook = await self.platform.create_webhook(definition)

        logger.info(f"Created webhook {webhook.id}")
        await self.progress.webhook_created(webhook)
        return webhook


class WebhookResolver:
    """Resolves the integration id of an existing webhook."""

    def __init__(self, platform: PlatformPort, progress: ProgressPort):
        self.platform = platform
        self.progress = progress

    async def resolve(self, webhook_id: str) -> int:
        """Return the webhook's external id.

        Raises:
            NetworkError, APIError, ParseError: From the platform.
        """
        details: WebhookDetails = await self.platform.get_webhook(webhook_id)

        logger.info(
            f"Resolved webhook {webhook_id} to integration id {details.external_id}"
        )
        await self.progress.webhook_resolved(details)
        return details.external_id
