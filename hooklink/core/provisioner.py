"""Provisioning orchestration.

Runs the stages in strict sequence, each consuming the previous one's
output:

    WebhookCreator -> WebhookResolver -> AlertCreator

The last two stages only run when an alert definition was supplied.
"""

import logging

from .alerts import AlertCreator
from .errors import HookLinkError, ProvisioningError
from .models import ProvisionResult
from .ports import DocumentSourcePort, PlatformPort, ProgressPort, ProvisioningPort
from .webhooks import WebhookCreator, WebhookResolver

logger = logging.getLogger(__name__)

STAGE_CREATE_WEBHOOK = "webhook creation failed"
STAGE_RESOLVE_WEBHOOK = "failed to get webhook external ID"
STAGE_CREATE_ALERT = "alert creation failed"


class Provisioner(ProvisioningPort):
    """Implements ProvisioningPort on top of the three stage components.

    Any stage failure aborts the run. A webhook created before the failure
    is not deleted.
    """

    def __init__(
        self,
        platform: PlatformPort,
        documents: DocumentSourcePort,
        progress: ProgressPort,
    ):
        self.webhook_creator = WebhookCreator(platform, documents, progress)
        self.webhook_resolver = WebhookResolver(platform, progress)
        self.alert_creator = AlertCreator(platform, documents, progress)

    async def provision(
        self, webhook_file: str, alert_file: str | None = None
    ) -> ProvisionResult:
        """Create the webhook, then the linked alert if one was requested."""
        try:
            webhook = await self.webhook_creator.create(webhook_file)
        except HookLinkError as e:
            raise ProvisioningError(STAGE_CREATE_WEBHOOK, e) from e

        if not alert_file:
            logger.info("No alert definition supplied, skipping alert creation")
            return ProvisionResult(webhook_id=webhook.id)

        try:
            external_id = await self.webhook_resolver.resolve(webhook.id)
        except HookLinkError as e:
            raise ProvisioningError(STAGE_RESOLVE_WEBHOOK, e) from e

        try:
            alert = await self.alert_creator.create(alert_file, external_id)
        except HookLinkError as e:
            raise ProvisioningError(STAGE_CREATE_ALERT, e) from e

        return ProvisionResult(
            webhook_id=webhook.id,
            alert_requested=True,
            external_id=external_id,
            alert_id=alert.id,
        )
