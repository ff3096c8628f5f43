"""Alert stage of the provisioning workflow."""

import logging

from .json_path import set_value
from .models import AlertRecord
from .ports import DocumentSourcePort, PlatformPort, ProgressPort

logger = logging.getLogger(__name__)

# Only the first webhook entry of the notification group is linked,
# however many the definition lists.
INTEGRATION_ID_PATH = "notificationGroup.webhooks.0.integration.integrationId"


def link_alert_to_webhook(definition: bytes, integration_id: int) -> bytes:
    """Point the alert's first notification webhook at ``integration_id``.

    Every byte outside the integrationId value is left as it was.

    Raises:
        PatchError: If the definition cannot be addressed at the path.
    """
    return set_value(definition, INTEGRATION_ID_PATH, integration_id)


class AlertCreator:
    """Creates an alert definition linked to a webhook."""

    def __init__(
        self,
        platform: PlatformPort,
        documents: DocumentSourcePort,
        progress: ProgressPort,
    ):
        self.platform = platform
        self.documents = documents
        self.progress = progress

    async def create(self, alert_file: str, integration_id: int) -> AlertRecord:
        """Read, link and submit the alert definition.

        Steps:
        1. Read the definition document
        2. Write the integration id into its first notification webhook
        3. Submit the patched document

        Raises:
            DocumentReadError: If the file cannot be read.
            PatchError: If the integration id cannot be written.
            NetworkError, APIError, ParseError: From the platform.
        """
        definition = await self.documents.read(alert_file)
        patched = link_alert_to_webhook(definition, integration_id)
        logger.debug(
            f"Linked alert definition from {alert_file} to integration {integration_id}",
            extra={"size_bytes": len(patched)},
        )

        alert = await self.platform.create_alert(patched)

        if alert.id:
            logger.info(f"Created alert definition {alert.id}")
        else:
            logger.warning("Alert definition created but response carried no id")
        await self.progress.alert_created(alert)
        return alert
