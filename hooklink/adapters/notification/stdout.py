"""Stdout progress adapter.

Implements ProgressPort by printing one human-readable line per
completed stage.
"""

import asyncio

from hooklink.core.models import AlertRecord, WebhookDetails, WebhookRecord
from hooklink.core.ports import ProgressPort


class StdoutProgressAdapter(ProgressPort):
    """Prints stage confirmations to stdout."""

    async def webhook_created(self, webhook: WebhookRecord) -> None:
        """Report the id of a newly created webhook."""
        await asyncio.to_thread(print, self._format_webhook_created(webhook))

    async def webhook_resolved(self, details: WebhookDetails) -> None:
        """Report the external id the alert will be linked through."""
        await asyncio.to_thread(print, self._format_webhook_resolved(details))

    async def alert_created(self, alert: AlertRecord) -> None:
        """Report the id of a newly created alert definition."""
        await asyncio.to_thread(print, self._format_alert_created(alert))

    @staticmethod
    def _format_webhook_created(webhook: WebhookRecord) -> str:
        return f"Webhook created successfully with ID: {webhook.id}"

    @staticmethod
    def _format_webhook_resolved(details: WebhookDetails) -> str:
        return (
            f"Webhook external (integration) ID: {details.external_id}. "
            "The alert will be linked to this webhook via this value."
        )

    @staticmethod
    def _format_alert_created(alert: AlertRecord) -> str:
        return f"Alert created successfully with ID: {alert.id}"
