"""CLI command implementations for hooklink.

Maps the ``create`` command to ProvisioningPort and defines the argument
parser. Stage failures are not handled here; they propagate to the
composition root, which logs them and sets the exit code.
"""

import argparse
import logging
from typing import Any

from hooklink.core.ports import ProvisioningPort

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the ``hooklink`` argument parser with its ``create`` subcommand."""
    parser = argparse.ArgumentParser(
        prog="hooklink",
        description="Manage Coralogix webhooks and (optional) alert definitions.",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    create = subparsers.add_parser(
        "create",
        help=(
            "Creates a webhook. If both the webhook and alert files are provided, "
            "the webhook will be associated with the alert definition."
        ),
    )
    create.add_argument(
        "--webhook-file",
        required=True,
        help="Path to file containing JSON body of the webhook.",
    )
    create.add_argument(
        "--alert-file",
        help="Path to file containing JSON body of the alert definition.",
    )
    create.add_argument(
        "--api-key",
        help=(
            "The Coralogix API key to use for authentication. "
            "Defaults to the CORALOGIX_API_KEY environment variable."
        ),
    )
    create.add_argument(
        "--api-url",
        help="Management API base URL. Overrides --region.",
    )
    create.add_argument(
        "--region",
        help="Coralogix region (eu1, eu2, us1, us2, ap1, ap2, ap3).",
    )
    create.add_argument(
        "--timeout",
        type=float,
        help="Per-request timeout in seconds.",
    )
    create.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level.",
    )
    return parser


class CLICommandHandler:
    """Handles CLI commands by delegating to ProvisioningPort."""

    def __init__(self, provisioning: ProvisioningPort):
        """Initialize the CLI command handler.

        Args:
            provisioning: ProvisioningPort implementation to execute commands.
        """
        self.provisioning = provisioning

    async def create(
        self, webhook_file: str, alert_file: str | None = None
    ) -> dict[str, Any]:
        """Create a webhook and, optionally, a linked alert definition.

        Args:
            webhook_file: Path to the webhook definition document.
            alert_file: Optional path to the alert definition document.

        Returns:
            Dictionary with status and the identifiers that were created.

        Raises:
            ProvisioningError: If any stage fails.
        """
        result = await self.provisioning.provision(webhook_file, alert_file)

        if result.alert_requested:
            message = f"Webhook {result.webhook_id} created and linked to alert {result.alert_id}"
        else:
            message = f"Webhook {result.webhook_id} created"

        return {
            "status": "success",
            "operation": "create",
            "message": message,
            **result.to_dict(),
        }


async def run_command(
    provisioning: ProvisioningPort,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Run a CLI command.

    Args:
        provisioning: ProvisioningPort implementation.
        command: Command name ('create').
        args: Dictionary of command arguments.

    Returns:
        Dictionary with command result.

    Raises:
        ValueError: If command is not recognized.
    """
    handler = CLICommandHandler(provisioning)

    if command == "create":
        return await handler.create(
            args["webhook_file"],
            args.get("alert_file"),
        )

    else:
        raise ValueError(f"Unknown command: {command}")
