"""Composition root for hooklink.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Argument parsing via the CLI adapter
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Exit code handling
"""

import argparse
import asyncio
import logging
import sys
from typing import Any

from pydantic import ValidationError

from hooklink.adapters.cli.commands import build_parser, run_command
from hooklink.adapters.documents.filesystem import FileDocumentSource
from hooklink.adapters.notification.stdout import StdoutProgressAdapter
from hooklink.adapters.platform.coralogix import CoralogixPlatformAdapter
from hooklink.config import Settings, load_settings, resolve_api_key
from hooklink.core.errors import HookLinkError, ProvisioningError
from hooklink.core.provisioner import Provisioner

logger = logging.getLogger(__name__)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.WARNING)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def _format_validation_error(error: ValidationError) -> str:
    """Collapse a pydantic ValidationError into a single line."""
    problems = [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    ]
    return "; ".join(problems)


async def bootstrap(args: argparse.Namespace, settings: Settings) -> dict[str, Any]:
    """Wire adapters and run the requested command.

    Steps:
    1. Resolve the API key (before any network activity)
    2. Instantiate adapters with configuration
    3. Initialize the provisioner
    4. Run the command

    Raises:
        ConfigError: If no API key is available.
        ProvisioningError: If a provisioning stage fails.
    """
    # Step 1: Resolve credentials
    api_key = resolve_api_key(args.api_key, settings)

    # Step 2: Instantiate adapters
    platform = CoralogixPlatformAdapter(
        api_url=settings.api_base_url,
        api_key=api_key,
        timeout=settings.request_timeout_seconds,
    )
    logger.debug(f"Platform adapter: Coralogix ({settings.api_base_url})")

    try:
        # Step 3: Initialize core services
        provisioner = Provisioner(
            platform=platform,
            documents=FileDocumentSource(),
            progress=StdoutProgressAdapter(),
        )

        # Step 4: Run the command
        return await run_command(
            provisioner,
            args.command,
            {"webhook_file": args.webhook_file, "alert_file": args.alert_file},
        )
    finally:
        await platform.close()


def main(argv: list[str] | None = None) -> None:
    """Application entry point.

    Exit codes:
        0: Webhook (and alert, if requested) created
        1: Configuration error or a failed provisioning stage
        2: Invalid command-line usage
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(
            coralogix_api_url=args.api_url,
            coralogix_region=args.region,
            request_timeout_seconds=args.timeout,
            log_level=args.log_level,
        )
    except ValidationError as e:
        configure_logging("ERROR", "text")
        logger.error(f"Invalid configuration: {_format_validation_error(e)}")
        sys.exit(1)

    configure_logging(settings.log_level, settings.log_format)

    try:
        result = asyncio.run(bootstrap(args, settings))
    except KeyboardInterrupt:
        logger.warning("Interrupted by user (SIGINT)")
        sys.exit(130)
    except ProvisioningError as e:
        logger.error(str(e), extra=e.details)
        sys.exit(1)
    except HookLinkError as e:
        logger.error(str(e))
        sys.exit(1)

    logger.info(result["message"])


if __name__ == "__main__":
    main()
