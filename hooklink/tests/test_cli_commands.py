"""Tests for the ``create`` command, from argument parsing to exit code.

Tests verify that the command:
- Parses its flags and rejects invalid usage
- Runs the provisioning stages in order against the HTTP API
- Exits with code 0 on success, non-zero on error
- Makes no network calls when configuration is missing
"""

import json
from collections.abc import Callable
from pathlib import Path
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from hooklink.adapters.cli.commands import CLICommandHandler, build_parser, run_command
from hooklink.adapters.platform.coralogix import CoralogixPlatformAdapter
from hooklink.core.errors import APIError, ProvisioningError
from hooklink.core.models import ProvisionResult
from hooklink.main import main

WEBHOOKS_PATH = "/mgmt/openapi/v1/outgoing-webhooks"
ALERTS_PATH = "/mgmt/openapi/v3/alert-defs"


# ============================================================================
# Test Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test away from any .env file and without Coralogix variables."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "CORALOGIX_API_KEY",
        "CORALOGIX_REGION",
        "CORALOGIX_API_URL",
        "REQUEST_TIMEOUT_SECONDS",
        "LOG_LEVEL",
        "LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def webhook_file(tmp_path: Path) -> str:
    path = tmp_path / "webhook.json"
    path.write_bytes(b'{"name":"wh1"}')
    return str(path)


@pytest.fixture
def alert_file(tmp_path: Path) -> str:
    path = tmp_path / "alert.json"
    path.write_bytes(b'{"notificationGroup":{"webhooks":[{"integration":{}}]}}')
    return str(path)


class FakeCoralogix:
    """Routes requests for the three endpoints and records them."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.failures: dict[str, int] = {}

    def fail(self, endpoint: str, status: int) -> None:
        """Make 'create_webhook', 'get_webhook' or 'create_alert' answer ``status``."""
        self.failures[endpoint] = status

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if request.method == "POST" and path == WEBHOOKS_PATH:
            endpoint, body = "create_webhook", {"id": "w-1"}
        elif request.method == "GET" and path.startswith(WEBHOOKS_PATH + "/"):
            endpoint, body = "get_webhook", {"webhook": {"externalId": 42}}
        elif request.method == "POST" and path == ALERTS_PATH:
            endpoint, body = "create_alert", {"alertDef": {"id": "a-9"}}
        else:
            return httpx.Response(404, text="unknown endpoint")

        if endpoint in self.failures:
            return httpx.Response(self.failures[endpoint], text='{"message":"failed"}')
        return httpx.Response(200, json=body)

    def adapter_factory(self) -> Callable[..., CoralogixPlatformAdapter]:
        transport = httpx.MockTransport(self.handle)

        def factory(**kwargs) -> CoralogixPlatformAdapter:
            return CoralogixPlatformAdapter(transport=transport, **kwargs)

        return factory


@pytest.fixture
def coralogix():
    """Patch the composition root to talk to an in-process fake API."""
    fake = FakeCoralogix()
    with patch("hooklink.main.CoralogixPlatformAdapter", side_effect=fake.adapter_factory()):
        yield fake


# ============================================================================
# Tests for argument parsing
# ============================================================================


class TestArgumentParsing:
    """Test command-line argument parsing."""

    def test_create_with_all_flags(self) -> None:
        args = build_parser().parse_args(
            [
                "create",
                "--webhook-file", "w.json",
                "--alert-file", "a.json",
                "--api-key", "k",
                "--region", "us1",
                "--timeout", "5",
            ]
        )
        assert args.command == "create"
        assert args.webhook_file == "w.json"
        assert args.alert_file == "a.json"
        assert args.api_key == "k"
        assert args.region == "us1"
        assert args.timeout == 5.0

    def test_optional_flags_default_to_none(self) -> None:
        args = build_parser().parse_args(["create", "--webhook-file", "w.json"])
        assert args.alert_file is None
        assert args.api_key is None
        assert args.api_url is None

    def test_webhook_file_is_required(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["create"])
        assert exc_info.value.code == 2

    def test_command_is_required(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args([])
        assert exc_info.value.code == 2


# ============================================================================
# Tests for CLICommandHandler
# ============================================================================


class TestCLICommandHandler:
    """Test the command handler against a mocked ProvisioningPort."""

    @pytest.mark.asyncio
    async def test_create_with_alert(self) -> None:
        provisioning = AsyncMock()
        provisioning.provision.return_value = ProvisionResult(
            webhook_id="w-1", alert_requested=True, external_id=42, alert_id="a-9"
        )

        result = await CLICommandHandler(provisioning).create("w.json", "a.json")

        provisioning.provision.assert_awaited_once_with("w.json", "a.json")
        assert result["status"] == "success"
        assert result["alert_id"] == "a-9"
        assert result["message"] == "Webhook w-1 created and linked to alert a-9"

    @pytest.mark.asyncio
    async def test_create_webhook_only(self) -> None:
        provisioning = AsyncMock()
        provisioning.provision.return_value = ProvisionResult(webhook_id="w-1")

        result = await run_command(provisioning, "create", {"webhook_file": "w.json"})

        provisioning.provision.assert_awaited_once_with("w.json", None)
        assert result["message"] == "Webhook w-1 created"
        assert result["alert_requested"] is False

    @pytest.mark.asyncio
    async def test_failure_propagates(self) -> None:
        provisioning = AsyncMock()
        provisioning.provision.side_effect = ProvisioningError(
            "webhook creation failed", APIError("webhook creation", 500, "")
        )

        with pytest.raises(ProvisioningError):
            await CLICommandHandler(provisioning).create("w.json")

    @pytest.mark.asyncio
    async def test_unknown_command(self) -> None:
        with pytest.raises(ValueError, match="Unknown command"):
            await run_command(AsyncMock(), "delete", {})


# ============================================================================
# End-to-end through main()
# ============================================================================


class TestCreateCommand:
    """Run main() against the fake API."""

    def test_full_scenario(self, coralogix, webhook_file, alert_file, capsys) -> None:
        main(
            [
                "create",
                "--webhook-file", webhook_file,
                "--alert-file", alert_file,
                "--api-key", "secret",
            ]
        )

        methods = [(r.method, r.url.path) for r in coralogix.requests]
        assert methods == [
            ("POST", WEBHOOKS_PATH),
            ("GET", WEBHOOKS_PATH + "/w-1"),
            ("POST", ALERTS_PATH),
        ]
        assert coralogix.requests[0].content == b'{"name":"wh1"}'
        alert_body = coralogix.requests[2].content
        assert b'"integrationId":42' in alert_body
        assert json.loads(alert_body) == {
            "notificationGroup": {"webhooks": [{"integration": {"integrationId": 42}}]}
        }

        output = capsys.readouterr().out.splitlines()
        assert output == [
            "Webhook created successfully with ID: w-1",
            "Webhook external (integration) ID: 42. "
            "The alert will be linked to this webhook via this value.",
            "Alert created successfully with ID: a-9",
        ]

    def test_without_alert_file_makes_one_call(self, coralogix, webhook_file) -> None:
        main(["create", "--webhook-file", webhook_file, "--api-key", "secret"])

        assert len(coralogix.requests) == 1
        assert coralogix.requests[0].method == "POST"
        assert coralogix.requests[0].url.path == WEBHOOKS_PATH

    def test_api_key_from_environment(
        self, coralogix, webhook_file, monkeypatch
    ) -> None:
        monkeypatch.setenv("CORALOGIX_API_KEY", "from-env")

        main(["create", "--webhook-file", webhook_file])

        assert coralogix.requests[0].headers["Authorization"] == "Bearer from-env"

    def test_api_key_flag_takes_precedence(
        self, coralogix, webhook_file, monkeypatch
    ) -> None:
        monkeypatch.setenv("CORALOGIX_API_KEY", "from-env")

        main(["create", "--webhook-file", webhook_file, "--api-key", "from-flag"])

        assert coralogix.requests[0].headers["Authorization"] == "Bearer from-flag"

    def test_missing_api_key_exits_without_network(
        self, coralogix, webhook_file, caplog
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["create", "--webhook-file", webhook_file])

        assert exc_info.value.code == 1
        assert coralogix.requests == []
        assert "API key is required" in caplog.text

    @pytest.mark.parametrize(
        ("endpoint", "calls_made"),
        [("create_webhook", 1), ("get_webhook", 2), ("create_alert", 3)],
    )
    @pytest.mark.parametrize("status", [400, 403, 500])
    def test_error_status_aborts_sequence(
        self, coralogix, webhook_file, alert_file, caplog, endpoint, calls_made, status
    ) -> None:
        coralogix.fail(endpoint, status)

        with pytest.raises(SystemExit) as exc_info:
            main(
                [
                    "create",
                    "--webhook-file", webhook_file,
                    "--alert-file", alert_file,
                    "--api-key", "secret",
                ]
            )

        assert exc_info.value.code == 1
        assert len(coralogix.requests) == calls_made
        assert f"failed with status {status}" in caplog.text

    def test_unreadable_webhook_file(self, coralogix, tmp_path, caplog) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(
                [
                    "create",
                    "--webhook-file", str(tmp_path / "missing.json"),
                    "--api-key", "secret",
                ]
            )

        assert exc_info.value.code == 1
        assert coralogix.requests == []
        assert "webhook creation failed: failed to read file" in caplog.text

    def test_region_selects_base_url(self, coralogix, webhook_file) -> None:
        main(["create", "--webhook-file", webhook_file, "--api-key", "k", "--region", "us1"])

        assert coralogix.requests[0].url.host == "api.coralogix.us"

    def test_api_url_overrides_region(self, coralogix, webhook_file, monkeypatch) -> None:
        monkeypatch.setenv("CORALOGIX_API_URL", "http://localhost:8080/mgmt/openapi")

        main(["create", "--webhook-file", webhook_file, "--api-key", "k", "--region", "us1"])

        url = coralogix.requests[0].url
        assert (url.scheme, url.host, url.port) == ("http", "localhost", 8080)

    def test_invalid_region_is_a_configuration_error(
        self, coralogix, webhook_file, caplog
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["create", "--webhook-file", webhook_file, "--api-key", "k", "--region", "mars"])

        assert exc_info.value.code == 1
        assert coralogix.requests == []
        assert "Invalid configuration" in caplog.text
