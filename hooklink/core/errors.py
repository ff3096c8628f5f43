"""Error taxonomy for the provisioning workflow.

Every failure raised by core or adapters derives from HookLinkError so the
composition root can report it with a single handler. Stage components
never recover from these; the Provisioner wraps them in ProvisioningError
with the name of the stage that failed.
"""

from typing import Any


class HookLinkError(Exception):
    """Base class for all provisioning failures."""


class ConfigError(HookLinkError):
    """Required configuration (e.g. the API key) is missing or invalid."""


class DocumentReadError(HookLinkError):
    """A webhook or alert document could not be read from disk."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"failed to read file '{path}': {reason}")
        self.path = path
        self.reason = reason


class NetworkError(HookLinkError):
    """The request never produced a response (connection failure, timeout)."""


class APIError(HookLinkError):
    """The platform answered with an HTTP status of 400 or above."""

    def __init__(self, operation: str, status_code: int, body: str):
        super().__init__(f"{operation} failed with status {status_code}: {body}")
        self.operation = operation
        self.status_code = status_code
        self.body = body


class ParseError(HookLinkError):
    """A success response did not contain the expected fields."""


class PatchError(HookLinkError):
    """A JSON document could not be addressed for the required field write."""


class ProvisioningError(HookLinkError):
    """A provisioning stage failed.

    Carries the stage name for context and the underlying error both as
    ``error`` and as ``__cause__``.
    """

    def __init__(self, stage: str, error: HookLinkError):
        super().__init__(f"{stage}: {error}")
        self.stage = stage
        self.error = error

    @property
    def details(self) -> dict[str, Any]:
        """Structured context for log records."""
        details: dict[str, Any] = {
            "stage": self.stage,
            "error_type": type(self.error).__name__,
        }
        if isinstance(self.error, APIError):
            details["status_code"] = self.error.status_code
        return details
