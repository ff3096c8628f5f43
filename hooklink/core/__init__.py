"""Core domain logic for the hooklink provisioning tool.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .errors import (
    APIError,
    ConfigError,
    DocumentReadError,
    HookLinkError,
    NetworkError,
    ParseError,
    PatchError,
    ProvisioningError,
)
from .models import AlertRecord, ProvisionResult, WebhookDetails, WebhookRecord

__all__ = [
    "APIError",
    "AlertRecord",
    "ConfigError",
    "DocumentReadError",
    "HookLinkError",
    "NetworkError",
    "ParseError",
    "PatchError",
    "ProvisionResult",
    "ProvisioningError",
    "WebhookDetails",
    "WebhookRecord",
]
