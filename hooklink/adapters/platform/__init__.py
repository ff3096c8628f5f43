"""Platform adapters for webhook and alert management APIs."""

from .coralogix import CoralogixPlatformAdapter

__all__ = ["CoralogixPlatformAdapter"]
