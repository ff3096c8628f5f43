"""Domain models for the hooklink provisioning workflow.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class WebhookRecord:
    """A webhook as returned by the creation endpoint."""

    id: str

    def __post_init__(self) -> None:
        """Validate webhook record invariants on creation."""
        if not self.id or not self.id.strip():
            raise ValueError("id must be a non-empty string")


@dataclass(frozen=True)
class WebhookDetails:
    """Details of an existing webhook.

    ``external_id`` is the integration identifier the alerting subsystem
    uses to reference the webhook from an alert definition.
    """

    webhook_id: str
    external_id: int

    def __post_init__(self) -> None:
        """Validate webhook details invariants on creation."""
        if isinstance(self.external_id, bool) or not isinstance(self.external_id, int):
            raise ValueError(
                f"external_id must be an integer, got {type(self.external_id).__name__}"
            )


@dataclass(frozen=True)
class AlertRecord:
    """An alert definition as returned by the creation endpoint.

    The id is informational only and may be empty when the platform
    omits it from the response.
    """

    id: str


@dataclass(frozen=True)
class ProvisionResult:
    """Outcome of a complete provisioning run."""

    webhook_id: str
    alert_requested: bool = False
    external_id: int | None = None
    alert_id: str | None = None

    def __post_init__(self) -> None:
        """Alert fields are only populated when an alert was requested."""
        if not self.alert_requested and (
            self.external_id is not None or self.alert_id is not None
        ):
            raise ValueError(
                "external_id and alert_id require alert_requested=True"
            )

    def to_dict(self) -> dict[str, str | int | bool | None]:
        """Plain representation for CLI output and logging."""
        return {
            "webhook_id": self.webhook_id,
            "alert_requested": self.alert_requested,
            "external_id": self.external_id,
            "alert_id": self.alert_id,
        }
