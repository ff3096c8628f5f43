"""Configuration loading for hooklink.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Resolve the management API base URL from a region or explicit URL
- Resolve the API key from an explicit value or the environment
"""

from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hooklink.core.errors import ConfigError

# Management OpenAPI hosts per Coralogix region.
CORALOGIX_REGIONS: dict[str, str] = {
    "eu1": "api.coralogix.com",
    "eu2": "api.eu2.coralogix.com",
    "us1": "api.coralogix.us",
    "us2": "api.cx498.coralogix.com",
    "ap1": "api.app.coralogix.in",
    "ap2": "api.coralogixsg.com",
    "ap3": "api.ap3.coralogix.com",
}

MANAGEMENT_API_PATH = "/mgmt/openapi"


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Coralogix API configuration
    coralogix_api_key: str = Field(
        default="",
        description="Coralogix API key used as bearer token",
    )
    coralogix_region: str = Field(
        default="eu2",
        description="Coralogix region the account lives in",
    )
    coralogix_api_url: str = Field(
        default="",
        description="Management API base URL (overrides coralogix_region)",
    )
    request_timeout_seconds: float = Field(
        default=10.0,
        description="Per-request timeout in seconds",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    @field_validator("coralogix_region")
    @classmethod
    def validate_region(cls, v: str) -> str:
        """Ensure region is one of the known Coralogix regions."""
        region = v.strip().lower()
        if region not in CORALOGIX_REGIONS:
            known = ", ".join(sorted(CORALOGIX_REGIONS))
            raise ValueError(f"coralogix_region must be one of: {known}")
        return region

    @field_validator("coralogix_api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Ensure an explicit API URL is http(s)."""
        v = v.strip()
        if v and not v.startswith(("http://", "https://")):
            raise ValueError("coralogix_api_url must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Ensure request timeout is positive."""
        if v <= 0:
            raise ValueError("request_timeout_seconds must be positive")
        return v

    @property
    def api_base_url(self) -> str:
        """Management API base URL for this configuration."""
        if self.coralogix_api_url:
            return self.coralogix_api_url
        host = CORALOGIX_REGIONS[self.coralogix_region]
        return f"https://{host}{MANAGEMENT_API_PATH}"


def load_settings(env_file: str | None = None, **overrides: Any) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.
        **overrides: Field values taking precedence over the environment
                 (e.g. values given on the command line). ``None`` values
                 are ignored.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    if env_file:
        return Settings(_env_file=env_file, **values)  # type: ignore[call-arg]
    return Settings(**values)


def resolve_api_key(explicit: str | None, settings: Settings) -> str:
    """Return the explicit API key, falling back to CORALOGIX_API_KEY.

    Raises:
        ConfigError: If neither is set.
    """
    api_key = explicit or settings.coralogix_api_key
    if not api_key:
        raise ConfigError(
            "API key is required. Set CORALOGIX_API_KEY environment variable "
            "or use --api-key flag"
        )
    return api_key


__all__ = [
    "CORALOGIX_REGIONS",
    "Settings",
    "load_settings",
    "resolve_api_key",
]
