"""
Client configuration management.

Loads configuration from environment variables or .env file.
"""

from enum import Enum
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RenewPolicy(str, Enum):
    """
    What the client does once its session has expired.

    REAUTH logs in again with the stored credentials, RENEW expects the
    background renewal loop to keep the token alive and NOTHING simply
    reports the expired session.
    """

    REAUTH = "reauth"
    RENEW = "renew"
    NOTHING = "nothing"


class VaultConfig(BaseSettings):
    """
    Vault client configuration settings.

    Can be loaded from:
    1. Environment variables (VAULT_URL, VAULT_RENEW_POLICY, etc.)
    2. .env file in project root
    3. Direct instantiation with kwargs

    Example:
        ```python
        # From environment
        config = VaultConfig()

        # Direct instantiation
        config = VaultConfig(
            vault_url="https://vault.example.com:8200",
            renew_policy=RenewPolicy.RENEW,
        )
        ```
    """

    model_config = SettingsConfigDict(
        env_prefix="VAULT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Server
    vault_url: str = Field(
        default="http://localhost:8200",
        description="Base URL of the Vault server (e.g., https://vault.example.com:8200)",
        validation_alias=AliasChoices("vault_url", "vault_addr"),
    )

    # Session handling
    renew_policy: RenewPolicy = Field(
        default=RenewPolicy.REAUTH,
        description="How an expired session is handled (reauth, renew, nothing)",
    )

    renew_threshold: float = Field(
        default=0.75,
        description="Fraction of the token lifetime left when the renewal loop renews",
    )

    # Optional: raw token for token auth
    token: Optional[str] = Field(
        default=None,
        description="Vault token used when no other auth method is configured",
    )

    token_duration: int = Field(
        default=3600,
        ge=0,
        description="Seconds a raw token is considered valid",
    )

    # HTTP
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="HTTP timeout in seconds",
    )

    verify_tls: bool = Field(
        default=True,
        description="Verify the server TLS certificate",
    )

    # Debug
    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    @field_validator("vault_url")
    @classmethod
    def validate_vault_url(cls, v: str) -> str:
        """Ensure the Vault URL is an http(s) URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("vault_url must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("renew_threshold")
    @classmethod
    def validate_renew_threshold(cls, v: float) -> float:
        """Ensure the threshold leaves a positive wait before renewing."""
        if not 0 <= v < 1:
            raise ValueError("renew_threshold must be in the range [0, 1)")
        return v

    @property
    def api_url(self) -> str:
        """Base URL for all API calls, e.g. http://localhost:8200/v1/."""
        return f"{self.vault_url}/v1/"


def load_config(**kwargs) -> VaultConfig:
    """
    Load client configuration.

    Priority order:
    1. Keyword arguments
    2. Environment variables (VAULT_*)
    3. .env file

    Args:
        **kwargs: Override configuration values

    Returns:
        VaultConfig instance

    Raises:
        ValidationError: If a value is invalid

    Example:
        ```python
        # Load from environment
        config = load_config()

        # Override specific values
        config = load_config(vault_url="http://127.0.0.1:8200")
        ```
    """
    return VaultConfig(**kwargs)
