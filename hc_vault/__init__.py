"""
hc-vault - Async client for the HashiCorp Vault HTTP API.

Pluggable auth methods keep a Vault session alive while secret engine
helpers wrap the most common endpoints.

Example:
    ```python
    from hc_vault import ApproleSession, Client, KV2Configuration

    # Log in with AppRole
    auth = ApproleSession(role_id="my-role-id", secret_id="my-secret-id")
    client = await Client.create(auth, vault_url="http://127.0.0.1:8200")

    # KV v2 secrets
    await client.kv2.configure("secret", KV2Configuration(max_versions=5))
    await client.kv2.update_set("secret", "app/db", {"password": "s3cret"})
    secret = await client.kv2.get("secret", "app/db")

    # Dynamic database credentials
    creds = await client.database.get_credentials("readonly")

    # Keep the session alive in the background
    client.start_renewal()
    ```
"""

from .approle import ApproleManager, ApproleOptions
from .auth import (
    ApproleSession,
    Auth,
    KubernetesSession,
    TokenSession,
    auth_from_env,
    env_approle,
    env_kubernetes,
    load_jwt,
)
from .client import Client
from .config import RenewPolicy, VaultConfig, load_config
from .database import DatabaseCredentials, DatabaseManager
from .errors import (
    CredentialsError,
    InvalidRequestError,
    NotFoundError,
    NotRenewableError,
    ParseError,
    RenewAuthError,
    RenewError,
    RenewNotEnabledError,
    RequestError,
    SealedError,
    SessionExpiredError,
    UnauthorizedError,
    UnexpectedStatusError,
    VaultError,
    VaultStatusError,
)
from .kv2 import KV2Configuration, KV2Manager, SecretMetadata, SecretVersion

__version__ = "0.1.0"

__all__ = [
    # Main client
    "Client",
    "VaultConfig",
    "RenewPolicy",
    "load_config",
    # Auth methods
    "Auth",
    "ApproleSession",
    "KubernetesSession",
    "TokenSession",
    "load_jwt",
    "env_approle",
    "env_kubernetes",
    "auth_from_env",
    # KV v2
    "KV2Manager",
    "KV2Configuration",
    "SecretMetadata",
    "SecretVersion",
    # Database
    "DatabaseManager",
    "DatabaseCredentials",
    # AppRole roles
    "ApproleManager",
    "ApproleOptions",
    # Errors
    "VaultError",
    "RequestError",
    "ParseError",
    "CredentialsError",
    "SessionExpiredError",
    "VaultStatusError",
    "InvalidRequestError",
    "UnauthorizedError",
    "NotFoundError",
    "SealedError",
    "UnexpectedStatusError",
    "RenewError",
    "RenewNotEnabledError",
    "NotRenewableError",
    "RenewAuthError",
]
