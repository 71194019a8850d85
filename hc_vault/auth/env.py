"""
Build auth methods from environment variables.

Environment-Variables:
* `VAULT_TOKEN`: Raw token (read through VaultConfig)
* `APPROLE_ID`: The ID of the AppRole role to use
* `APPROLE_SECRET`: The secret ID of the AppRole role to use
* `VAULT_ROLE`: The role for the kubernetes auth method
"""

import os
from typing import Optional

from ..config import VaultConfig
from ..errors import CredentialsError
from .approle import ApproleSession
from .base import Auth
from .kubernetes import KubernetesSession, load_jwt
from .token import TokenSession


def _require_env(name: str) -> str:
    value = os.environ.get(name)
    if not value:
        raise CredentialsError(f"Environment variable {name} is not set")
    return value


def env_approle() -> ApproleSession:
    """
    Create an AppRole session from APPROLE_ID and APPROLE_SECRET.

    Raises:
        CredentialsError: If either variable is missing
    """
    role_id = _require_env("APPROLE_ID")
    secret_id = _require_env("APPROLE_SECRET")
    return ApproleSession(role_id=role_id, secret_id=secret_id)


def env_kubernetes(jwt_path: Optional[str] = None) -> KubernetesSession:
    """
    Create a kubernetes session from VAULT_ROLE and the service account JWT.

    Raises:
        CredentialsError: If VAULT_ROLE is missing or the JWT can't be read
    """
    role = _require_env("VAULT_ROLE")
    jwt = load_jwt(jwt_path) if jwt_path else load_jwt()
    return KubernetesSession(role=role, jwt=jwt)


def auth_from_env(config: VaultConfig) -> Auth:
    """
    Pick an auth method from the environment.

    Tried in order: the configured token, AppRole credentials, then the
    kubernetes role.

    Args:
        config: Client configuration (provides token and token_duration)

    Returns:
        Auth instance ready to be passed to Client.create()

    Raises:
        CredentialsError: If no auth method is configured
    """
    if config.token:
        return TokenSession(config.token, duration=config.token_duration)
    if os.environ.get("APPROLE_ID"):
        return env_approle()
    if os.environ.get("VAULT_ROLE"):
        return env_kubernetes()
    raise CredentialsError(
        "No credentials found: set VAULT_TOKEN, APPROLE_ID/APPROLE_SECRET or VAULT_ROLE"
    )
