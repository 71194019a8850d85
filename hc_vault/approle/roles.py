"""
AppRole role management.

Creates roles and hands out the role ID and secret IDs used to log in with
ApproleSession.
"""

import json
from typing import TYPE_CHECKING, Dict, List, Optional

from ..utils.http import parse_response
from .models import (
    ApproleOptions,
    RoleIDResponse,
    SecretIDData,
    SecretIDRequest,
    SecretIDResponse,
)

if TYPE_CHECKING:
    from ..client import Client


class ApproleManager:
    """
    Manages roles of the approle auth backend.

    Example:
        ```python
        await client.approle.create_update(
            "my-app",
            ApproleOptions(token_policies=["app"], token_ttl=3600),
        )
        role_id = await client.approle.read_role_id("my-app")
        secret = await client.approle.generate_secret_id("my-app")

        app_auth = ApproleSession(role_id, secret.secret_id)
        ```
    """

    def __init__(self, client: "Client", mount: str = "approle") -> None:
        self.client = client
        self.mount = mount.strip("/")

    def _role_path(self, name: str) -> str:
        return f"auth/{self.mount}/role/{name}"

    async def create_update(self, name: str, options: ApproleOptions) -> None:
        """
        Create or update a role with the given options.

        [Vault-Documentation](https://developer.hashicorp.com/vault/api-docs/auth/approle#create-update-approle)

        Args:
            name: Name of the role to create or modify
            options: Options to apply to the role
        """
        await self.client.vault_request("POST", self._role_path(name), body=options)

    async def read_role_id(self, name: str) -> str:
        """
        Read the role ID of a role.

        [Vault-Documentation](https://developer.hashicorp.com/vault/api-docs/auth/approle#read-approle-role-id)
        """
        response = await self.client.vault_request(
            "GET", f"{self._role_path(name)}/role-id"
        )
        return parse_response(response, RoleIDResponse).data.role_id

    async def generate_secret_id(
        self,
        name: str,
        metadata: Optional[Dict[str, str]] = None,
        cidr_list: Optional[List[str]] = None,
        ttl: Optional[str] = None,
        num_uses: Optional[int] = None,
    ) -> SecretIDData:
        """
        Generate a new secret ID for a role.

        [Vault-Documentation](https://developer.hashicorp.com/vault/api-docs/auth/approle#generate-new-secret-id)

        Args:
            name: Name of the role
            metadata: Key/value pairs attached to tokens created with this secret ID
            cidr_list: CIDR blocks allowed to use this secret ID
            ttl: TTL of the secret ID, e.g. "30m"
            num_uses: Logins allowed with this secret ID

        Returns:
            SecretIDData with the secret ID and its accessor
        """
        body = SecretIDRequest(
            # Vault expects the metadata as a JSON encoded string
            metadata=json.dumps(metadata) if metadata else None,
            cidr_list=cidr_list,
            ttl=ttl,
            num_uses=num_uses,
        )
        response = await self.client.vault_request(
            "POST", f"{self._role_path(name)}/secret-id", body=body
        )
        return parse_response(response, SecretIDResponse).data
