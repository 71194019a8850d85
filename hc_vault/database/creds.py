"""
Database secrets engine operations.
"""

from typing import TYPE_CHECKING

from ..utils.http import parse_response
from .models import CredentialsResponse, DatabaseCredentials

if TYPE_CHECKING:
    from ..client import Client


class DatabaseManager:
    """
    Loads dynamic credentials from the database secrets engine.

    Example:
        ```python
        creds = await client.database.get_credentials("readonly")
        dsn = f"postgresql://{creds.username}:{creds.password}@db/app"
        ```
    """

    def __init__(self, client: "Client", mount: str = "database") -> None:
        self.client = client
        self.mount = mount.strip("/")

    async def get_credentials(self, name: str) -> DatabaseCredentials:
        """
        Generate credentials for a database role.

        [Vault-Documentation](https://developer.hashicorp.com/vault/api-docs/secret/databases#generate-credentials)

        Args:
            name: Name of the role to generate credentials for

        Returns:
            DatabaseCredentials with the lease information

        Raises:
            NotFoundError: If the role does not exist
        """
        response = await self.client.vault_request("GET", f"{self.mount}/creds/{name}")
        body = parse_response(response, CredentialsResponse)

        return DatabaseCredentials(
            username=body.data.username,
            password=body.data.password,
            lease_id=body.lease_id,
            lease_duration=body.lease_duration,
            renewable=body.renewable,
        )
