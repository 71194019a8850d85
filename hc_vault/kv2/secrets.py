"""
KV v2 secrets engine operations.

Reads, writes, versions and metadata of secrets stored in a kv2 mount.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Type, TypeVar, Union, overload

from pydantic import BaseModel

from ..errors import NotFoundError
from ..utils.http import parse_response
from .models import (
    ConfigurationResponse,
    KV2Configuration,
    ListResponse,
    MetadataResponse,
    MetadataUpdate,
    ReadResponse,
    SecretMetadata,
    SecretVersion,
    UpdateOptions,
    UpdatePayload,
    VersionsBody,
    WriteResponse,
)

if TYPE_CHECKING:
    from ..client import Client

ModelT = TypeVar("ModelT", bound=BaseModel)


def _path(mount: str, kind: str, name: str = "") -> str:
    return f"{mount.strip('/')}/{kind}/{name.strip('/')}".rstrip("/")


class KV2Manager:
    """
    Manages secrets in kv2 mounts.

    Every method takes the mount point of the engine as its first argument,
    so one manager serves all kv2 mounts of a server.

    Example:
        ```python
        # Write a secret
        await client.kv2.update_set("secret", "app/db", {"password": "s3cret"})

        # Read it back
        data = await client.kv2.get("secret", "app/db")

        # Read an older version into a model
        creds = await client.kv2.get("secret", "app/db", version=1, model=DBSecret)
        ```
    """

    def __init__(self, client: "Client") -> None:
        """
        Initialize KV2Manager.

        Args:
            client: Client used to send the requests
        """
        self.client = client

    async def configure(self, mount: str, config: KV2Configuration) -> None:
        """
        Configure the kv2 mount.

        [Vault-Documentation](https://developer.hashicorp.com/vault/api-docs/secret/kv/kv-v2#configure-the-kv-engine)

        Args:
            mount: Mount point of the engine (e.g., "secret")
            config: Settings to apply; unset fields are not sent
        """
        await self.client.vault_request("POST", f"{mount.strip('/')}/config", body=config)

    async def get_configuration(self, mount: str) -> KV2Configuration:
        """
        Load the current configuration of the kv2 mount.

        [Vault-Documentation](https://developer.hashicorp.com/vault/api-docs/secret/kv/kv-v2#read-kv-engine-configuration)
        """
        response = await self.client.vault_request("GET", f"{mount.strip('/')}/config")
        return parse_response(response, ConfigurationResponse).data

    @overload
    async def get(
        self, mount: str, name: str, version: Optional[int] = ..., model: None = ...
    ) -> Dict[str, Any]: ...

    @overload
    async def get(
        self, mount: str, name: str, version: Optional[int] = ..., model: Type[ModelT] = ...
    ) -> ModelT: ...

    async def get(
        self,
        mount: str,
        name: str,
        version: Optional[int] = None,
        model: Optional[Type[ModelT]] = None,
    ) -> Union[Dict[str, Any], ModelT]:
        """
        Read a secret.

        [Vault-Documentation](https://developer.hashicorp.com/vault/api-docs/secret/kv/kv-v2#read-secret-version)

        Args:
            mount: Mount point of the engine
            name: Path of the secret inside the mount
            version: Version to read (latest if None)
            model: Optional pydantic model to parse the secret into

        Returns:
            The secret data as a dict, or as `model` if given

        Raises:
            NotFoundError: If the secret or version does not exist
            ParseError: If the secret does not match `model`
        """
        params = {"version": version} if version is not None else None
        response = await self.client.vault_request(
            "GET", _path(mount, "data", name), params=params
        )

        data_type = model if model is not None else Dict[str, Any]
        return parse_response(response, ReadResponse[data_type]).data.data

    async def update_set(
        self,
        mount: str,
        name: str,
        data: Union[Dict[str, Any], BaseModel],
        cas: Optional[int] = None,
    ) -> Optional[SecretVersion]:
        """
        Create or update a secret.

        [Vault-Documentation](https://developer.hashicorp.com/vault/api-docs/secret/kv/kv-v2#create-update-secret)

        Args:
            mount: Mount point of the engine
            name: Path of the secret inside the mount
            data: Secret data, a dict or a pydantic model
            cas: Only write if the current version matches (0 = must not exist)

        Returns:
            Metadata of the written version, if Vault returned it
        """
        if isinstance(data, BaseModel):
            data = data.model_dump(mode="json")

        payload = UpdatePayload(data=data)
        if cas is not None:
            payload.options = UpdateOptions(cas=cas)

        response = await self.client.vault_request(
            "POST", _path(mount, "data", name), body=payload
        )
        if response.status_code == 204 or not response.content:
            return None
        return parse_response(response, WriteResponse).data

    async def delete(self, mount: str, name: str) -> None:
        """
        Soft delete the latest version of a secret.

        The data is kept and can be restored with undelete_versions().

        [Vault-Documentation](https://developer.hashicorp.com/vault/api-docs/secret/kv/kv-v2#delete-latest-version-of-secret)
        """
        await self.client.vault_request("DELETE", _path(mount, "data", name))

    async def delete_versions(self, mount: str, name: str, versions: List[int]) -> None:
        """
        Soft delete the given versions of a secret.

        [Vault-Documentation](https://developer.hashicorp.com/vault/api-docs/secret/kv/kv-v2#delete-secret-versions)
        """
        await self.client.vault_request(
            "POST", _path(mount, "delete", name), body=VersionsBody(versions=versions)
        )

    async def undelete_versions(self, mount: str, name: str, versions: List[int]) -> None:
        """
        Restore soft deleted versions. Destroyed versions stay gone.

        [Vault-Documentation](https://developer.hashicorp.com/vault/api-docs/secret/kv/kv-v2#undelete-secret-versions)
        """
        await self.client.vault_request(
            "POST", _path(mount, "undelete", name), body=VersionsBody(versions=versions)
        )

    async def destroy_versions(self, mount: str, name: str, versions: List[int]) -> None:
        """
        Permanently remove the given versions. This cannot be undone.

        [Vault-Documentation](https://developer.hashicorp.com/vault/api-docs/secret/kv/kv-v2#destroy-secret-versions)
        """
        await self.client.vault_request(
            "POST", _path(mount, "destroy", name), body=VersionsBody(versions=versions)
        )

    async def delete_metadata_all_versions(self, mount: str, name: str) -> None:
        """
        Permanently remove a key with all of its versions and metadata.

        [Vault-Documentation](https://developer.hashicorp.com/vault/api-docs/secret/kv/kv-v2#delete-metadata-and-all-versions)
        """
        await self.client.vault_request("DELETE", _path(mount, "metadata", name))

    async def list(self, mount: str, path: str = "") -> List[str]:
        """
        List the keys below a path. Folders end with "/".

        [Vault-Documentation](https://developer.hashicorp.com/vault/api-docs/secret/kv/kv-v2#list-secrets)

        Returns:
            Key names, or an empty list if nothing exists below the path
        """
        try:
            response = await self.client.vault_request(
                "LIST", _path(mount, "metadata", path)
            )
        except NotFoundError:
            return []
        return parse_response(response, ListResponse).data.keys

    async def read_metadata(self, mount: str, name: str) -> SecretMetadata:
        """
        Read the metadata and version history of a key.

        [Vault-Documentation](https://developer.hashicorp.com/vault/api-docs/secret/kv/kv-v2#read-secret-metadata)
        """
        response = await self.client.vault_request("GET", _path(mount, "metadata", name))
        return parse_response(response, MetadataResponse).data

    async def update_metadata(
        self,
        mount: str,
        name: str,
        max_versions: Optional[int] = None,
        cas_required: Optional[bool] = None,
        delete_version_after: Optional[str] = None,
        custom_metadata: Optional[Dict[str, str]] = None,
    ) -> None:
        """
        Update the metadata of a key. Only the given settings are changed.

        [Vault-Documentation](https://developer.hashicorp.com/vault/api-docs/secret/kv/kv-v2#create-update-metadata)
        """
        body = MetadataUpdate(
            max_versions=max_versions,
            cas_required=cas_required,
            delete_version_after=delete_version_after,
            custom_metadata=custom_metadata,
        )
        await self.client.vault_request("POST", _path(mount, "metadata", name), body=body)
