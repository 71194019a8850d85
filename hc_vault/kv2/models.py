"""
KV v2 models.

Pydantic models for the configuration, versions and metadata of the KV v2
secrets engine.
"""

from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class KV2Configuration(BaseModel):
    """
    Configuration of a single kv2 mount.

    Unset fields are left untouched when sent with configure().
    """

    # Require the cas option on every write
    cas_required: Optional[bool] = None
    # Versions older than this duration (e.g. "768h") are dropped
    delete_version_after: Optional[str] = None
    # Oldest versions are dropped once this many exist
    max_versions: Optional[int] = Field(default=None, ge=0)


class SecretVersion(BaseModel):
    """Metadata of a single secret version."""

    created_time: Optional[str] = None
    deletion_time: Optional[str] = None
    destroyed: bool = False
    version: Optional[int] = None
    custom_metadata: Optional[Dict[str, str]] = None


class SecretData(BaseModel, Generic[DataT]):
    """The "data" block of a read: the secret itself plus its version."""

    data: DataT
    metadata: Optional[SecretVersion] = None


class SecretMetadata(BaseModel):
    """Metadata of a key, covering all of its versions."""

    cas_required: bool = False
    created_time: Optional[str] = None
    current_version: int = 0
    delete_version_after: Optional[str] = None
    max_versions: int = 0
    oldest_version: int = 0
    updated_time: Optional[str] = None
    custom_metadata: Optional[Dict[str, str]] = None
    versions: Dict[str, SecretVersion] = Field(default_factory=dict)


class UpdateOptions(BaseModel):
    cas: Optional[int] = Field(default=None, ge=0)


class UpdatePayload(BaseModel):
    """Body of a create/update secret call."""

    data: Dict[str, Any]
    options: Optional[UpdateOptions] = None


class VersionsBody(BaseModel):
    """Body of the delete, undelete and destroy version calls."""

    versions: List[int]


class MetadataUpdate(BaseModel):
    """Body of an update metadata call; unset fields are not sent."""

    max_versions: Optional[int] = Field(default=None, ge=0)
    cas_required: Optional[bool] = None
    delete_version_after: Optional[str] = None
    custom_metadata: Optional[Dict[str, str]] = None


class ConfigurationResponse(BaseModel):
    data: KV2Configuration


class ReadResponse(BaseModel, Generic[DataT]):
    data: SecretData[DataT]


class WriteResponse(BaseModel):
    data: SecretVersion


class MetadataResponse(BaseModel):
    data: SecretMetadata


class ListData(BaseModel):
    keys: List[str] = Field(default_factory=list)


class ListResponse(BaseModel):
    data: ListData
