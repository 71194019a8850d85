"""
AppRole role management models.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ApproleOptions(BaseModel):
    """
    Options of an AppRole role. Unset options are not sent to Vault.

    [Vault-Documentation](https://developer.hashicorp.com/vault/api-docs/auth/approle#create-update-approle)
    """

    # If the secret_id is required to be present when logging in
    bind_secret_id: Optional[bool] = None
    # CIDR blocks allowed to use secret IDs of this role
    secret_id_bound_cidrs: Optional[List[str]] = None
    # Logins per secret ID, 0 means unlimited
    secret_id_num_uses: Optional[int] = Field(default=None, ge=0)
    # TTL of a secret ID, e.g. "30m"
    secret_id_ttl: Optional[str] = None
    # Can't be changed after the role has been created
    enable_local_secret_ids: Optional[bool] = None
    token_ttl: Optional[int] = Field(default=None, ge=0)
    token_max_ttl: Optional[int] = Field(default=None, ge=0)
    token_policies: Optional[List[str]] = None
    token_bound_cidrs: Optional[List[str]] = None
    token_explicit_max_ttl: Optional[int] = Field(default=None, ge=0)
    token_no_default_policy: Optional[bool] = None
    token_num_uses: Optional[int] = Field(default=None, ge=0)
    token_period: Optional[int] = Field(default=None, ge=0)
    # "service", "batch" or "default"
    token_type: Optional[str] = None


class RoleIDData(BaseModel):
    role_id: str


class RoleIDResponse(BaseModel):
    data: RoleIDData


class SecretIDData(BaseModel):
    """A freshly generated secret ID."""

    secret_id: str = Field(repr=False)
    secret_id_accessor: str
    secret_id_ttl: int = 0
    secret_id_num_uses: int = 0


class SecretIDResponse(BaseModel):
    data: SecretIDData


class SecretIDRequest(BaseModel):
    metadata: Optional[str] = None
    cidr_list: Optional[List[str]] = None
    ttl: Optional[str] = None
    num_uses: Optional[int] = Field(default=None, ge=0)
