"""
Auth models.

Pydantic models for login requests and the auth responses returned by Vault.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class AuthInfo(BaseModel):
    """
    The "auth" block of a login or renew response.

    Vault returns either `policies`, `token_policies` or both depending on
    the auth method; missing lists default to empty.
    """

    client_token: str = Field(repr=False)
    accessor: Optional[str] = None
    policies: List[str] = Field(default_factory=list)
    token_policies: List[str] = Field(default_factory=list)
    metadata: Optional[Dict[str, str]] = None
    lease_duration: int = Field(ge=0)
    renewable: bool = False

    model_config = {
        "json_schema_extra": {
            "example": {
                "client_token": "hvs.CAESIJ...",
                "accessor": "0e9e354a-520f-df04-6867-ee81cae3d42d",
                "token_policies": ["default", "app"],
                "lease_duration": 2764800,
                "renewable": True,
            }
        }
    }


class LoginResponse(BaseModel):
    """Response of a login or renew-self call."""

    auth: AuthInfo
    lease_id: Optional[str] = None
    lease_duration: Optional[int] = None
    renewable: Optional[bool] = None


class ApproleLogin(BaseModel):
    """Credentials for the approle login endpoint."""

    role_id: str
    secret_id: str = Field(repr=False)


class KubernetesLogin(BaseModel):
    """Credentials for the kubernetes login endpoint."""

    role: str
    jwt: str = Field(repr=False)
