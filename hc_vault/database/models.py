"""
Database secrets engine models.
"""

from datetime import timedelta
from typing import Optional

from pydantic import BaseModel, Field


class DatabaseCredentials(BaseModel):
    """
    Credentials generated by the database secrets engine.

    The credentials stop working once the lease runs out; `duration` is
    the lease length as a timedelta.
    """

    username: str
    # Kept out of repr() and str()
    password: str = Field(repr=False)
    lease_id: Optional[str] = None
    lease_duration: int = Field(default=0, ge=0)
    renewable: bool = False

    @property
    def duration(self) -> timedelta:
        return timedelta(seconds=self.lease_duration)


class CredentialsData(BaseModel):
    username: str
    password: str = Field(repr=False)


class CredentialsResponse(BaseModel):
    lease_id: Optional[str] = None
    lease_duration: int = 0
    renewable: bool = False
    data: CredentialsData
