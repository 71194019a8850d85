"""
AppRole auth method.

Logs in with a role ID and secret ID pair.
"""

from typing import TYPE_CHECKING

from ..utils.http import parse_response
from .base import Auth
from .models import ApproleLogin, LoginResponse

if TYPE_CHECKING:
    from ..utils.http import VaultHTTPClient

APPROLE_LOGIN_PATH = "auth/approle/login"


class ApproleSession(Auth):
    """
    Auth session for the approle backend.

    Example:
        ```python
        auth = ApproleSession(role_id="my-role-id", secret_id="my-secret-id")
        client = await Client.create(auth, vault_url="http://127.0.0.1:8200")
        ```
    """

    def __init__(self, role_id: str, secret_id: str) -> None:
        super().__init__()
        self.approle = ApproleLogin(role_id=role_id, secret_id=secret_id)

    async def auth(self, http: "VaultHTTPClient") -> None:
        """Log in through auth/approle/login."""
        response = await http.request("POST", APPROLE_LOGIN_PATH, body=self.approle)
        self._store_login(parse_response(response, LoginResponse))
