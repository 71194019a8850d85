"""
Base class for pluggable auth methods.

An auth method knows how to obtain a token from Vault and caches it together
with its lifetime so the client can tell when the session has expired.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from ..utils.http import parse_response
from .models import LoginResponse

if TYPE_CHECKING:
    from ..utils.http import VaultHTTPClient

logger = logging.getLogger(__name__)

RENEW_SELF_PATH = "auth/token/renew-self"


def now() -> float:
    """Monotonic clock in seconds used for all token lifetimes."""
    return time.monotonic()


class TokenState:
    """
    Token cached by an auth method.

    The token string, its start time, its duration and the renewable flag
    are replaced together by update(), so a reader never sees a new token
    with the lifetime of the old one.
    """

    def __init__(
        self,
        token: str = "",
        duration: int = 0,
        renewable: bool = False,
        start: Optional[float] = None,
    ) -> None:
        self.token = token
        self.duration = duration
        self.renewable = renewable
        self.start = now() if start is None else start

    def update(
        self,
        duration: int,
        renewable: bool,
        token: Optional[str] = None,
    ) -> None:
        """Store a fresh lifetime, restarting the clock."""
        if token is not None:
            self.token = token
        self.renewable = renewable
        self.duration = duration
        self.start = now()

    def is_expired(self) -> bool:
        return now() - self.start >= self.duration


class Auth(ABC):
    """
    Pluggable auth method used by the Client.

    Subclasses implement auth() to log in; token renewal through
    auth/token/renew-self is shared by all methods.

    Example:
        ```python
        class MyAuth(Auth):
            async def auth(self, http):
                response = await http.request("POST", "auth/my/login", body={...})
                self._store_login(parse_response(response, LoginResponse))
        ```
    """

    def __init__(self) -> None:
        # Empty and already expired until the first login
        self._state = TokenState()

    def is_expired(self) -> bool:
        """
        Check if the current session is expired.

        Note:
            This only compares the elapsed time with the lease duration and
            does not ask Vault whether the token has been revoked.
        """
        return self._state.is_expired()

    def get_token(self) -> str:
        """Return the current token, or an empty string before login."""
        return self._state.token

    def is_renewable(self) -> bool:
        return self._state.renewable

    def get_total_duration(self) -> int:
        """Lease duration of the current token in seconds."""
        return self._state.duration

    @abstractmethod
    async def auth(self, http: "VaultHTTPClient") -> None:
        """
        Log in to Vault and cache the returned token.

        Args:
            http: HTTP client rooted at the Vault API

        Raises:
            VaultError: If the login request fails
        """

    async def renew(self, http: "VaultHTTPClient") -> None:
        """
        Renew the current token through auth/token/renew-self.

        Args:
            http: HTTP client rooted at the Vault API

        Raises:
            VaultError: If the renew request fails
        """
        response = await http.request(
            "POST",
            RENEW_SELF_PATH,
            token=self.get_token(),
        )
        data = parse_response(response, LoginResponse)

        self._state.update(
            duration=data.auth.lease_duration,
            renewable=data.auth.renewable,
            token=data.auth.client_token or None,
        )
        logger.info(
            "Renewed %s session for %s seconds",
            self.method_name,
            data.auth.lease_duration,
        )

    @property
    def method_name(self) -> str:
        return type(self).__name__

    def _store_login(self, data: LoginResponse) -> None:
        self._state.update(
            token=data.auth.client_token,
            duration=data.auth.lease_duration,
            renewable=data.auth.renewable,
        )
        logger.info(
            "Logged in with %s, lease duration %s seconds",
            self.method_name,
            data.auth.lease_duration,
        )
