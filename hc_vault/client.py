"""
Main Vault client.

This is the primary interface users interact with.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import httpx

from .approle import ApproleManager
from .auth import ApproleSession, Auth, TokenSession
from .config import RenewPolicy, VaultConfig, load_config
from .database import DatabaseManager
from .errors import (
    NotRenewableError,
    RenewAuthError,
    RenewNotEnabledError,
    SessionExpiredError,
    VaultError,
)
from .kv2 import KV2Manager
from .utils.http import VaultHTTPClient

logger = logging.getLogger(__name__)


class Client:
    """
    A single Vault session used for all further requests.

    The client owns the configuration, the auth method and a pooled HTTP
    client. Every request checks the session first and logs in again when
    the renew policy allows it.

    Example:
        ```python
        from hc_vault import ApproleSession, Client

        auth = ApproleSession(role_id="my-role-id", secret_id="my-secret-id")
        client = await Client.create(auth, vault_url="http://127.0.0.1:8200")

        # Secret engines
        await client.kv2.update_set("secret", "app", {"key": "value"})
        creds = await client.database.get_credentials("readonly")

        # Or any other endpoint
        response = await client.vault_request("GET", "sys/mounts")
        ```
    """

    def __init__(
        self,
        config: VaultConfig,
        auth: Auth,
        http: Optional[VaultHTTPClient] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            config: Client configuration
            auth: Auth method providing the token
            http: HTTP client wrapper (created from config if omitted)

        Note:
            Use Client.create() to get a logged in client.
        """
        self.config = config
        self.auth = auth
        self.http = http or VaultHTTPClient.create(config)

        # Serializes re-login and renewal
        self._session_lock = asyncio.Lock()
        self._renew_task: Optional["asyncio.Task[None]"] = None

        # Secret engines and auth backends
        self.kv2 = KV2Manager(self)
        self.database = DatabaseManager(self)
        self.approle = ApproleManager(self)

    @classmethod
    async def create(
        cls,
        auth: Auth,
        config: Optional[VaultConfig] = None,
        **kwargs,
    ) -> "Client":
        """
        Create a client and log in with the given auth method.

        Args:
            auth: Auth method to log in with
            config: Client configuration (loaded from env if omitted)
            **kwargs: Configuration overrides when no config is given

        Returns:
            Logged in Client

        Raises:
            TypeError: If both config and overrides are given
            ValidationError: If the configuration is invalid
            VaultError: If the login fails

        Example:
            ```python
            # Load the server address from environment (.env file or VAULT_* env vars)
            client = await Client.create(auth)

            # Explicit configuration
            client = await Client.create(
                auth,
                vault_url="https://vault.example.com:8200",
                renew_policy="renew",
            )
            ```
        """
        if config is None:
            config = load_config(**kwargs)
        elif kwargs:
            raise TypeError(
                f"Pass either config or configuration overrides, not both: {sorted(kwargs)}"
            )

        client = cls(config=config, auth=auth)
        try:
            await client.login()
        except VaultError:
            await client.http.close()
            raise
        return client

    @classmethod
    async def new_approle(
        cls,
        vault_url: str,
        role_id: str,
        secret_id: str,
        **kwargs,
    ) -> "Client":
        """
        Create a client logged in with AppRole credentials.

        Example:
            ```python
            client = await Client.new_approle("http://127.0.0.1:8200", role_id, secret_id)
            ```
        """
        auth = ApproleSession(role_id=role_id, secret_id=secret_id)
        return await cls.create(auth, vault_url=vault_url, **kwargs)

    @classmethod
    async def new_token(
        cls,
        vault_url: str,
        token: str,
        duration: int,
        **kwargs,
    ) -> "Client":
        """
        Create a client using an existing token valid for `duration` seconds.
        """
        auth = TokenSession(token, duration=duration)
        return await cls.create(auth, vault_url=vault_url, **kwargs)

    @classmethod
    async def create_renewing(
        cls,
        auth: Auth,
        config: Optional[VaultConfig] = None,
        **kwargs,
    ) -> "Client":
        """
        Create a client and start renewing its session in the background.

        The renew policy must be RENEW, otherwise the background task ends
        right away with RenewNotEnabledError (logged).

        Example:
            ```python
            client = await Client.create_renewing(auth, renew_policy="renew")
            ```
        """
        client = await cls.create(auth, config=config, **kwargs)
        client.start_renewal()
        return client

    async def login(self) -> None:
        """Log in with the auth method, replacing the current token."""
        await self.auth.auth(self.http)

    def get_token(self) -> str:
        """
        Return the token of the current session.

        Prefer vault_request(), which also keeps the session valid.
        """
        return self.auth.get_token()

    def is_expired(self) -> bool:
        return self.auth.is_expired()

    async def check_session(self) -> None:
        """
        Make sure the session is valid before a request.

        Under RenewPolicy.REAUTH an expired session triggers exactly one
        new login, even with many concurrent callers.

        Raises:
            SessionExpiredError: If the session expired and the policy
                does not allow logging in again
            VaultError: If the new login fails
        """
        if not self.auth.is_expired():
            return

        async with self._session_lock:
            # Another caller may have logged in while we waited
            if not self.auth.is_expired():
                return

            if self.config.renew_policy != RenewPolicy.REAUTH:
                raise SessionExpiredError()

            logger.warning("Vault session expired, logging in again")
            await self.login()

    async def vault_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """
        Send an authenticated request to Vault.

        This can be used for custom requests or for endpoints not directly
        covered by this library.

        Args:
            method: HTTP method (GET, POST, DELETE, LIST, ...)
            path: API path relative to /v1/ (e.g., "sys/mounts")
            body: Optional JSON body, a dict or a pydantic model
            params: Optional query parameters

        Returns:
            httpx.Response with status 200 or 204

        Raises:
            SessionExpiredError: If the session expired and can't be renewed
            RequestError: If the request could not be sent
            VaultStatusError: If Vault answered with an error status

        Example:
            ```python
            response = await client.vault_request("POST", "sys/policies/acl/app", {"policy": hcl})
            ```
        """
        await self.check_session()
        return await self.http.request(
            method,
            path,
            body=body,
            token=self.auth.get_token(),
            params=params,
        )

    async def renew_background(self) -> None:
        """
        Keep the session alive by renewing the token before it expires.

        Runs until an error occurs, so it is meant to run as its own task
        (see start_renewal()). Each round waits for (1 - renew_threshold) of
        the token's lifetime and then renews it.

        Raises:
            RenewNotEnabledError: If the renew policy is not RENEW
            NotRenewableError: If the token can't be renewed (any more)
            RenewAuthError: If Vault rejected the renewal
        """
        if self.config.renew_policy != RenewPolicy.RENEW:
            raise RenewNotEnabledError()

        wait_fraction = 1.0 - self.config.renew_threshold

        while True:
            total_duration = self.auth.get_total_duration()
            # A zero lease has nothing left to renew
            if not self.auth.is_renewable() or total_duration <= 0:
                raise NotRenewableError()

            wait_seconds = total_duration * wait_fraction
            logger.debug("Next session renewal in %.1f seconds", wait_seconds)
            await asyncio.sleep(wait_seconds)

            async with self._session_lock:
                try:
                    await self.auth.renew(self.http)
                except VaultError as e:
                    raise RenewAuthError(e) from e

    def start_renewal(self) -> "asyncio.Task[None]":
        """
        Run renew_background() as a task on the running event loop.

        The task is cancelled by close(); its terminal error is logged.

        Returns:
            The renewal task
        """
        if self._renew_task is not None and not self._renew_task.done():
            return self._renew_task

        self._renew_task = asyncio.create_task(self.renew_background())
        self._renew_task.add_done_callback(_log_renewal_result)
        return self._renew_task

    async def close(self) -> None:
        """
        Stop background renewal and close the HTTP client.

        Example:
            ```python
            client = await Client.create(auth)
            try:
                # ... use client
                pass
            finally:
                await client.close()
            ```
        """
        if self._renew_task is not None and not self._renew_task.done():
            self._renew_task.cancel()
            try:
                await self._renew_task
            except asyncio.CancelledError:
                pass
        await self.http.close()

    async def __aenter__(self) -> "Client":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def _log_renewal_result(task: "asyncio.Task[None]") -> None:
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.error("Vault session renewal stopped: %s", error)

