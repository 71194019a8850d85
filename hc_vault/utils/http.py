"""
HTTP client wrapper for talking to Vault.

Provides a thin wrapper around httpx.AsyncClient with the Vault API base URL
and the response handling shared by the client and the auth methods.
"""

import logging
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..config import VaultConfig
from ..errors import ParseError, RequestError, error_from_status

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

SUCCESS_STATUS_CODES = (200, 204)


class VaultHTTPClient:
    """
    Wrapper around httpx.AsyncClient configured for the Vault HTTP API.

    This class provides:
    1. A pooled client rooted at <vault_url>/v1/
    2. Token and request headers on every call
    3. Status code to exception mapping
    4. JSON body serialization for dicts and pydantic models

    Example:
        ```python
        from hc_vault.config import VaultConfig
        from hc_vault.utils.http import VaultHTTPClient

        http = VaultHTTPClient.create(VaultConfig())
        response = await http.request("GET", "sys/health")
        await http.close()
        ```
    """

    def __init__(self, config: VaultConfig, client: httpx.AsyncClient) -> None:
        """
        Initialize the HTTP client wrapper.

        Args:
            config: Client configuration
            client: httpx client whose base_url is the Vault API root

        Note:
            Use VaultHTTPClient.create() instead of direct instantiation.
        """
        self.config = config
        self._client = client

    @classmethod
    def create(cls, config: VaultConfig) -> "VaultHTTPClient":
        """
        Create a VaultHTTPClient for the configured server.

        Args:
            config: Client configuration

        Returns:
            VaultHTTPClient instance
        """
        client = httpx.AsyncClient(
            base_url=config.api_url,
            timeout=config.timeout,
            verify=config.verify_tls,
        )
        return cls(config=config, client=client)

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        token: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """
        Send a request to the Vault API and check its status.

        Args:
            method: HTTP method (GET, POST, LIST, ...)
            path: API path relative to /v1/ (e.g., "secret/data/app")
            body: Optional JSON body, a dict or a pydantic model
            token: Vault token for the X-Vault-Token header
            params: Optional query parameters

        Returns:
            httpx.Response with status 200 or 204

        Raises:
            RequestError: If the request could not be sent
            VaultStatusError: If Vault answered with another status
        """
        path = path.lstrip("/")
        headers = {"X-Vault-Request": "true"}
        if token:
            headers["X-Vault-Token"] = token

        logger.debug("Vault request %s %s", method.upper(), path)

        try:
            response = await self._client.request(
                method.upper(),
                path,
                json=serialize_body(body),
                headers=headers,
                params=params,
            )
        except httpx.HTTPError as e:
            raise RequestError(f"Request to {path} failed: {e}") from e

        if response.status_code not in SUCCESS_STATUS_CODES:
            logger.debug(
                "Vault request %s %s returned %s",
                method.upper(),
                path,
                response.status_code,
            )
            raise error_from_status(response.status_code, path)

        return response

    async def close(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()


def serialize_body(body: Any) -> Any:
    """
    Convert a request body into JSON-ready data.

    Pydantic models are dumped without unset (None) fields so optional
    settings are not sent to Vault.
    """
    if body is None:
        return None
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", exclude_none=True)
    return body


def parse_response(response: httpx.Response, model: Type[ModelT]) -> ModelT:
    """
    Parse a JSON response body into a pydantic model.

    Args:
        response: Successful response from Vault
        model: Model describing the expected body

    Returns:
        Parsed model instance

    Raises:
        ParseError: If the body is not JSON or does not match the model
    """
    try:
        return model.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        raise ParseError(
            f"Unexpected response body from {response.request.url.path}: {e}"
        ) from e
