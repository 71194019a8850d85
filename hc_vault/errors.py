"""
Client exception hierarchy.

Exception hierarchy:
    VaultError (base)
    ├── RequestError - Transport failure talking to Vault
    ├── ParseError - Response body did not have the expected shape
    ├── CredentialsError - Local credentials missing or unreadable
    ├── SessionExpiredError - Session expired and no re-login is configured
    ├── VaultStatusError - Vault answered with an error status
    │   ├── InvalidRequestError (400)
    │   ├── UnauthorizedError (401, 403)
    │   ├── NotFoundError (404)
    │   ├── SealedError (503)
    │   └── UnexpectedStatusError (anything else)
    └── RenewError - Background renewal stopped
        ├── RenewNotEnabledError
        ├── NotRenewableError
        └── RenewAuthError

Messages carry paths and status codes only, never tokens or secret values.
"""

from typing import Optional


class VaultError(Exception):
    """Base exception for all client errors."""


class RequestError(VaultError):
    """The HTTP request to Vault failed before a response was received."""


class ParseError(VaultError):
    """The response from Vault could not be parsed."""


class CredentialsError(VaultError):
    """Credentials for an auth method are missing or could not be loaded."""


class SessionExpiredError(VaultError):
    """The session has expired and the client is not allowed to log in again."""

    def __init__(self, message: str = "Session has expired, no auto login") -> None:
        super().__init__(message)


class VaultStatusError(VaultError):
    """
    Vault rejected a request with an unexpected status code.

    Attributes:
        status_code: HTTP status returned by Vault
        path: API path the request was sent to, if known
    """

    default_message = "Unknown error"

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        path: Optional[str] = None,
    ) -> None:
        self.message = message or self.default_message
        self.status_code = status_code
        self.path = path
        super().__init__(self.message)

    def __str__(self) -> str:
        context_parts = []
        if self.status_code is not None:
            context_parts.append(f"status: {self.status_code}")
        if self.path:
            context_parts.append(f"path: {self.path}")

        if context_parts:
            return f"{self.message} ({', '.join(context_parts)})"
        return self.message


class InvalidRequestError(VaultStatusError):
    default_message = "Invalid Request: Invalid or Missing data"


class UnauthorizedError(VaultStatusError):
    default_message = "Unauthorized"


class NotFoundError(VaultStatusError):
    default_message = "Not Found"


class SealedError(VaultStatusError):
    default_message = "The Vault instance is still sealed and can't be used at the moment"


class UnexpectedStatusError(VaultStatusError):
    pass


_STATUS_ERRORS = {
    400: InvalidRequestError,
    401: UnauthorizedError,
    403: UnauthorizedError,
    404: NotFoundError,
    503: SealedError,
}


def error_from_status(status_code: int, path: Optional[str] = None) -> VaultStatusError:
    """
    Build the exception matching a Vault status code.

    Args:
        status_code: HTTP status returned by Vault
        path: API path of the failed request

    Returns:
        VaultStatusError subclass instance (not raised)

    Example:
        ```python
        raise error_from_status(404, "secret/data/missing")
        ```
    """
    error_cls = _STATUS_ERRORS.get(status_code, UnexpectedStatusError)
    return error_cls(status_code=status_code, path=path)


class RenewError(VaultError):
    """Base exception for errors ending the background renewal loop."""


class RenewNotEnabledError(RenewError):
    def __init__(self) -> None:
        super().__init__("The Renew Policy is not enabled")


class NotRenewableError(RenewError):
    def __init__(self) -> None:
        super().__init__("The current session can not be renewed")


class RenewAuthError(RenewError):
    """The auth backend failed to renew the session; the cause is chained."""

    def __init__(self, cause: VaultError) -> None:
        self.cause = cause
        super().__init__(f"Error returned by Auth-Backend: {cause}")
