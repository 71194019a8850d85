"""
Token auth method.

Uses an existing Vault token instead of logging in.
"""

import logging
from datetime import timedelta
from typing import TYPE_CHECKING, Union

from .base import Auth, TokenState

if TYPE_CHECKING:
    from ..utils.http import VaultHTTPClient

logger = logging.getLogger(__name__)


class TokenSession(Auth):
    """
    Auth session wrapping a token obtained elsewhere.

    The duration is counted from construction; there are no credentials to
    log in again with, so auth() keeps the token as it is.

    Example:
        ```python
        auth = TokenSession("hvs.CAESIJ...", duration=3600)
        ```
    """

    def __init__(
        self,
        token: str,
        duration: Union[int, timedelta],
        renewable: bool = True,
    ) -> None:
        super().__init__()
        if isinstance(duration, timedelta):
            duration = int(duration.total_seconds())
        self._state = TokenState(token=token, duration=duration, renewable=renewable)

    async def auth(self, http: "VaultHTTPClient") -> None:
        if self.is_expired():
            logger.warning("Token session has expired and cannot log in again")
