"""
Kubernetes auth method.

Logs in with the JWT of a pod's service account.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Dict, Optional, Union

from ..errors import CredentialsError
from ..utils.http import parse_response
from .base import Auth
from .models import KubernetesLogin, LoginResponse

if TYPE_CHECKING:
    from ..utils.http import VaultHTTPClient

KUBERNETES_LOGIN_PATH = "auth/kubernetes/login"
DEFAULT_JWT_PATH = "/var/run/secrets/kubernetes.io/serviceaccount/token"


class KubernetesSession(Auth):
    """
    Auth session for the kubernetes backend.

    After login, `metadata` holds the service account details Vault
    resolved the JWT to (service_account_name, namespace, ...).

    Example:
        ```python
        auth = KubernetesSession(role="my-app", jwt=load_jwt())
        client = await Client.create(auth)
        ```
    """

    def __init__(self, role: str, jwt: str) -> None:
        super().__init__()
        self.kubernetes = KubernetesLogin(role=role, jwt=jwt)
        self.metadata: Optional[Dict[str, str]] = None

    async def auth(self, http: "VaultHTTPClient") -> None:
        """Log in through auth/kubernetes/login."""
        response = await http.request(
            "POST", KUBERNETES_LOGIN_PATH, body=self.kubernetes
        )
        data = parse_response(response, LoginResponse)
        self.metadata = data.auth.metadata
        self._store_login(data)


def load_jwt(path: Union[str, Path] = DEFAULT_JWT_PATH) -> str:
    """
    Read the service account JWT mounted into the pod.

    Args:
        path: Token file, defaults to the standard service account mount

    Returns:
        The JWT with surrounding whitespace removed

    Raises:
        CredentialsError: If the file cannot be read
    """
    try:
        return Path(path).read_text(encoding="utf-8").strip()
    except OSError as e:
        raise CredentialsError(f"Could not read service account token {path}: {e}") from e
