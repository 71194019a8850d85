"""
Pytest configuration and fixtures for hc_vault tests.

Provides a mocked Vault HTTP API (respx) and test fixtures.
"""

from typing import Any, Dict, List, Optional

import pytest
import respx

from hc_vault.auth import TokenSession
from hc_vault.client import Client
from hc_vault.config import VaultConfig

VAULT_URL = "http://vault.test"


def api(path: str) -> str:
    """Full URL of an API path on the mocked server."""
    return f"{VAULT_URL}/v1/{path}"


def login_body(
    client_token: str = "testToken",
    lease_duration: int = 120,
    renewable: bool = True,
    policies: Optional[List[str]] = None,
    **auth_extra: Any,
) -> Dict[str, Any]:
    """Body of a successful login or renew-self response."""
    auth = {
        "client_token": client_token,
        "accessor": "testAccessor",
        "policies": policies or ["test"],
        "token_policies": policies or ["test"],
        "lease_duration": lease_duration,
        "renewable": renewable,
    }
    auth.update(auth_extra)
    return {
        "auth": auth,
        "lease_id": "",
        "lease_duration": 0,
        "renewable": False,
    }


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep the developer's Vault environment out of the tests."""
    for name in (
        "VAULT_URL",
        "VAULT_ADDR",
        "VAULT_TOKEN",
        "VAULT_TOKEN_DURATION",
        "VAULT_RENEW_POLICY",
        "VAULT_RENEW_THRESHOLD",
        "VAULT_TIMEOUT",
        "VAULT_VERIFY_TLS",
        "VAULT_DEBUG",
        "APPROLE_ID",
        "APPROLE_SECRET",
        "VAULT_ROLE",
    ):
        monkeypatch.delenv(name, raising=False)
    # No stray .env file either
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def vault_api():
    """Mocked Vault HTTP API; register routes with api(path)."""
    with respx.mock(assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def vault_config():
    """Create a test VaultConfig."""
    return VaultConfig(vault_url=VAULT_URL)


@pytest.fixture
async def token_client(vault_config):
    """Client using a raw token valid for two minutes."""
    client = Client(config=vault_config, auth=TokenSession("testToken", duration=120))
    yield client
    await client.close()
