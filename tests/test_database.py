"""
Tests for hc_vault.database module.
"""

from datetime import timedelta

import httpx
import pytest

from hc_vault.database import DatabaseCredentials, DatabaseManager
from hc_vault.errors import NotFoundError

from conftest import api

CREDS_BODY = {
    "lease_id": "database/creds/readonly/2f6a614c-4aa2-7b19-24b9-ad944a8d4de6",
    "lease_duration": 3600,
    "renewable": True,
    "data": {
        "username": "v-token-readonly-1234",
        "password": "A1a-generated",
    },
}


class TestDatabaseManager:
    """Tests for DatabaseManager class."""

    @pytest.mark.asyncio
    async def test_get_credentials(self, token_client, vault_api):
        route = vault_api.get(api("database/creds/readonly")).mock(
            return_value=httpx.Response(200, json=CREDS_BODY)
        )

        creds = await token_client.database.get_credentials("readonly")

        assert route.calls.last.request.headers["X-Vault-Token"] == "testToken"
        assert isinstance(creds, DatabaseCredentials)
        assert creds.username == "v-token-readonly-1234"
        assert creds.password == "A1a-generated"
        assert creds.lease_id == CREDS_BODY["lease_id"]
        assert creds.renewable is True
        assert creds.duration == timedelta(hours=1)

    @pytest.mark.asyncio
    async def test_custom_mount(self, token_client, vault_api):
        route = vault_api.get(api("postgres/creds/app")).mock(
            return_value=httpx.Response(200, json=CREDS_BODY)
        )
        manager = DatabaseManager(token_client, mount="/postgres/")

        await manager.get_credentials("app")

        assert route.called

    @pytest.mark.asyncio
    async def test_unknown_role(self, token_client, vault_api):
        vault_api.get(api("database/creds/missing")).mock(return_value=httpx.Response(404))

        with pytest.raises(NotFoundError):
            await token_client.database.get_credentials("missing")


def test_repr_hides_password():
    creds = DatabaseCredentials(username="app", password="hunter2", lease_duration=60)

    assert "hunter2" not in repr(creds)
    assert "app" in repr(creds)


def test_str_hides_password():
    """Formatting the credentials into a log line must not leak the password."""
    creds = DatabaseCredentials(username="app", password="hunter2", lease_duration=60)

    assert "hunter2" not in str(creds)
    assert "hunter2" not in f"{creds}"
    assert "username='app'" in str(creds)
    assert creds.password == "hunter2"
