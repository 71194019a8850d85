"""
Tests for hc_vault.kv2 module.
"""

import json

import httpx
import pytest
from pydantic import BaseModel

from hc_vault.errors import InvalidRequestError, NotFoundError, ParseError
from hc_vault.kv2 import KV2Configuration, SecretMetadata, SecretVersion

from conftest import api


class DBSecret(BaseModel):
    username: str
    password: str


def read_body(data, version=1):
    return {
        "data": {
            "data": data,
            "metadata": {
                "created_time": "2018-03-22T02:24:06.945319214Z",
                "custom_metadata": None,
                "deletion_time": "",
                "destroyed": False,
                "version": version,
            },
        }
    }


VERSION_BODY = {
    "data": {
        "created_time": "2018-03-22T02:36:43.986212308Z",
        "custom_metadata": None,
        "deletion_time": "",
        "destroyed": False,
        "version": 2,
    }
}


class TestConfiguration:
    """Tests for the mount configuration."""

    @pytest.mark.asyncio
    async def test_configure(self, token_client, vault_api):
        route = vault_api.post(api("secret/config")).mock(return_value=httpx.Response(204))

        await token_client.kv2.configure(
            "secret", KV2Configuration(max_versions=5, cas_required=False)
        )

        # Unset settings are not sent
        assert json.loads(route.calls.last.request.content) == {
            "max_versions": 5,
            "cas_required": False,
        }

    @pytest.mark.asyncio
    async def test_get_configuration(self, token_client, vault_api):
        vault_api.get(api("secret/config")).mock(
            return_value=httpx.Response(
                200,
                json={
                    "data": {
                        "cas_required": False,
                        "delete_version_after": "0s",
                        "max_versions": 0,
                    }
                },
            )
        )

        config = await token_client.kv2.get_configuration("secret")

        assert config == KV2Configuration(
            cas_required=False, delete_version_after="0s", max_versions=0
        )


class TestReadWrite:
    """Tests for reading and writing secrets."""

    @pytest.mark.asyncio
    async def test_get_latest(self, token_client, vault_api):
        route = vault_api.get(api("secret/data/app/db")).mock(
            return_value=httpx.Response(200, json=read_body({"password": "s3cret"}))
        )

        data = await token_client.kv2.get("secret", "app/db")

        assert data == {"password": "s3cret"}
        assert "version" not in route.calls.last.request.url.params

    @pytest.mark.asyncio
    async def test_get_version_into_model(self, token_client, vault_api):
        route = vault_api.get(api("secret/data/app/db")).mock(
            return_value=httpx.Response(
                200, json=read_body({"username": "app", "password": "s3cret"}, version=3)
            )
        )

        creds = await token_client.kv2.get("secret", "app/db", version=3, model=DBSecret)

        assert creds == DBSecret(username="app", password="s3cret")
        assert route.calls.last.request.url.params["version"] == "3"

    @pytest.mark.asyncio
    async def test_get_model_mismatch(self, token_client, vault_api):
        vault_api.get(api("secret/data/app/db")).mock(
            return_value=httpx.Response(200, json=read_body({"other": "value"}))
        )

        with pytest.raises(ParseError):
            await token_client.kv2.get("secret", "app/db", model=DBSecret)

    @pytest.mark.asyncio
    async def test_get_missing(self, token_client, vault_api):
        vault_api.get(api("secret/data/missing")).mock(return_value=httpx.Response(404))

        with pytest.raises(NotFoundError):
            await token_client.kv2.get("secret", "missing")

    @pytest.mark.asyncio
    async def test_update_set(self, token_client, vault_api):
        route = vault_api.post(api("secret/data/app")).mock(
            return_value=httpx.Response(200, json=VERSION_BODY)
        )

        version = await token_client.kv2.update_set("secret", "app", {"key": "value"})

        assert json.loads(route.calls.last.request.content) == {"data": {"key": "value"}}
        assert isinstance(version, SecretVersion)
        assert version.version == 2
        assert version.destroyed is False

    @pytest.mark.asyncio
    async def test_update_set_model_with_cas(self, token_client, vault_api):
        route = vault_api.post(api("secret/data/app")).mock(
            return_value=httpx.Response(200, json=VERSION_BODY)
        )

        await token_client.kv2.update_set(
            "secret", "app", DBSecret(username="app", password="pw"), cas=0
        )

        assert json.loads(route.calls.last.request.content) == {
            "data": {"username": "app", "password": "pw"},
            "options": {"cas": 0},
        }

    @pytest.mark.asyncio
    async def test_update_set_cas_mismatch(self, token_client, vault_api):
        vault_api.post(api("secret/data/app")).mock(return_value=httpx.Response(400))

        with pytest.raises(InvalidRequestError):
            await token_client.kv2.update_set("secret", "app", {"key": "value"}, cas=1)

    @pytest.mark.asyncio
    async def test_update_set_no_content(self, token_client, vault_api):
        vault_api.post(api("secret/data/app")).mock(return_value=httpx.Response(204))

        assert await token_client.kv2.update_set("secret", "app", {"k": "v"}) is None


class TestVersions:
    """Tests for deleting, restoring and destroying versions."""

    @pytest.mark.asyncio
    async def test_delete_latest(self, token_client, vault_api):
        route = vault_api.delete(api("secret/data/app")).mock(
            return_value=httpx.Response(204)
        )

        await token_client.kv2.delete("secret", "app")

        assert route.called

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method_name,endpoint",
        [
            ("delete_versions", "delete"),
            ("undelete_versions", "undelete"),
            ("destroy_versions", "destroy"),
        ],
    )
    async def test_version_operations(self, token_client, vault_api, method_name, endpoint):
        route = vault_api.post(api(f"secret/{endpoint}/app")).mock(
            return_value=httpx.Response(204)
        )

        await getattr(token_client.kv2, method_name)("secret", "app", [1, 2])

        assert json.loads(route.calls.last.request.content) == {"versions": [1, 2]}

    @pytest.mark.asyncio
    async def test_delete_metadata_all_versions(self, token_client, vault_api):
        route = vault_api.delete(api("secret/metadata/app")).mock(
            return_value=httpx.Response(204)
        )

        await token_client.kv2.delete_metadata_all_versions("secret", "app")

        assert route.called


class TestMetadata:
    """Tests for listing and metadata."""

    @pytest.mark.asyncio
    async def test_list(self, token_client, vault_api):
        route = vault_api.route(method="LIST", url=api("secret/metadata/app")).mock(
            return_value=httpx.Response(200, json={"data": {"keys": ["db", "cache/"]}})
        )

        keys = await token_client.kv2.list("secret", "app")

        assert keys == ["db", "cache/"]
        assert route.calls.last.request.headers["X-Vault-Token"] == "testToken"

    @pytest.mark.asyncio
    async def test_list_missing_path(self, token_client, vault_api):
        vault_api.route(method="LIST", url=api("secret/metadata/empty")).mock(
            return_value=httpx.Response(404)
        )

        assert await token_client.kv2.list("secret", "empty") == []

    @pytest.mark.asyncio
    async def test_read_metadata(self, token_client, vault_api):
        vault_api.get(api("secret/metadata/app")).mock(
            return_value=httpx.Response(
                200,
                json={
                    "data": {
                        "cas_required": False,
                        "created_time": "2018-03-22T02:24:06.945319214Z",
                        "current_version": 3,
                        "delete_version_after": "3h25m19s",
                        "max_versions": 0,
                        "oldest_version": 0,
                        "updated_time": "2018-03-22T02:36:43.986212308Z",
                        "custom_metadata": {"owner": "team"},
                        "versions": {
                            "1": {
                                "created_time": "2018-03-22T02:24:06.945319214Z",
                                "deletion_time": "",
                                "destroyed": False,
                            },
                            "2": {
                                "created_time": "2018-03-22T02:36:33.954880664Z",
                                "deletion_time": "",
                                "destroyed": True,
                            },
                        },
                    }
                },
            )
        )

        metadata = await token_client.kv2.read_metadata("secret", "app")

        assert isinstance(metadata, SecretMetadata)
        assert metadata.current_version == 3
        assert metadata.custom_metadata == {"owner": "team"}
        assert metadata.versions["2"].destroyed is True

    @pytest.mark.asyncio
    async def test_update_metadata(self, token_client, vault_api):
        route = vault_api.post(api("secret/metadata/app")).mock(
            return_value=httpx.Response(204)
        )

        await token_client.kv2.update_metadata(
            "secret", "app", max_versions=10, custom_metadata={"owner": "team"}
        )

        assert json.loads(route.calls.last.request.content) == {
            "max_versions": 10,
            "custom_metadata": {"owner": "team"},
        }
