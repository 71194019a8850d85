"""
Basic hc_vault usage example.

This example demonstrates the core features of the client:
- AppRole login
- Writing, reading and versioning KV v2 secrets
- Dynamic database credentials
- Raw requests for endpoints without a helper

Run with:
    VAULT_URL=http://127.0.0.1:8200 APPROLE_ID=... APPROLE_SECRET=... \
        python examples/basic_usage.py
"""

import asyncio

from pydantic import BaseModel

from hc_vault import Client, env_approle
from hc_vault.errors import NotFoundError


class AppSecret(BaseModel):
    username: str
    password: str


async def main():
    # Server address from VAULT_URL, credentials from APPROLE_ID/APPROLE_SECRET
    client = await Client.create(env_approle())

    try:
        # =================================================================
        # 1. Write a Secret
        # =================================================================
        print("Writing secret...")

        written = await client.kv2.update_set(
            "secret",
            "example/app",
            {"username": "app", "password": "first-password"},
        )
        print(f"  Written version: {written.version if written else '-'}")

        await client.kv2.update_set(
            "secret",
            "example/app",
            AppSecret(username="app", password="second-password"),
        )
        print("  Written second version")

        # =================================================================
        # 2. Read it Back
        # =================================================================
        print("\nReading secret...")

        latest = await client.kv2.get("secret", "example/app", model=AppSecret)
        print(f"  Latest password: {latest.password}")

        first = await client.kv2.get("secret", "example/app", version=1)
        print(f"  First password: {first['password']}")

        metadata = await client.kv2.read_metadata("secret", "example/app")
        print(f"  Current version: {metadata.current_version}")

        keys = await client.kv2.list("secret", "example")
        print(f"  Keys in secret/example: {keys}")

        # =================================================================
        # 3. Database Credentials
        # =================================================================
        print("\nGenerating database credentials...")

        try:
            creds = await client.database.get_credentials("readonly")
            print(f"  Username: {creds.username}")
            print(f"  Valid for: {creds.duration}")
        except NotFoundError:
            print("  No database role 'readonly' configured")

        # =================================================================
        # 4. Raw Requests
        # =================================================================
        print("\nListing mounts...")

        response = await client.vault_request("GET", "sys/mounts")
        print(f"  Mounts: {', '.join(response.json()['data'])}")

        # =================================================================
        # 5. Cleanup
        # =================================================================
        print("\nCleaning up...")

        await client.kv2.delete_metadata_all_versions("secret", "example/app")
        print("  Deleted secret/example/app")

        print("\nDone!")

    finally:
        await client.close()


if __name__ == "__main__":
    asyncio.run(main())
