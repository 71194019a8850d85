"""
Background renewal example.

This example shows how to:
- Create an AppRole with short-lived tokens
- Log in with the new role
- Keep the session alive with the renew policy

Run with:
    VAULT_URL=http://127.0.0.1:8200 VAULT_TOKEN=<admin token> \
        python examples/renew_background.py
"""

import asyncio
import logging

from hc_vault import ApproleOptions, ApproleSession, Client, RenewPolicy, load_config


async def main():
    logging.basicConfig(level=logging.INFO)

    # Admin client with the token from VAULT_TOKEN
    config = load_config()
    admin = await Client.new_token(config.vault_url, config.token, config.token_duration)

    try:
        # =================================================================
        # 1. Create a Role
        # =================================================================
        print("Creating role...")

        await admin.approle.create_update(
            "renew-example",
            ApproleOptions(token_policies=["default"], token_ttl=20, token_max_ttl=300),
        )
        role_id = await admin.approle.read_role_id("renew-example")
        secret = await admin.approle.generate_secret_id("renew-example", ttl="10m")
        print(f"  Role ID: {role_id}")
    finally:
        await admin.close()

    # =================================================================
    # 2. Renew in the Background
    # =================================================================
    print("\nLogging in with renewal...")

    client = await Client.create_renewing(
        ApproleSession(role_id, secret.secret_id),
        vault_url=config.vault_url,
        renew_policy=RenewPolicy.RENEW,
        renew_threshold=0.5,
    )

    try:
        # The token lives 20 seconds and is renewed every 10
        for _ in range(4):
            await asyncio.sleep(15)
            response = await client.vault_request("GET", "auth/token/lookup-self")
            print(f"  Token TTL: {response.json()['data']['ttl']}s")

        print("\nDone!")
    finally:
        await client.close()


if __name__ == "__main__":
    asyncio.run(main())
