"""
CLI commands for AppRole role management.
"""

from typing import List, Optional

import typer
from rich.console import Console

from ...approle import ApproleOptions
from ..session import connect, run

console = Console()
app = typer.Typer(help="Manage AppRole roles")


@app.command("create")
def approle_create_command(
    name: str = typer.Argument(..., help="Name of the role"),
    policies: Optional[List[str]] = typer.Option(
        None, "--policy", "-p", help="Policy attached to issued tokens (repeatable)"
    ),
    token_ttl: Optional[int] = typer.Option(None, "--token-ttl", help="Token TTL in seconds"),
    token_max_ttl: Optional[int] = typer.Option(
        None, "--token-max-ttl", help="Maximum token TTL in seconds"
    ),
    secret_id_ttl: Optional[str] = typer.Option(
        None, "--secret-id-ttl", help="TTL of secret IDs (e.g. 30m)"
    ),
    secret_id_num_uses: Optional[int] = typer.Option(
        None, "--secret-id-num-uses", help="Logins per secret ID (0 = unlimited)"
    ),
) -> None:
    """
    Create or update a role.

    Example:
        $ hc-vault approle create my-app -p app -p default --token-ttl 3600
    """
    options = ApproleOptions(
        token_policies=policies or None,
        token_ttl=token_ttl,
        token_max_ttl=token_max_ttl,
        secret_id_ttl=secret_id_ttl,
        secret_id_num_uses=secret_id_num_uses,
    )

    async def _create():
        async with connect() as client:
            await client.approle.create_update(name, options)

    run(_create())
    console.print(f"[green]✓[/green] Role saved: {name}")


@app.command("role-id")
def approle_role_id_command(
    name: str = typer.Argument(..., help="Name of the role"),
) -> None:
    """Print the role ID of a role."""

    async def _role_id():
        async with connect() as client:
            return await client.approle.read_role_id(name)

    console.print(run(_role_id()))


@app.command("secret-id")
def approle_secret_id_command(
    name: str = typer.Argument(..., help="Name of the role"),
    ttl: Optional[str] = typer.Option(None, "--ttl", help="TTL of the secret ID (e.g. 30m)"),
    num_uses: Optional[int] = typer.Option(None, "--num-uses", help="Logins allowed"),
) -> None:
    """
    Generate a new secret ID for a role.

    Example:
        $ hc-vault approle secret-id my-app --ttl 30m
    """

    async def _secret_id():
        async with connect() as client:
            return await client.approle.generate_secret_id(name, ttl=ttl, num_uses=num_uses)

    secret = run(_secret_id())

    console.print("[bold red]IMPORTANT:[/bold red] Save this secret ID now. It cannot be retrieved again!")
    console.print(f"[bold cyan]Secret ID:[/bold cyan] {secret.secret_id}")
    console.print(f"  Accessor: {secret.secret_id_accessor}")
