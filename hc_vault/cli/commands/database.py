"""
CLI commands for the database secrets engine.
"""

import typer
from rich.console import Console

from ..session import connect, run

console = Console()
app = typer.Typer(help="Generate database credentials")


@app.command("creds")
def db_creds_command(
    role: str = typer.Argument(..., help="Database role to generate credentials for"),
) -> None:
    """
    Generate credentials for a database role.

    Example:
        $ hc-vault db creds readonly
    """

    async def _creds():
        async with connect() as client:
            return await client.database.get_credentials(role)

    creds = run(_creds())

    console.print(f"[green]✓[/green] Credentials for role {role}")
    console.print(f"  Username: [cyan]{creds.username}[/cyan]")
    console.print(f"  Password: [cyan]{creds.password}[/cyan]")
    console.print(f"  Lease: {creds.lease_id or '-'} ({creds.duration})")
