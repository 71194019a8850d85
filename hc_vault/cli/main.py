"""
hc-vault CLI - Command-line interface for a Vault server.

Usage:
    hc-vault kv             Read and write KV v2 secrets
    hc-vault db             Generate database credentials
    hc-vault approle        Manage AppRole roles

Credentials are read from the environment: VAULT_TOKEN, APPROLE_ID and
APPROLE_SECRET, or VAULT_ROLE for kubernetes auth. The server address comes
from VAULT_URL (or VAULT_ADDR).
"""

import logging

import typer
from rich.logging import RichHandler

from .commands import approle, database, kv

# Create the main Typer app
app = typer.Typer(
    name="hc-vault",
    help="Async client for the HashiCorp Vault HTTP API",
    add_completion=False,
)

app.add_typer(kv.app, name="kv")
app.add_typer(database.app, name="db")
app.add_typer(approle.app, name="approle")


def configure_logging(debug: bool) -> None:
    """Send library logs through rich; DEBUG shows every request."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


@app.callback()
def callback(
    debug: bool = typer.Option(
        False, "--debug", envvar="VAULT_DEBUG", help="Enable debug logging"
    ),
) -> None:
    """
    hc-vault - talk to HashiCorp Vault from the command line.
    """
    configure_logging(debug)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
