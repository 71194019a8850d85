"""
CLI commands for the KV v2 secrets engine.
"""

import json
from typing import Dict, List, Optional

import typer
from rich.console import Console
from rich.table import Table

from ...kv2 import KV2Configuration
from ..session import connect, run

console = Console()
app = typer.Typer(help="Read and write KV v2 secrets")

MOUNT_OPTION = typer.Option("secret", "--mount", "-m", help="Mount point of the kv2 engine")


def parse_pairs(pairs: List[str]) -> Dict[str, str]:
    """Turn KEY=VALUE arguments into a dict."""
    data = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected KEY=VALUE, got {pair!r}")
        data[key] = value
    return data


@app.command("get")
def kv_get_command(
    name: str = typer.Argument(..., help="Path of the secret"),
    mount: str = MOUNT_OPTION,
    version: Optional[int] = typer.Option(None, "--version", "-v", help="Version to read"),
    as_json: bool = typer.Option(False, "--json", help="Print the secret as JSON"),
) -> None:
    """
    Read a secret.

    Example:
        $ hc-vault kv get app/db
        $ hc-vault kv get app/db --version 2 --json
    """

    async def _get():
        async with connect() as client:
            return await client.kv2.get(mount, name, version=version)

    data = run(_get())

    if as_json:
        console.print_json(json.dumps(data))
        return

    table = Table(title=f"{mount}/{name}")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in data.items():
        table.add_row(key, str(value))
    console.print(table)


@app.command("put")
def kv_put_command(
    name: str = typer.Argument(..., help="Path of the secret"),
    pairs: List[str] = typer.Argument(..., help="Secret data as KEY=VALUE pairs"),
    mount: str = MOUNT_OPTION,
    cas: Optional[int] = typer.Option(None, "--cas", help="Only write if the current version matches"),
) -> None:
    """
    Create or update a secret.

    Example:
        $ hc-vault kv put app/db username=app password=s3cret
    """
    data = parse_pairs(pairs)

    async def _put():
        async with connect() as client:
            return await client.kv2.update_set(mount, name, data, cas=cas)

    written = run(_put())

    console.print(f"[green]✓[/green] Secret written: {mount}/{name}")
    if written is not None and written.version is not None:
        console.print(f"  Version: [cyan]{written.version}[/cyan]")


@app.command("delete")
def kv_delete_command(
    name: str = typer.Argument(..., help="Path of the secret"),
    mount: str = MOUNT_OPTION,
    versions: Optional[List[int]] = typer.Option(
        None, "--version", "-v", help="Versions to delete (latest if omitted)"
    ),
) -> None:
    """Soft delete the latest or the given versions of a secret."""

    async def _delete():
        async with connect() as client:
            if versions:
                await client.kv2.delete_versions(mount, name, versions)
            else:
                await client.kv2.delete(mount, name)

    run(_delete())
    console.print(f"[green]✓[/green] Deleted: {mount}/{name}")


@app.command("undelete")
def kv_undelete_command(
    name: str = typer.Argument(..., help="Path of the secret"),
    versions: List[int] = typer.Option(..., "--version", "-v", help="Versions to restore"),
    mount: str = MOUNT_OPTION,
) -> None:
    """Restore soft deleted versions of a secret."""

    async def _undelete():
        async with connect() as client:
            await client.kv2.undelete_versions(mount, name, versions)

    run(_undelete())
    console.print(f"[green]✓[/green] Restored versions {versions} of {mount}/{name}")


@app.command("destroy")
def kv_destroy_command(
    name: str = typer.Argument(..., help="Path of the secret"),
    versions: Optional[List[int]] = typer.Option(
        None, "--version", "-v", help="Versions to destroy"
    ),
    all_versions: bool = typer.Option(
        False, "--all", help="Remove the key with all versions and metadata"
    ),
    mount: str = MOUNT_OPTION,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """
    Permanently destroy versions of a secret.

    Example:
        $ hc-vault kv destroy app/db -v 1 -v 2
        $ hc-vault kv destroy app/db --all --yes
    """
    if not versions and not all_versions:
        raise typer.BadParameter("Pass --version or --all")

    if not yes:
        typer.confirm(f"Permanently destroy {mount}/{name}?", abort=True)

    async def _destroy():
        async with connect() as client:
            if all_versions:
                await client.kv2.delete_metadata_all_versions(mount, name)
            else:
                await client.kv2.destroy_versions(mount, name, versions)

    run(_destroy())
    console.print(f"[green]✓[/green] Destroyed: {mount}/{name}")


@app.command("list")
def kv_list_command(
    path: str = typer.Argument("", help="Folder to list"),
    mount: str = MOUNT_OPTION,
) -> None:
    """List the keys below a folder."""

    async def _list():
        async with connect() as client:
            return await client.kv2.list(mount, path)

    keys = run(_list())

    if not keys:
        console.print("[yellow]No keys found[/yellow]")
        return

    for key in keys:
        console.print(key)


@app.command("config")
def kv_config_command(
    mount: str = MOUNT_OPTION,
    max_versions: Optional[int] = typer.Option(None, "--max-versions", help="Versions to keep"),
    cas_required: Optional[bool] = typer.Option(
        None, "--cas-required/--no-cas-required", help="Require cas on every write"
    ),
    delete_version_after: Optional[str] = typer.Option(
        None, "--delete-version-after", help="Drop versions older than this (e.g. 768h)"
    ),
) -> None:
    """
    Show or change the configuration of a kv2 mount.

    Without options the current configuration is printed.
    """
    config = KV2Configuration(
        max_versions=max_versions,
        cas_required=cas_required,
        delete_version_after=delete_version_after,
    )
    changes = config.model_dump(exclude_none=True)

    async def _config():
        async with connect() as client:
            if changes:
                await client.kv2.configure(mount, config)
            return await client.kv2.get_configuration(mount)

    current = run(_config())

    table = Table(title=f"{mount} configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for key, value in current.model_dump().items():
        table.add_row(key, "-" if value is None else str(value))
    console.print(table)
