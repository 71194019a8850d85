"""
Shared plumbing for CLI commands: connecting and running coroutines.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Coroutine, TypeVar

import typer
from pydantic import ValidationError
from rich.console import Console

from ..auth import auth_from_env
from ..client import Client
from ..config import load_config
from ..errors import VaultError

console = Console()

T = TypeVar("T")


@asynccontextmanager
async def connect() -> AsyncIterator[Client]:
    """Log in with the auth method found in the environment."""
    config = load_config()
    client = await Client.create(auth_from_env(config), config=config)
    try:
        yield client
    finally:
        await client.close()


def run(coro: Coroutine[Any, Any, T]) -> T:
    """
    Run a command coroutine, turning client errors into exit code 1.
    """
    try:
        return asyncio.run(coro)
    except (VaultError, ValidationError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
