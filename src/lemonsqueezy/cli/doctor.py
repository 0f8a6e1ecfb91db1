"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from lemonsqueezy.adapters.http_client import build_async_client
from lemonsqueezy.client import LemonSqueezy
from lemonsqueezy.core.config import API_BASE_URL, ClientSettings, write_user_env_vars
from lemonsqueezy.core.domain.models import FetchResponse
from lemonsqueezy.resources.users import get_authenticated_user

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: ClientSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or exc.__class__.__name__


async def _check_user(settings: ClientSettings) -> FetchResponse:
    return await LemonSqueezy.from_settings(settings).call(get_authenticated_user)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = ClientSettings()

    table = Table(title="lemonsqueezy doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    has_key = bool(settings.api_key)
    if has_key:
        table.add_row("API key", "OK", "LEMONSQUEEZY_API_KEY set")
    else:
        table.add_row("API key", "MISSING", "Run `lemonsqueezy doctor setup` or set LEMONSQUEEZY_API_KEY")
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    ok_http, detail_http = asyncio.run(_check_http(API_BASE_URL, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    if has_key and ok_http:
        response = asyncio.run(_check_user(settings))
        if response.error is None:
            attributes = (response.data or {}).get("data", {}).get("attributes", {})
            table.add_row("Authentication", "OK", str(attributes.get("email", "")))
        else:
            table.add_row("Authentication", "FAIL", f"{response.status_code}: {response.error}")

    _console.print(table)

    if not has_key:
        _console.print(
            "\n[yellow]Note:[/yellow] license activation/validation works without an API key."
        )


@app.command(name="setup")
def setup() -> None:
    """Store the API key in the user config .env (no manual editing)."""

    api_key = typer.prompt("Lemon Squeezy API key", hide_input=True).strip()
    if not api_key:
        raise typer.BadParameter("api key is required")

    env_path = write_user_env_vars({"LEMONSQUEEZY_API_KEY": api_key})
    _console.print(f"[green]Saved API key to:[/green] {env_path}")
