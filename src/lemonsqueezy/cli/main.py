"""CLI principal (Typer).

Comandos de consulta rápida sobre el API; la lógica vive en `resources/`.
"""

from __future__ import annotations

import asyncio
import logging

import typer
from rich.console import Console

from lemonsqueezy.cli import doctor
from lemonsqueezy.cli.ui_components import (
    build_license_panel,
    build_stores_table,
    build_user_panel,
    print_banner,
    print_error,
)
from lemonsqueezy.client import LemonSqueezy
from lemonsqueezy.resources.license import validate_license
from lemonsqueezy.resources.stores import list_stores
from lemonsqueezy.resources.users import get_authenticated_user

app = typer.Typer(no_args_is_help=True, help="Lemon Squeezy API from the terminal.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable DEBUG logging."),
    banner: bool = typer.Option(False, "--banner", help="Print the banner first."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if banner:
        print_banner(_console)


@app.command()
def me() -> None:
    """Show the user that owns the API key."""

    response = asyncio.run(LemonSqueezy.from_settings().call(get_authenticated_user))
    if response.error is not None:
        print_error(_console, response.error)
        raise typer.Exit(code=1)
    _console.print(build_user_panel((response.data or {}).get("data") or {}))


@app.command()
def stores(
    page: int = typer.Option(1, min=1, help="Page number."),
    size: int = typer.Option(10, min=1, max=100, help="Page size."),
) -> None:
    """List the stores available to the API key."""

    params = {"page": {"number": page, "size": size}}
    response = asyncio.run(LemonSqueezy.from_settings().call(list_stores, params))
    if response.error is not None:
        print_error(_console, response.error)
        raise typer.Exit(code=1)
    _console.print(build_stores_table((response.data or {}).get("data") or []))


@app.command(name="validate-license")
def validate_license_command(
    license_key: str = typer.Argument(..., help="License key to validate."),
    instance_id: str | None = typer.Option(None, "--instance-id", help="Validate a specific instance."),
) -> None:
    """Validate a license key (no API key needed)."""

    response = asyncio.run(LemonSqueezy().call(validate_license, license_key, instance_id))
    if isinstance(response.data, dict):
        _console.print(build_license_panel(response.data))
    elif response.error is not None:
        print_error(_console, response.error)
    if response.error is not None or not (response.data or {}).get("valid"):
        raise typer.Exit(code=1)


def run() -> None:
    app()
