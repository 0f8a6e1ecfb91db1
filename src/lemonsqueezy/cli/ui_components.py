"""Componentes de UI para CLI (Rich).

Tablas/paneles reutilizables; los comandos solo deciden qué imprimir.
"""

from __future__ import annotations

from typing import Any

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from lemonsqueezy.core.errors import LemonSqueezyError


def print_banner(console: Console) -> None:
    title = Text("lemonsqueezy", style="bold yellow")
    subtitle = Text("Stores • Orders • Subscriptions • Licenses", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="yellow", padding=(1, 4)))


def build_stores_table(resources: list[dict[str, Any]]) -> Table:
    table = Table(title="Stores")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Domain", style="magenta")
    table.add_column("Currency", style="green")
    for resource in resources:
        attributes = resource.get("attributes") or {}
        table.add_row(
            str(resource.get("id", "")),
            str(attributes.get("name", "")),
            str(attributes.get("domain", "")),
            str(attributes.get("currency", "")),
        )
    return table


def build_user_panel(resource: dict[str, Any]) -> Panel:
    attributes = resource.get("attributes") or {}
    body = Text()
    body.append(f"{attributes.get('name', '')}\n", style="bold")
    body.append(f"{attributes.get('email', '')}\n")
    if attributes.get("has_custom_avatar"):
        body.append(f"{attributes.get('avatar_url', '')}\n", style="dim")
    return Panel(body, title=Text("Authenticated user", style="bold yellow"), border_style="yellow")


def build_license_panel(data: dict[str, Any]) -> Panel:
    """Panel para la respuesta de `validate_license` (también en error)."""

    valid = bool(data.get("valid"))
    license_key = data.get("license_key") or {}
    meta = data.get("meta") or {}
    body = Text()
    body.append("VALID\n" if valid else "INVALID\n", style="bold green" if valid else "bold red")
    if data.get("error"):
        body.append(f"{data['error']}\n", style="red")
    if license_key:
        body.append(f"Status: {license_key.get('status')}\n")
        body.append(
            f"Activations: {license_key.get('activation_usage')}/{license_key.get('activation_limit')}\n"
        )
    if meta:
        body.append(f"Product: {meta.get('product_name')} ({meta.get('variant_name')})\n", style="dim")
    return Panel(body, title=Text("License", style="bold yellow"), border_style="green" if valid else "red")


def print_error(console: Console, error: LemonSqueezyError) -> None:
    console.print(f"[red]{error.name}[/red] ({error.kind.value}): {error.message}")
    if error.status_code is not None:
        console.print(f"[dim]HTTP {error.status_code}[/dim]")
    if error.cause and error.cause != "unknown":
        console.print(f"[dim]{error.cause}[/dim]")
