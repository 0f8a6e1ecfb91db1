"""CLI `lemonsqueezy` (Typer + Rich)."""
