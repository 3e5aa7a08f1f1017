"""CLI command modules for config-copier."""

from __future__ import annotations

import typer

from . import copy_cmd, list_cmd


def register_commands(app: typer.Typer) -> None:
    """Attach every command to the root Typer application."""
    app.command(name="copy")(copy_cmd.copy)
    app.command(name="list")(list_cmd.list_catalog)


__all__ = ["register_commands"]
