"""Top-level ``config-copier list`` command."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from config_copier.catalog import load_catalog
from config_copier.core.config import resolve_catalog_path
from config_copier.errors import CatalogError

console = Console()


def list_catalog(
    catalog: Optional[Path] = typer.Option(
        None,
        "--catalog",
        "-c",
        help="Catalog YAML file (default: config.yaml or $CONFIG_COPIER_CATALOG)",
    ),
) -> None:
    """Show every configuration bundle in the catalog."""
    catalog_path = resolve_catalog_path(catalog)
    try:
        bundles = load_catalog(catalog_path)
    except CatalogError as e:
        console.print(f"[red]Failed to read config file:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if not bundles:
        console.print(f"[yellow]No configurations defined in {escape(str(catalog_path))}[/yellow]")
        return

    table = Table(title="Configurations", show_lines=True)
    table.add_column("Label", style="cyan")
    table.add_column("File", style="bold")
    table.add_column("Post-copy message")

    for label, entries in bundles.items():
        if not entries:
            table.add_row(escape(label), "[dim]no files[/dim]", "")
            continue
        for index, entry in enumerate(entries):
            table.add_row(
                escape(label) if index == 0 else "",
                escape(entry.path),
                escape(entry.post_message),
            )

    console.print(table)
