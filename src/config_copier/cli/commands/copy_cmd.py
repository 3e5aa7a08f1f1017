"""Top-level ``config-copier copy`` command.

Walks the user through picking a project path and configuration bundles,
then copies the resolved files concurrently.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from config_copier.catalog import load_catalog
from config_copier.cli.ui import ConsolePromptProvider, PromptProvider
from config_copier.copy import CopyManager, join_under
from config_copier.core.config import resolve_catalog_path, resolve_source_dir
from config_copier.errors import CatalogError, CopyBatchError, DestinationError, PathValidationError
from config_copier.paths import normalize_project_path

console = Console()

PROJECT_PATH_PROMPT = "1. Project path"
SELECTION_PROMPT = "2. Which configurations do you want to copy to your project?"
PROCEED_PROMPT = "Do you want to proceed?"


def _cancelled() -> typer.Exit:
    console.print()
    console.print("[red]You cancelled copying![/red]")
    return typer.Exit(0)


def get_prompt_provider() -> PromptProvider:
    return ConsolePromptProvider(console)


def copy(
    catalog: Optional[Path] = typer.Option(
        None,
        "--catalog",
        "-c",
        help="Catalog YAML file (default: config.yaml or $CONFIG_COPIER_CATALOG)",
    ),
    source_dir: Optional[Path] = typer.Option(
        None,
        "--source-dir",
        "-s",
        help="Directory catalog paths are relative to (default: ./configs or $CONFIG_COPIER_SOURCE_DIR)",
    ),
    project: Optional[str] = typer.Option(
        None,
        "--project",
        "-p",
        help="Project path to copy into (prompted when omitted)",
    ),
    select: Optional[List[str]] = typer.Option(
        None,
        "--select",
        help="Catalog label to copy; repeat for several (prompted when omitted)",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Skip the final 'proceed?' confirmation",
    ),
    jobs: Optional[int] = typer.Option(
        None,
        "--jobs",
        "-j",
        min=1,
        help="Maximum number of files copied at the same time (default: all at once)",
    ),
) -> None:
    """Copy configuration bundles from the catalog into a project."""
    prompts = get_prompt_provider()

    catalog_path = resolve_catalog_path(catalog)
    try:
        bundles = load_catalog(catalog_path)
    except CatalogError as e:
        console.print(f"[red]Failed to read config file:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    try:
        raw_path = project if project is not None else prompts.text_input(PROJECT_PATH_PROMPT)
    except typer.Abort:
        raise _cancelled() from None
    try:
        project_path = normalize_project_path(raw_path)
    except PathValidationError as e:
        console.print(f"[red]Failed to input file path:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(f"Normalized file path is [green]{escape(project_path)}[/green]")

    if select:
        selected = list(select)
    else:
        try:
            selected = prompts.multiselect(SELECTION_PROMPT, bundles.labels())
        except typer.Abort:
            raise _cancelled() from None

    files = bundles.resolve(selected)
    source_root = resolve_source_dir(source_dir)

    console.print(f"Following file will be copied to the project path [green]{escape(project_path)}[/green]:")
    for entry in files:
        console.print(f"- [green]{escape(str(join_under(source_root, entry.path)))}[/green].")

    try:
        proceed = yes or prompts.confirm(PROCEED_PROMPT)
    except typer.Abort:
        proceed = False
    if not proceed:
        raise _cancelled()

    console.print()

    manager = CopyManager(source_root, confirm=prompts.confirm, console=console, max_workers=jobs)
    try:
        manager.copy_all(files, Path(project_path))
    except (DestinationError, CopyBatchError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
