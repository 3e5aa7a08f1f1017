"""
config-copier - copy catalogued configuration bundles into a project.

Usage:
    config-copier copy
    config-copier copy --project ./my-app --select web --select db
    config-copier list
"""

from __future__ import annotations

import logging

import typer

from config_copier.cli.commands import register_commands

__version__ = "0.1.0"

app = typer.Typer(
    name="config-copier",
    help="Copy configuration bundles from a catalog into a project directory",
    add_completion=False,
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"config-copier {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


register_commands(app)


def main():
    app()


if __name__ == "__main__":
    main()
