"""Interactive prompts for the config-copier CLI."""

from __future__ import annotations

from typing import List, Optional, Protocol, Sequence

import readchar
import typer
from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table


class PromptProvider(Protocol):
    """The three synchronous prompts the copy command needs."""

    def text_input(self, prompt_text: str) -> str: ...

    def multiselect(self, prompt_text: str, options: Sequence[str]) -> List[str]: ...

    def confirm(self, prompt_text: str) -> bool: ...


def get_key() -> str:
    """Get a single keypress in a cross-platform way using readchar."""
    key = readchar.readkey()

    if key == readchar.key.UP or key == readchar.key.CTRL_P:
        return "up"
    if key == readchar.key.DOWN or key == readchar.key.CTRL_N:
        return "down"

    if key == readchar.key.ENTER:
        return "enter"

    if key == readchar.key.ESC or key == "\x1b":
        return "escape"

    if key == readchar.key.BACKSPACE:
        return "backspace"

    if key == readchar.key.CTRL_C:
        raise KeyboardInterrupt

    return key


def _resolve_console(console: Optional[Console]) -> Console:
    return console or Console()


def filter_options(options: Sequence[str], query: str) -> List[str]:
    """Return options containing *query*, case-insensitively, in original order."""
    needle = query.strip().lower()
    if not needle:
        return list(options)
    return [option for option in options if needle in option.lower()]


def multi_select_with_arrows(
    options: Sequence[str],
    prompt_text: str = "Select options",
    console: Console | None = None,
) -> List[str]:
    """Select zero or more options.

    Arrow keys move, Space toggles, typing narrows the list, Backspace edits
    the filter, Enter confirms. The result keeps the order of *options*.

    Raises:
        typer.Abort: On Escape or Ctrl-C.
    """
    console = _resolve_console(console)
    all_options = list(options)
    selected: set[str] = set()
    query = ""
    cursor_index = 0

    def visible() -> List[str]:
        return filter_options(all_options, query)

    def build_panel():
        table = Table.grid(padding=(0, 2))
        table.add_column(style="cyan", justify="left", width=3)
        table.add_column(style="white", justify="left")

        table.add_row("", f"[dim]Filter:[/dim] {escape(query)}")
        shown = visible()
        for i, option in enumerate(shown):
            indicator = "[cyan]☑" if option in selected else "[bright_black]☐"
            pointer = "▶" if i == cursor_index else " "
            table.add_row(pointer, f"{indicator} [cyan]{escape(option)}[/cyan]")
        if not shown:
            table.add_row("", "[dim]No matching options[/dim]")

        table.add_row("", "")
        table.add_row(
            "",
            "[dim]Use ↑/↓ to move, Space to toggle, type to filter, Enter to confirm, Esc to cancel[/dim]",
        )

        return Panel(table, title=f"[bold]{prompt_text}[/bold]", border_style="cyan", padding=(1, 2))

    console.print()

    with Live(build_panel(), console=console, transient=True, auto_refresh=False) as live:
        while True:
            try:
                key = get_key()
                shown = visible()
                if key == "up" and shown:
                    cursor_index = (cursor_index - 1) % len(shown)
                elif key == "down" and shown:
                    cursor_index = (cursor_index + 1) % len(shown)
                elif key in (" ", readchar.key.SPACE):
                    if shown:
                        option = shown[cursor_index]
                        if option in selected:
                            selected.remove(option)
                        else:
                            selected.add(option)
                elif key == "enter":
                    return [option for option in all_options if option in selected]
                elif key == "escape":
                    console.print("\n[yellow]Selection cancelled[/yellow]")
                    raise typer.Abort()
                elif key == "backspace":
                    query = query[:-1]
                    cursor_index = 0
                elif len(key) == 1 and key.isprintable():
                    query += key
                    cursor_index = 0

                live.update(build_panel(), refresh=True)

            except KeyboardInterrupt:
                console.print("\n[yellow]Selection cancelled[/yellow]")
                raise typer.Abort()


class ConsolePromptProvider:
    """Terminal-backed PromptProvider."""

    def __init__(self, console: Console | None = None):
        self.console = _resolve_console(console)

    def text_input(self, prompt_text: str) -> str:
        return typer.prompt(prompt_text)

    def multiselect(self, prompt_text: str, options: Sequence[str]) -> List[str]:
        return multi_select_with_arrows(options, prompt_text=prompt_text, console=self.console)

    def confirm(self, prompt_text: str) -> bool:
        return typer.confirm(prompt_text, default=False)


__all__ = [
    "ConsolePromptProvider",
    "PromptProvider",
    "filter_options",
    "get_key",
    "multi_select_with_arrows",
]
