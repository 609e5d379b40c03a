"""Reusable UI helpers for agent-profiles CLI interactions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, NoReturn, Optional, Sequence, Union

import readchar
import typer
from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from agent_profiles.core.config import LABEL_WIDTH, PAGE_SIZE


class StepTracker:
    """Track and render per-asset progress with Rich trees."""

    _SYMBOLS = {
        "pending": "[green dim]○[/green dim]",
        "done": "[green]●[/green]",
        "error": "[red]●[/red]",
        "skipped": "[yellow]○[/yellow]",
    }

    def __init__(self, title: str):
        self.title = title
        self.steps = []  # list of dicts: {key, label, status, detail}

    def add(self, key: str, label: str):
        if key not in [s["key"] for s in self.steps]:
            self.steps.append({"key": key, "label": label, "status": "pending", "detail": ""})

    def complete(self, key: str, detail: str = ""):
        self._update(key, status="done", detail=detail)

    def error(self, key: str, detail: str = ""):
        self._update(key, status="error", detail=detail)

    def skip(self, key: str, detail: str = ""):
        self._update(key, status="skipped", detail=detail)

    def _update(self, key: str, status: str, detail: str):
        for s in self.steps:
            if s["key"] == key:
                s["status"] = status
                if detail:
                    s["detail"] = detail
                return
        self.steps.append({"key": key, "label": key, "status": status, "detail": detail})

    def render(self) -> Tree:
        tree = Tree(f"[cyan]{self.title}[/cyan]", guide_style="grey50")
        for step in self.steps:
            symbol = self._SYMBOLS.get(step["status"], " ")
            label = escape(step["label"])
            detail_text = escape(step["detail"].strip()) if step["detail"] else ""
            if step["status"] == "pending":
                line = f"{symbol} [bright_black]{label}[/bright_black]"
            elif detail_text:
                line = f"{symbol} [white]{label}[/white] [bright_black]({detail_text})[/bright_black]"
            else:
                line = f"{symbol} [white]{label}[/white]"
            tree.add(line)
        return tree


@dataclass(frozen=True)
class Choice:
    """A selectable prompt row. ``label`` is Rich markup."""

    value: str
    label: str


@dataclass(frozen=True)
class Separator:
    """A non-selectable group header."""

    title: str


Row = Union[Choice, Separator]


def format_display(name: str, description: str = "") -> str:
    """Pad the name into a column and append the description in grey italics."""
    if not description:
        return escape(name)
    return f"{escape(name.ljust(LABEL_WIDTH))} [italic bright_black]{escape(description)}[/italic bright_black]"


def get_key() -> str:
    """Get a single keypress in a cross-platform way using readchar."""
    key = readchar.readkey()

    if key == readchar.key.UP or key == readchar.key.CTRL_P:
        return "up"
    if key == readchar.key.DOWN or key == readchar.key.CTRL_N:
        return "down"

    if key == readchar.key.ENTER or key == "\n":
        return "enter"

    if key == readchar.key.SPACE:
        return "space"

    if key == readchar.key.ESC or key == "\x1b":
        return "escape"

    if key == readchar.key.CTRL_C:
        raise KeyboardInterrupt

    return key


def _resolve_console(console: Optional[Console]) -> Console:
    return console or Console()


def _cancel(console: Console) -> NoReturn:
    console.print("\n[yellow]Selection cancelled[/yellow]")
    raise typer.Exit(0)


def multi_select_with_arrows(
    rows: Sequence[Row],
    prompt_text: str = "Select options",
    console: Console | None = None,
    page_size: int = PAGE_SIZE,
) -> List[str]:
    """Checkbox prompt over grouped rows.

    ↑/↓ move between choices (headers are skipped), Space toggles, ``a``
    toggles everything, Enter confirms. An empty selection is returned as
    ``[]``. Esc and Ctrl+C exit cleanly via ``typer.Exit(0)``.
    """
    console = _resolve_console(console)
    selectable = [i for i, row in enumerate(rows) if isinstance(row, Choice)]
    if not selectable:
        return []

    checked: set[int] = set()
    cursor = 0  # position within ``selectable``
    offset = 0  # first visible row

    def scroll_to_cursor() -> None:
        nonlocal offset
        row_index = selectable[cursor]
        if row_index < offset:
            offset = row_index
        elif row_index >= offset + page_size:
            offset = row_index - page_size + 1
        # keep a group header visible above the first choice of the group
        if offset == row_index and offset > 0 and isinstance(rows[offset - 1], Separator):
            offset -= 1

    def build_panel() -> Panel:
        table = Table.grid(padding=(0, 1))
        table.add_column(width=1)
        table.add_column()

        for i in range(offset, min(len(rows), offset + page_size)):
            row = rows[i]
            if isinstance(row, Separator):
                table.add_row("", f"[bold magenta]--- {escape(row.title)} ---[/bold magenta]")
                continue
            indicator = "[cyan]◉[/cyan]" if i in checked else "[bright_black]◯[/bright_black]"
            pointer = "[cyan]❯[/cyan]" if i == selectable[cursor] else " "
            table.add_row(pointer, f"{indicator} {row.label}")

        if len(rows) > page_size:
            table.add_row("", f"[dim]({offset + 1}-{min(len(rows), offset + page_size)} of {len(rows)})[/dim]")
        table.add_row("", "")
        table.add_row(
            "",
            "[dim]Use ↑/↓ to move, Space to toggle, a to toggle all, Enter to confirm, Esc to cancel[/dim]",
        )
        return Panel(table, title=f"[bold]{prompt_text}[/bold]", border_style="cyan", padding=(1, 2))

    console.print()
    scroll_to_cursor()

    with Live(build_panel(), console=console, transient=True, auto_refresh=False) as live:
        while True:
            try:
                key = get_key()
            except KeyboardInterrupt:
                _cancel(console)

            if key == "up":
                cursor = (cursor - 1) % len(selectable)
            elif key == "down":
                cursor = (cursor + 1) % len(selectable)
            elif key == "space":
                row_index = selectable[cursor]
                if row_index in checked:
                    checked.remove(row_index)
                else:
                    checked.add(row_index)
            elif key in ("a", "A"):
                if len(checked) == len(selectable):
                    checked.clear()
                else:
                    checked.update(selectable)
            elif key == "enter":
                return [rows[i].value for i in selectable if i in checked]
            elif key == "escape":
                _cancel(console)

            scroll_to_cursor()
            live.update(build_panel(), refresh=True)


__all__ = [
    "Choice",
    "Row",
    "Separator",
    "StepTracker",
    "format_display",
    "get_key",
    "multi_select_with_arrows",
]
