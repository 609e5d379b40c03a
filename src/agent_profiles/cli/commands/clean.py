"""Remove installed Rules, Workflows and Skills from a project."""

from __future__ import annotations

from pathlib import Path
from typing import List

from rich.console import Console
from rich.markup import escape

from agent_profiles.cleanup import remove_selected, scan_installed
from agent_profiles.cli.commands.install import build_choices
from agent_profiles.cli.ui import multi_select_with_arrows


def run_clean(console: Console, *, destination_root: Path) -> List[str]:
    """Prompt for installed assets to delete and remove them."""
    console.print("[bold cyan]🧹 Agent Profiles Cleanup Mode[/bold cyan]\n")

    installed = scan_installed(destination_root)
    rows = build_choices(installed)
    if not rows:
        console.print("[yellow]No installed Rules/Workflows/Skills found in the current project.[/yellow]")
        return []

    selected = multi_select_with_arrows(
        rows,
        prompt_text="Select (Space) the items you want to REMOVE from the project, press Enter to confirm",
        console=console,
    )
    if not selected:
        console.print("[yellow]⚠️  No items selected for removal. Operation cancelled.[/yellow]")
        return []

    console.print("\n[blue]⏳ Removing selected items...[/blue]")
    removed = remove_selected(selected, destination_root)
    for target_path in removed:
        console.print(f"[red]  ✖ Removed:[/red] {escape(target_path)}")

    console.print("\n[bold green]🎉 Cleanup complete![/bold green]")
    return removed


__all__ = ["run_clean"]
