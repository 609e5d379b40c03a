"""Install Rules, Workflows and Skills into a project."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List

from rich.console import Console

from agent_profiles.catalog.installed import filter_installed
from agent_profiles.catalog.local import discover_local
from agent_profiles.catalog.models import Catalog
from agent_profiles.catalog.remote import discover_remote
from agent_profiles.cli.ui import Choice, Row, Separator, StepTracker, format_display, multi_select_with_arrows
from agent_profiles.core.errors import InvalidRepositoryError
from agent_profiles.github.client import GitHubClient, GitHubRepository, create_async_client, parse_github_repo
from agent_profiles.installer import InstallOutcome, install_from_local, install_from_remote
from agent_profiles.template.manager import get_local_template_root

logger = logging.getLogger(__name__)


def build_choices(catalog: Catalog) -> List[Row]:
    """Flatten a catalog into grouped prompt rows."""
    rows: List[Row] = []
    for category, entries in catalog.groups():
        rows.append(Separator(category.heading))
        rows.extend(
            Choice(value=entry.target_path, label=format_display(entry.display_name, entry.description))
            for entry in entries
        )
    return rows


def filter_catalog(catalog: Catalog, destination_root: Path) -> Catalog:
    """Copy of ``catalog`` without the assets already present in ``destination_root``."""
    return Catalog(
        entries={category: filter_installed(items, destination_root) for category, items in catalog.entries.items()},
        remote_index=catalog.remote_index,
    )


async def _discover(repo: GitHubRepository, github_token: str | None) -> Catalog:
    async with create_async_client(github_token) as http:
        return await discover_remote(GitHubClient(http), repo)


async def _download(
    selected: List[str],
    catalog: Catalog,
    destination_root: Path,
    github_token: str | None,
) -> List[InstallOutcome]:
    async with create_async_client(github_token) as http:
        return await install_from_remote(selected, catalog.remote_index, GitHubClient(http), destination_root)


def _render_outcomes(console: Console, outcomes: List[InstallOutcome], remote: bool) -> None:
    tracker = StepTracker("Install")
    verb = "Downloaded" if remote else "Copied"
    for outcome in outcomes:
        tracker.add(outcome.target_path, outcome.target_path)
        if outcome.skipped:
            tracker.skip(outcome.target_path, "source missing")
        elif outcome.failed:
            tracker.error(outcome.target_path, f"failed: {', '.join(outcome.failed)}")
        elif not outcome.written:
            tracker.skip(outcome.target_path, "no files in repository" if remote else "no files")
        else:
            count = len(outcome.written)
            tracker.complete(outcome.target_path, f"{verb} {count} file{'s' if count != 1 else ''}")
    console.print(tracker.render())


def run_install(
    console: Console,
    *,
    destination_root: Path,
    repo: str | None = None,
    template_root: str | None = None,
    github_token: str | None = None,
) -> List[InstallOutcome]:
    """Discover, filter, prompt and install.

    Raises:
        InvalidRepositoryError: ``repo`` is not ``owner/repo`` or a GitHub URL.
        RepositoryLookupError: the remote repository could not be read.
    """
    console.print("[bold cyan]🤖 Welcome to the Agent Profiles Installer![/bold cyan]\n")

    source_root: Path | None = None
    if repo:
        repository = parse_github_repo(repo)
        if repository is None:
            raise InvalidRepositoryError(
                f"Invalid GitHub URL '{repo}'. Please format as owner/repo or use a full URL."
            )
        console.print(f"[blue]⏳ Analyzing structure from GitHub Repository: {repository.slug}...[/blue]")
        catalog = asyncio.run(_discover(repository, github_token))
        console.print("[green]✔ Analysis complete![/green]\n")
    else:
        source_root = get_local_template_root(template_root)
        catalog = discover_local(source_root) if source_root is not None else Catalog()

    available = filter_catalog(catalog, destination_root)
    rows = build_choices(available)

    if not rows:
        if catalog.total > 0:
            console.print(
                "[green]✔ All available templates (Rules/Workflows/Skills) are already installed in this project.[/green]"
            )
        elif repo:
            console.print(
                "[red]No valid template structures (Rules/Workflows/Skills) found in this GitHub Repository.[/red]"
            )
        else:
            console.print(
                "[red]No templates found in the local templates directory. "
                "Copy .agent and .agents folders into the templates/ directory or pass --template-root.[/red]"
            )
        return []

    selected = multi_select_with_arrows(
        rows,
        prompt_text="Select (Space) the items you want to install, press Enter to confirm",
        console=console,
    )
    if not selected:
        console.print("[yellow]⚠️  No items selected. Operation cancelled.[/yellow]")
        return []

    console.print("\n[blue]⏳ Installing...[/blue]")
    if repo:
        outcomes = asyncio.run(_download(selected, catalog, destination_root, github_token))
    else:
        outcomes = install_from_local(selected, source_root, destination_root)

    _render_outcomes(console, outcomes, remote=bool(repo))

    if any(outcome.failed for outcome in outcomes):
        console.print("[yellow]Some files could not be downloaded. Re-run the installer to retry them.[/yellow]")
    console.print("\n[bold green]🎉 Done! Your project is now ready for the AI Assistant.[/bold green]")
    return outcomes


__all__ = ["build_choices", "filter_catalog", "run_install"]
