"""
Agent Profiles CLI - install Rules, Workflows and Skills for AI coding agents.

Usage:
    agent-profiles                         (install from the bundled templates)
    agent-profiles --repo owner/my-repo    (install from a GitHub repository)
    agent-profiles --clean                 (remove installed assets)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.align import Align
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from agent_profiles.cli.commands.clean import run_clean
from agent_profiles.cli.commands.install import run_install
from agent_profiles.core.config import APP_NAME, APP_VERSION, BANNER, TAGLINE
from agent_profiles.core.errors import AgentProfilesError, RepositoryLookupError

logger = logging.getLogger(__name__)

console = Console()

EPILOG = """\
Usage examples:

  agent-profiles                                 install from the bundled templates

  agent-profiles --repo owner/my-repo            download from a GitHub repository

  agent-profiles -r https://github.com/owner/my-repo

  agent-profiles --clean                         remove installed rules, workflows, skills
"""

app = typer.Typer(
    name=APP_NAME,
    help="Install Rules, Workflows and Skills for your AI agent into the current project.",
    add_completion=False,
)


def show_banner():
    """Display the ASCII art banner."""
    banner_lines = BANNER.strip().split("\n")
    colors = ["bright_blue", "blue", "cyan", "bright_cyan", "white", "bright_white"]

    styled_banner = Text()
    for i, line in enumerate(banner_lines):
        color = colors[i % len(colors)]
        styled_banner.append(line + "\n", style=color)

    console.print(Align.center(styled_banner))
    console.print(Align.center(Text(TAGLINE, style="italic bright_yellow")))
    console.print()


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _version_callback(value: bool):
    if value:
        console.print(f"{APP_NAME} {APP_VERSION}")
        raise typer.Exit()


@app.command(epilog=EPILOG)
def profiles(
    repo: Optional[str] = typer.Option(
        None,
        "--repo",
        "-r",
        help="GitHub repository containing templates (owner/repo or https://github.com/owner/repo)",
    ),
    clean: bool = typer.Option(
        False,
        "--clean",
        "-c",
        help="Uninstall (remove) existing rules, workflows, skills from the project",
    ),
    dest: Path = typer.Option(
        Path("."),
        "--dest",
        help="Project directory to install into or clean (default: current directory)",
        file_okay=False,
    ),
    template_root: Optional[str] = typer.Option(
        None,
        "--template-root",
        help="Local template directory containing .agent/ and .agents/ (overrides AGENT_PROFILES_TEMPLATE_ROOT)",
    ),
    github_token: Optional[str] = typer.Option(
        None,
        "--github-token",
        help="GitHub token for API requests (or set GH_TOKEN / GITHUB_TOKEN)",
    ),
    debug: bool = typer.Option(False, "--debug", help="Show verbose diagnostic output"),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show the current version",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """Install or remove agent profile assets in a project."""
    _configure_logging(debug)
    show_banner()
    destination_root = dest.expanduser().resolve()

    try:
        if clean:
            run_clean(console, destination_root=destination_root)
        else:
            run_install(
                console,
                destination_root=destination_root,
                repo=repo,
                template_root=template_root,
                github_token=github_token,
            )
    except typer.Exit:
        raise
    except KeyboardInterrupt:
        console.print("\n[yellow]Selection cancelled[/yellow]")
        raise typer.Exit(0)
    except RepositoryLookupError as e:
        console.print("[red]❌ Error fetching data from GitHub[/red]")
        console.print(Panel(str(e), title="Fetch Error", border_style="red"))
        if e.repository_missing:
            console.print("[yellow]Repository does not exist or is Private. Please verify the URL.[/yellow]")
        raise typer.Exit(1)
    except AgentProfilesError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except Exception as e:
        logger.debug("Unhandled error", exc_info=True)
        console.print(Panel(str(e) or type(e).__name__, title="An error occurred", border_style="red"))
        raise typer.Exit(1)


def main():
    app()


if __name__ == "__main__":
    main()
