"""Template bundle discovery and copy helpers."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from rich.console import Console

from agent_profiles.core.config import TEMPLATE_ROOT_ENV_VAR
from agent_profiles.core.constants import RULES_DIR, SKILLS_ROOT_DIR
from agent_profiles.core.utils import ensure_directory, resolve_target

console = Console()


def _is_template_root(path: Path) -> bool:
    return (path / RULES_DIR).is_dir() or (path / SKILLS_ROOT_DIR).is_dir()


def packaged_template_root() -> Path:
    """The ``templates/`` bundle shipped inside the package."""
    return Path(__file__).resolve().parents[1] / "templates"


def get_local_template_root(override_path: str | None = None) -> Path | None:
    """Return the directory holding ``.agent`` / ``.agents`` templates, or None.

    Args:
        override_path: Optional override path (e.g., from --template-root flag)
    """
    if override_path:
        override = Path(override_path).expanduser().resolve()
        if _is_template_root(override):
            return override
        console.print(
            f"[yellow]--template-root set to {override}, but no {RULES_DIR} or {SKILLS_ROOT_DIR} directory found there. Ignoring.[/yellow]"
        )

    env_root = os.environ.get(TEMPLATE_ROOT_ENV_VAR)
    if env_root:
        root_path = Path(env_root).expanduser().resolve()
        if _is_template_root(root_path):
            return root_path
        console.print(
            f"[yellow]{TEMPLATE_ROOT_ENV_VAR} set to {root_path}, but no {RULES_DIR} or {SKILLS_ROOT_DIR} directory found there. Ignoring.[/yellow]"
        )

    packaged = packaged_template_root()
    if _is_template_root(packaged):
        return packaged

    # Running from a source checkout
    candidate = Path(__file__).resolve().parents[3] / "templates"
    if _is_template_root(candidate):
        return candidate
    return None


def copy_template_asset(source_root: Path, destination_root: Path, target_path: str) -> list[str] | None:
    """Copy one asset (file or directory tree) to the same relative path.

    Returns the destination-relative paths of the copied files, or None when
    the source no longer exists.
    """
    src = resolve_target(source_root, target_path)
    if not src.exists():
        return None

    dest = resolve_target(destination_root, target_path)
    ensure_directory(dest.parent)

    if src.is_dir():
        shutil.copytree(src, dest, dirs_exist_ok=True)
        return sorted(
            f"{target_path}/{child.relative_to(src).as_posix()}"
            for child in src.rglob("*")
            if child.is_file()
        )

    shutil.copy2(src, dest)
    return [target_path]


__all__ = [
    "copy_template_asset",
    "get_local_template_root",
    "packaged_template_root",
]
