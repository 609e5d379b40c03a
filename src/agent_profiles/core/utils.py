"""Filesystem helpers shared by install and cleanup."""

from __future__ import annotations

import os
import shutil
from pathlib import Path


def ensure_directory(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def resolve_target(root: Path, target_path: str) -> Path:
    """Join a destination-relative POSIX path onto ``root``."""
    return root.joinpath(*target_path.split("/"))


def safe_remove(path: Path) -> bool:
    """Remove a file, symlink or directory tree. Returns False if nothing was there."""
    if path.is_symlink() or path.is_file():
        path.unlink()
        return True
    if path.is_dir():
        shutil.rmtree(path)
        return True
    if os.path.lexists(path):
        path.unlink()
        return True
    return False


__all__ = ["ensure_directory", "resolve_target", "safe_remove"]
