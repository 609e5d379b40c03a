"""Existence checks against the destination project."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from agent_profiles.catalog.models import AssetCatalogEntry
from agent_profiles.core.utils import resolve_target


def is_installed(destination_root: Path, target_path: str) -> bool:
    """True when anything (file, directory, dangling link) sits at ``target_path``."""
    return os.path.lexists(resolve_target(destination_root, target_path))


def filter_installed(entries: Iterable[AssetCatalogEntry], destination_root: Path) -> List[AssetCatalogEntry]:
    return [entry for entry in entries if not is_installed(destination_root, entry.target_path)]


__all__ = ["filter_installed", "is_installed"]
