"""Removal of installed assets from a project."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from agent_profiles.catalog.installed import is_installed
from agent_profiles.catalog.local import discover_local
from agent_profiles.catalog.models import Catalog
from agent_profiles.core.utils import resolve_target, safe_remove

logger = logging.getLogger(__name__)


def scan_installed(destination_root: Path) -> Catalog:
    """Catalog of assets already installed under ``destination_root`` (no descriptions)."""
    return discover_local(destination_root, describe=False)


def remove_selected(selected: Iterable[str], destination_root: Path) -> List[str]:
    """Delete each selected target. Returns the paths actually removed."""
    removed: List[str] = []
    for target_path in selected:
        if not is_installed(destination_root, target_path):
            continue
        if safe_remove(resolve_target(destination_root, target_path)):
            logger.debug("Removed %s", target_path)
            removed.append(target_path)
    return removed


__all__ = ["remove_selected", "scan_installed"]
