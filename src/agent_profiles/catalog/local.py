"""Asset discovery on the local filesystem.

Used for the bundled template directory during install and for the
destination project during cleanup.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from agent_profiles.catalog.frontmatter import extract_description
from agent_profiles.catalog.models import AssetCatalogEntry, Catalog, Category
from agent_profiles.core.constants import MARKDOWN_SUFFIX, SKILL_MANIFEST
from agent_profiles.core.utils import resolve_target

logger = logging.getLogger(__name__)


def _read_description(path: Path) -> str:
    try:
        return extract_description(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Could not read description from %s: %s", path, exc)
        return ""


def list_category_names(root: Path, category: Category) -> List[str]:
    """Names of the assets present for ``category`` under ``root``, sorted."""
    directory = resolve_target(root, category.directory)
    if not directory.is_dir():
        return []

    if category.is_directory_asset:
        names = [child.name for child in directory.iterdir() if child.is_dir()]
    else:
        names = [
            child.name
            for child in directory.iterdir()
            if child.is_file() and child.name.endswith(MARKDOWN_SUFFIX)
        ]
    return sorted(names)


def scan_category(root: Path, category: Category, *, describe: bool = True) -> List[AssetCatalogEntry]:
    """Build catalog entries for one category rooted at ``root``."""
    entries: List[AssetCatalogEntry] = []
    directory = resolve_target(root, category.directory)
    for name in list_category_names(root, category):
        description = ""
        if describe:
            if category.is_directory_asset:
                manifest = directory / name / SKILL_MANIFEST
                if manifest.is_file():
                    description = _read_description(manifest)
            else:
                description = _read_description(directory / name)
        entries.append(
            AssetCatalogEntry(
                display_name=name,
                target_path=category.target_path(name),
                description=description,
            )
        )
    return entries


def discover_local(root: Path, *, describe: bool = True) -> Catalog:
    """Collect rules, workflows and skills found under ``root``."""
    catalog = Catalog()
    for category in Category:
        catalog.entries[category] = scan_category(root, category, describe=describe)
    logger.debug("Discovered %d local assets under %s", catalog.total, root)
    return catalog


__all__ = ["discover_local", "list_category_names", "scan_category"]
