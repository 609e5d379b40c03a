"""Materialize selected assets into the destination project."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List

from agent_profiles.catalog.models import RemoteFileIndex
from agent_profiles.core.errors import DownloadError
from agent_profiles.core.utils import ensure_directory, resolve_target
from agent_profiles.github.client import GitHubClient
from agent_profiles.template.manager import copy_template_asset

logger = logging.getLogger(__name__)


@dataclass
class InstallOutcome:
    """Result of installing one selected target path."""

    target_path: str
    written: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    skipped: bool = False

    @property
    def ok(self) -> bool:
        return not self.failed and not self.skipped


def install_from_local(
    selected: Iterable[str],
    source_root: Path,
    destination_root: Path,
) -> List[InstallOutcome]:
    """Copy each selected asset out of the local template bundle."""
    outcomes: List[InstallOutcome] = []
    for target_path in selected:
        copied = copy_template_asset(source_root, destination_root, target_path)
        if copied is None:
            logger.debug("Template source vanished, skipping %s", target_path)
            outcomes.append(InstallOutcome(target_path=target_path, skipped=True))
            continue
        outcomes.append(InstallOutcome(target_path=target_path, written=copied))
    return outcomes


async def install_from_remote(
    selected: Iterable[str],
    index: RemoteFileIndex,
    github: GitHubClient,
    destination_root: Path,
) -> List[InstallOutcome]:
    """Download every indexed file under each selected path.

    A failing file is recorded on its outcome; the remaining files and
    selections are still processed.
    """
    outcomes: List[InstallOutcome] = []
    for target_path in selected:
        outcome = InstallOutcome(target_path=target_path)
        for path, url in index.resolve(target_path):
            dest = resolve_target(destination_root, path)
            try:
                content = await github.fetch_bytes(path, url)
                ensure_directory(dest.parent)
                dest.write_bytes(content)
            except (DownloadError, OSError) as exc:
                logger.warning("Error downloading %s: %s", path, exc)
                outcome.failed.append(path)
                continue
            outcome.written.append(path)
        outcomes.append(outcome)
    return outcomes


__all__ = ["InstallOutcome", "install_from_local", "install_from_remote"]
