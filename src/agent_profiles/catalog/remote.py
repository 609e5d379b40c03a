"""Asset discovery from a GitHub repository's default branch."""

from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Tuple

import httpx

from agent_profiles.catalog.frontmatter import extract_description
from agent_profiles.catalog.models import AssetCatalogEntry, Catalog, Category, RemoteFileIndex
from agent_profiles.core.constants import (
    MARKDOWN_SUFFIX,
    RULES_DIR,
    SKILL_MANIFEST,
    SKILLS_DIR,
    WORKFLOWS_DIR,
)
from agent_profiles.github.client import GitHubClient, GitHubRepository

logger = logging.getLogger(__name__)

_RULE_PATH_RE = re.compile(rf"^{re.escape(RULES_DIR)}/[^/]+{re.escape(MARKDOWN_SUFFIX)}$")


@dataclass(frozen=True)
class RemoteAsset:
    """A classified remote asset before its description is known."""

    name: str
    target_path: str
    url: str


def classify_path(path: str) -> Tuple[Category, str] | None:
    """Return ``(category, key)`` for an asset path, or None if it is not one."""
    if _RULE_PATH_RE.match(path):
        return Category.RULES, path.rsplit("/", 1)[-1]
    if path.startswith(f"{WORKFLOWS_DIR}/") and path.endswith(MARKDOWN_SUFFIX):
        return Category.WORKFLOWS, path.rsplit("/", 1)[-1]
    if path.startswith(f"{SKILLS_DIR}/") and path.endswith(SKILL_MANIFEST):
        parts = path.split("/")
        if len(parts) >= 4:
            return Category.SKILLS, parts[2]
    return None


def classify_tree(
    tree: Iterable[Mapping[str, Any]],
    raw_url: Callable[[str], str],
) -> Tuple[RemoteFileIndex, Dict[Category, Dict[str, RemoteAsset]]]:
    """Index every blob and bucket asset paths by category.

    Buckets are keyed by file name or skill name; a later path with the same
    key replaces the earlier one.
    """
    index = RemoteFileIndex()
    buckets: Dict[Category, Dict[str, RemoteAsset]] = {category: {} for category in Category}

    for item in tree:
        if item.get("type") != "blob":
            continue
        path = item.get("path")
        if not isinstance(path, str):
            continue

        url = raw_url(path)
        index.add(path, url)

        classified = classify_path(path)
        if classified is None:
            continue
        category, key = classified
        buckets[category][key] = RemoteAsset(name=key, target_path=category.target_path(key), url=url)

    return index, buckets


async def _describe(github: GitHubClient, asset: RemoteAsset) -> AssetCatalogEntry:
    try:
        description = extract_description(await github.fetch_text(asset.url))
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.debug("Description fetch failed for %s: %s", asset.url, exc)
        description = ""
    return AssetCatalogEntry(display_name=asset.name, target_path=asset.target_path, description=description)


async def describe_assets(github: GitHubClient, assets: List[RemoteAsset]) -> List[AssetCatalogEntry]:
    """Fetch all descriptions concurrently; results keep the order of ``assets``."""
    return list(await asyncio.gather(*(_describe(github, asset) for asset in assets)))


async def discover_remote(github: GitHubClient, repo: GitHubRepository) -> Catalog:
    """Build the catalog and file index for ``repo``.

    Raises:
        RepositoryLookupError: metadata or tree could not be fetched.
    """
    branch = await github.fetch_default_branch(repo)
    logger.debug("Default branch for %s is %s", repo.slug, branch)
    tree = await github.fetch_tree(repo, branch)

    index, buckets = classify_tree(tree, lambda path: github.raw_url(repo, branch, path))

    ordered: List[Tuple[Category, RemoteAsset]] = [
        (category, asset) for category in Category for asset in buckets[category].values()
    ]
    described = await describe_assets(github, [asset for _, asset in ordered])

    catalog = Catalog(remote_index=index)
    for (category, _), entry in zip(ordered, described):
        catalog.entries[category].append(entry)
    logger.debug("Discovered %d remote assets in %s (%d files)", catalog.total, repo.slug, len(index))
    return catalog


__all__ = [
    "RemoteAsset",
    "classify_path",
    "classify_tree",
    "describe_assets",
    "discover_remote",
]
