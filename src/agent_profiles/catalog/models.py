"""Catalog data model shared by discovery, install and cleanup."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from agent_profiles.core.constants import RULES_DIR, SKILLS_DIR, WORKFLOWS_DIR


class Category(str, Enum):
    """Asset categories, in prompt order."""

    RULES = "rules"
    WORKFLOWS = "workflows"
    SKILLS = "skills"

    @property
    def directory(self) -> str:
        """Destination-relative directory holding this category's assets."""
        return _DIRECTORIES[self]

    @property
    def heading(self) -> str:
        return _HEADINGS[self]

    @property
    def is_directory_asset(self) -> bool:
        return self is Category.SKILLS

    def target_path(self, name: str) -> str:
        return f"{self.directory}/{name}"


_DIRECTORIES = {
    Category.RULES: RULES_DIR,
    Category.WORKFLOWS: WORKFLOWS_DIR,
    Category.SKILLS: SKILLS_DIR,
}

_HEADINGS = {
    Category.RULES: f"📌 Rules ({RULES_DIR}/)",
    Category.WORKFLOWS: f"⚙️  Workflows ({WORKFLOWS_DIR}/)",
    Category.SKILLS: f"🧠 Skills ({SKILLS_DIR}/)",
}


@dataclass(frozen=True)
class AssetCatalogEntry:
    """One installable asset.

    Attributes:
        display_name: File name (rules, workflows) or skill name.
        target_path: Destination-relative POSIX path of the asset.
        description: Frontmatter description, empty when unavailable.
    """

    display_name: str
    target_path: str
    description: str = ""


@dataclass
class RemoteFileIndex:
    """Repository path to raw-content URL for every blob in a remote tree."""

    files: Dict[str, str] = field(default_factory=dict)

    def add(self, path: str, url: str) -> None:
        self.files[path] = url

    def resolve(self, target_path: str) -> List[Tuple[str, str]]:
        """Return ``(path, url)`` for the target itself and everything nested under it."""
        prefix = target_path + "/"
        return [
            (path, url)
            for path, url in self.files.items()
            if path == target_path or path.startswith(prefix)
        ]

    def __contains__(self, path: object) -> bool:
        return path in self.files

    def __len__(self) -> int:
        return len(self.files)


@dataclass
class Catalog:
    """Per-category candidates discovered for one run."""

    entries: Dict[Category, List[AssetCatalogEntry]] = field(
        default_factory=lambda: {category: [] for category in Category}
    )
    remote_index: Optional[RemoteFileIndex] = None

    @property
    def total(self) -> int:
        return sum(len(items) for items in self.entries.values())

    def groups(self) -> Iterator[Tuple[Category, List[AssetCatalogEntry]]]:
        """Yield non-empty categories in prompt order."""
        for category in Category:
            items = self.entries.get(category, [])
            if items:
                yield category, items

    def __getitem__(self, category: Category) -> List[AssetCatalogEntry]:
        return self.entries.get(category, [])


__all__ = [
    "AssetCatalogEntry",
    "Catalog",
    "Category",
    "RemoteFileIndex",
]
