"""Asset catalog discovery."""

from .frontmatter import extract_description
from .installed import filter_installed, is_installed
from .local import discover_local, list_category_names, scan_category
from .models import AssetCatalogEntry, Catalog, Category, RemoteFileIndex
from .remote import classify_path, classify_tree, describe_assets, discover_remote

__all__ = [
    "AssetCatalogEntry",
    "Catalog",
    "Category",
    "RemoteFileIndex",
    "classify_path",
    "classify_tree",
    "describe_assets",
    "discover_local",
    "discover_remote",
    "extract_description",
    "filter_installed",
    "is_installed",
    "list_category_names",
    "scan_category",
]
