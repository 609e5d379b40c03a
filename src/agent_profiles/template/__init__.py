"""Local template bundle management."""

from .manager import (
    copy_template_asset,
    get_local_template_root,
    packaged_template_root,
)

__all__ = [
    "copy_template_asset",
    "get_local_template_root",
    "packaged_template_root",
]
