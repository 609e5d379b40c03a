"""Core utilities and configuration exports."""

from .config import (
    APP_NAME,
    APP_VERSION,
    BANNER,
    PAGE_SIZE,
    LABEL_WIDTH,
    TAGLINE,
)
from .constants import (
    MARKDOWN_SUFFIX,
    RULES_DIR,
    SKILL_MANIFEST,
    SKILLS_DIR,
    SKILLS_ROOT_DIR,
    WORKFLOWS_DIR,
)
from .errors import (
    AgentProfilesError,
    DownloadError,
    InvalidRepositoryError,
    RepositoryLookupError,
)
from .utils import ensure_directory, resolve_target, safe_remove

__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "BANNER",
    "LABEL_WIDTH",
    "PAGE_SIZE",
    "TAGLINE",
    "MARKDOWN_SUFFIX",
    "RULES_DIR",
    "SKILL_MANIFEST",
    "SKILLS_DIR",
    "SKILLS_ROOT_DIR",
    "WORKFLOWS_DIR",
    "AgentProfilesError",
    "DownloadError",
    "InvalidRepositoryError",
    "RepositoryLookupError",
    "ensure_directory",
    "resolve_target",
    "safe_remove",
]
