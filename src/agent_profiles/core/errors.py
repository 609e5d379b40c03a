"""Exception hierarchy for agent-profiles."""

from __future__ import annotations


class AgentProfilesError(RuntimeError):
    """Base class for errors reported to the user."""


class InvalidRepositoryError(AgentProfilesError):
    """Raised when a repository identifier is not ``owner/repo`` or a GitHub URL."""


class RepositoryLookupError(AgentProfilesError):
    """Raised when repository metadata or its file tree cannot be fetched."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code

    @property
    def repository_missing(self) -> bool:
        """True when GitHub answered in a way that means missing or private."""
        if self.status_code == 404:
            return True
        return self.status_code == 403 and "rate limit" not in str(self).lower()


class DownloadError(AgentProfilesError):
    """Raised when a single remote file cannot be downloaded."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


__all__ = [
    "AgentProfilesError",
    "DownloadError",
    "InvalidRepositoryError",
    "RepositoryLookupError",
]
