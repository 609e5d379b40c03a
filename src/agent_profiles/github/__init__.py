"""GitHub access for remote template repositories."""

from .client import (
    GitHubClient,
    GitHubRepository,
    create_async_client,
    parse_github_repo,
)

__all__ = [
    "GitHubClient",
    "GitHubRepository",
    "create_async_client",
    "parse_github_repo",
]
