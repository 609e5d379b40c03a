"""GitHub REST and raw-content access."""

from __future__ import annotations

import logging
import os
import re
import ssl
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx
import truststore

from agent_profiles.core.config import (
    GITHUB_API_URL,
    GITHUB_RAW_URL,
    GITHUB_TOKEN_ENV_VARS,
    HTTP_TIMEOUT,
    USER_AGENT,
)
from agent_profiles.core.errors import DownloadError, RepositoryLookupError

logger = logging.getLogger(__name__)

ssl_context = truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)

GITHUB_REPO_RE = re.compile(r"^(?:https?://github\.com/)?([^/]+)/([^/]+)(?:/.*)?$")


@dataclass(frozen=True)
class GitHubRepository:
    owner: str
    name: str

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.name}"


def parse_github_repo(value: str) -> Optional[GitHubRepository]:
    """Parse ``owner/repo`` or a github.com URL. Returns None when it does not match."""
    match = GITHUB_REPO_RE.match(value.strip())
    if match is None:
        return None
    owner = match.group(1)
    name = re.sub(r"\.git$", "", match.group(2))
    if not name:
        return None
    return GitHubRepository(owner=owner, name=name)


def _github_token(cli_token: str | None = None) -> str | None:
    """Return sanitized GitHub token (cli arg takes precedence) or None."""
    candidates = [cli_token] + [os.getenv(name) for name in GITHUB_TOKEN_ENV_VARS]
    for candidate in candidates:
        if candidate and candidate.strip():
            return candidate.strip()
    return None


def _github_auth_headers(cli_token: str | None = None) -> dict:
    """Return Authorization header dict only when a non-empty token exists."""
    token = _github_token(cli_token)
    return {"Authorization": f"Bearer {token}"} if token else {}


def create_async_client(
    github_token: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    headers = {"User-Agent": USER_AGENT, **_github_auth_headers(github_token)}
    if transport is not None:
        return httpx.AsyncClient(
            transport=transport,
            headers=headers,
            timeout=HTTP_TIMEOUT,
            follow_redirects=True,
        )
    return httpx.AsyncClient(
        verify=ssl_context,
        headers=headers,
        timeout=HTTP_TIMEOUT,
        follow_redirects=True,
    )


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return response.text[:200]


class GitHubClient:
    """Thin async wrapper over the endpoints the installer needs."""

    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    async def _get_json(self, url: str) -> Any:
        logger.debug("GET %s", url)
        try:
            response = await self.http.get(url)
        except httpx.HTTPError as exc:
            raise RepositoryLookupError(f"Cannot reach GitHub: {exc}") from exc

        if response.status_code != 200:
            raise RepositoryLookupError(
                f"GitHub API returned {response.status_code}: {_error_message(response)}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise RepositoryLookupError(f"Invalid JSON from {url}") from exc

    async def fetch_default_branch(self, repo: GitHubRepository) -> str:
        data = await self._get_json(f"{GITHUB_API_URL}/repos/{repo.owner}/{repo.name}")
        branch = data.get("default_branch") if isinstance(data, dict) else None
        if not branch:
            raise RepositoryLookupError(f"No default branch reported for {repo.slug}")
        return str(branch)

    async def fetch_tree(self, repo: GitHubRepository, branch: str) -> List[Dict[str, Any]]:
        """Return the recursive tree entries for ``branch``."""
        data = await self._get_json(
            f"{GITHUB_API_URL}/repos/{repo.owner}/{repo.name}/git/trees/{quote(branch, safe='/')}?recursive=1"
        )
        tree = data.get("tree") if isinstance(data, dict) else None
        if not isinstance(tree, list):
            raise RepositoryLookupError(f"Malformed tree response for {repo.slug}@{branch}")
        if data.get("truncated"):
            logger.warning("Tree listing for %s@%s was truncated by GitHub", repo.slug, branch)
        return tree

    @staticmethod
    def raw_url(repo: GitHubRepository, branch: str, path: str) -> str:
        """Raw content URL; every segment is percent-encoded (``#``, ``?``, spaces, control chars)."""
        return "/".join(
            [
                GITHUB_RAW_URL,
                quote(repo.owner, safe=""),
                quote(repo.name, safe=""),
                quote(branch, safe="/"),
                quote(path, safe="/"),
            ]
        )

    async def fetch_text(self, url: str) -> str:
        """Fetch a raw file as text. Raises httpx.HTTPError on failure."""
        response = await self.http.get(url)
        response.raise_for_status()
        return response.text

    async def fetch_bytes(self, path: str, url: str) -> bytes:
        try:
            response = await self.http.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise DownloadError(path, str(exc)) from exc
        if response.status_code != 200:
            raise DownloadError(path, f"HTTP {response.status_code}")
        return response.content


__all__ = [
    "GitHubClient",
    "GitHubRepository",
    "create_async_client",
    "parse_github_repo",
    "ssl_context",
]
