"""Tests for repository parsing and the GitHub client."""

import asyncio

import httpx
import pytest

from agent_profiles.core.errors import DownloadError, RepositoryLookupError
from agent_profiles.github.client import (
    GitHubClient,
    GitHubRepository,
    _github_auth_headers,
    create_async_client,
    parse_github_repo,
)


class TestParseGithubRepo:
    @pytest.mark.parametrize(
        "value",
        [
            "owner/repo",
            "https://github.com/owner/repo",
            "https://github.com/owner/repo.git",
            "http://github.com/owner/repo",
            "https://github.com/owner/repo/tree/main/.agent",
            "  owner/repo  ",
            "owner/repo.git",
        ],
    )
    def test_accepted_forms(self, value):
        assert parse_github_repo(value) == GitHubRepository(owner="owner", name="repo")

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "repo",
            "https://github.com/owner",
            "https://gitlab.com/owner/repo",
            "/repo",
            "owner/.git",
        ],
    )
    def test_rejected_forms(self, value):
        assert parse_github_repo(value) is None

    def test_slug(self):
        assert GitHubRepository(owner="a", name="b").slug == "a/b"


class TestAuthHeaders:
    def test_cli_token_takes_precedence(self, monkeypatch):
        monkeypatch.setenv("GH_TOKEN", "env-token")
        assert _github_auth_headers("cli-token") == {"Authorization": "Bearer cli-token"}

    def test_env_fallback_order(self, monkeypatch):
        monkeypatch.setenv("GH_TOKEN", "   ")
        monkeypatch.setenv("GITHUB_TOKEN", "gh-token")
        assert _github_auth_headers() == {"Authorization": "Bearer gh-token"}

    def test_no_token(self, clean_env):
        assert _github_auth_headers() == {}

    def test_client_sends_headers(self, clean_env):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen.update(request.headers)
            return httpx.Response(200, json={"default_branch": "main"})

        async def _run():
            async with create_async_client("tok", transport=httpx.MockTransport(handler)) as http:
                return await GitHubClient(http).fetch_default_branch(GitHubRepository("o", "r"))

        assert asyncio.run(_run()) == "main"
        assert seen["authorization"] == "Bearer tok"
        assert seen["user-agent"] == "agent-profiles"


def _run_with(handler, coro_factory):
    async def _run():
        async with create_async_client(transport=httpx.MockTransport(handler)) as http:
            return await coro_factory(GitHubClient(http))

    return asyncio.run(_run())


class TestGitHubClient:
    def test_forbidden_is_reported_as_missing(self, clean_env):
        def handler(request):
            return httpx.Response(403, json={"message": "Forbidden"})

        with pytest.raises(RepositoryLookupError) as excinfo:
            _run_with(handler, lambda gh: gh.fetch_default_branch(GitHubRepository("o", "r")))

        assert excinfo.value.repository_missing
        assert "Forbidden" in str(excinfo.value)

    def test_rate_limit_is_not_reported_as_missing(self, clean_env):
        def handler(request):
            return httpx.Response(403, json={"message": "API rate limit exceeded for 1.2.3.4."})

        with pytest.raises(RepositoryLookupError) as excinfo:
            _run_with(handler, lambda gh: gh.fetch_default_branch(GitHubRepository("o", "r")))

        assert not excinfo.value.repository_missing

    def test_invalid_json(self, clean_env):
        def handler(request):
            return httpx.Response(200, text="<html>")

        with pytest.raises(RepositoryLookupError, match="Invalid JSON"):
            _run_with(handler, lambda gh: gh.fetch_default_branch(GitHubRepository("o", "r")))

    def test_malformed_tree(self, clean_env):
        def handler(request):
            return httpx.Response(200, json={"sha": "abc"})

        with pytest.raises(RepositoryLookupError, match="Malformed tree"):
            _run_with(handler, lambda gh: gh.fetch_tree(GitHubRepository("o", "r"), "main"))

    def test_raw_url(self):
        url = GitHubClient.raw_url(GitHubRepository("o", "r"), "dev", ".agent/x.md")
        assert url == "https://raw.githubusercontent.com/o/r/dev/.agent/x.md"

    @pytest.mark.parametrize(
        "path, encoded",
        [
            (".agent/c#-guide.md", b"/o/r/feature/x/.agent/c%23-guide.md"),
            (".agent/a\tb.md", b"/o/r/feature/x/.agent/a%09b.md"),
            (".agent/what?.md", b"/o/r/feature/x/.agent/what%3F.md"),
            (".agents/skills/my skill/SKILL.md", b"/o/r/feature/x/.agents/skills/my%20skill/SKILL.md"),
        ],
    )
    def test_raw_url_keeps_whole_path(self, path, encoded):
        url = GitHubClient.raw_url(GitHubRepository("o", "r"), "feature/x", path)

        request_url = httpx.Request("GET", url).url
        assert request_url.raw_path == encoded
        assert request_url.fragment == ""

    def test_fetch_text_reaches_hash_named_file(self, clean_env):
        seen = []

        def handler(request):
            seen.append(request.url.raw_path)
            return httpx.Response(200, text="content")

        url = GitHubClient.raw_url(GitHubRepository("o", "r"), "main", ".agent/c#-guide.md")
        assert _run_with(handler, lambda gh: gh.fetch_text(url)) == "content"
        assert seen == [b"/o/r/main/.agent/c%23-guide.md"]

    def test_tree_branch_is_encoded(self, clean_env):
        seen = []

        def handler(request):
            seen.append(request.url.raw_path)
            return httpx.Response(200, json={"tree": []})

        _run_with(handler, lambda gh: gh.fetch_tree(GitHubRepository("o", "r"), "fix#1"))

        assert seen == [b"/repos/o/r/git/trees/fix%231?recursive=1"]

    def test_fetch_bytes_failure_raises_download_error(self, clean_env):
        def handler(request):
            return httpx.Response(502)

        with pytest.raises(DownloadError) as excinfo:
            _run_with(handler, lambda gh: gh.fetch_bytes(".agent/x.md", "https://raw.example/x"))

        assert excinfo.value.path == ".agent/x.md"
        assert "502" in excinfo.value.reason

    def test_fetch_bytes_unusable_url_raises_download_error(self, clean_env):
        def handler(request):
            raise AssertionError("no request should be sent")

        with pytest.raises(DownloadError) as excinfo:
            _run_with(handler, lambda gh: gh.fetch_bytes(".agent/a\tb.md", "https://raw.example/a\tb.md"))

        assert excinfo.value.path == ".agent/a\tb.md"
