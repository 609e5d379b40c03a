from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Dict, Iterator
from urllib.parse import quote, unquote

import httpx
import pytest


RULE_CONTENT = '---\ndescription: "Rule {name}"\n---\n# {name}\n'
SKILL_CONTENT = "---\nname: {name}\ndescription: Skill {name}\n---\n# {name}\n"


@pytest.fixture()
def template_root(tmp_path: Path) -> Path:
    """A local template bundle with two rules, one workflow and one skill."""
    root = tmp_path / "templates"
    (root / ".agent" / "workflows").mkdir(parents=True)
    (root / ".agents" / "skills" / "reviewer" / "refs").mkdir(parents=True)

    (root / ".agent" / "a.md").write_text(RULE_CONTENT.format(name="a"), encoding="utf-8")
    (root / ".agent" / "b.md").write_text(RULE_CONTENT.format(name="b"), encoding="utf-8")
    (root / ".agent" / "notes.txt").write_text("not a rule", encoding="utf-8")
    (root / ".agent" / "workflows" / "ship.md").write_text("# no frontmatter\n", encoding="utf-8")
    skill_dir = root / ".agents" / "skills" / "reviewer"
    (skill_dir / "SKILL.md").write_text(SKILL_CONTENT.format(name="reviewer"), encoding="utf-8")
    (skill_dir / "refs" / "checklist.md").write_text("- item\n", encoding="utf-8")
    return root


@pytest.fixture()
def project_dir(tmp_path: Path) -> Path:
    project = tmp_path / "project"
    project.mkdir()
    return project


class FakeGitHub:
    """Serves the GitHub API and raw endpoints for one repository."""

    def __init__(self, owner: str, repo: str, files: Dict[str, str], branch: str = "main"):
        self.owner = owner
        self.repo = repo
        self.branch = branch
        self.files = files
        self.repo_status = 200
        self.failing_paths: set[str] = set()
        self.requests: list[str] = []

    def raw_url(self, path: str) -> str:
        return f"https://raw.githubusercontent.com/{self.owner}/{self.repo}/{self.branch}/{quote(path, safe='/')}"

    def tree(self) -> list[dict]:
        entries: list[dict] = []
        dirs: set[str] = set()
        for path in self.files:
            parts = path.split("/")
            for i in range(1, len(parts)):
                dirs.add("/".join(parts[:i]))
        entries.extend({"path": d, "type": "tree"} for d in sorted(dirs))
        entries.extend({"path": p, "type": "blob"} for p in self.files)
        return entries

    def handler(self, request: httpx.Request) -> httpx.Response:
        # compare encoded paths, the way the server sees them
        host = request.url.host
        raw_path = request.url.raw_path.decode("ascii")
        self.requests.append(f"{request.url.scheme}://{host}{raw_path}")
        repo_api = f"/repos/{self.owner}/{self.repo}"

        if host == "api.github.com":
            if raw_path == repo_api:
                if self.repo_status != 200:
                    return httpx.Response(self.repo_status, json={"message": "Not Found"})
                return httpx.Response(200, json={"default_branch": self.branch})
            if raw_path == f"{repo_api}/git/trees/{self.branch}?recursive=1":
                return httpx.Response(200, content=json.dumps({"tree": self.tree(), "truncated": False}))
            return httpx.Response(404, json={"message": "Not Found"})

        prefix = f"/{self.owner}/{self.repo}/{self.branch}/"
        if host == "raw.githubusercontent.com" and raw_path.startswith(prefix):
            path = unquote(raw_path[len(prefix):])
            if path in self.files:
                if path in self.failing_paths:
                    return httpx.Response(500, text="boom")
                return httpx.Response(200, text=self.files[path])
        return httpx.Response(404, json={"message": "Not Found"})

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture()
def fake_github() -> Callable[..., FakeGitHub]:
    def _factory(files: Dict[str, str], owner: str = "octo", repo: str = "profiles") -> FakeGitHub:
        return FakeGitHub(owner, repo, files)

    return _factory


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("GH_TOKEN", "GITHUB_TOKEN", "AGENT_PROFILES_TEMPLATE_ROOT"):
        monkeypatch.delenv(name, raising=False)
    yield
