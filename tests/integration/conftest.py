"""Integration fixtures: a fake GitHub API served through httpx.MockTransport and a fake git."""

from pathlib import Path
from unittest.mock import patch

import httpx
import pytest
from git import GitCommandError

from github_repo_mirror.client import GitHubApiClient


class FakeGitHub:
    """Serves /users/{user}/repos and /repos/{user}/{repo}/branches from dicts."""

    def __init__(self):
        self.repos: dict[str, list[dict]] = {}
        self.branches: dict[str, list[str]] = {}
        self.status_overrides: dict[str, int] = {}
        self.body_overrides: dict[str, list] = {}
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path in self.status_overrides:
            return httpx.Response(self.status_overrides[path], json={"message": "nope"})
        if path in self.body_overrides:
            return httpx.Response(200, json=self.body_overrides[path])

        page = int(request.url.params.get("page", "1"))
        per_page = int(request.url.params.get("per_page", "30"))
        parts = path.strip("/").split("/")

        if parts[0] == "users" and parts[2] == "repos":
            items = self.repos.get(parts[1], [])
        elif parts[0] == "repos" and parts[3] == "branches":
            if parts[2] not in self.branches:
                return httpx.Response(404, json={"message": "Not Found"})
            items = [{"name": name} for name in self.branches[parts[2]]]
        else:
            return httpx.Response(404, json={"message": "Not Found"})

        start = (page - 1) * per_page
        return httpx.Response(200, json=items[start:start + per_page])


class FakeGit:
    """GitBackend that writes checkouts to disk instead of talking to a remote.

    ``checkouts`` maps ``(repo_name, branch)`` to file names; ``None`` as the
    branch is the default-branch clone. Missing keys fail like an unknown
    remote branch.
    """

    def __init__(self):
        self.checkouts: dict[tuple[str, str | None], list[str]] = {}
        self.clones: list[tuple[str, Path, str | None]] = []
        self.crashes: set[str] = set()

    def clone(self, url: str, destination: Path, branch: str | None = None, depth: int = 1) -> None:
        assert depth == 1
        self.clones.append((url, Path(destination), branch))
        repo_name = url.rstrip("/").rsplit("/", 1)[-1].removesuffix(".git")
        if repo_name in self.crashes:
            raise RuntimeError(f"backend crashed on {repo_name}")
        destination = Path(destination)
        destination.mkdir(parents=True, exist_ok=True)
        (destination / ".git").mkdir(exist_ok=True)
        files = self.checkouts.get((repo_name, branch))
        if files is None:
            raise GitCommandError(["git", "clone", url], 128, f"fatal: Remote branch {branch} not found")
        for name in files:
            (destination / name).write_text(name)

    def update_submodules(self, path: Path) -> None:
        raise GitCommandError(["git", "submodule"], 128, "fatal: no submodule mapping found in .gitmodules")


@pytest.fixture(autouse=True)
def _no_sleep():
    with patch("time.sleep"):
        yield


@pytest.fixture
def github():
    return FakeGitHub()


@pytest.fixture
def client(github):
    with GitHubApiClient(token="t0k", transport=httpx.MockTransport(github.handler)) as c:
        yield c


@pytest.fixture
def git():
    return FakeGit()
