"""Git operations behind a small interface so cloning logic can run against a fake."""

import logging
from pathlib import Path
from typing import Protocol

from git import Repo

logging.getLogger("git").setLevel(logging.WARNING)


class GitBackend(Protocol):
    def clone(self, url: str, destination: Path, branch: str | None = None, depth: int = 1) -> None:
        """Clone ``url`` into ``destination``; raise on failure."""

    def update_submodules(self, path: Path) -> None:
        """Initialize and shallowly update submodules of the checkout at ``path``."""


class GitPythonBackend:
    """GitBackend implemented with GitPython (shells out to the git binary)."""

    def clone(self, url: str, destination: Path, branch: str | None = None, depth: int = 1) -> None:
        options: dict = {"depth": depth}
        if branch is not None:
            options["branch"] = branch
            options["single_branch"] = True
        Repo.clone_from(url, str(destination), **options)

    def update_submodules(self, path: Path) -> None:
        repo = Repo(str(path))
        try:
            repo.git.submodule("init")
            repo.git.submodule("update", "--recursive", "--init", "--depth", "1")
        finally:
            repo.close()
