"""Path, URL and console helpers."""

import hashlib
import shutil
import sys
from pathlib import Path

from .models import GITHUB_HOST


def clone_url(username: str, repo_name: str, token: str | None = None) -> str:
    """HTTPS clone URL, with the token embedded as credentials when given."""
    auth = f"{token}@" if token else ""
    return f"https://{auth}{GITHUB_HOST}/{username}/{repo_name}.git"


def redact(message: str, token: str | None) -> str:
    """Hide the token in messages that may echo a clone URL."""
    if not token:
        return message
    return message.replace(token, "***")


def branch_dir_name(branch: str) -> str:
    """Directory segment for a branch: every ``/`` becomes ``-``."""
    return branch.replace("/", "-")


def branch_dir_names(branches: list[str]) -> dict[str, str]:
    """Map each branch to a directory segment unique within the repository.

    ``a/b`` and ``a-b`` both flatten to ``a-b``; the later branch gets a short
    hash of its real name appended so the two never share a directory.
    """
    names: dict[str, str] = {}
    used: set[str] = set()
    for branch in branches:
        name = branch_dir_name(branch)
        if name in used:
            digest = hashlib.sha1(branch.encode()).hexdigest()[:7]
            name = f"{name}-{digest}"
        used.add(name)
        names[branch] = name
    return names


def has_content(path: Path) -> bool:
    """True if ``path`` is a directory holding anything at all."""
    return path.is_dir() and any(path.iterdir())


def is_checkout_empty(path: Path) -> bool:
    """True if a clone at ``path`` holds nothing besides ``.git``."""
    return not any(entry.name != ".git" for entry in path.iterdir())


def remove_tree(path: Path) -> None:
    """Delete a directory tree if it exists."""
    if path.exists():
        shutil.rmtree(path, ignore_errors=True)


def log_error(msg: str) -> None:
    sys.stderr.write(f"[error] {msg}\n")
    sys.stderr.flush()


def log_warning(msg: str) -> None:
    sys.stderr.write(f"[warn] {msg}\n")
    sys.stderr.flush()
