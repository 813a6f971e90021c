"""Shallow single-branch clone with emptiness check, submodules and retry."""

from pathlib import Path

from ..git_backend import GitBackend
from ..models import Repository
from ..retry import RetriesExhausted, RetryPolicy, exponential_backoff
from ..utils import clone_url, has_content, is_checkout_empty, log_error, log_warning, redact, remove_tree

NO_SUBMODULE_MAPPING = "no submodule mapping found"


class CloneError(Exception):
    """A clone attempt failed; the message has any token removed."""


class EmptyBranchError(Exception):
    """The branch checked out nothing besides .git."""


BRANCH_CLONE_RETRY = RetryPolicy(
    max_attempts=3,
    backoff=exponential_backoff(0.5),
    is_retryable=lambda e: not isinstance(e, EmptyBranchError),
)


def clone_branch(
    username: str,
    repo: Repository,
    branch: str,
    target_path: Path,
    *,
    git: GitBackend,
    token: str | None = None,
    policy: RetryPolicy = BRANCH_CLONE_RETRY,
) -> bool:
    """Clone ``branch`` of ``repo`` into ``target_path``.

    An existing non-empty ``target_path`` counts as already cloned and is
    left untouched. A failed or empty clone never leaves a directory behind.
    """
    if has_content(target_path):
        print(f"Branch {branch} already exists at {target_path}, skipping...", flush=True)
        return True

    url = clone_url(username, repo.name, token)

    def attempt() -> None:
        print(f"Cloning branch {branch} to {target_path}...", flush=True)
        try:
            git.clone(url, target_path, branch=branch, depth=1)
        except Exception as e:
            remove_tree(target_path)
            raise CloneError(redact(str(e), token)) from e

        if is_checkout_empty(target_path):
            remove_tree(target_path)
            raise EmptyBranchError(branch)

    try:
        policy.call(attempt, label=f"branch {branch}")
    except RetriesExhausted as e:
        if isinstance(e.last_error, EmptyBranchError):
            print(f"Branch {branch} is empty, skipping...", flush=True)
        else:
            log_error(f"Error cloning branch {branch} after {e.attempts} attempt(s): {e.last_error}")
        return False

    print(f"Successfully cloned branch {branch}", flush=True)
    _update_submodules(git, target_path, branch, token)
    return True


def _update_submodules(git: GitBackend, path: Path, branch: str, token: str | None) -> None:
    """Best effort: a submodule failure never fails the branch."""
    try:
        git.update_submodules(path)
    except Exception as e:
        if NO_SUBMODULE_MAPPING not in str(e):
            log_warning(f"Could not update submodules for branch {branch}: {redact(str(e), token)}")
        return
    print(f"Updated submodules for branch {branch}", flush=True)
