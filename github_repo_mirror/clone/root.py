"""Shallow clone of a repository's default branch."""

from pathlib import Path

from ..git_backend import GitBackend
from ..models import Repository
from ..utils import clone_url, has_content, log_error, redact, remove_tree


def clone_root_repo(
    username: str,
    repo: Repository,
    output_dir: Path,
    *,
    git: GitBackend,
    token: str | None = None,
) -> bool:
    """Clone ``repo`` into ``output_dir/<name>`` in a single attempt."""
    repo_path = output_dir / repo.name
    print(f"\nProcessing repository: {repo.name}", flush=True)

    if has_content(repo_path):
        print(f"Repository {repo.name} already exists at {repo_path}, skipping...", flush=True)
        return True

    print(f"Cloning root repository {repo.name}...", flush=True)
    try:
        git.clone(clone_url(username, repo.name, token), repo_path, depth=1)
    except Exception as e:
        remove_tree(repo_path)
        log_error(f"Error processing repository {repo.name}: {redact(str(e), token)}")
        return False

    print(f"Successfully cloned root repository {repo.name}", flush=True)
    return True
