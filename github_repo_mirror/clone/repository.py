"""Mirror every branch of one repository into its own directory."""

import time
from pathlib import Path

from ..client import GitHubApiClient
from ..fetch import fetch_branches
from ..git_backend import GitBackend
from ..models import CloneResult, Repository
from ..utils import branch_dir_names, log_error, remove_tree
from .branch import clone_branch


def clone_repo(
    client: GitHubApiClient,
    username: str,
    repo: Repository,
    output_dir: Path,
    *,
    git: GitBackend,
    token: str | None = None,
    branch_delay: float = 0.5,
) -> CloneResult:
    """Clone each branch of ``repo`` under ``output_dir/<name>/<branch dir>``.

    The repository succeeds if at least one branch does. When none does, its
    directory is removed.
    """
    repo_path = output_dir / repo.name
    print(f"\nProcessing repository: {repo.name}", flush=True)

    print("Fetching branch information from GitHub API...", flush=True)
    branches = fetch_branches(client, username, repo.name)
    print(f"Found {len(branches)} branches in {repo.name}", flush=True)

    if not branches:
        print("No branches found, skipping repository", flush=True)
        return CloneResult(success=False)

    try:
        repo_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        log_error(f"Error processing repository {repo.name}: {e}")
        return CloneResult(success=False, failed_branches=len(branches))

    successful = 0
    failed = 0
    for branch, dir_name in branch_dir_names(branches).items():
        if clone_branch(username, repo, branch, repo_path / dir_name, git=git, token=token):
            successful += 1
        else:
            failed += 1
        time.sleep(branch_delay)

    print(f"\nRepository {repo.name} summary:", flush=True)
    print(f"Successfully cloned branches: {successful}", flush=True)
    print(f"Failed branches: {failed}", flush=True)

    if successful == 0:
        remove_tree(repo_path)
        print(f"Removed empty repository directory: {repo.name}", flush=True)

    return CloneResult(success=successful > 0, successful_branches=successful, failed_branches=failed)
