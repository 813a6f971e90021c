"""Drive one mirror run: list repositories, clone each, report totals."""

import time

from .client import GitHubApiClient
from .clone import clone_repo, clone_root_repo
from .fetch import fetch_all_repos
from .git_backend import GitBackend
from .models import CloneResult, MirrorConfig, MirrorSummary
from .utils import log_error, log_warning, redact


def mirror_user(config: MirrorConfig, *, client: GitHubApiClient, git: GitBackend) -> MirrorSummary:
    """Mirror every non-fork repository of ``config.username``.

    Repositories are processed one at a time with ``config.repo_delay``
    seconds between them. ``RateLimitError`` from the listing propagates
    before anything is cloned; per-repository failures only show up in the
    returned counters.
    """
    summary = MirrorSummary()

    if not config.token:
        log_warning(
            "No GitHub access token configured; API and clone requests are "
            "unauthenticated and subject to lower rate limits."
        )

    output_dir = config.user_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    print(f"Fetching repositories for user: {config.username}...", flush=True)
    repos = fetch_all_repos(client, config.username)

    if not repos:
        print("No public repositories found.", flush=True)
        return summary

    print(f"Found {len(repos)} repositories. Starting cloning...", flush=True)

    for repo in repos:
        try:
            if config.fetch_branches:
                result = clone_repo(
                    client,
                    config.username,
                    repo,
                    output_dir,
                    git=git,
                    token=config.token,
                    branch_delay=config.branch_delay,
                )
            else:
                cloned = clone_root_repo(config.username, repo, output_dir, git=git, token=config.token)
                result = CloneResult(success=cloned)
        except Exception as e:
            log_error(f"Error processing repository {repo.name}: {redact(str(e), config.token)}")
            result = CloneResult(success=False)

        summary.add(result)
        time.sleep(config.repo_delay)

    print_summary(summary, config.fetch_branches)
    return summary


def print_summary(summary: MirrorSummary, with_branches: bool) -> None:
    print("\nFinal Summary:", flush=True)
    print(f"Successfully processed repositories: {summary.successful_repos}", flush=True)
    print(f"Failed repositories: {summary.failed_repos}", flush=True)
    if with_branches:
        print(f"Total successful branches: {summary.successful_branches}", flush=True)
        print(f"Total failed branches: {summary.failed_branches}", flush=True)
