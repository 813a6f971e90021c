"""Fetch the branch names of one repository."""

from ..client import GitHubApiClient, RateLimitError, is_transient
from ..models import PER_PAGE
from ..retry import RetriesExhausted, RetryPolicy, linear_backoff
from ..utils import log_error

BRANCH_PAGE_RETRY = RetryPolicy(
    max_attempts=3,
    backoff=linear_backoff(1.0),
    is_retryable=is_transient,
)


def fetch_branches(
    client: GitHubApiClient,
    username: str,
    repo_name: str,
    policy: RetryPolicy = BRANCH_PAGE_RETRY,
) -> list[str]:
    """Return branch names, or [] when the listing cannot be completed.

    Rate limiting here only costs this repository, so it never aborts the run.
    """
    endpoint = f"/repos/{username}/{repo_name}/branches"
    branches: list[str] = []
    page = 1

    while True:
        try:
            batch = policy.call(
                lambda: client.get_page(endpoint, page),
                label=f"branches of {repo_name}",
            )
        except RetriesExhausted as e:
            if isinstance(e.last_error, RateLimitError):
                log_error(f"Rate limit exceeded while fetching branches of {repo_name}")
            else:
                log_error(f"Error fetching branches for {repo_name}: {e.last_error}")
            return []

        if not batch:
            break

        try:
            branches.extend(item["name"] for item in batch)
        except (KeyError, TypeError) as e:
            log_error(f"Unexpected branch listing for {repo_name}: missing {e}")
            return []
        if len(batch) < PER_PAGE:
            break
        page += 1

    return branches
