"""Fetch every non-fork repository of a user, page by page."""

from ..client import GitHubApiClient, RateLimitError, is_transient
from ..models import Repository
from ..retry import RetriesExhausted, RetryPolicy, linear_backoff
from ..utils import log_error

# A rate-limited listing aborts the run; anything else is retried.
REPO_PAGE_RETRY = RetryPolicy(
    max_attempts=3,
    backoff=linear_backoff(1.0),
    is_retryable=is_transient,
    is_fatal=lambda e: isinstance(e, RateLimitError),
)


def fetch_all_repos(
    client: GitHubApiClient,
    username: str,
    policy: RetryPolicy = REPO_PAGE_RETRY,
) -> list[Repository]:
    """Collect repositories page by page until an empty page, then drop forks.

    A page that still fails after retries ends pagination; the repositories
    gathered so far are returned. ``RateLimitError`` propagates.
    """
    endpoint = f"/users/{username}/repos"
    repos: list[Repository] = []
    page = 1

    while True:
        try:
            batch = policy.call(
                lambda: client.get_page(endpoint, page),
                label=f"page {page}",
            )
        except RetriesExhausted as e:
            log_error(f"Error fetching page {page}: {e.last_error}")
            break

        if not batch:
            break

        try:
            repos.extend(Repository.from_api(item) for item in batch)
        except (KeyError, TypeError) as e:
            log_error(f"Unexpected repository listing on page {page}: missing {e}")
            break
        page += 1

    return [repo for repo in repos if not repo.fork]
