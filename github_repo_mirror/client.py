"""GitHub REST API client for listing repositories and branches, using httpx."""

import logging

import httpx

from .models import PER_PAGE

API_BASE = "https://api.github.com"
REQUEST_TIMEOUT = 30.0

logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


class RateLimitError(Exception):
    """GitHub refused the request with 403/429 (rate limited or forbidden)."""

    def __init__(self, status: int, wait: float | None = None):
        super().__init__(f"GitHub API rate limit or forbidden (HTTP {status})")
        self.status = status
        self.wait = wait


class _RetryableError(Exception):
    pass


def is_transient(exc: Exception) -> bool:
    """Everything except a rate limit is worth another attempt."""
    return not isinstance(exc, RateLimitError)


class GitHubApiClient:
    """Thin client for the paginated list endpoints.

    Sends ``Authorization: token <value>`` when a token is configured.
    Does not retry on its own; callers wrap ``get_page`` in a RetryPolicy.
    """

    def __init__(self, token: str | None = None, base_url: str = API_BASE, transport=None):
        headers = {"Accept": "application/vnd.github+json"}
        if token:
            headers["Authorization"] = f"token {token}"
        self._client = httpx.Client(
            base_url=base_url,
            headers=headers,
            timeout=REQUEST_TIMEOUT,
            transport=transport,
        )

    def get_page(self, endpoint: str, page: int, per_page: int = PER_PAGE) -> list[dict]:
        """Fetch one page of a list endpoint, e.g. ``/users/octocat/repos``."""
        resp = self._client.get(endpoint, params={"per_page": per_page, "page": page})

        if resp.status_code in (403, 429):
            raise RateLimitError(resp.status_code, _parse_retry_after(resp))

        if resp.status_code >= 500:
            raise _RetryableError(f"GitHub API error {resp.status_code} for {endpoint}")

        if 200 <= resp.status_code < 300:
            body = resp.json() if resp.content else []
            if not isinstance(body, list):
                raise _RetryableError(f"Expected a JSON list from {endpoint}")
            return body

        raise httpx.HTTPStatusError(
            f"GitHub API error {resp.status_code} for {endpoint}",
            request=resp.request,
            response=resp,
        )

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


def _parse_retry_after(resp: httpx.Response) -> float | None:
    val = resp.headers.get("retry-after")
    if val is None:
        return None
    try:
        return float(val)
    except ValueError:
        return None
