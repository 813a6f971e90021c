"""Bounded retry shared by the API listers and the branch cloner."""

import time
from dataclasses import dataclass
from typing import Callable, TypeVar

from .utils import log_warning

T = TypeVar("T")


def linear_backoff(base: float) -> Callable[[int], float]:
    """Wait ``base * attempt`` seconds after failed attempt ``attempt``."""
    return lambda attempt: base * attempt


def exponential_backoff(base: float, factor: float = 2) -> Callable[[int], float]:
    """Wait ``base * factor ** (attempt - 1)`` seconds after failed attempt ``attempt``."""
    return lambda attempt: base * factor ** (attempt - 1)


def _always(exc: Exception) -> bool:
    return True


def _never(exc: Exception) -> bool:
    return False


class RetriesExhausted(Exception):
    """Raised when an operation gives up, either out of attempts or on a non-retryable error."""

    def __init__(self, label: str, attempts: int, last_error: Exception):
        super().__init__(f"{label} failed after {attempts} attempt(s): {last_error}")
        self.label = label
        self.attempts = attempts
        self.last_error = last_error


@dataclass(frozen=True)
class RetryPolicy:
    """How many times to try, how long to wait, and which errors end the loop early.

    Errors matching ``is_fatal`` are re-raised unchanged so they can abort the
    whole run. Errors not matching ``is_retryable`` stop retrying at once and
    surface as ``RetriesExhausted``, as does the last error once
    ``max_attempts`` is used up.
    """

    max_attempts: int = 3
    backoff: Callable[[int], float] = linear_backoff(1.0)
    is_retryable: Callable[[Exception], bool] = _always
    is_fatal: Callable[[Exception], bool] = _never

    def call(self, fn: Callable[[], T], label: str = "operation") -> T:
        for attempt in range(1, self.max_attempts + 1):
            try:
                return fn()
            except Exception as e:
                if self.is_fatal(e):
                    raise
                if not self.is_retryable(e) or attempt >= self.max_attempts:
                    raise RetriesExhausted(label, attempt, e) from e
                delay = self.backoff(attempt)
                log_warning(f"Retry {attempt}/{self.max_attempts} for {label} ({e}), waiting {delay:.1f}s")
                time.sleep(delay)
        raise ValueError("max_attempts must be at least 1")
