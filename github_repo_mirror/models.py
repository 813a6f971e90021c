"""Data models and constants for repository mirroring."""

from dataclasses import dataclass
from pathlib import Path

GITHUB_HOST = "github.com"
PER_PAGE = 100  # GitHub REST maximum page size
DEFAULT_OUTPUT_ROOT = Path("repositories")


@dataclass(frozen=True)
class Repository:
    """A repository descriptor from the listing API."""

    name: str
    fork: bool = False
    default_branch: str | None = None

    @classmethod
    def from_api(cls, data: dict) -> "Repository":
        return cls(
            name=data["name"],
            fork=bool(data.get("fork", False)),
            default_branch=data.get("default_branch"),
        )


@dataclass
class CloneResult:
    """Outcome of mirroring one repository."""

    success: bool
    successful_branches: int = 0
    failed_branches: int = 0


@dataclass
class MirrorSummary:
    """Run-level counters accumulated by the orchestrator."""

    successful_repos: int = 0
    failed_repos: int = 0
    successful_branches: int = 0
    failed_branches: int = 0

    def add(self, result: CloneResult) -> None:
        """Count the repository; branch counts only come from repositories that succeeded."""
        if not result.success:
            self.failed_repos += 1
            return
        self.successful_repos += 1
        self.successful_branches += result.successful_branches
        self.failed_branches += result.failed_branches


@dataclass
class MirrorConfig:
    """Everything one mirror run needs, passed explicitly to each component."""

    username: str
    token: str | None = None
    fetch_branches: bool = False
    output_root: Path = DEFAULT_OUTPUT_ROOT
    repo_delay: float = 1.0
    branch_delay: float = 0.5

    @property
    def user_dir(self) -> Path:
        return self.output_root / self.username
