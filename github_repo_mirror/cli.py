"""Command-line entry point for mirroring a user's repositories."""

import argparse
import sys
from pathlib import Path

from .client import GitHubApiClient, RateLimitError
from .git_backend import GitPythonBackend
from .mirror import mirror_user
from .models import DEFAULT_OUTPUT_ROOT, MirrorConfig
from .settings import get_settings
from .utils import log_error

TOKEN_HELP = """Rate limit exceeded. Please set the GITHUB_ACCESS_TOKEN environment variable.
You can create a token at: https://github.com/settings/tokens
Then run: set GITHUB_ACCESS_TOKEN=your_token_here (Windows)
Or: export GITHUB_ACCESS_TOKEN=your_token_here (Linux/Mac)"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="github-mirror",
        description="Shallow-clone every public, non-fork repository of a GitHub user",
    )
    parser.add_argument(
        "username",
        nargs="?",
        help="GitHub user whose repositories to mirror",
    )
    parser.add_argument(
        "--fetch-branches",
        action="store_true",
        help="Clone every branch into its own directory instead of only the default branch",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=DEFAULT_OUTPUT_ROOT,
        help="Root directory for clones (default: ./repositories)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.username:
        parser.print_usage(sys.stderr)
        log_error("Please provide a GitHub username")
        return 1

    config = MirrorConfig(
        username=args.username,
        token=get_settings().github_token,
        fetch_branches=args.fetch_branches,
        output_root=args.output_dir,
    )

    try:
        with GitHubApiClient(token=config.token) as client:
            mirror_user(config, client=client, git=GitPythonBackend())
    except RateLimitError:
        sys.stderr.write(f"{TOKEN_HELP}\n")
        sys.stderr.flush()
        return 1
    except Exception as e:
        log_error(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
