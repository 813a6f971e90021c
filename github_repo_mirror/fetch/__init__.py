from .branches import BRANCH_PAGE_RETRY, fetch_branches
from .repos import REPO_PAGE_RETRY, fetch_all_repos

__all__ = ["BRANCH_PAGE_RETRY", "REPO_PAGE_RETRY", "fetch_all_repos", "fetch_branches"]
