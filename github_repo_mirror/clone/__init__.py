from .branch import BRANCH_CLONE_RETRY, clone_branch
from .repository import clone_repo
from .root import clone_root_repo

__all__ = ["BRANCH_CLONE_RETRY", "clone_branch", "clone_repo", "clone_root_repo"]
