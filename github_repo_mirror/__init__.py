"""Mirror a GitHub user's public repositories to local disk.

Lists every non-fork repository through the REST API and shallow-clones
each one, or each of its branches, under ``repositories/<user>/``.
"""

from .cli import main
from .mirror import mirror_user
from .models import CloneResult, MirrorConfig, MirrorSummary, Repository

__all__ = ["main", "mirror_user", "CloneResult", "MirrorConfig", "MirrorSummary", "Repository"]
