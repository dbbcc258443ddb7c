"""
vs root / head - Repository location and current commit.
"""

from versionspace.git import RepositoryFacade
from versionspace.lib.output import report


def cmd_root(args, repo: RepositoryFacade) -> int:
    return report(repo.get_repository_root())


def cmd_head(args, repo: RepositoryFacade) -> int:
    if args.short:
        return report(repo.get_current_commit_hash_short())
    return report(repo.get_current_commit_hash())
