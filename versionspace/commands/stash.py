"""
vs stash - Save, list, apply and drop stashed changes.
"""

from versionspace.git import RepositoryFacade
from versionspace.lib.output import report


def cmd_stash_save(args, repo: RepositoryFacade) -> int:
    return report(repo.stash(args.message))


def cmd_stash_pop(args, repo: RepositoryFacade) -> int:
    return report(repo.stash_pop())


def cmd_stash_list(args, repo: RepositoryFacade) -> int:
    return report(repo.stash_list(), empty_message="No stashes.")


def cmd_stash_apply(args, repo: RepositoryFacade) -> int:
    return report(repo.stash_apply(args.id))


def cmd_stash_drop(args, repo: RepositoryFacade) -> int:
    return report(repo.stash_drop(args.id))
