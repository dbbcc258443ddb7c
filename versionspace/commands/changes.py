"""
vs add / commit / unstage / discard / init - Working tree and index changes.
"""

from versionspace.git import RepositoryFacade
from versionspace.lib.output import error, report


def cmd_add(args, repo: RepositoryFacade) -> int:
    if args.all:
        return report(repo.add_all())
    if not args.file:
        error("Specify a file or --all")
        return 2
    return report(repo.add(args.file))


def cmd_commit(args, repo: RepositoryFacade) -> int:
    if not args.message.strip():
        error("Commit message cannot be empty")
        return 2
    return report(repo.commit(args.message))


def cmd_unstage(args, repo: RepositoryFacade) -> int:
    return report(repo.unstage_file(args.file))


def cmd_discard(args, repo: RepositoryFacade) -> int:
    """Discard unstaged edits to one file."""
    return report(repo.discard_changes(args.file))


def cmd_init(args, repo: RepositoryFacade) -> int:
    return report(repo.init_repository())
