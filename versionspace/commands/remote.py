"""
vs push / pull / fetch / remote - Remote sync and remote management.
"""

from versionspace.git import RepositoryFacade
from versionspace.lib.output import error, report


def cmd_push(args, repo: RepositoryFacade) -> int:
    """Push the current branch, or a named branch to origin."""
    if args.remote and args.remote != "origin":
        error(f"push only targets origin, got '{args.remote}'")
        return 2
    return report(repo.push(args.branch))


def cmd_pull(args, repo: RepositoryFacade) -> int:
    return report(repo.pull(args.remote, args.branch))


def cmd_fetch(args, repo: RepositoryFacade) -> int:
    return report(repo.fetch(args.remote))


def cmd_remote_list(args, repo: RepositoryFacade) -> int:
    if not repo.is_git_repository():
        error(f"Not a git repository: {repo.working_directory}")
        return 1
    for name in repo.get_remotes():
        print(name)
    return 0


def cmd_remote_add(args, repo: RepositoryFacade) -> int:
    return report(repo.add_remote(args.name, args.url))


def cmd_remote_remove(args, repo: RepositoryFacade) -> int:
    return report(repo.remove_remote(args.name))


def cmd_remote_get_url(args, repo: RepositoryFacade) -> int:
    return report(repo.get_remote_url(args.name))
