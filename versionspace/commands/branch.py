"""
vs branch / checkout / merge / rebase - Branch management.
"""

from versionspace.git import RepositoryFacade
from versionspace.lib.output import colorizer, error, report


def cmd_branch_list(args, repo: RepositoryFacade) -> int:
    """List local branches, marking the current one."""
    if not repo.is_git_repository():
        error(f"Not a git repository: {repo.working_directory}")
        return 1

    branches = repo.get_branches()
    if not branches:
        print("No branches yet.")
        return 0

    current = repo.get_current_branch()
    paint = colorizer(not args.no_color)
    for name in branches:
        if name == current:
            print(f"* {paint(name, 'green')}")
        else:
            print(f"  {name}")
    return 0


def cmd_branch_create(args, repo: RepositoryFacade) -> int:
    """Create a branch and switch to it."""
    return report(repo.create_branch(args.name), empty_message=f"Switched to new branch '{args.name}'")


def cmd_branch_delete(args, repo: RepositoryFacade) -> int:
    if args.force:
        return report(repo.force_delete_branch(args.name))
    return report(repo.delete_branch(args.name))


def cmd_checkout(args, repo: RepositoryFacade) -> int:
    return report(repo.switch_branch(args.branch))


def cmd_merge(args, repo: RepositoryFacade) -> int:
    return report(repo.merge_branch(args.branch))


def cmd_rebase(args, repo: RepositoryFacade) -> int:
    return report(repo.rebase(args.branch))
