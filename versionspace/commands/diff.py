"""
vs diff - Show working tree, staged, or commit-range diff.
"""

from versionspace.git import RepositoryFacade
from versionspace.lib.output import error, report


def cmd_diff(args, repo: RepositoryFacade) -> int:
    """Show diff for the working tree, one file, or two commits."""
    targets = args.targets or []

    if args.staged:
        if len(targets) > 1:
            error("--staged takes at most one file")
            return 2
        result = repo.get_diff_staged(targets[0] if targets else None)
        return report(result, empty_message="No staged changes")

    if len(targets) > 2:
        error("diff takes a file or two commits")
        return 2

    result = repo.get_diff(*targets)
    return report(result, empty_message="No unstaged changes")
