"""
vs log - Show recent commits.

Similar to `git log --oneline` with author and date columns.
"""

from versionspace.git import RepositoryFacade
from versionspace.lib.output import colorizer, error


def cmd_log(args, repo: RepositoryFacade) -> int:
    """Print recent commits, newest first."""
    if args.limit is not None and args.limit < 1:
        error(f"limit must be positive, got {args.limit}")
        return 2

    if not repo.is_git_repository():
        error(f"Not a git repository: {repo.working_directory}")
        return 1

    commits = repo.get_commit_history(args.limit)
    if not commits:
        print("No commits found.")
        return 0

    paint = colorizer(not args.no_color)
    for c in commits:
        if c.hash:
            print(f"{paint(c.short_hash, 'yellow')} {c.date} {paint(c.author, 'dim')}  {c.message}")
        else:
            # Line we could not split into fields
            print(c.message)
    return 0
