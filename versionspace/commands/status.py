"""
vs status - Show staged, modified and untracked files.
"""

from versionspace.git import RepositoryFacade
from versionspace.lib.output import colorizer, error


def cmd_status(args, repo: RepositoryFacade) -> int:
    """Print current branch and the three file groups."""
    if not repo.is_git_repository():
        error(f"Not a git repository: {repo.working_directory}")
        return 1

    status = repo.get_status()
    paint = colorizer(not args.no_color)

    if status.current_branch:
        print(f"On branch {paint(status.current_branch, 'cyan')}")
    else:
        print(paint('HEAD detached', 'yellow'))
    if status.is_clean:
        print("Nothing to commit, working tree clean")
        return 0

    groups = [
        ("Staged", status.staged, "green"),
        ("Modified", status.modified, "red"),
        ("Untracked", status.untracked, "yellow"),
    ]
    for title, paths, color in groups:
        if not paths:
            continue
        print()
        print(f"{title} ({len(paths)}):")
        for path in sorted(paths):
            print(f"  {paint(path, color)}")

    return 0
