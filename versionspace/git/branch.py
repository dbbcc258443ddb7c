"""Branch listing parsing."""


def parse_branch_list(output: str) -> list[str]:
    """Parse `git branch` output into branch names, in listing order.

    The current branch is marked with a leading "* ", which is stripped.
    """
    branches = []
    for line in output.splitlines():
        name = line.strip().removeprefix("* ").strip()
        if name:
            branches.append(name)
    return branches
