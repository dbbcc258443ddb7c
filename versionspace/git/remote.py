"""Remote listing parsing."""


def parse_remote_names(output: str) -> list[str]:
    """Parse `git remote -v` output into unique remote names, first-seen order.

    Each remote appears twice ("(fetch)" and "(push)"), tab-separated from its URL.
    """
    names: list[str] = []
    for line in output.splitlines():
        if not line.strip():
            continue
        name = line.split("\t")[0]
        if name not in names:
            names.append(name)
    return names
