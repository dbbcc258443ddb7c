"""Porcelain status parsing."""

from dataclasses import dataclass, field


@dataclass
class StatusBuckets:
    """Paths grouped by porcelain status code, in output order."""
    staged: list[str] = field(default_factory=list)
    modified: list[str] = field(default_factory=list)
    untracked: list[str] = field(default_factory=list)


def classify_status_code(code: str) -> str | None:
    """
    Map a two-character porcelain code to "staged", "modified" or "untracked".

    First match wins. "MM" fails the staged test because its worktree
    column is also M, so it is reported as modified only.
    Returns None for codes that match nothing (deleted, renamed, conflicts).
    """
    if code.startswith("A") or (code.startswith("M") and code[1:2] != "M"):
        return "staged"
    if code.endswith("M") or code.startswith(" M"):
        return "modified"
    if code.startswith("??"):
        return "untracked"
    return None


def parse_status_porcelain(output: str) -> StatusBuckets:
    """Parse `git status --porcelain` output into staged/modified/untracked paths.

    Format per line: "XY path". Blank lines and unrecognised codes are skipped.
    """
    buckets = StatusBuckets()
    for line in output.splitlines():
        if not line.strip():
            continue
        kind = classify_status_code(line[:2])
        if kind is None:
            continue
        getattr(buckets, kind).append(line[3:])
    return buckets
