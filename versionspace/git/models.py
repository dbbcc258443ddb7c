"""Value types parsed from git output."""

from dataclasses import dataclass, field

DEFAULT_BRANCH = "main"


@dataclass(frozen=True)
class RepositoryStatus:
    """Snapshot of working-tree state from a single porcelain status query."""
    staged: frozenset[str] = field(default_factory=frozenset)
    modified: frozenset[str] = field(default_factory=frozenset)
    untracked: frozenset[str] = field(default_factory=frozenset)
    current_branch: str = DEFAULT_BRANCH

    @property
    def is_clean(self) -> bool:
        return not (self.staged or self.modified or self.untracked)


@dataclass(frozen=True)
class Commit:
    """One line of formatted `git log` output."""
    hash: str
    message: str
    author: str
    date: str

    @property
    def short_hash(self) -> str:
        return self.hash[:7]
