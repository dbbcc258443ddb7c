"""Git repository facade.

One RepositoryFacade per working directory. Each method runs exactly one
git process (get_status runs two) and blocks until it exits. Callers that
need responsiveness should run calls off their main thread; nothing here
serializes concurrent calls against the same directory.
"""

import logging
from pathlib import Path
from typing import Optional

from versionspace.git.branch import parse_branch_list
from versionspace.git.log import LOG_DATE_FORMAT, LOG_FORMAT, parse_commit_log
from versionspace.git.models import DEFAULT_BRANCH, Commit, RepositoryStatus
from versionspace.git.remote import parse_remote_names
from versionspace.git.runner import CommandResult, run_git
from versionspace.git.status import parse_status_porcelain
from versionspace.lib.config import GitConfig

logger = logging.getLogger(__name__)

DEFAULT_REMOTE = "origin"


class RepositoryFacade:
    """Typed query/command API over the git CLI for one working directory."""

    def __init__(self, working_directory: Path, config: Optional[GitConfig] = None):
        self._working_directory = Path(working_directory)
        self._config = config or GitConfig()

    @property
    def working_directory(self) -> Path:
        return self._working_directory

    @property
    def config(self) -> GitConfig:
        return self._config

    def __repr__(self) -> str:
        return f"RepositoryFacade({str(self._working_directory)!r})"

    def _run(self, *args: str) -> CommandResult:
        return run_git(
            list(args),
            self._working_directory,
            timeout=self._config.timeout,
            git_binary=self._config.git_binary,
        )

    def _run_network(self, *args: str) -> CommandResult:
        return run_git(
            list(args),
            self._working_directory,
            timeout=self._config.network_timeout,
            git_binary=self._config.git_binary,
        )

    # ------------------------------------------------------------------
    # Queries with parsed results
    # ------------------------------------------------------------------

    def get_status(self) -> RepositoryStatus:
        """Get staged, modified and untracked paths plus the current branch.

        Returns an empty status on branch "main" if the status query fails.
        """
        result = self._run("status", "--porcelain")
        if not result.success:
            logger.debug(f"Status query failed in {self._working_directory}: {result.message}")
            return RepositoryStatus()

        buckets = parse_status_porcelain(result.output)
        return RepositoryStatus(
            staged=frozenset(buckets.staged),
            modified=frozenset(buckets.modified),
            untracked=frozenset(buckets.untracked),
            current_branch=self.get_current_branch(),
        )

    def get_current_branch(self) -> str:
        """Get the current branch name, or "main" if the query fails.

        Empty string on a detached HEAD.
        """
        result = self._run("branch", "--show-current")
        if result.success:
            return result.output.strip()
        return DEFAULT_BRANCH

    def get_branches(self) -> list[str]:
        """Get local branch names in git's listing order; [] on failure."""
        result = self._run("branch")
        if not result.success:
            return []
        return parse_branch_list(result.output)

    def get_commit_history(self, limit: Optional[int] = None) -> list[Commit]:
        """Get up to limit commits, most recent first; [] on failure."""
        if limit is None:
            limit = self._config.log_limit
        result = self._run("log", "-n", str(limit), LOG_FORMAT, LOG_DATE_FORMAT)
        if not result.success:
            return []
        return parse_commit_log(result.output)

    def get_remotes(self) -> list[str]:
        """Get configured remote names, de-duplicated; [] on failure."""
        result = self._run("remote", "-v")
        if not result.success:
            return []
        return parse_remote_names(result.output)

    def is_git_repository(self) -> bool:
        """Check whether the working directory is inside a git repository."""
        return self._run("rev-parse", "--git-dir").success

    # ------------------------------------------------------------------
    # Pass-through queries
    # ------------------------------------------------------------------

    def get_repository_root(self) -> CommandResult:
        return self._run("rev-parse", "--show-toplevel")

    def get_current_commit_hash(self) -> CommandResult:
        return self._run("rev-parse", "HEAD")

    def get_current_commit_hash_short(self) -> CommandResult:
        return self._run("rev-parse", "--short", "HEAD")

    def get_remote_url(self, remote: str = DEFAULT_REMOTE) -> CommandResult:
        return self._run("remote", "get-url", remote)

    def get_log(self, limit: int = 10, format: str = "--oneline") -> CommandResult:
        """Get raw log output, with format passed as a single log option."""
        return self._run("log", format, "-n", str(limit))

    def get_diff(self, target: Optional[str] = None, other: Optional[str] = None) -> CommandResult:
        """
        Get a diff of the working tree.

        get_diff()               -> all unstaged changes
        get_diff(file)           -> unstaged changes to one file
        get_diff(commit1, commit2) -> changes between two commits
        """
        if target is None:
            if other is not None:
                raise ValueError("get_diff() needs a first commit when a second is given")
            return self._run("diff")
        if other is None:
            return self._run("diff", target)
        return self._run("diff", target, other)

    def get_diff_staged(self, file: Optional[str] = None) -> CommandResult:
        if file is None:
            return self._run("diff", "--staged")
        return self._run("diff", "--staged", file)

    # ------------------------------------------------------------------
    # Working tree and index
    # ------------------------------------------------------------------

    def init_repository(self) -> CommandResult:
        return self._run("init")

    def add(self, file: str) -> CommandResult:
        return self._run("add", file)

    def add_all(self) -> CommandResult:
        return self._run("add", ".")

    def commit(self, message: str) -> CommandResult:
        return self._run("commit", "-m", message)

    def unstage_file(self, file: str) -> CommandResult:
        return self._run("reset", "HEAD", file)

    def discard_changes(self, file: str) -> CommandResult:
        """Restore a file to its index state, dropping unstaged edits."""
        return self._run("checkout", "--", file)

    # ------------------------------------------------------------------
    # Branches
    # ------------------------------------------------------------------

    def create_branch(self, name: str) -> CommandResult:
        """Create a branch and switch to it."""
        return self._run("checkout", "-b", name)

    def switch_branch(self, name: str) -> CommandResult:
        return self._run("checkout", name)

    def delete_branch(self, name: str) -> CommandResult:
        return self._run("branch", "-d", name)

    def force_delete_branch(self, name: str) -> CommandResult:
        return self._run("branch", "-D", name)

    def merge_branch(self, name: str) -> CommandResult:
        return self._run("merge", name)

    def rebase(self, name: str) -> CommandResult:
        return self._run("rebase", name)

    # ------------------------------------------------------------------
    # Remotes
    # ------------------------------------------------------------------

    def push(self, branch: Optional[str] = None) -> CommandResult:
        if branch is None:
            return self._run_network("push")
        return self._run_network("push", DEFAULT_REMOTE, branch)

    def pull(self, remote: Optional[str] = None, branch: Optional[str] = None) -> CommandResult:
        if remote is None and branch is None:
            return self._run_network("pull")
        args = ["pull", remote or DEFAULT_REMOTE]
        if branch:
            args.append(branch)
        return self._run_network(*args)

    def fetch(self, remote: Optional[str] = None) -> CommandResult:
        if remote is None:
            return self._run_network("fetch")
        return self._run_network("fetch", remote)

    def add_remote(self, name: str, url: str) -> CommandResult:
        return self._run("remote", "add", name, url)

    def remove_remote(self, name: str) -> CommandResult:
        return self._run("remote", "remove", name)

    # ------------------------------------------------------------------
    # Stash
    # ------------------------------------------------------------------

    def stash(self, message: Optional[str] = None) -> CommandResult:
        if message is None:
            return self._run("stash")
        return self._run("stash", "push", "-m", message)

    def stash_pop(self) -> CommandResult:
        return self._run("stash", "pop")

    def stash_list(self) -> CommandResult:
        return self._run("stash", "list")

    def stash_apply(self, stash_id: str) -> CommandResult:
        """Apply a stash (e.g. "stash@{0}") without removing it."""
        return self._run("stash", "apply", stash_id)

    def stash_drop(self, stash_id: str) -> CommandResult:
        return self._run("stash", "drop", stash_id)
