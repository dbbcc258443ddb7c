"""Git operations for versionspace.

RepositoryFacade is the entry point; the parse_* helpers are exposed for
callers that already hold git output.

Return type conventions:
- Methods returning CommandResult: Caller must check .success before using
  .output; failures carry .message.
  Examples: commit(), push(), get_diff()
- Methods returning bool: True on success/condition met, False otherwise.
  Examples: is_git_repository()
- Methods returning parsed values: Return empty/default values on failure.
  Examples: get_branches() -> [], get_current_branch() -> "main"
"""

from versionspace.git.runner import (
    DEFAULT_TIMEOUT,
    CommandFailure,
    CommandResult,
    CommandSuccess,
    ProcessLaunchFailure,
    run_command,
    run_git,
)
from versionspace.git.models import (
    Commit,
    RepositoryStatus,
)
from versionspace.git.status import parse_status_porcelain
from versionspace.git.branch import parse_branch_list
from versionspace.git.log import parse_commit_log, parse_log_line
from versionspace.git.remote import parse_remote_names
from versionspace.git.repository import RepositoryFacade

__all__ = [
    # runner
    "DEFAULT_TIMEOUT",
    "CommandFailure",
    "CommandResult",
    "CommandSuccess",
    "ProcessLaunchFailure",
    "run_command",
    "run_git",
    # models
    "Commit",
    "RepositoryStatus",
    # parsers
    "parse_status_porcelain",
    "parse_branch_list",
    "parse_commit_log",
    "parse_log_line",
    "parse_remote_names",
    # facade
    "RepositoryFacade",
]
