"""Tests for versionspace.git runner and parsers."""

import subprocess
from pathlib import Path
from unittest.mock import patch, MagicMock

from versionspace.git.runner import (
    CommandFailure,
    CommandSuccess,
    ProcessLaunchFailure,
    run_command,
    run_git,
)
from versionspace.git.status import classify_status_code, parse_status_porcelain
from versionspace.git.branch import parse_branch_list
from versionspace.git.log import parse_commit_log, parse_log_line
from versionspace.git.remote import parse_remote_names
from versionspace.git.models import Commit, RepositoryStatus


class TestCommandResult:
    """Test the result variants."""

    def test_success_flag(self):
        assert CommandSuccess(output="ok").success is True

    def test_failure_flag(self):
        assert CommandFailure(message="boom", returncode=1).success is False

    def test_launch_failure_flag(self):
        assert ProcessLaunchFailure(message="not found").success is False


class TestRunCommand:
    """Test run_command function."""

    @patch("versionspace.git.runner.subprocess.run")
    def test_returns_success_on_zero_exit(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stdout="output")
        result = run_command(["git", "status"], Path("/tmp"))
        assert isinstance(result, CommandSuccess)
        assert result.output == "output"
        mock_run.assert_called_once()

    @patch("versionspace.git.runner.subprocess.run")
    def test_merges_stderr_and_sets_cwd(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stdout="")
        run_command(["git", "status"], Path("/my/repo"))
        kwargs = mock_run.call_args[1]
        assert kwargs["cwd"] == Path("/my/repo")
        assert kwargs["stdout"] == subprocess.PIPE
        assert kwargs["stderr"] == subprocess.STDOUT
        assert kwargs["encoding"] == "utf-8"
        assert kwargs["errors"] == "replace"

    @patch("versionspace.git.runner.subprocess.run")
    def test_nonzero_exit_embeds_output(self, mock_run):
        mock_run.return_value = MagicMock(
            returncode=128,
            stdout="fatal: not a git repository\n",
        )
        result = run_command(["git", "status"], Path("/tmp"))
        assert isinstance(result, CommandFailure)
        assert result.returncode == 128
        assert result.output == "fatal: not a git repository\n"
        assert "fatal: not a git repository" in result.message

    @patch("versionspace.git.runner.subprocess.run")
    def test_handles_timeout(self, mock_run):
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="git", timeout=30)
        result = run_command(["git", "status"], Path("/tmp"))
        assert isinstance(result, CommandFailure)
        assert result.timed_out
        assert result.returncode is None
        assert "timed out" in result.message

    @patch("versionspace.git.runner.subprocess.run")
    def test_timeout_keeps_partial_bytes_output(self, mock_run):
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="git", timeout=5, output=b"partial")
        result = run_command(["git", "fetch"], Path("/tmp"), timeout=5)
        assert result.output == "partial"

    @patch("versionspace.git.runner.subprocess.run")
    def test_timeout_replaces_undecodable_bytes(self, mock_run):
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="git", timeout=5, output=b"caf\xe9")
        result = run_command(["git", "diff"], Path("/tmp"), timeout=5)
        assert result.output == "caf�"

    @patch("versionspace.git.runner.subprocess.run")
    def test_passes_timeout(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stdout="")
        run_command(["git", "push"], Path("/tmp"), timeout=60)
        assert mock_run.call_args[1]["timeout"] == 60

    def test_missing_binary_is_launch_failure(self, tmp_path):
        result = run_command(["versionspace-no-such-binary-xyz"], tmp_path)
        assert isinstance(result, ProcessLaunchFailure)
        assert result.message

    def test_missing_directory_is_launch_failure(self, tmp_path):
        result = run_command(["git", "status"], tmp_path / "does-not-exist")
        assert isinstance(result, ProcessLaunchFailure)

    @patch("versionspace.git.runner.subprocess.run")
    def test_permission_error_is_launch_failure(self, mock_run):
        mock_run.side_effect = PermissionError(13, "Permission denied")
        result = run_command(["git", "status"], Path("/tmp"))
        assert isinstance(result, ProcessLaunchFailure)
        assert "Permission denied" in result.message


class TestRunGit:
    """Test run_git function."""

    @patch("versionspace.git.runner.subprocess.run")
    def test_prefixes_binary(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stdout="")
        run_git(["status", "--porcelain"], Path("/my/repo"))
        call_args = mock_run.call_args[0][0]
        assert call_args == ["git", "status", "--porcelain"]

    @patch("versionspace.git.runner.subprocess.run")
    def test_custom_binary(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stdout="")
        run_git(["status"], Path("/my/repo"), git_binary="/usr/local/bin/git")
        assert mock_run.call_args[0][0][0] == "/usr/local/bin/git"


class TestClassifyStatusCode:
    """Test porcelain code classification precedence."""

    def test_added_is_staged(self):
        assert classify_status_code("A ") == "staged"

    def test_added_then_modified_is_staged(self):
        # A wins before the trailing M is considered
        assert classify_status_code("AM") == "staged"

    def test_index_modified_is_staged(self):
        assert classify_status_code("M ") == "staged"

    def test_worktree_modified_is_modified(self):
        assert classify_status_code(" M") == "modified"

    def test_mm_is_modified_not_staged(self):
        assert classify_status_code("MM") == "modified"

    def test_untracked(self):
        assert classify_status_code("??") == "untracked"

    def test_unrecognised_codes(self):
        assert classify_status_code(" D") is None
        assert classify_status_code("D ") is None
        assert classify_status_code("R ") is None
        assert classify_status_code("UU") is None
        assert classify_status_code("!!") is None


class TestParseStatusPorcelain:
    """Test parse_status_porcelain function."""

    def test_empty_when_clean(self):
        buckets = parse_status_porcelain("")
        assert buckets.staged == []
        assert buckets.modified == []
        assert buckets.untracked == []

    def test_partitions_lines(self):
        output = "A  new.py\nM  staged.py\n M edited.py\n?? scratch.txt\n D gone.py\n"
        buckets = parse_status_porcelain(output)
        assert buckets.staged == ["new.py", "staged.py"]
        assert buckets.modified == ["edited.py"]
        assert buckets.untracked == ["scratch.txt"]

    def test_mm_file_lands_in_modified_only(self):
        buckets = parse_status_porcelain("MM somefile.txt\n")
        assert buckets.modified == ["somefile.txt"]
        assert buckets.staged == []

    def test_skips_blank_lines(self):
        buckets = parse_status_porcelain("\n   \n?? a.txt\n\n")
        assert buckets.untracked == ["a.txt"]

    def test_handles_path_with_spaces(self):
        buckets = parse_status_porcelain(" M path with spaces/file.txt\n")
        assert buckets.modified == ["path with spaces/file.txt"]

    def test_no_path_in_two_sets(self):
        output = "A  a\nMM b\n M c\n?? d\nAM e\n"
        buckets = parse_status_porcelain(output)
        all_paths = buckets.staged + buckets.modified + buckets.untracked
        assert len(all_paths) == len(set(all_paths)) == 5


class TestParseBranchList:
    """Test parse_branch_list function."""

    def test_strips_marker_and_whitespace(self):
        assert parse_branch_list("* main\n  feature\n") == ["main", "feature"]

    def test_keeps_listing_order(self):
        assert parse_branch_list("  zeta\n* alpha\n  mid\n") == ["zeta", "alpha", "mid"]

    def test_empty_output(self):
        assert parse_branch_list("") == []
        assert parse_branch_list("\n  \n") == []


class TestParseCommitLog:
    """Test log line parsing."""

    def test_parses_four_fields(self):
        commit = parse_log_line("abc123|fix bug|Jane|2024-01-01")
        assert commit == Commit(hash="abc123", message="fix bug", author="Jane", date="2024-01-01")

    def test_malformed_line_degrades(self):
        commit = parse_log_line("not enough fields")
        assert commit == Commit(hash="", message="not enough fields", author="", date="")

    def test_extra_separators_use_first_four_fields(self):
        commit = parse_log_line("abc|fix a|b|Jane|2024-01-01")
        assert commit.hash == "abc"
        assert commit.message == "fix a"
        assert commit.author == "b"
        assert commit.date == "Jane"

    def test_parses_multiple_lines_in_order(self):
        output = "aaa|second|Jane|2024-01-02\n\nbbb|first|Joe|2024-01-01"
        commits = parse_commit_log(output)
        assert [c.hash for c in commits] == ["aaa", "bbb"]

    def test_malformed_line_does_not_abort(self):
        output = "aaa|ok|Jane|2024-01-02\ngarbage\nbbb|ok too|Joe|2024-01-01\n"
        commits = parse_commit_log(output)
        assert len(commits) == 3
        assert commits[1].message == "garbage"
        assert commits[2].hash == "bbb"


class TestParseRemoteNames:
    """Test parse_remote_names function."""

    def test_deduplicates_fetch_and_push(self):
        output = "origin\thttps://x.git (fetch)\norigin\thttps://x.git (push)\n"
        assert parse_remote_names(output) == ["origin"]

    def test_preserves_first_seen_order(self):
        output = (
            "upstream\thttps://u.git (fetch)\n"
            "upstream\thttps://u.git (push)\n"
            "origin\thttps://o.git (fetch)\n"
            "origin\thttps://o.git (push)\n"
        )
        assert parse_remote_names(output) == ["upstream", "origin"]

    def test_empty_output(self):
        assert parse_remote_names("") == []


class TestModels:
    """Test value types."""

    def test_default_status(self):
        status = RepositoryStatus()
        assert status.current_branch == "main"
        assert status.is_clean

    def test_status_equality(self):
        a = RepositoryStatus(staged=frozenset({"a"}), current_branch="dev")
        b = RepositoryStatus(staged=frozenset({"a"}), current_branch="dev")
        assert a == b

    def test_short_hash(self):
        commit = Commit(hash="0123456789abcdef", message="m", author="a", date="d")
        assert commit.short_hash == "0123456"
