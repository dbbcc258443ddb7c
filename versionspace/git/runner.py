"""Git command runner with timeout handling."""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Union

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


@dataclass(frozen=True)
class CommandSuccess:
    """Command exited zero."""
    output: str

    success: ClassVar[bool] = True


@dataclass(frozen=True)
class CommandFailure:
    """Command started but exited non-zero or timed out."""
    message: str
    output: str = ""
    returncode: int | None = None
    timed_out: bool = False

    success: ClassVar[bool] = False


@dataclass(frozen=True)
class ProcessLaunchFailure:
    """Command could not be started at all."""
    message: str

    success: ClassVar[bool] = False


CommandResult = Union[CommandSuccess, CommandFailure, ProcessLaunchFailure]


def run_command(
    cmd: list[str],
    cwd: Path,
    timeout: float | None = DEFAULT_TIMEOUT,
) -> CommandResult:
    """
    Run a command with stderr merged into stdout.

    Args:
        cmd: Program name followed by its arguments
        cwd: Working directory for the command
        timeout: Timeout in seconds, or None to wait indefinitely

    Returns:
        CommandSuccess with the combined output on exit code 0,
        CommandFailure on non-zero exit or timeout,
        ProcessLaunchFailure if the process could not be spawned.
    """
    logger.debug(f"Running {' '.join(cmd)} in {cwd}")
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        logger.warning(f"Command timed out after {timeout}s: {' '.join(cmd)}")
        output = e.output or ""
        if isinstance(output, bytes):
            output = output.decode("utf-8", errors="replace")
        return CommandFailure(
            message=f"Command timed out after {timeout}s",
            output=output,
            timed_out=True,
        )
    except OSError as e:
        # Missing binary, no permission, or bad working directory
        logger.warning(f"Failed to launch {cmd[0]}: {e}")
        return ProcessLaunchFailure(message=str(e))

    output = result.stdout or ""
    if result.returncode == 0:
        return CommandSuccess(output=output)

    logger.debug(f"{' '.join(cmd)} exited {result.returncode}")
    return CommandFailure(
        message=f"Git command failed: {output}",
        output=output,
        returncode=result.returncode,
    )


def run_git(
    args: list[str],
    cwd: Path,
    timeout: float | None = DEFAULT_TIMEOUT,
    git_binary: str = "git",
) -> CommandResult:
    """Run a git subcommand, e.g. run_git(["status", "--porcelain"], repo)."""
    return run_command([git_binary] + args, cwd, timeout=timeout)
