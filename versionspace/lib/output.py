"""Terminal output helpers shared by CLI commands."""

import sys

from versionspace.git.runner import CommandResult

COLORS = {
    "reset": "\033[0m",
    "dim": "\033[2m",
    "bold": "\033[1m",
    "green": "\033[32m",
    "red": "\033[31m",
    "yellow": "\033[33m",
    "cyan": "\033[36m",
}


def colorizer(enabled: bool):
    """Return a function that wraps text in a named color, or leaves it as-is."""
    def paint(text: str, color: str) -> str:
        if not enabled:
            return text
        return f"{COLORS[color]}{text}{COLORS['reset']}"
    return paint


def report(result: CommandResult, empty_message: str | None = None) -> int:
    """Print a command result and return the CLI exit code.

    Success prints the combined git output on stdout (or empty_message if
    git printed nothing); failure prints the error on stderr and returns 1.
    """
    if result.success:
        output = result.output.rstrip("\n")
        if output:
            print(output)
        elif empty_message:
            print(empty_message)
        return 0

    error(result.message.rstrip())
    return 1


def error(message: str) -> None:
    """Print an ERROR line on stderr."""
    print(f"ERROR: {message}", file=sys.stderr)
