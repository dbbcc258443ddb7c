"""Commit log parsing."""

from versionspace.git.models import Commit

# Fields: full hash, subject, author name, date (with --date=short)
LOG_FORMAT = "--pretty=format:%H|%s|%an|%ad"
LOG_DATE_FORMAT = "--date=short"
FIELD_SEPARATOR = "|"


def parse_log_line(line: str) -> Commit:
    """
    Parse one "hash|subject|author|date" line.

    Lines with fewer than four fields keep the raw line as the message
    and leave the other fields empty rather than failing.
    """
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) >= 4:
        return Commit(hash=parts[0], message=parts[1], author=parts[2], date=parts[3])
    return Commit(hash="", message=line, author="", date="")


def parse_commit_log(output: str) -> list[Commit]:
    """Parse formatted log output, most recent first."""
    return [parse_log_line(line) for line in output.splitlines() if line.strip()]
