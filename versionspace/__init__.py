"""versionspace - typed facade over the git command line."""

__version__ = "0.1.0"
