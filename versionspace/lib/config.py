"""
Configuration for versionspace.

Loads versionspace.yaml from the repository directory and checks it against
schemas/config.schema.json. If no config file exists, or it can't be read,
returns defaults. Environment variables override both:

    VERSIONSPACE_GIT_BINARY  - git executable to run
    VERSIONSPACE_TIMEOUT     - timeout in seconds for local commands
"""

import json
import logging
import os
from dataclasses import dataclass, replace
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, Optional

import jsonschema
import yaml

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "versionspace.yaml"
CONFIG_SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "config.schema.json"

ENV_GIT_BINARY = "VERSIONSPACE_GIT_BINARY"
ENV_TIMEOUT = "VERSIONSPACE_TIMEOUT"


class ConfigError(Exception):
    """versionspace.yaml parsed but doesn't match the config schema."""

    def __init__(self, message: str, path: str):
        self.path = path
        super().__init__(f"{CONFIG_FILENAME}: {message} at {path}")


@dataclass(frozen=True)
class GitConfig:
    """How git is invoked for a repository."""
    git_binary: str = "git"
    timeout: float = 30  # local commands (status, commit, diff, ...)
    network_timeout: float = 60  # push, pull, fetch
    log_limit: int = 10


@lru_cache(maxsize=None)
def _config_schema() -> dict:
    return json.loads(CONFIG_SCHEMA_PATH.read_text())


def check_config_data(data: Any) -> None:
    """Raise ConfigError unless data is a valid versionspace.yaml document."""
    try:
        jsonschema.validate(instance=data, schema=_config_schema())
    except jsonschema.ValidationError as e:
        path = ".".join(str(p) for p in e.absolute_path) or "(root)"
        raise ConfigError(e.message, path) from None


def _read_config_file(config_path: Path) -> Any:
    """Return the parsed YAML document, or None if it can't be read or parsed."""
    try:
        return yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read {config_path}: {e}")
    except yaml.YAMLError as e:
        logger.warning(f"Failed to parse {config_path}: {e}")
    return None


def load_git_config(
    directory: Optional[Path],
    environ: Optional[Mapping[str, str]] = None,
) -> GitConfig:
    """Load versionspace.yaml from directory and return GitConfig.

    Missing, unreadable or unparseable files fall back to defaults.

    Raises:
        ConfigError: if the file parses but doesn't match the schema
        ValueError: if VERSIONSPACE_TIMEOUT is not a positive number
    """
    config = GitConfig()

    if directory is not None:
        config_path = Path(directory) / CONFIG_FILENAME
        if config_path.exists():
            data = _read_config_file(config_path)
            if data is not None:
                check_config_data(data)
                config = replace(config, **data)

    return apply_env_overrides(config, os.environ if environ is None else environ)


def apply_env_overrides(config: GitConfig, environ: Mapping[str, str]) -> GitConfig:
    """Apply VERSIONSPACE_* environment variables on top of config."""
    binary = environ.get(ENV_GIT_BINARY, "").strip()
    if binary:
        config = replace(config, git_binary=binary)

    raw_timeout = environ.get(ENV_TIMEOUT, "").strip()
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(f"{ENV_TIMEOUT} must be a number, got '{raw_timeout}'") from None
        if timeout <= 0:
            raise ValueError(f"{ENV_TIMEOUT} must be positive, got '{raw_timeout}'")
        config = replace(config, timeout=timeout)

    return config
