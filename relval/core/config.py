"""Typed configuration loading.

The validator runs fine without any config file; the file only overrides the
defaults that point at the canonical upstream repository and tracker.
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_float, get_str, get_table

__all__ = [
    "Config",
    "ConfigError",
    "RepositoryConfig",
    "TrackerConfig",
    "WorkspaceConfig",
    "default_config_path",
    "load_config",
    "load_config_or_default",
    "DEFAULT_BRANCH",
    "DEFAULT_PROJECT_KEY",
    "DEFAULT_REPO_URL",
    "DEFAULT_TRACKER_URL",
]

CONFIG_ENV_VAR = "RELEASE_VALIDATOR_CONFIG"

DEFAULT_REPO_URL = "https://git.example/proj/proj.git"
DEFAULT_BRANCH = "master"
DEFAULT_TRACKER_URL = "https://tracker.example"
DEFAULT_PROJECT_KEY = "PROJ"


def _default_temp_root() -> Path:
    return Path(tempfile.gettempdir()) / "release-validator"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class RepositoryConfig:
    url: str = DEFAULT_REPO_URL
    branch: str = DEFAULT_BRANCH


@dataclass(frozen=True, slots=True)
class TrackerConfig:
    """Issue tracker location and the project key used in commit messages.

    ``timeout`` is None unless configured: export requests block until the
    tracker answers.
    """

    url: str = DEFAULT_TRACKER_URL
    project: str = DEFAULT_PROJECT_KEY
    timeout: float | None = None


@dataclass(frozen=True, slots=True)
class WorkspaceConfig:
    temp_root: Path = field(default_factory=_default_temp_root)


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    repository: RepositoryConfig = field(default_factory=RepositoryConfig)
    tracker: TrackerConfig = field(default_factory=TrackerConfig)
    workspace: WorkspaceConfig = field(default_factory=WorkspaceConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        repository: StrDict = get_table(data, "repository") or {}
        tracker: StrDict = get_table(data, "tracker") or {}
        workspace: StrDict = get_table(data, "workspace") or {}

        temp_root = get_str(workspace, "temp_root")

        return cls(
            repository=RepositoryConfig(
                url=get_str(repository, "url") or DEFAULT_REPO_URL,
                branch=get_str(repository, "branch") or DEFAULT_BRANCH,
            ),
            tracker=TrackerConfig(
                url=(get_str(tracker, "url") or DEFAULT_TRACKER_URL).rstrip("/"),
                project=get_str(tracker, "project") or DEFAULT_PROJECT_KEY,
                timeout=get_float(tracker, "timeout"),
            ),
            workspace=WorkspaceConfig(
                temp_root=Path(temp_root).expanduser() if temp_root else _default_temp_root(),
            ),
        )


def default_config_path() -> Path:
    """Config path used when --config is not given.

    $RELEASE_VALIDATOR_CONFIG wins over ~/.config/release-validator/config.toml.
    """
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser()
    return Path.home() / ".config" / "release-validator" / "config.toml"


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to the config file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Config:
    """Load config from file, or return the defaults if it is missing or broken."""
    result = load_config(path)
    if isinstance(result, Ok):
        return result.value
    return Config()
