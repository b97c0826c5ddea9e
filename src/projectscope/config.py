# Copyright © 2025 Sierra Labs LLC
# SPDX-License-Identifier: AGPL-3.0-only
# License-Filename: LICENSE

"""
Configuration management for projectscope.
Loads settings from a YAML file, falling back to defaults.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
from dataclasses import dataclass

CONFIG_FILENAME = "config.yaml"
CONFIG_DIR_ENV = "PROJECTSCOPE_CONFIG_DIR"

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
DEFAULT_CLAUDE_PROJECTS_DIR = "~/.claude/projects"


class ConfigError(Exception):
    """Raised when a configuration file exists but cannot be used."""


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    datefmt: str = DEFAULT_LOG_DATEFMT


@dataclass
class PathsConfig:
    """Filesystem locations."""
    claude_projects_dir: Path = Path(DEFAULT_CLAUDE_PROJECTS_DIR).expanduser()


def default_config_locations() -> List[Path]:
    """Directories searched for config.yaml, in priority order."""
    locations = []
    env_dir = os.environ.get(CONFIG_DIR_ENV)
    if env_dir:
        locations.append(Path(env_dir).expanduser())
    locations.extend([
        Path.home() / ".projectscope",
        Path("/etc/projectscope"),
    ])
    return locations


class Config:
    """
    Configuration manager.

    Reads config.yaml from ``config_dir`` or the first default location that
    has one. Missing files mean defaults everywhere.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize configuration.

        Args:
            config_dir: Directory containing config.yaml.
                       Defaults to searching default_config_locations()
        """
        if config_dir is None:
            for location in default_config_locations():
                if (location / CONFIG_FILENAME).is_file():
                    config_dir = location
                    break
            else:
                config_dir = Path.home() / ".projectscope"

        self.config_dir = Path(config_dir)
        self._config: Dict[str, Any] = {}

        self._load_config()

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILENAME

    def _load_config(self) -> None:
        """Load config.yaml if present."""
        if not self.config_file.exists():
            self._config = {}
            return

        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot load {self.config_file}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"{self.config_file} must contain a mapping, got {type(data).__name__}"
            )
        self._config = data

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration."""
        return LoggingConfig(
            level=str(self.get("logging.level", "INFO")).upper(),
            format=self.get("logging.format", DEFAULT_LOG_FORMAT),
            datefmt=self.get("logging.datefmt", DEFAULT_LOG_DATEFMT),
        )

    @property
    def paths(self) -> PathsConfig:
        """Get path configuration."""
        return PathsConfig(
            claude_projects_dir=self.get_path(
                "paths.claude_projects_dir", DEFAULT_CLAUDE_PROJECTS_DIR
            ),
        )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value using a dot-separated path.

        Args:
            key: Dot-separated key path (e.g., "logging.level")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value: Any = self._config
        for part in key.split("."):
            if not isinstance(value, dict):
                return default
            value = value.get(part)
            if value is None:
                return default
        return value

    def get_path(self, key: str, default: Any = None) -> Path:
        """
        Get a path configuration value with ~ expanded.

        Raises:
            ConfigError: key is missing and no default was given.
        """
        value = self.get(key, default)
        if value is None:
            raise ConfigError(f"Path configuration '{key}' not found and no default provided")
        return Path(value).expanduser()


__all__ = [
    "Config",
    "ConfigError",
    "LoggingConfig",
    "PathsConfig",
    "default_config_locations",
]
