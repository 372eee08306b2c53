"""YAML configuration loading.

Configuration files are optional: every setting has a built-in default and a
user file only overrides the keys it names.

Typical usage example:
    from flightcalc.core.config import ConfigLoader

    config = ConfigLoader(defaults)
    config.merge(ConfigLoader.load("config/logging.yaml"))
    level = config.get("console.level", default="WARNING")
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

LOG_CONFIG_ENV = "FLIGHTCALC_LOG_CONFIG"


class ConfigError(Exception):
    """Raised when configuration cannot be loaded or is malformed."""


class ConfigLoader:
    """Nested configuration with dot-notation access.

    Examples:
        >>> config = ConfigLoader({"console": {"level": "DEBUG"}})
        >>> config.get("console.level")
        'DEBUG'
        >>> config.get("file_log.enabled", default=False)
        False
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        """Initialize with configuration data.

        Args:
            data: Configuration dictionary (copied on merge, not on init).
        """
        self._data = data if data is not None else {}

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If the file is missing, unreadable or not a mapping.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        logger.debug("Loaded configuration from: %s", path)
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Args:
            key: Configuration key, e.g. "console.level".
            default: Value returned when any part of the key is missing.

        Returns:
            Configuration value or default.
        """
        value: Any = self._data

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_section(self, key: str) -> dict[str, Any]:
        """Get an entire configuration section.

        Args:
            key: Section key (supports dot notation).

        Returns:
            Section as a dictionary, empty if absent.

        Raises:
            ConfigError: If the key exists but is not a section.
        """
        value = self.get(key, default={})

        if not isinstance(value, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")

        return value

    def merge(self, other: "ConfigLoader") -> None:
        """Merge another configuration into this one, other values win."""
        self._data = _merge_dicts(self._data, other._data)

    def to_dict(self) -> dict[str, Any]:
        """Get a shallow copy of the configuration dictionary."""
        return self._data.copy()


def _merge_dicts(base: dict, override: dict) -> dict:
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_dicts(result[key], value)
        else:
            result[key] = value

    return result


def resolve_log_config_path(explicit: str | Path | None = None) -> Path | None:
    """Find the logging configuration file to use, if any.

    Args:
        explicit: Path given on the command line.

    Returns:
        The explicit path, else the path named by FLIGHTCALC_LOG_CONFIG,
        else None (built-in defaults).
    """
    if explicit:
        return Path(explicit)

    env_path = os.environ.get(LOG_CONFIG_ENV)
    if env_path:
        return Path(env_path)

    return None
