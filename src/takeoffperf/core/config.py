"""Configuration loader for YAML takeoff case files.

This module provides loading of YAML documents with support for nested
access, command-line style overrides, and section validation.

Typical usage example:
    from takeoffperf.core.config import ConfigLoader

    config = ConfigLoader.load("cases/departure.yaml")
    oat = config.get("takeoff.oat", default=15.0)
"""

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration operations fail."""


class ConfigLoader:
    """Configuration loader for YAML files.

    Provides loading, nested access, and default values for configuration.

    Examples:
        >>> config = ConfigLoader.load("cases/departure.yaml")
        >>> tora = config.get("takeoff.tora")
    """

    def __init__(self, data: dict[str, Any]) -> None:
        """Initialize with configuration data.

        Args:
            data: Configuration dictionary.
        """
        self._data = data

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If file cannot be loaded or is not a mapping.

        Examples:
            >>> config = ConfigLoader.load("cases/departure.yaml")
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration: {e}") from e

        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        logger.info("Loaded configuration from: %s", path)
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Supports nested access like "takeoff.runway_condition".

        Args:
            key: Configuration key (supports dot notation).
            default: Default value if key not found.

        Returns:
            Configuration value or default.

        Examples:
            >>> oat = config.get("takeoff.oat", default=15.0)
        """
        keys = key.split(".")
        value = self._data

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value using dot notation.

        Args:
            key: Configuration key (supports dot notation).
            value: Value to set.

        Raises:
            ConfigError: If an intermediate key holds a scalar.

        Examples:
            >>> config.set("takeoff.oat", 25)
        """
        keys = key.split(".")
        data = self._data

        for k in keys[:-1]:
            if k not in data:
                data[k] = {}
            if not isinstance(data[k], dict):
                raise ConfigError(f"Cannot set {key}: {k} is not a section")
            data = data[k]

        data[keys[-1]] = value

    def apply_override(self, override: str) -> None:
        """Apply a ``key=value`` override, parsing the value as YAML.

        Args:
            override: Override expression such as ``takeoff.oat=25``.

        Raises:
            ConfigError: If the expression has no ``=`` or an invalid value.

        Examples:
            >>> config.apply_override("takeoff.packs=false")
        """
        key, sep, raw_value = override.partition("=")
        if not sep or not key.strip():
            raise ConfigError(f"Override must look like key=value: {override!r}")

        try:
            value = yaml.safe_load(raw_value)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid override value for {key}: {e}") from e

        self.set(key.strip(), value)

    def get_section(self, key: str) -> dict[str, Any]:
        """Get an entire configuration section.

        Args:
            key: Section key (supports dot notation).

        Returns:
            Configuration section as dictionary.

        Raises:
            ConfigError: If section not found or not a dict.

        Examples:
            >>> takeoff = config.get_section("takeoff")
        """
        value = self.get(key)

        if value is None:
            raise ConfigError(f"Configuration section not found: {key}")

        if not isinstance(value, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")

        return value

    def to_dict(self) -> dict[str, Any]:
        """Get the configuration as a dictionary.

        Returns:
            Configuration dictionary.
        """
        return self._data.copy()
