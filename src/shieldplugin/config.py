"""Configuration loading and validation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from shieldplugin.errors import ConfigError, ConfigNotFoundError

__all__ = ["Config"]

logger = logging.getLogger(__name__)


class Config:
    """Configuration accessor with dot-path key support."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def from_yaml(cls, path: str | Path) -> Config:
        """Load a configuration mapping from a YAML file.

        An empty file yields an empty configuration.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the file is not valid YAML or its top level
                is not a mapping.
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise ConfigNotFoundError(config_path=str(file_path))

        try:
            data = yaml.safe_load(file_path.read_text())
        except yaml.YAMLError as e:
            raise ConfigError(message=f"Invalid YAML in configuration file '{file_path}': {e}", cause=e) from e

        if data is None:
            logger.debug("Configuration file %s is empty", file_path)
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(message=f"Configuration file '{file_path}' must contain a mapping")
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting by dot-path key, or ``default`` when any segment is absent."""
        node: Any = self._data
        for segment in key.split("."):
            if not isinstance(node, dict) or segment not in node:
                return default
            node = node[segment]
        return node

    def get_str_list(self, key: str, default: list[str] | None = None) -> list[str]:
        """Get a list-of-strings setting by dot-path key.

        Raises:
            ConfigError: If the setting is present but not a list of strings.
        """
        value = self.get(key)
        if value is None:
            return list(default or [])
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise ConfigError(message=f"Setting '{key}' must be a list of strings")
        return list(value)
