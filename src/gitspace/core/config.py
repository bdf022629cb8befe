"""Configuration management for gitspace."""

import json
from pathlib import Path
from typing import Any

from gitspace.core.types import DEFAULT_LOG_LEVEL, DEFAULT_MANIFEST_NAME, GitspaceSettings


class Config:
    """User configuration for gitspace, stored as JSON."""

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize configuration manager.

        Args:
            config_path: Path to configuration file. If None, nothing is loaded.
        """
        self._config_path = config_path
        self._config_data: dict[str, Any] = {}

    @classmethod
    def from_file(cls, config_path: Path) -> "Config":
        """Load configuration from file.

        Args:
            config_path: Path to configuration file.

        Returns:
            Config instance with loaded configuration.
        """
        instance = cls(config_path)
        instance.load()
        return instance

    def load(self) -> None:
        """Load configuration from file. A missing file leaves it empty."""
        if self._config_path is None or not self._config_path.exists():
            return

        with open(self._config_path, encoding="utf-8") as f:
            self._config_data = json.load(f)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value.

        Args:
            key: Configuration key (supports dot notation).
            default: Default value if key not found.

        Returns:
            Configuration value.
        """
        keys = key.split(".")
        value = self._config_data
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def to_settings(self, **overrides: Any) -> GitspaceSettings:
        """Convert configuration to GitspaceSettings.

        Args:
            **overrides: Values that take precedence over the file, typically
                from command line flags. ``None`` values are ignored.

        Returns:
            GitspaceSettings instance.
        """
        values = {
            "manifest": self.get("manifest", DEFAULT_MANIFEST_NAME),
            "log_level": self.get("log_level", DEFAULT_LOG_LEVEL),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return GitspaceSettings(**values)

    @property
    def data(self) -> dict[str, Any]:
        """Get raw configuration data."""
        return self._config_data
