"""YAML-based configuration provider implementation."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from blepo.domain.exceptions import ConfigurationError
from blepo.domain.models.channel import ChannelConfig
from blepo.domain.models.video import FetchWindow
from blepo.domain.services.configuration_provider import ConfigurationProvider
from blepo.infrastructure.config.models import AppConfig, FetchSettings, LoggingConfig

DEFAULT_CONFIG_PATH = Path("~/.config/blepo/config.yml")

EXAMPLE_CONFIG = """\
fetch_window_days: 7
channels:
  - name: Channel Name
    id: UCxxxxxxxxxxxxxxxxxxxxxx
"""

# ${VAR_NAME} or ${VAR_NAME:default}
_ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")


class YamlConfigurationProvider(ConfigurationProvider):
    """
    Configuration provider that loads settings from YAML files.

    This implementation supports loading configuration from YAML files
    with environment variable substitution and validation using Pydantic models.
    """

    def __init__(self, config_path: str | Path) -> None:
        """
        Initialize the YAML configuration provider.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            ConfigurationError: If the configuration file cannot be loaded or is invalid
        """
        self.config_path = Path(config_path).expanduser()
        self._config: AppConfig | None = None
        self._load_config()

    def _load_config(self) -> None:
        """Load and validate configuration from YAML file."""
        if not self.config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {self.config_path}\n\n"
                f"Create it with:\n\n{EXAMPLE_CONFIG}"
            )

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in configuration file: {e}", e) from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file: {e}", e) from e

        if raw_config is None:
            raise ConfigurationError("Configuration file is empty")
        if not isinstance(raw_config, dict):
            raise ConfigurationError("Configuration file must contain a mapping at the top level")

        raw_config = self._substitute_env_vars(raw_config)

        try:
            self._config = AppConfig(**raw_config)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}", e) from e

    def _substitute_env_vars(self, obj: Any) -> Any:
        """
        Recursively substitute environment variables in configuration.

        Supports ${VAR_NAME} and ${VAR_NAME:default_value} syntax.
        """
        if isinstance(obj, dict):
            return {key: self._substitute_env_vars(value) for key, value in obj.items()}
        elif isinstance(obj, list):
            return [self._substitute_env_vars(item) for item in obj]
        elif isinstance(obj, str):
            return self._substitute_string_env_vars(obj)
        else:
            return obj

    def _substitute_string_env_vars(self, value: str) -> str:
        """Substitute environment variables in a string value."""

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.getenv(var_name, default_value)

        return _ENV_VAR_PATTERN.sub(replace_var, value)

    @property
    def config(self) -> AppConfig:
        """Get the loaded configuration."""
        if self._config is None:
            raise ConfigurationError("Configuration not loaded")
        return self._config

    def get_channels(self) -> list[ChannelConfig]:
        """Get the list of subscribed channels."""
        return self.config.channels

    def get_fetch_window(self) -> FetchWindow:
        """Get the trailing window videos must have been published in."""
        return self.config.fetch_window

    def get_data_dir(self) -> Path:
        """Get the directory holding local state."""
        return self.config.data_path

    def get_fetch_settings(self) -> FetchSettings:
        """Get network and yt-dlp settings for fetching."""
        return self.config.fetching

    def get_player_command(self) -> str:
        """Get the executable used to play videos."""
        return self.config.player.command

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        return self.config.logging
