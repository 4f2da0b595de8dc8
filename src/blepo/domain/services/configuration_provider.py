"""Abstract base class for configuration management."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

from blepo.domain.models.channel import ChannelConfig
from blepo.domain.models.video import FetchWindow

if TYPE_CHECKING:
    from blepo.infrastructure.config.models import FetchSettings, LoggingConfig


class ConfigurationProvider(ABC):
    """
    Abstract service for providing application configuration.

    This interface defines the contract for loading and validating
    configuration data from a source such as a YAML file.
    """

    @abstractmethod
    def get_channels(self) -> list[ChannelConfig]:
        """
        Get the list of subscribed channels.

        Returns:
            List of validated channel configurations (may be empty)

        Raises:
            ConfigurationError: If configuration is invalid or cannot be loaded
        """
        pass

    @abstractmethod
    def get_fetch_window(self) -> FetchWindow:
        """
        Get the trailing window videos must have been published in.

        Returns:
            Validated fetch window (defaults to 7 days)
        """
        pass

    @abstractmethod
    def get_data_dir(self) -> Path:
        """
        Get the directory holding local state such as the watched list.

        Returns:
            Expanded data directory path
        """
        pass

    @abstractmethod
    def get_fetch_settings(self) -> FetchSettings:
        """
        Get network and yt-dlp settings for fetching.

        Returns:
            Settings with timeouts, the yt-dlp path and the shorts toggle
        """
        pass

    @abstractmethod
    def get_player_command(self) -> str:
        """
        Get the executable used to play videos.

        Returns:
            Player command name or path (typically "mpv")
        """
        pass

    @abstractmethod
    def get_logging_config(self) -> LoggingConfig:
        """
        Get logging configuration.

        Returns:
            Logging settings (level, format, optional log file)
        """
        pass
