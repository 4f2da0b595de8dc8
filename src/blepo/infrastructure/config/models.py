"""Pydantic configuration models for application settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, validator

from blepo.domain.models.channel import ChannelConfig
from blepo.domain.models.video import FetchWindow

DEFAULT_FETCH_WINDOW_DAYS = 7
DEFAULT_DATA_DIR = "~/.local/share/blepo"


class FetchSettings(BaseModel):
    """Configuration for the feed request, the Shorts probe and yt-dlp."""

    timeout_seconds: float = Field(default=15.0, gt=0, description="HTTP timeout in seconds")
    user_agent: str = Field(default="blepo/0.1", min_length=1, description="HTTP User-Agent header")
    ytdlp_path: str = Field(default="yt-dlp", min_length=1, description="yt-dlp executable")
    ytdlp_timeout_seconds: float | None = Field(
        default=120.0, gt=0, description="Seconds before a yt-dlp run is abandoned (None waits forever)"
    )
    detect_shorts: bool = Field(default=True, description="Probe and drop YouTube Shorts")

    class Config:
        """Pydantic configuration."""
        extra = "forbid"


class PlayerSettings(BaseModel):
    """Configuration for the external video player."""

    command: str = Field(default="mpv", min_length=1, description="Player executable")

    class Config:
        """Pydantic configuration."""
        extra = "forbid"


class LoggingConfig(BaseModel):
    """Configuration for application logging."""

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(default="%(message)s", description="Log format string")
    file_path: str | None = Field(default=None, description="Log file path (None for console only)")
    max_file_size: int = Field(default=10485760, ge=1024, description="Max log file size in bytes (10MB)")
    backup_count: int = Field(default=5, ge=1, description="Number of backup log files to keep")

    @validator("level")
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    class Config:
        """Pydantic configuration."""
        extra = "forbid"


class AppConfig(BaseModel):
    """
    Main application configuration model.

    This is the root configuration object that contains all application settings,
    validated using Pydantic for type safety and runtime validation.
    """

    fetch_window_days: int = Field(
        default=DEFAULT_FETCH_WINDOW_DAYS, description="Only show videos from the last N days"
    )
    data_dir: str = Field(default=DEFAULT_DATA_DIR, description="Directory for the watched list")
    channels: list[ChannelConfig] = Field(default_factory=list, description="Subscribed channels")

    fetching: FetchSettings = Field(default_factory=FetchSettings)
    player: PlayerSettings = Field(default_factory=PlayerSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @validator("fetch_window_days")
    def validate_fetch_window_days(cls, v: int) -> int:
        """Validate the fetch window through the domain value object."""
        FetchWindow(v)
        return v

    @validator("channels")
    def validate_channels(cls, v: list[ChannelConfig]) -> list[ChannelConfig]:
        """Validate channel configurations."""
        channel_ids = [channel.id for channel in v]
        if len(channel_ids) != len(set(channel_ids)):
            raise ValueError("Duplicate channel IDs found in configuration")
        return v

    @property
    def fetch_window(self) -> FetchWindow:
        return FetchWindow(self.fetch_window_days)

    @property
    def data_path(self) -> Path:
        return Path(self.data_dir).expanduser()

    class Config:
        """Pydantic configuration."""
        extra = "forbid"
        validate_assignment = True
