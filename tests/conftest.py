"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
import tempfile
from datetime import datetime, timedelta, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest
import yaml
from rich.logging import RichHandler

from blepo.domain.models.channel import Channel, ChannelConfig
from blepo.domain.models.video import TimestampPrecision, Video, watch_url
from blepo.infrastructure.config.models import AppConfig

NOW = datetime(2024, 1, 20, 12, 0, tzinfo=timezone.utc)


def make_video(
    video_id: str,
    published_at: datetime | None = None,
    channel: Channel | None = None,
    precision: TimestampPrecision = TimestampPrecision.EXACT,
    title: str | None = None,
) -> Video:
    """Build a video with sensible defaults."""
    video = Video(
        id=video_id,
        title=title if title is not None else f"Video {video_id}",
        url=watch_url(video_id),
        published_at=published_at or NOW - timedelta(hours=1),
        precision=precision,
    )
    if channel is not None:
        video = video.with_channel(channel)
    return video


@pytest.fixture
def now() -> datetime:
    """Fixed reference time used by window tests."""
    return NOW


@pytest.fixture
def sample_config_data(tmp_path: Path) -> dict[str, Any]:
    """Sample configuration data for testing."""
    return {
        "fetch_window_days": 7,
        "data_dir": str(tmp_path / "data"),
        "channels": [
            {"name": "Test Channel 1", "id": "UCTestChannelID000000001"},
            {"name": "Test Channel 2", "id": "UCTestChannelID000000002"},
            {"name": "Test Channel 3", "id": "UCTestChannelID000000003"},
        ],
        "fetching": {
            "timeout_seconds": 10.0,
            "user_agent": "blepo-tests",
            "ytdlp_path": "yt-dlp",
            "ytdlp_timeout_seconds": 60.0,
            "detect_shorts": True,
        },
        "player": {"command": "mpv"},
        "logging": {
            "level": "INFO",
            "format": "%(message)s",
            "file_path": None,
            "max_file_size": 10485760,
            "backup_count": 5,
        },
    }


@pytest.fixture
def temp_config_file(sample_config_data: dict[str, Any]) -> Path:
    """Create a temporary configuration file for testing."""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yml", delete=False) as f:
        yaml.dump(sample_config_data, f)
        return Path(f.name)


@pytest.fixture
def app_config(sample_config_data: dict[str, Any]) -> AppConfig:
    """Create an AppConfig instance for testing."""
    return AppConfig(**sample_config_data)


@pytest.fixture
def sample_channel() -> Channel:
    """Create a sample channel for testing."""
    return Channel(id="UCTestChannelID000000001", name="Test Channel 1")


@pytest.fixture
def sample_channel_config() -> ChannelConfig:
    """Create a sample channel config for testing."""
    return ChannelConfig(name="Test Channel 1", id="UCTestChannelID000000001")


@pytest.fixture
def sample_video(sample_channel: Channel) -> Video:
    """Create a sample video annotated with its channel."""
    return make_video("dQw4w9WgXcQ", channel=sample_channel, title="Never Gonna Give You Up")


@pytest.fixture
def mock_config_provider(app_config: AppConfig) -> Mock:
    """Create a mock configuration provider."""
    mock = Mock()
    mock.get_channels.return_value = app_config.channels
    mock.get_fetch_window.return_value = app_config.fetch_window
    mock.get_data_dir.return_value = app_config.data_path
    mock.get_fetch_settings.return_value = app_config.fetching
    mock.get_player_command.return_value = app_config.player.command
    mock.get_logging_config.return_value = app_config.logging
    return mock


@pytest.fixture
def mock_watched_store() -> Mock:
    """Create a mock watched store with nothing watched."""
    mock = Mock()
    mock.load_watched.return_value = set()
    return mock


@pytest.fixture
def video_factory():
    """Factory for videos, see ``make_video``."""
    return make_video


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop handlers installed by configure_logging so tests stay isolated."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler, (RichHandler, RotatingFileHandler)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
