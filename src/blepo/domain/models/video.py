"""Video domain model and related value objects."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from blepo.domain.models.channel import Channel

WATCH_URL_TEMPLATE = "https://www.youtube.com/watch?v={video_id}"


class TimestampPrecision(str, Enum):
    """How precisely a video's publish time is known."""

    EXACT = "exact"
    APPROXIMATE = "approximate"


@dataclass(frozen=True)
class Video:
    """
    Represents a single upload from a subscribed channel.

    Built by a fetcher and never mutated afterwards. Feed entries carry an
    exact publish time; yt-dlp listings often only know the day, or nothing
    at all, and are tagged approximate.
    """

    id: str
    title: str
    url: str
    published_at: datetime
    channel_name: str = ""
    channel_id: str = ""
    precision: TimestampPrecision = TimestampPrecision.EXACT

    def __post_init__(self) -> None:
        """Validate video data after initialization."""
        if not self.id:
            raise ValueError("Video ID cannot be empty")
        if not self.url:
            raise ValueError("Video URL cannot be empty")
        if self.published_at.tzinfo is None:
            raise ValueError(f"Publish time must be timezone-aware for video {self.id}")

    @property
    def is_approximate(self) -> bool:
        """Whether the publish time is only known to the day (or guessed)."""
        return self.precision == TimestampPrecision.APPROXIMATE

    def with_channel(self, channel: Channel) -> Video:
        """Create a copy annotated with the channel it was fetched from."""
        return replace(self, channel_name=channel.name, channel_id=channel.id)

    def __str__(self) -> str:
        """Human-readable string representation."""
        return f"Video(id={self.id}, title='{self.title[:50]}', channel='{self.channel_name}')"


def watch_url(video_id: str) -> str:
    """Canonical watch page URL for a video ID."""
    return WATCH_URL_TEMPLATE.format(video_id=video_id)


@dataclass(frozen=True)
class FetchWindow:
    """Trailing number of days a video's publish time must fall within."""

    days: int

    def __post_init__(self) -> None:
        if isinstance(self.days, bool) or not isinstance(self.days, int):
            raise ValueError(f"fetch_window_days must be an integer, got {self.days!r}")
        if self.days <= 0:
            raise ValueError(f"fetch_window_days must be positive, got {self.days}")

    def cutoff(self, now: datetime) -> datetime:
        """Oldest publish time still inside the window."""
        return now - timedelta(days=self.days)


@dataclass(frozen=True)
class VideoNumber:
    """1-based position of a video in the presented queue."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("Video number must be at least 1")

    def to_index(self) -> int:
        return self.value - 1
