"""Result models for tracking a fetch run across channels."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from blepo.domain.exceptions import FetchError
from blepo.domain.models.channel import Channel
from blepo.domain.models.video import Video


@dataclass
class ChannelFetchResult:
    """
    Outcome of fetching a single channel.

    Holds either the channel's videos or the error that stopped the fetch,
    never both.
    """

    channel: Channel
    videos: list[Video] = field(default_factory=list)
    error: FetchError | None = None

    @property
    def is_success(self) -> bool:
        """Whether the channel was fetched successfully."""
        return self.error is None

    def __str__(self) -> str:
        """Human-readable string representation."""
        if self.error is not None:
            return f"{self.channel.name}: failed ({self.error})"
        return f"{self.channel.name}: {len(self.videos)} videos"


@dataclass
class FetchBatchResult:
    """
    Result of fetching every configured channel.

    ``videos`` are the candidates that survived short-form detection;
    ``failures`` pairs each failed channel with its error so none is lost.
    """

    videos: list[Video] = field(default_factory=list)
    failures: list[tuple[Channel, FetchError]] = field(default_factory=list)
    channels_attempted: int = 0
    videos_fetched: int = 0
    shorts_removed: int = 0
    started_at: datetime = field(default_factory=datetime.now)
    completed_at: datetime | None = None

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)

    @property
    def channels_succeeded(self) -> int:
        return self.channels_attempted - len(self.failures)

    @property
    def processing_time_seconds(self) -> float:
        if self.completed_at is None:
            return 0.0
        return (self.completed_at - self.started_at).total_seconds()

    def add_channel_result(self, result: ChannelFetchResult) -> None:
        """Record one channel's outcome."""
        self.channels_attempted += 1
        if result.error is not None:
            self.failures.append((result.channel, result.error))
        else:
            self.videos_fetched += len(result.videos)

    def complete(self) -> None:
        """Mark the fetch run as completed."""
        self.completed_at = datetime.now()

    @property
    def summary(self) -> str:
        return (
            f"Fetched {self.videos_fetched} videos from "
            f"{self.channels_succeeded}/{self.channels_attempted} channels"
        )

    def __str__(self) -> str:
        """Human-readable string representation."""
        return (
            f"FetchBatchResult(videos={len(self.videos)}, fetched={self.videos_fetched}, "
            f"shorts_removed={self.shorts_removed}, failures={len(self.failures)})"
        )
