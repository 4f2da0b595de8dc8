"""Domain models for the blepo application."""

from blepo.domain.models.channel import Channel, ChannelConfig
from blepo.domain.models.fetching import ChannelFetchResult, FetchBatchResult
from blepo.domain.models.queue import VideoQueue
from blepo.domain.models.video import (
    FetchWindow,
    TimestampPrecision,
    Video,
    VideoNumber,
)

__all__ = [
    "Channel",
    "ChannelConfig",
    "Video",
    "TimestampPrecision",
    "FetchWindow",
    "VideoNumber",
    "ChannelFetchResult",
    "FetchBatchResult",
    "VideoQueue",
]
