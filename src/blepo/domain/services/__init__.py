"""Abstract ports and pure domain services."""

from blepo.domain.services.configuration_provider import ConfigurationProvider
from blepo.domain.services.filtering import (
    filter_by_window,
    filter_unwatched,
    filter_videos,
    sort_newest_first,
)
from blepo.domain.services.shorts_detector import ShortsDetector
from blepo.domain.services.video_fetcher import ChannelVideoSource, FeedFetcher
from blepo.domain.services.video_player import VideoPlayer
from blepo.domain.services.watched_store import WatchedStore

__all__ = [
    "ConfigurationProvider",
    "FeedFetcher",
    "ChannelVideoSource",
    "ShortsDetector",
    "WatchedStore",
    "VideoPlayer",
    "filter_by_window",
    "filter_unwatched",
    "sort_newest_first",
    "filter_videos",
]
