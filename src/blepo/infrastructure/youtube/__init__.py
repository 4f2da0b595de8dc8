"""YouTube fetchers and probes."""

from blepo.infrastructure.youtube.fallback_fetcher import FallbackVideoSource
from blepo.infrastructure.youtube.rss_fetcher import RssFeedFetcher, parse_feed
from blepo.infrastructure.youtube.shorts_detector import HttpShortsDetector
from blepo.infrastructure.youtube.ytdlp_fetcher import YtDlpFeedFetcher, parse_ytdlp_output

__all__ = [
    "FallbackVideoSource",
    "HttpShortsDetector",
    "RssFeedFetcher",
    "YtDlpFeedFetcher",
    "parse_feed",
    "parse_ytdlp_output",
]
