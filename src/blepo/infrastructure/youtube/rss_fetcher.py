"""Primary fetcher backed by the public channel Atom feed."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import feedparser
import httpx

from blepo.domain.exceptions import ChannelNotFoundError, MalformedPayloadError, NetworkError
from blepo.domain.models.video import TimestampPrecision, Video, watch_url
from blepo.domain.services.video_fetcher import FeedFetcher

logger = logging.getLogger(__name__)

FEED_URL = "https://www.youtube.com/feeds/videos.xml"
DEFAULT_TIMEOUT = 15.0
DEFAULT_USER_AGENT = "blepo/0.1"


def parse_feed(content: bytes | str, channel_id: str) -> list[Video]:
    """
    Parse a channel feed document into videos.

    Args:
        content: Raw feed body
        channel_id: Channel the feed belongs to, used in error reports

    Returns:
        Videos in feed order, all with exact timestamps

    Raises:
        MalformedPayloadError: If the document is not a feed or an entry
            lacks a video ID or a usable publish date
    """
    feed = feedparser.parse(content)
    if feed.bozo and not feed.entries:
        raise MalformedPayloadError(
            f"Invalid feed for channel {channel_id}: {feed.get('bozo_exception')}",
            channel_id,
        )

    videos: list[Video] = []
    for entry in feed.entries:
        video_id = entry.get("yt_videoid")
        if not video_id:
            raise MalformedPayloadError(f"Feed entry without video ID in channel {channel_id}", channel_id)

        published = entry.get("published_parsed")
        if not published:
            raise MalformedPayloadError(
                f"Feed entry {video_id} has no parseable publish date", channel_id
            )

        videos.append(
            Video(
                id=video_id,
                title=entry.get("title", ""),
                url=entry.get("link") or watch_url(video_id),
                published_at=datetime(*published[:6], tzinfo=timezone.utc),
                channel_id=channel_id,
                precision=TimestampPrecision.EXACT,
            )
        )
    return videos


class RssFeedFetcher(FeedFetcher):
    """Fetches recent uploads from ``/feeds/videos.xml``."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        """
        Initialize the feed fetcher.

        Args:
            client: Shared HTTP client; when None a client is opened per call
            timeout: Request timeout in seconds for per-call clients
            user_agent: User-Agent header for per-call clients
        """
        self.client = client
        self.timeout = timeout
        self.user_agent = user_agent

    async def fetch(self, channel_id: str) -> list[Video]:
        if self.client is not None:
            return await self._fetch_with(self.client, channel_id)

        async with httpx.AsyncClient(
            timeout=self.timeout, headers={"User-Agent": self.user_agent}
        ) as client:
            return await self._fetch_with(client, channel_id)

    async def _fetch_with(self, client: httpx.AsyncClient, channel_id: str) -> list[Video]:
        try:
            response = await client.get(FEED_URL, params={"channel_id": channel_id})
        except httpx.HTTPError as e:
            raise NetworkError(f"Request for channel {channel_id} failed: {e}", channel_id, cause=e) from e

        if response.status_code == 404:
            raise ChannelNotFoundError(channel_id)
        if not response.is_success:
            raise NetworkError(
                f"Feed for channel {channel_id} returned HTTP {response.status_code}",
                channel_id,
                status_code=response.status_code,
            )

        videos = parse_feed(response.content, channel_id)
        logger.debug("Feed for %s listed %d videos", channel_id, len(videos))
        return videos
