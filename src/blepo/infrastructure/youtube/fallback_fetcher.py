"""Source selection between the feed and the yt-dlp fallback."""

from __future__ import annotations

import logging

from blepo.domain.exceptions import ChannelNotFoundError
from blepo.domain.models.channel import Channel
from blepo.domain.models.video import Video
from blepo.domain.services.video_fetcher import ChannelVideoSource, FeedFetcher

logger = logging.getLogger(__name__)


class FallbackVideoSource(ChannelVideoSource):
    """
    Tries the primary fetcher and falls back only when the channel is not found.

    Some channels have no public feed (it answers 404) but can still be
    listed by yt-dlp. Every other primary failure is propagated unchanged.
    """

    def __init__(self, primary: FeedFetcher, fallback: FeedFetcher) -> None:
        self.primary = primary
        self.fallback = fallback

    async def fetch(self, channel: Channel) -> list[Video]:
        try:
            return await self.primary.fetch(channel.id)
        except ChannelNotFoundError:
            logger.warning("Feed not found for %s, falling back to yt-dlp", channel.name)

        return await self.fallback.fetch(channel.id)
