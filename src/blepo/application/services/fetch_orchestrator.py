"""Concurrent fetching of every configured channel."""

from __future__ import annotations

import asyncio
import logging

from blepo.domain.exceptions import FetchError
from blepo.domain.models.channel import Channel
from blepo.domain.models.fetching import ChannelFetchResult, FetchBatchResult
from blepo.domain.models.video import Video
from blepo.domain.services.shorts_detector import ShortsDetector
from blepo.domain.services.video_fetcher import ChannelVideoSource

logger = logging.getLogger(__name__)


class FetchOrchestrator:
    """
    Fans a fetch out over all channels, then a Shorts probe over all videos.

    Both fan-outs run one task per item and wait for every task before
    moving on. A failing channel is recorded in the batch result and never
    affects the other channels.
    """

    def __init__(
        self,
        video_source: ChannelVideoSource,
        shorts_detector: ShortsDetector | None = None,
    ) -> None:
        """
        Initialize the orchestrator.

        Args:
            video_source: Per-channel fetch operation (usually the fallback coordinator)
            shorts_detector: Probe used to drop Shorts; None keeps every video
        """
        self.video_source = video_source
        self.shorts_detector = shorts_detector

    async def fetch_all(self, channels: list[Channel]) -> FetchBatchResult:
        """
        Fetch every channel concurrently and drop short-form videos.

        Args:
            channels: Channels to fetch

        Returns:
            FetchBatchResult with surviving videos and per-channel failures.
            Never raises for a channel failure.
        """
        logger.info("Updating videos list for %d channels", len(channels))
        batch_result = FetchBatchResult()

        results = await asyncio.gather(
            *(self.fetch_channel(channel) for channel in channels),
            return_exceptions=True,
        )

        candidates: list[Video] = []
        for channel, result in zip(channels, results):
            if isinstance(result, ChannelFetchResult):
                channel_result = result
            elif isinstance(result, Exception):
                # fetch_channel only lets non-FetchError exceptions escape
                logger.error("Unexpected error fetching %s: %s", channel.name, result)
                channel_result = ChannelFetchResult(
                    channel=channel,
                    error=FetchError(f"Unexpected error: {result}", channel.id, result),
                )
            else:
                raise result

            batch_result.add_channel_result(channel_result)
            candidates.extend(video.with_channel(channel) for video in channel_result.videos)

        batch_result.videos = await self._drop_shorts(candidates)
        batch_result.shorts_removed = len(candidates) - len(batch_result.videos)
        batch_result.complete()

        logger.info(
            "%s in %.2fs (%d shorts removed, %d channels failed)",
            batch_result.summary,
            batch_result.processing_time_seconds,
            batch_result.shorts_removed,
            len(batch_result.failures),
        )
        return batch_result

    async def fetch_channel(self, channel: Channel) -> ChannelFetchResult:
        """
        Fetch a single channel, turning a FetchError into a failed result.

        Args:
            channel: The channel to fetch

        Returns:
            ChannelFetchResult holding either the videos or the error
        """
        logger.debug("Fetching %s (%s)", channel.name, channel.id)
        try:
            videos = await self.video_source.fetch(channel)
        except FetchError as e:
            logger.warning("Failed to fetch %s: %s", channel.name, e)
            return ChannelFetchResult(channel=channel, error=e)

        logger.debug("Found %d videos in %s", len(videos), channel.name)
        return ChannelFetchResult(channel=channel, videos=videos)

    async def _drop_shorts(self, videos: list[Video]) -> list[Video]:
        """Probe every video concurrently and keep the ones that are not Shorts."""
        if self.shorts_detector is None or not videos:
            return list(videos)

        flags = await asyncio.gather(*(self._probe(video) for video in videos))
        return [video for video, is_short in zip(videos, flags) if not is_short]

    async def _probe(self, video: Video) -> bool:
        assert self.shorts_detector is not None
        try:
            return await self.shorts_detector.is_short(video.id)
        except Exception as e:
            logger.debug("Shorts probe for %s failed, keeping video: %s", video.id, e)
            return False
