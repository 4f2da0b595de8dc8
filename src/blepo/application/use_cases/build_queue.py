"""Use case for building the queue of unwatched videos."""

from __future__ import annotations

import logging
from datetime import datetime

from blepo.application.services.fetch_orchestrator import FetchOrchestrator
from blepo.domain.models.queue import VideoQueue
from blepo.domain.services.configuration_provider import ConfigurationProvider
from blepo.domain.services.filtering import filter_videos
from blepo.domain.services.watched_store import WatchedStore

logger = logging.getLogger(__name__)


class BuildQueueUseCase:
    """
    Fetch every configured channel and reduce the result to the queue shown
    to the user: inside the fetch window, unwatched, newest first.
    """

    def __init__(
        self,
        orchestrator: FetchOrchestrator,
        watched_store: WatchedStore,
        config_provider: ConfigurationProvider,
    ) -> None:
        self.orchestrator = orchestrator
        self.watched_store = watched_store
        self.config_provider = config_provider

    async def execute(self, now: datetime | None = None) -> VideoQueue:
        """
        Build the queue.

        Args:
            now: Reference time for the fetch window (defaults to now, UTC)

        Returns:
            VideoQueue with the ordered videos and the underlying fetch result

        Raises:
            StoreError: If the watched state cannot be loaded
        """
        watched = self.watched_store.load_watched()
        channels = [config.to_domain() for config in self.config_provider.get_channels()]

        batch = await self.orchestrator.fetch_all(channels)
        videos = filter_videos(
            batch.videos,
            self.config_provider.get_fetch_window(),
            watched,
            now=now,
        )

        logger.info("%d unwatched videos in the queue", len(videos))
        return VideoQueue(videos=videos, batch=batch)
