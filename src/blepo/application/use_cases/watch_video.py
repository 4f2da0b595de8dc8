"""Use case for playing a video and recording it as watched."""

from __future__ import annotations

import logging

from blepo.domain.models.video import Video
from blepo.domain.services.video_player import VideoPlayer
from blepo.domain.services.watched_store import WatchedStore

logger = logging.getLogger(__name__)


class WatchVideoUseCase:
    """Actions available once the user has picked a video from the queue."""

    def __init__(self, watched_store: WatchedStore, player: VideoPlayer | None = None) -> None:
        self.watched_store = watched_store
        self.player = player

    def play(self, video: Video) -> None:
        """
        Launch the player for a video, then mark it watched.

        Nothing is marked if the player cannot be launched.

        Raises:
            PlayerError: If the player fails to start
            StoreError: If the watched state cannot be written
        """
        if self.player is None:
            raise ValueError("No player configured")
        logger.info("Playing %s [%s]", video.title, video.channel_name)
        self.player.play(video.url)
        self.watched_store.mark_watched(video.id)

    def mark_watched(self, video: Video) -> None:
        """Mark a video watched without playing it."""
        self.watched_store.mark_watched(video.id)
        logger.info("Marked as watched: %s [%s]", video.title, video.channel_name)
