"""Abstract base class for short-form video detection."""

from abc import ABC, abstractmethod


class ShortsDetector(ABC):
    """
    Abstract classifier for YouTube Shorts.

    Implementations must fail open: when the answer is unknown the video is
    reported as a regular upload, so ambiguity never hides a video.
    """

    @abstractmethod
    async def is_short(self, video_id: str) -> bool:
        """
        Check whether a video is short-form content.

        Args:
            video_id: YouTube video ID

        Returns:
            True only when the video is positively identified as a Short.
            Never raises.
        """
        pass
