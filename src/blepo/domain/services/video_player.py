"""Abstract base class for launching an external player."""

from abc import ABC, abstractmethod


class VideoPlayer(ABC):
    """
    Abstract fire-and-forget video player.

    ``play`` only starts playback. The spawned process is not owned,
    awaited, or reported back on.
    """

    @abstractmethod
    def play(self, url: str) -> None:
        """
        Start playing a video.

        Args:
            url: Playable video URL

        Raises:
            PlayerError: If the player cannot be launched
        """
        pass
