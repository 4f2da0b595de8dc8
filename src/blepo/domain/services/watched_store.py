"""Abstract base class for the watched-state store."""

from abc import ABC, abstractmethod


class WatchedStore(ABC):
    """
    Abstract persistence for the IDs of videos already watched.

    The fetch-and-filter core only reads the set returned by
    ``load_watched``; marking happens after the user picks a video.
    """

    @abstractmethod
    def load_watched(self) -> set[str]:
        """
        Load the IDs of every watched video.

        Returns:
            Set of video IDs (empty if nothing has been watched yet)

        Raises:
            StoreError: If the stored state cannot be read
        """
        pass

    @abstractmethod
    def mark_watched(self, video_id: str) -> None:
        """
        Record a video as watched. Marking twice is harmless.

        Args:
            video_id: YouTube video ID

        Raises:
            StoreError: If the state cannot be written
        """
        pass
