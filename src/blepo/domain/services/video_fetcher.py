"""Abstract base classes for fetching a channel's recent videos."""

from abc import ABC, abstractmethod

from blepo.domain.models.channel import Channel
from blepo.domain.models.video import Video


class FeedFetcher(ABC):
    """
    Abstract source of a channel's recent uploads.

    Implementations talk to one concrete source (the public feed, yt-dlp)
    and map its payload into Video records. They know nothing about the
    channel's display name; the orchestrator annotates that later.
    """

    @abstractmethod
    async def fetch(self, channel_id: str) -> list[Video]:
        """
        Retrieve recent videos for a channel.

        Args:
            channel_id: YouTube channel ID (UC...)

        Returns:
            Videos in the order the source lists them

        Raises:
            ChannelNotFoundError: If the source reports the channel as missing
            NetworkError: If the request fails or returns an unexpected status
            MalformedPayloadError: If any entry cannot be parsed
            FallbackToolError: If an external tool cannot be run
        """
        pass


class ChannelVideoSource(ABC):
    """
    Abstract per-channel fetch operation used by the orchestrator.

    This is the seam where source selection (primary feed, fallback tool)
    happens, so the orchestrator only ever deals with one fetch per channel.
    """

    @abstractmethod
    async def fetch(self, channel: Channel) -> list[Video]:
        """
        Retrieve recent videos for a configured channel.

        Args:
            channel: The channel to fetch

        Returns:
            Videos from the channel

        Raises:
            FetchError: Any subclass describing why the channel failed
        """
        pass
