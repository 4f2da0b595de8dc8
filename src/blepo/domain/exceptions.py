"""Domain-specific exceptions for the blepo application."""

from typing import Optional


class BlepoError(Exception):
    """Base exception for all blepo errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(BlepoError):
    """Raised when there are configuration-related errors."""

    pass


class FetchError(BlepoError):
    """Raised when a channel's videos cannot be fetched."""

    def __init__(
        self,
        message: str,
        channel_id: Optional[str] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, cause)
        self.channel_id = channel_id


class ChannelNotFoundError(FetchError):
    """Raised when the feed source reports the channel as not found (HTTP 404)."""

    def __init__(self, channel_id: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"Channel feed not found: {channel_id}", channel_id, cause)


class NetworkError(FetchError):
    """Raised on transport failures and unexpected HTTP statuses."""

    def __init__(
        self,
        message: str,
        channel_id: Optional[str] = None,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, channel_id, cause)
        self.status_code = status_code


class MalformedPayloadError(FetchError):
    """Raised when a fetched payload cannot be parsed into videos."""

    pass


class FallbackToolError(FetchError):
    """Raised when the yt-dlp fallback cannot be run or exits unsuccessfully."""

    def __init__(
        self,
        message: str,
        channel_id: Optional[str] = None,
        returncode: Optional[int] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, channel_id, cause)
        self.returncode = returncode


class StoreError(BlepoError):
    """Raised when the watched-state store cannot be read or written."""

    pass


class PlayerError(BlepoError):
    """Raised when the external player cannot be launched."""

    pass


class SelectionError(BlepoError):
    """Raised when a queue position does not refer to a listed video."""

    def __init__(self, number: int, queue_length: int) -> None:
        message = f"Video #{number} not found (have {queue_length} unwatched videos)"
        super().__init__(message)
        self.number = number
        self.queue_length = queue_length
