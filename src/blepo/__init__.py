"""blepo - a personal queue of recent uploads from the channels you follow."""

__version__ = "0.1.0"
__description__ = "Terminal queue of unwatched YouTube uploads, played through mpv"

from blepo.domain.models import Channel, FetchWindow, TimestampPrecision, Video

__all__ = ["Channel", "FetchWindow", "TimestampPrecision", "Video"]
