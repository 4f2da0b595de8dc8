"""
Pure filter pipeline applied to fetched candidates.

Every function returns a new list and leaves its input untouched, so the
pipeline can be re-applied to its own output without changing it.
"""

from __future__ import annotations

from collections.abc import Container, Iterable
from datetime import datetime, timezone

from blepo.domain.models.video import FetchWindow, Video


def filter_by_window(videos: Iterable[Video], window: FetchWindow, now: datetime) -> list[Video]:
    """Keep videos published at or after ``now - window``."""
    cutoff = window.cutoff(now)
    return [video for video in videos if video.published_at >= cutoff]


def filter_unwatched(videos: Iterable[Video], watched: Container[str]) -> list[Video]:
    """Drop videos whose ID is in the watched set."""
    return [video for video in videos if video.id not in watched]


def sort_newest_first(videos: Iterable[Video]) -> list[Video]:
    """
    Order videos by publish time, newest first.

    The sort is stable: videos with identical timestamps (common for
    approximate dates that defaulted to the same "now") keep their input order.
    """
    return sorted(videos, key=lambda video: video.published_at, reverse=True)


def filter_videos(
    videos: Iterable[Video],
    window: FetchWindow,
    watched: Container[str],
    now: datetime | None = None,
) -> list[Video]:
    """
    Run the full pipeline: window, unwatched, sort.

    Args:
        videos: Candidate videos, already stripped of short-form content
        window: Trailing fetch window
        watched: IDs of already-watched videos; only membership is read
        now: Reference time for the window (defaults to the current UTC time)

    Returns:
        The exact list to present, newest first
    """
    if now is None:
        now = datetime.now(timezone.utc)
    in_window = filter_by_window(videos, window, now)
    unwatched = filter_unwatched(in_window, watched)
    return sort_newest_first(unwatched)
