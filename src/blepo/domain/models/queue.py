"""The numbered list of videos presented to the user."""

from __future__ import annotations

from dataclasses import dataclass, field

from blepo.domain.exceptions import SelectionError
from blepo.domain.models.fetching import FetchBatchResult
from blepo.domain.models.video import Video, VideoNumber


@dataclass
class VideoQueue:
    """
    Filtered, newest-first videos ready to be picked by number.

    Keeps the fetch result it was built from so channel failures can be
    reported next to the list.
    """

    videos: list[Video] = field(default_factory=list)
    batch: FetchBatchResult = field(default_factory=FetchBatchResult)

    def __len__(self) -> int:
        return len(self.videos)

    @property
    def is_empty(self) -> bool:
        return not self.videos

    def numbered(self) -> list[tuple[int, Video]]:
        """Videos paired with their 1-based display number."""
        return list(enumerate(self.videos, start=1))

    def select(self, number: VideoNumber) -> Video:
        """Return the video shown at ``number``."""
        index = number.to_index()
        if index >= len(self.videos):
            raise SelectionError(number.value, len(self.videos))
        return self.videos[index]
