"""External player launched as a detached process."""

from __future__ import annotations

import logging
import shutil
import subprocess

from blepo.domain.exceptions import PlayerError
from blepo.domain.services.video_player import VideoPlayer

logger = logging.getLogger(__name__)


class MpvPlayer(VideoPlayer):
    """
    Plays videos with mpv (or any player taking a URL argument).

    mpv resolves YouTube URLs through yt-dlp, so both must be installed.
    """

    def __init__(self, command: str = "mpv", ytdlp_path: str = "yt-dlp") -> None:
        self.command = command
        self.ytdlp_path = ytdlp_path

    def check_dependencies(self) -> None:
        """
        Verify the player and yt-dlp can be found on PATH.

        Raises:
            PlayerError: Naming the first missing executable
        """
        for executable in (self.command, self.ytdlp_path):
            if shutil.which(executable) is None:
                raise PlayerError(f"{executable} is not installed or not on PATH")

    def play(self, url: str) -> None:
        logger.debug("Launching %s %s", self.command, url)
        try:
            subprocess.Popen(
                [self.command, url],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            raise PlayerError(f"Failed to launch {self.command}: {e}", e) from e
