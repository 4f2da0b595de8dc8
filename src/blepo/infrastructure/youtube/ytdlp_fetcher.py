"""Fallback fetcher that lists a channel through yt-dlp."""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import datetime, timezone
from typing import Any

from blepo.domain.exceptions import FallbackToolError, MalformedPayloadError
from blepo.domain.models.video import TimestampPrecision, Video, watch_url
from blepo.domain.services.video_fetcher import FeedFetcher

logger = logging.getLogger(__name__)

CHANNEL_VIDEOS_URL = "https://www.youtube.com/channel/{channel_id}/videos"
YTDLP_ARGS = (
    "--flat-playlist",
    "--dump-json",
    "--extractor-args",
    "youtubetab:approximate_date",
)


def _resolve_published(
    entry: dict[str, Any], channel_id: str, now: datetime
) -> tuple[datetime, TimestampPrecision]:
    timestamp = entry.get("timestamp")
    if timestamp is not None:
        try:
            return (
                datetime.fromtimestamp(int(timestamp), tz=timezone.utc),
                TimestampPrecision.EXACT,
            )
        except (TypeError, ValueError, OverflowError, OSError):
            logger.debug("Ignoring unusable timestamp %r for %s", timestamp, entry.get("id"))

    upload_date = entry.get("upload_date")
    if upload_date is not None:
        text = str(upload_date)
        message = f"Invalid upload_date {upload_date!r} for video {entry.get('id')}"
        # strptime alone accepts unpadded fields such as "2024115"
        if len(text) != 8 or not text.isdigit():
            raise MalformedPayloadError(message, channel_id)
        try:
            day = datetime.strptime(text, "%Y%m%d")
        except ValueError as e:
            raise MalformedPayloadError(message, channel_id, e) from e
        return day.replace(tzinfo=timezone.utc), TimestampPrecision.APPROXIMATE

    return now, TimestampPrecision.APPROXIMATE


def parse_ytdlp_output(text: str, channel_id: str, now: datetime | None = None) -> list[Video]:
    """
    Parse yt-dlp ``--dump-json`` output, one JSON object per line.

    Publish times come from ``timestamp`` when usable (exact), then from
    ``upload_date`` at midnight UTC (approximate), and otherwise default to
    ``now`` (approximate).

    Args:
        text: Decoded stdout of yt-dlp
        channel_id: Channel being listed, used in error reports
        now: Time used for entries without any date (defaults to current UTC time)

    Returns:
        Videos in the order yt-dlp listed them

    Raises:
        MalformedPayloadError: On invalid JSON, entries without an ID, or a
            malformed upload_date
    """
    if now is None:
        now = datetime.now(timezone.utc)

    videos: list[Video] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue

        try:
            entry = json.loads(line)
        except json.JSONDecodeError as e:
            raise MalformedPayloadError(
                f"yt-dlp line {line_number} for channel {channel_id} is not JSON: {e}",
                channel_id,
                e,
            ) from e
        if not isinstance(entry, dict):
            raise MalformedPayloadError(
                f"yt-dlp line {line_number} for channel {channel_id} is not an object", channel_id
            )

        video_id = entry.get("id")
        if not video_id:
            raise MalformedPayloadError(
                f"yt-dlp entry on line {line_number} has no id (channel {channel_id})", channel_id
            )

        published_at, precision = _resolve_published(entry, channel_id, now)
        videos.append(
            Video(
                id=str(video_id),
                title=entry.get("title") or "",
                url=entry.get("url") or entry.get("webpage_url") or watch_url(str(video_id)),
                published_at=published_at,
                channel_id=channel_id,
                precision=precision,
            )
        )
    return videos


class YtDlpFeedFetcher(FeedFetcher):
    """Lists a channel's uploads by running yt-dlp as a subprocess."""

    def __init__(self, executable: str = "yt-dlp", timeout: float | None = 120.0) -> None:
        self.executable = executable
        self.timeout = timeout

    def build_command(self, channel_id: str) -> list[str]:
        return [self.executable, *YTDLP_ARGS, CHANNEL_VIDEOS_URL.format(channel_id=channel_id)]

    async def fetch(self, channel_id: str) -> list[Video]:
        command = self.build_command(channel_id)
        logger.debug("Running %s", " ".join(command))

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise FallbackToolError(
                f"Could not run {self.executable}: {e}", channel_id, cause=e
            ) from e

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            process.kill()
            await process.wait()
            raise FallbackToolError(
                f"{self.executable} timed out after {self.timeout}s for channel {channel_id}",
                channel_id,
                cause=e,
            ) from e

        if process.returncode != 0:
            detail = stderr.decode("utf-8", errors="replace").strip()
            raise FallbackToolError(
                f"{self.executable} exited with status {process.returncode}: {detail}",
                channel_id,
                returncode=process.returncode,
            )

        try:
            text = stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedPayloadError(
                f"{self.executable} output for channel {channel_id} is not UTF-8", channel_id, e
            ) from e

        return parse_ytdlp_output(text, channel_id)
