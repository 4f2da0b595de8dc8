"""Tests for the fetch orchestrator."""

from __future__ import annotations

import asyncio
import logging
from unittest.mock import AsyncMock

import pytest

from blepo.application.services.fetch_orchestrator import FetchOrchestrator
from blepo.domain.exceptions import ChannelNotFoundError, FetchError, NetworkError
from blepo.domain.models.channel import Channel
from blepo.infrastructure.youtube.fallback_fetcher import FallbackVideoSource

CHANNEL_A = Channel(id="UCTestChannelID00000000A", name="Channel A")
CHANNEL_B = Channel(id="UCTestChannelID00000000B", name="Channel B")
CHANNEL_C = Channel(id="UCTestChannelID00000000C", name="Channel C")


class TestFetchOrchestrator:
    """Tests for FetchOrchestrator."""

    @pytest.mark.asyncio
    async def test_mixed_channel_outcomes(self, video_factory) -> None:
        """A succeeds, B needs the fallback, C fails: four videos, one failure."""
        primary = AsyncMock()
        fallback = AsyncMock()

        async def primary_fetch(channel_id: str):
            if channel_id == CHANNEL_A.id:
                return [video_factory("a1"), video_factory("a2"), video_factory("a3")]
            if channel_id == CHANNEL_B.id:
                raise ChannelNotFoundError(channel_id)
            raise NetworkError("connection reset", channel_id)

        primary.fetch.side_effect = primary_fetch
        fallback.fetch.return_value = [video_factory("b1")]

        orchestrator = FetchOrchestrator(FallbackVideoSource(primary, fallback))
        result = await orchestrator.fetch_all([CHANNEL_A, CHANNEL_B, CHANNEL_C])

        assert [v.id for v in result.videos] == ["a1", "a2", "a3", "b1"]
        assert len(result.failures) == 1
        failed_channel, error = result.failures[0]
        assert failed_channel == CHANNEL_C
        assert isinstance(error, NetworkError)
        fallback.fetch.assert_awaited_once_with(CHANNEL_B.id)

    @pytest.mark.asyncio
    async def test_channels_are_fetched_concurrently(self, video_factory) -> None:
        """Every fetch waits until all three have started, so a sequential loop would time out."""
        started: list[str] = []
        all_started = asyncio.Event()
        source = AsyncMock()

        async def fetch(channel: Channel):
            started.append(channel.id)
            if len(started) == 3:
                all_started.set()
            await asyncio.wait_for(all_started.wait(), timeout=1.0)
            return [video_factory(channel.id[-1].lower())]

        source.fetch.side_effect = fetch

        result = await FetchOrchestrator(source).fetch_all([CHANNEL_A, CHANNEL_B, CHANNEL_C])

        assert result.failures == []
        assert [v.id for v in result.videos] == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_summary_is_logged_with_duration(
        self, video_factory, caplog: pytest.LogCaptureFixture
    ) -> None:
        source = AsyncMock()
        source.fetch.return_value = [video_factory("a1")]

        with caplog.at_level(logging.INFO, logger="blepo.application.services.fetch_orchestrator"):
            result = await FetchOrchestrator(source).fetch_all([CHANNEL_A])

        assert result.completed_at is not None
        assert result.processing_time_seconds >= 0
        assert any(
            record.getMessage().startswith("Fetched 1 videos from 1/1 channels in ")
            for record in caplog.records
        )

    @pytest.mark.asyncio
    async def test_videos_annotated_with_channel(self, video_factory) -> None:
        source = AsyncMock()
        source.fetch.return_value = [video_factory("a1")]

        result = await FetchOrchestrator(source).fetch_all([CHANNEL_A])

        assert result.videos[0].channel_name == "Channel A"
        assert result.videos[0].channel_id == CHANNEL_A.id

    @pytest.mark.asyncio
    async def test_shorts_are_removed(self, video_factory) -> None:
        """Five candidates, two of them Shorts: three remain, in order."""
        source = AsyncMock()
        source.fetch.return_value = [video_factory(vid) for vid in ("v1", "v2", "v3", "v4", "v5")]
        detector = AsyncMock()
        detector.is_short.side_effect = lambda video_id: video_id in {"v2", "v4"}

        result = await FetchOrchestrator(source, detector).fetch_all([CHANNEL_A])

        assert [v.id for v in result.videos] == ["v1", "v3", "v5"]
        assert result.shorts_removed == 2
        assert result.videos_fetched == 5
        assert detector.is_short.await_count == 5

    @pytest.mark.asyncio
    async def test_failing_probe_keeps_video(self, video_factory) -> None:
        source = AsyncMock()
        source.fetch.return_value = [video_factory("v1")]
        detector = AsyncMock()
        detector.is_short.side_effect = RuntimeError("probe exploded")

        result = await FetchOrchestrator(source, detector).fetch_all([CHANNEL_A])

        assert [v.id for v in result.videos] == ["v1"]

    @pytest.mark.asyncio
    async def test_no_channels(self) -> None:
        source = AsyncMock()

        result = await FetchOrchestrator(source).fetch_all([])

        assert result.videos == []
        assert result.failures == []
        assert result.channels_attempted == 0
        source.fetch.assert_not_called()

    @pytest.mark.asyncio
    async def test_all_channels_fail(self) -> None:
        source = AsyncMock()
        source.fetch.side_effect = NetworkError("offline")

        result = await FetchOrchestrator(source).fetch_all([CHANNEL_A, CHANNEL_B])

        assert result.videos == []
        assert [channel for channel, _ in result.failures] == [CHANNEL_A, CHANNEL_B]

    @pytest.mark.asyncio
    async def test_unexpected_exception_is_recorded(self, video_factory) -> None:
        source = AsyncMock()

        async def fetch(channel: Channel):
            if channel == CHANNEL_A:
                raise KeyError("surprise")
            return [video_factory("b1")]

        source.fetch.side_effect = fetch

        result = await FetchOrchestrator(source).fetch_all([CHANNEL_A, CHANNEL_B])

        assert [v.id for v in result.videos] == ["b1"]
        failed_channel, error = result.failures[0]
        assert failed_channel == CHANNEL_A
        assert isinstance(error, FetchError)
        assert "Unexpected error" in str(error)
        assert isinstance(error.cause, KeyError)

    @pytest.mark.asyncio
    async def test_fetch_channel_wraps_fetch_error(self) -> None:
        source = AsyncMock()
        source.fetch.side_effect = NetworkError("offline", CHANNEL_A.id)

        channel_result = await FetchOrchestrator(source).fetch_channel(CHANNEL_A)

        assert channel_result.is_success is False
        assert channel_result.videos == []
