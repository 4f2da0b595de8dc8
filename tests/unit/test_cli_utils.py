"""Tests for CLI helpers."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from blepo.cli.utils import MARK_WATCHED, PLAY, QUIT, create_queue_table, format_published, parse_choice
from blepo.domain.models.queue import VideoQueue
from blepo.domain.models.video import TimestampPrecision, VideoNumber


class TestParseChoice:
    """Tests for prompt input parsing."""

    @pytest.mark.parametrize("text", ["", "q", "Q", "  q  "])
    def test_quit(self, text: str) -> None:
        assert parse_choice(text) == (QUIT, None)

    def test_play(self) -> None:
        assert parse_choice("3") == (PLAY, VideoNumber(3))

    @pytest.mark.parametrize("text", ["w2", "W2", "w 2"])
    def test_mark_watched(self, text: str) -> None:
        assert parse_choice(text) == (MARK_WATCHED, VideoNumber(2))

    @pytest.mark.parametrize("text", ["abc", "w", "wx", "-1", "1.5", "play 1"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_choice(text)

    def test_zero_is_invalid(self) -> None:
        with pytest.raises(ValueError):
            parse_choice("0")


class TestFormatting:
    """Tests for queue rendering helpers."""

    def test_exact_date(self, video_factory) -> None:
        video = video_factory("a", published_at=datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc))
        assert format_published(video) == "2024-01-15"

    def test_approximate_date_is_marked(self, video_factory) -> None:
        video = video_factory(
            "a",
            published_at=datetime(2024, 1, 15, tzinfo=timezone.utc),
            precision=TimestampPrecision.APPROXIMATE,
        )
        assert format_published(video) == "~2024-01-15"

    def test_queue_table_rows(self, video_factory) -> None:
        queue = VideoQueue(videos=[video_factory("a"), video_factory("b")])
        table = create_queue_table(queue)

        assert table.row_count == 2
        assert [column.header for column in table.columns] == ["#", "Published", "Channel", "Title"]
